"""Terminal operations that consume a producer into a single result.

Lookups never raise when nothing is found, they return a
:code:`(value, found)` pair where :code:`value` is :code:`None` if
:code:`found` is :code:`False`.
"""

from .errors import guarded_call
from .producer import from_iterable, from_pairs
from .utils import check_callable, isint


_missing = object()


def reduce(f, producer, initial=_missing):
    """Fold the values of a producer into a single value.

    Computes :code:`f(...f(f(initial, v0), v1)..., vn)` in production
    order. Without `initial` the first value is used as the starting
    accumulator, like :func:`python:functools.reduce`, and an empty
    producer reduces to :code:`None`.

    Example:

        >>> pushseq.reduce(lambda a, b: a + b, [2, 2, 1, 5])
        10
        >>> pushseq.reduce(lambda a, b: a + b, [2, 2, 1, 5], 10)
        20
    """
    check_callable(f)
    acc = initial
    for i, value in enumerate(from_iterable(producer)):
        if acc is _missing:
            acc = value
        else:
            acc = guarded_call("reduce", None, i, f, acc, value)

    return None if acc is _missing else acc


def nth(producer, n):
    """Return the n-th value (starting from 1) of a producer.

    The traversal stops as soon as the value is reached.

    Return:
        (Any, bool): the value and wether it was found.

    Example:

        >>> pushseq.nth(['a', 'b', 'c'], 2)
        ('b', True)
        >>> pushseq.nth(['a', 'b', 'c'], 10)
        (None, False)
    """
    if not isint(n):
        raise TypeError("n must be an integer, not " + n.__class__.__name__)
    if n < 1:
        return None, False

    for i, value in enumerate(from_iterable(producer), 1):
        if i == n:
            return value, True

    return None, False


def first(producer):
    """Return the first value of a producer, see :func:`nth`."""
    return nth(producer, 1)


def last(producer):
    """Return the last value of a producer.

    The producer is always drained entirely.
    """
    found = False
    value = None
    for value in from_iterable(producer):
        found = True

    return value, found


def position(producer, target):
    """Return the index of the first value equal to `target`.

    Example:

        >>> pushseq.position(pushseq.chars("hello"), "l")
        (2, True)
        >>> pushseq.position(pushseq.chars("hello"), "z")
        (None, False)
    """
    for i, value in enumerate(from_iterable(producer)):
        if value == target:
            return i, True

    return None, False


def _extremum(producer, key, better, owner):
    best = best_key = None
    found = False

    for i, value in enumerate(from_iterable(producer)):
        k = value if key is None else guarded_call(owner, None, i, key, value)
        if not found or better(k, best_key):
            best, best_key = value, k
            found = True

    return best, found


def minimum(producer, key=None):
    """Return the smallest value of a producer.

    Values (or their `key`) must support ordering comparisons, the
    first of several equal minima is returned.

    Return:
        (Any, bool): the minimum and :code:`True`, or
        :code:`(None, False)` for an empty producer.

    Example:

        >>> pushseq.minimum([2, 0, -11, 7, 9])
        (-11, True)
        >>> pushseq.minimum([])
        (None, False)
    """
    if key is not None:
        check_callable(key, "key")
    return _extremum(producer, key, lambda a, b: a < b, "minimum")


def maximum(producer, key=None):
    """Return the largest value of a producer, see :func:`minimum`."""
    if key is not None:
        check_callable(key, "key")
    return _extremum(producer, key, lambda a, b: a > b, "maximum")


def each(f, producer):
    """Call `f` on every value of a producer."""
    check_callable(f)
    for i, value in enumerate(from_iterable(producer)):
        guarded_call("each", None, i, f, value)


def each_pair(f, producer):
    """Call `f` with every key and value of a key/value producer."""
    check_callable(f)
    for i, (key, value) in enumerate(from_pairs(producer)):
        guarded_call("each_pair", None, i, f, key, value)
