"""Lazy, restartable sequences driven by their consumer."""

from abc import ABC, abstractmethod
import functools

from .utils import check_callable, get_logger


logger = get_logger(__name__)


class Producer(ABC):
    """Restartable description of a sequence of values.

    Nothing is computed until a traversal starts. A producer can be
    traversed in two ways:

    - by pushing values to a consumer: :code:`producer(consumer)` calls
      :code:`consumer(value)` for each value in order and stops as soon
      as the consumer returns :code:`False` (any other return value,
      :code:`None` included, lets production continue).
    - by pulling values with :code:`iter(producer)`.

    Every traversal runs the generation logic again from the start, two
    traversals never share state.

    Subclasses only implement :meth:`__iter__`.
    """

    @abstractmethod
    def __iter__(self):
        raise NotImplementedError

    def __call__(self, consumer):
        check_callable(consumer, "consumer")

        iterator = iter(self)
        try:
            for value in iterator:
                if consumer(value) is False:
                    return
        finally:
            # terminate upstream production synchronously
            close = getattr(iterator, "close", None)
            if close is not None:
                close()


class PairProducer(Producer):
    """Two-element variant of :class:`Producer` for key/value sequences.

    Iterating yields :code:`(key, value)` tuples, pushing calls
    :code:`consumer(key, value)`. Keys are not required to be unique.
    """

    def __call__(self, consumer):
        check_callable(consumer, "consumer")

        iterator = iter(self)
        try:
            for key, value in iterator:
                if consumer(key, value) is False:
                    return
        finally:
            close = getattr(iterator, "close", None)
            if close is not None:
                close()


class IterableProducer(Producer):
    def __init__(self, iterable):
        self.iterable = iterable

    def __iter__(self):
        return iter(self.iterable)


class IterablePairProducer(PairProducer):
    def __init__(self, iterable):
        self.iterable = iterable

    def __iter__(self):
        for key, value in self.iterable:
            yield key, value


def _warn_if_one_shot(iterable):
    try:
        one_shot = iter(iterable) is iterable
    except TypeError:
        raise TypeError(
            "expected an iterable, not " + iterable.__class__.__name__)

    if one_shot:
        logger.warning(
            "%s is an iterator, the resulting producer can only be "
            "traversed once", iterable.__class__.__name__)


def from_iterable(iterable):
    """Return a producer over the items of an iterable.

    Items are produced in the iteration order of `iterable` which
    should not be modified while it is being traversed.

    Passing a one-shot iterator (a generator for instance) is
    permitted but the producer will then be empty after its first
    traversal, use :func:`generator` to get a restartable producer out
    of a generator function instead.

    Example:

        >>> p = pushseq.from_iterable(['a', 'b', 'c'])
        >>> p(print)
        a
        b
        c
        >>> pushseq.collect_list(p)
        ['a', 'b', 'c']
    """
    if isinstance(iterable, Producer):
        return iterable

    _warn_if_one_shot(iterable)
    return IterableProducer(iterable)


def from_pairs(iterable):
    """Return a key/value producer over an iterable of pairs.

    A mapping is adapted with :func:`~pushseq.from_mapping`, its items
    are produced rather than its keys.

    Example:

        >>> pairs = pushseq.from_pairs([('a', 1), ('b', 2), ('a', 3)])
        >>> pairs(lambda k, v: print(k, v))
        a 1
        b 2
        a 3
    """
    if isinstance(iterable, PairProducer):
        return iterable

    if callable(getattr(iterable, "items", None)):
        from .dicts import from_mapping
        return from_mapping(iterable)

    _warn_if_one_shot(iterable)
    return IterablePairProducer(iterable)


class Generated(Producer):
    def __init__(self, func, args, kwargs):
        self.func = func
        self.args = args
        self.kwargs = kwargs

    def __iter__(self):
        return iter(self.func(*self.args, **self.kwargs))


def generator(func):
    """Decorate a generator function to return restartable producers.

    The function is invoked again with the same arguments each time the
    returned producer is traversed.

    Example:

        >>> @pushseq.generator
        ... def countdown(n):
        ...     while n > 0:
        ...         yield n
        ...         n -= 1
        ...
        >>> p = countdown(3)
        >>> pushseq.collect_list(p), pushseq.collect_list(p)
        ([3, 2, 1], [3, 2, 1])
    """
    check_callable(func, "func")

    @functools.wraps(func)
    def make_producer(*args, **kwargs):
        return Generated(func, args, kwargs)

    return make_producer
