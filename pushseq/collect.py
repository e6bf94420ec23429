"""Terminal collectors, where a producer becomes a concrete container."""

from .producer import from_iterable, from_pairs


def collect_list(producer):
    """Drain a producer into a list, in production order.

    Values of a key/value producer are collected as `(key, value)`
    tuples.
    """
    return [value for value in from_iterable(producer)]


def collect_dict(producer):
    """Drain a key/value producer into a dict.

    When a key is produced more than once, the last value wins.
    """
    result = {}
    from_pairs(producer)(result.__setitem__)
    return result


def collect_array(producer, dtype=None):
    """Drain a producer into a :class:`numpy:numpy.ndarray`.

    Requires numpy which is an optional dependency.

    Example:

        >>> pushseq.collect_array(pushseq.srange(4), dtype='float32')
        array([0., 1., 2., 3.], dtype=float32)
    """
    import numpy as np

    return np.asarray(collect_list(producer), dtype=dtype)
