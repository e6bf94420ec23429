"""Operations that assemble producers or split them apart."""

import itertools

from .errors import guarded_call
from .producer import Producer, PairProducer, IterableProducer, \
    from_iterable, from_pairs
from .utils import check_callable, get_logger


logger = get_logger(__name__)


class Concatenation(Producer):
    def __init__(self, producers):
        self.producers = []
        for p in producers:
            if isinstance(p, self.__class__):
                self.producers.extend(p.producers)
            else:
                self.producers.append(self.wrap(p))

    @staticmethod
    def wrap(p):
        return from_iterable(p)

    def __iter__(self):
        return itertools.chain.from_iterable(self.producers)


class PairConcatenation(Concatenation, PairProducer):
    @staticmethod
    def wrap(p):
        return from_pairs(p)

    def __iter__(self):
        for key, value in itertools.chain.from_iterable(self.producers):
            yield key, value


def join(*producers):
    """Return the concatenation of several producers.

    Producers are visited in argument order, each one in its own order.
    Stopping the traversal ends it for all producers at once, even in
    the middle of one of them.

    Example:

        >>> cat = pushseq.join([1, 2, 3], pushseq.between(8, 11))
        >>> pushseq.collect_list(cat)
        [1, 2, 3, 8, 9, 10]
    """
    return Concatenation(producers)


def join_pairs(*producers):
    """Return the concatenation of several key/value producers.

    Keys are forwarded as they come, the same key may appear more than
    once in the result. Collecting the result with
    :func:`~pushseq.collect_dict` keeps the value from the latest
    producer.

    Example:

        >>> merged = pushseq.join_pairs(
        ...     pushseq.from_mapping({'a': 1, 'b': 2}),
        ...     pushseq.from_mapping({'b': 3}))
        >>> pushseq.collect_dict(merged)
        {'a': 1, 'b': 3}
    """
    return PairConcatenation(producers)


def partition(predicate, producer):
    """Split the values of a producer according to a predicate.

    Unlike most operations, this one is evaluated immediately: the
    producer is drained exactly once and its values are buffered.

    Args:
        predicate (Callable[[Any], bool]):
            Tells which side a value goes to.
        producer (Producer or Iterable):
            The values to split.

    Return:
        (Producer, Producer): The values for which `predicate` holds
        and the remaining ones, both in their original relative order.

    Example:

        >>> odd, even = pushseq.partition(lambda x: x % 2, pushseq.srange(7))
        >>> pushseq.collect_list(odd), pushseq.collect_list(even)
        ([1, 3, 5], [0, 2, 4, 6])
    """
    check_callable(predicate, "predicate")
    left, right = [], []
    for i, value in enumerate(from_iterable(producer)):
        if guarded_call("partition", None, i, predicate, value):
            left.append(value)
        else:
            right.append(value)

    logger.debug("partitioned %d values into %d and %d",
                 len(left) + len(right), len(left), len(right))

    return IterableProducer(left), IterableProducer(right)
