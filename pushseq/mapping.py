from .errors import format_stack, guarded_call
from .producer import Producer, PairProducer, from_iterable
from .utils import check_callable


class Mapping(Producer):
    def __init__(self, f, *producers):
        check_callable(f)
        if len(producers) <= 0:
            raise ValueError("at least one input producer must be provided")

        self.producers = [from_iterable(p) for p in producers]
        self.f = f
        self.stack = format_stack(2)

    def __iter__(self):
        name = self.__class__.__name__
        iterator = iter(self.producers[0]) if len(self.producers) == 1 \
            else zip(*self.producers)
        star = len(self.producers) > 1

        for i, value in enumerate(iterator):
            if star:
                yield guarded_call(name, self.stack, i, self.f, *value)
            else:
                yield guarded_call(name, self.stack, i, self.f, value)


def smap(f, *producers):
    """Return a mapping of `f` over the producer(s).

    Equivalent to :code:`(f(x) for x in producer)` with a restartable
    result and on-demand evaluation: `f` is only called when a value is
    requested downstream.

    If several producers are passed, they will be zipped together and
    their values will be passed as distinct arguments to f, the mapping
    ends with the shortest producer.

    Example:

        >>> def do(x):
        ...     print("computing", x)
        ...     return x + 2
        ...
        >>> m = pushseq.smap(do, [1, 2, 3, 4])
        >>> pushseq.first(m)
        computing 1
        (3, True)
        >>> pushseq.collect_list(pushseq.smap(lambda a, b: a * b, [1, 2], [3, 4]))
        [3, 8]
    """
    return Mapping(f, *producers)


def starmap(f, producer):
    """Map a function over a producer of argument tuples.

    A producer equivalent of :func:`python:itertools.starmap`, also
    accepts a :class:`~pushseq.PairProducer` in which case `f` is
    called with each key and value.
    """
    return Mapping(lambda x: f(*x), producer)


class Filtering(Producer):
    def __init__(self, predicate, producer):
        check_callable(predicate, "predicate")

        self.producer = from_iterable(producer)
        self.predicate = predicate
        self.stack = format_stack(2)

    def __iter__(self):
        name = self.__class__.__name__

        for i, value in enumerate(self.producer):
            if guarded_call(name, self.stack, i, self.predicate, value):
                yield value


def sfilter(predicate, producer):
    """Return the values of a producer for which `predicate` holds.

    Rejected values are silently skipped, they never interrupt the
    traversal.

    Example:

        >>> evens = pushseq.sfilter(lambda x: x % 2 == 0, pushseq.srange(10))
        >>> pushseq.collect_list(evens)
        [0, 2, 4, 6, 8]
    """
    return Filtering(predicate, producer)


class TryMapping(PairProducer):
    def __init__(self, f, producer):
        check_callable(f)

        self.producer = from_iterable(producer)
        self.f = f

    def __iter__(self):
        for value in self.producer:
            try:
                result = self.f(value)
            except Exception as error:
                yield None, error
            else:
                yield result, None


def try_map(f, producer):
    """Map a fallible function and produce `(result, error)` pairs.

    Each value yields :code:`(f(value), None)` when `f` returns
    normally, or :code:`(None, error)` when it raises. Failures do not
    abort the traversal, deciding what to do with them is left to the
    consumer.

    Example:

        >>> outcomes = pushseq.try_map(int, ['1', 'x', '3'])
        >>> for result, error in outcomes:
        ...     print(result, type(error).__name__)
        1 NoneType
        None ValueError
        3 NoneType
    """
    return TryMapping(f, producer)
