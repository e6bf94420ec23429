"""Debugging tools."""

from time import monotonic, perf_counter

from .errors import format_stack, guarded_call
from .producer import Producer, from_iterable
from .utils import check_callable


class Debug(Producer):
    def __init__(self, producer, func, max_calls, max_rate):
        check_callable(func, "func")

        self.producer = from_iterable(producer)
        self.max_calls = max_calls
        self.max_rate = max_rate
        self.n_calls = 0
        self.last_call = monotonic()
        self.func = func
        self.stack = format_stack(2)

    def silence(self):
        if self.max_calls is not None:
            if self.n_calls >= self.max_calls:
                return True

        if self.max_rate is not None:
            elapsed = monotonic() - self.last_call
            if elapsed < (1.0 / self.max_rate):
                return True

        return False

    def __iter__(self):
        for i, value in enumerate(self.producer):
            if not self.silence():
                guarded_call(self.__class__.__name__, self.stack, i,
                             self.func, i, value)
                self.last_call = monotonic()
                self.n_calls += 1

            yield value


def debug(producer, func, max_calls=None, max_rate=None):
    """Wrap a producer to trigger a function on each produced value.

    Args:
        producer (Producer):
            Source producer.
        func (Callable):
            A function to call whenever a value is produced, must take
            the index and the value.
        max_calls (Optional[int]):
            An optional count limit on how many times `func` is invoked
            (default None), shared by all traversals.
        max_rate (Optional[int]):
            An optional rate limit to avoid spamming `func`.

    Returns:
        (Producer): The wrapped producer.

    Example:

        .. testsetup::

           from pushseq.instrument import debug

        >>> watchthis = debug([1, 2, 3, 4, 5], lambda i, v: print(i, v), 2)
        >>> pushseq.collect_list(watchthis)
        0 1
        1 2
        [1, 2, 3, 4, 5]
    """
    return Debug(producer, func, max_calls, max_rate)


class ThroughputMonitor(Producer):
    def __init__(self, producer):
        self.producer = from_iterable(producer)
        self.reset()

    def reset(self):
        """Forget the statistics gathered by previous traversals."""
        self.n_values = 0
        self.n_traversals = 0
        self.time_waiting = 0.

    def _average(self, what):
        if self.n_values == 0:
            raise RuntimeError(
                "cannot measure {} before any value was produced".format(what))

        return self.time_waiting / self.n_values

    def read_delay(self):
        """Return the average time spent waiting for upstream values."""
        return self._average("read delay")

    def throughput(self):
        """Return the average number of values produced per second."""
        delay = self._average("throughput")
        return float("inf") if delay == 0 else 1. / delay

    def __iter__(self):
        self.n_traversals += 1
        upstream = iter(self.producer)

        while True:
            t_start = perf_counter()
            try:
                value = next(upstream)
            except StopIteration:
                return
            self.time_waiting += perf_counter() - t_start
            self.n_values += 1

            # time spent by downstream consumers is not accounted
            yield value


def monitor_throughput(producer):
    """Wrap a producer to measure how fast it produces values.

    Only the time spent waiting for upstream values is measured, the
    time taken by downstream consumers is excluded. Statistics
    accumulate over all traversals until :code:`reset()` is called.

    Returns:
        (Producer): The wrapped producer, with :code:`read_delay()`,
        :code:`throughput()` and :code:`reset()` methods and
        :code:`n_values` / :code:`n_traversals` counters.

    Example:

        .. testsetup::

           from pushseq.instrument import monitor_throughput

        >>> monitored = monitor_throughput(pushseq.srange(10))
        >>> pushseq.first(monitored)
        (0, True)
        >>> monitored.n_values, monitored.n_traversals
        (1, 1)
    """
    return ThroughputMonitor(producer)
