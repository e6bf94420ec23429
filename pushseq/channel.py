"""Bridge between a concurrent FIFO queue and producers."""

import queue

from tblib import pickling_support

from .errors import reraise_err
from .producer import Producer
from .utils import get_logger


# preserve tracebacks of errors sent accross processes by Channel.fail
pickling_support.install()

logger = get_logger(__name__)

# queue.ShutDown only exists on python>=3.13
QueueShutDown = getattr(queue, "ShutDown", None)


class ChannelClosed:
    """Marker put in the queue when a channel is closed."""

    def __init__(self, error=None):
        self.error = error


class Channel:
    """A closeable FIFO queue.

    Producer threads (or processes) :meth:`put` values and
    :meth:`close` the channel once done, consumers drain it with
    :func:`consume_channel` which stops at closure.

    Args:
        maxsize (int): Maximum number of pending values, 0 means
            unbounded (default 0).
        queue (Optional[Queue]): The underlying queue, must provide
            blocking :code:`put` and :code:`get` methods.
            Defaults to a new :class:`python:queue.Queue`, pass a
            :class:`python:multiprocessing.Queue` to share the channel
            with other processes.

    Note:
        The closed state is tracked by each copy of the channel object
        separately, a closed channel only rejects :meth:`put` in the
        thread or process where it was closed.

        The closure marker travels through the queue like a value: on a
        bounded channel that is full, :meth:`close` and :meth:`fail`
        block until a consumer makes room for it.
    """

    def __init__(self, maxsize=0, queue=None):
        self.queue = _new_queue(maxsize) if queue is None else queue
        self.closed = False

    def put(self, value, block=True, timeout=None):
        """Send a value to the consumers."""
        if self.closed:
            raise ValueError("put to closed channel")

        self.queue.put(value, block, timeout)

    def get(self, block=True, timeout=None):
        """Retrieve the next value or the closure marker."""
        return self.queue.get(block, timeout)

    def close(self):
        """Signal consumers that no more values will be sent.

        Blocks while a bounded channel is full.
        """
        if self.closed:
            return

        self.closed = True
        self.queue.put(ChannelClosed())
        logger.debug("channel closed")

    def fail(self, error):
        """Close the channel with an error to be raised by consumers."""
        if self.closed:
            raise ValueError("cannot fail a closed channel")

        self.closed = True
        self.queue.put(ChannelClosed(error))
        logger.debug("channel closed with error %r", error)


def _new_queue(maxsize):
    return queue.Queue(maxsize)


class ChannelConsumption(Producer):
    def __init__(self, channel):
        if not callable(getattr(channel, "get", None)):
            raise TypeError("channel must provide a get method")

        self.channel = channel

    def __iter__(self):
        channel = self.channel
        i = 0

        while True:
            try:
                value = channel.get()
            except Exception as error:
                if QueueShutDown is not None and isinstance(error, QueueShutDown):
                    logger.debug("queue shut down after %d values", i)
                    return
                raise

            if isinstance(value, ChannelClosed):
                # let other consumers see the closure too
                _requeue(channel, value)

                if value.error is not None:
                    reraise_err(i, value.error, "channel")

                logger.debug("channel drained after %d values", i)
                return

            yield value
            i += 1


def _requeue(channel, marker):
    put = channel.queue.put if isinstance(channel, Channel) else channel.put
    put(marker)


def consume_channel(channel):
    """Produce the values received from a channel until it is closed.

    Traversing the producer blocks while waiting for the next value.
    Each value is retrieved only once across all traversals and all
    consumers of the channel, values received just before the consumer
    stops the traversal are lost.

    Args:
        channel (Channel or Queue): A :class:`Channel`, or a queue whose
            shutdown signals closure (:meth:`python:queue.Queue.shutdown`,
            python 3.13 or later).

    Example:

        >>> c = pushseq.Channel()
        >>> for i in range(3):
        ...     c.put(i)
        >>> c.close()
        >>> pushseq.collect_list(pushseq.consume_channel(c))
        [0, 1, 2]
    """
    return ChannelConsumption(channel)
