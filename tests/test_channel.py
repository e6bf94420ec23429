import multiprocessing
import queue
import threading
import time

import pytest
from pushseq import Channel, consume_channel, collect_list, first, \
    EvaluationError, seterr


@pytest.fixture(autouse=True)
def restore_seterr():
    yield
    seterr('wrap')


@pytest.mark.timeout(3)
def test_preloaded_channel():
    c = Channel()
    for i in range(5):
        c.put(i)
    c.close()

    assert collect_list(consume_channel(c)) == [0, 1, 2, 3, 4]

    # closure is sticky
    assert collect_list(consume_channel(c)) == []
    assert collect_list(consume_channel(c)) == []

    with pytest.raises(ValueError):
        c.put(5)

    c.close()  # no-op


@pytest.mark.timeout(3)
def test_threaded_producer():
    c = Channel(maxsize=2)

    def feed():
        for i in range(50):
            c.put(i)
            time.sleep(0.001)
        c.close()

    t = threading.Thread(target=feed)
    t.start()
    assert collect_list(consume_channel(c)) == list(range(50))
    t.join()


@pytest.mark.timeout(3)
def test_partial_drain():
    c = Channel()
    for i in range(5):
        c.put(i)
    c.close()

    drained = consume_channel(c)
    assert first(drained) == (0, True)
    assert collect_list(drained) == [1, 2, 3, 4]


@pytest.mark.timeout(3)
def test_blocks_until_closed():
    c = Channel()
    result = []

    def drain():
        result.extend(collect_list(consume_channel(c)))

    t = threading.Thread(target=drain)
    t.start()
    time.sleep(0.1)
    assert t.is_alive()

    c.put("a")
    c.close()
    t.join()
    assert result == ["a"]


@pytest.mark.timeout(3)
@pytest.mark.parametrize('evaluation', ['wrap', 'passthrough'])
def test_failed_channel(evaluation):
    seterr(evaluation)

    c = Channel()
    c.put(1)
    c.fail(KeyError("producer crashed"))

    with pytest.raises(ValueError):
        c.fail(KeyError("again"))

    seen = []
    if evaluation == 'wrap':
        with pytest.raises(EvaluationError) as excinfo:
            consume_channel(c)(seen.append)
        assert isinstance(excinfo.value.__cause__, KeyError)
    else:
        with pytest.raises(KeyError):
            consume_channel(c)(seen.append)

    assert seen == [1]


@pytest.mark.timeout(3)
@pytest.mark.skipif(not hasattr(queue, "ShutDown"),
                    reason="queue shutdown requires python>=3.13")
def test_queue_shutdown():
    q = queue.Queue()
    for i in range(5):
        q.put(i)
    q.shutdown()

    assert collect_list(consume_channel(q)) == [0, 1, 2, 3, 4]


def test_invalid_channel():
    with pytest.raises(TypeError):
        consume_channel([1, 2, 3])


def feed_process(c, n, fail):
    for i in range(n):
        c.put(i)
    if fail:
        try:
            raise RuntimeError("worker failed")
        except RuntimeError as error:
            c.fail(error)
    else:
        c.close()


@pytest.mark.timeout(10)
def test_multiprocessing_channel():
    c = Channel(queue=multiprocessing.Queue())
    p = multiprocessing.Process(target=feed_process, args=(c, 5, False))
    p.start()
    assert collect_list(consume_channel(c)) == [0, 1, 2, 3, 4]
    p.join()

    c = Channel(queue=multiprocessing.Queue())
    p = multiprocessing.Process(target=feed_process, args=(c, 3, True))
    p.start()
    seen = []
    with pytest.raises(EvaluationError) as excinfo:
        consume_channel(c)(seen.append)
    p.join()

    assert seen == [0, 1, 2]
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert excinfo.value.__cause__.__traceback__ is not None
