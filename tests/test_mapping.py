import random

import pytest
from pushseq import smap, starmap, sfilter, try_map, from_iterable, \
    from_pairs, collect_list, first, srange, EvaluationError, seterr


@pytest.fixture(autouse=True)
def restore_seterr():
    yield
    seterr('wrap')


def test_smap_basics():
    n = 100
    data = [random.random() for _ in range(n)]

    def do(x):
        do.call_cnt += 1
        return x + 1

    do.call_cnt = 0

    result = smap(do, data)
    assert do.call_cnt == 0
    assert collect_list(result) == [x + 1 for x in data]
    assert do.call_cnt == n
    assert list(result) == [x + 1 for x in data]
    assert do.call_cnt == 2 * n

    do.call_cnt = 0
    assert first(result) == (data[0] + 1, True)
    assert do.call_cnt == 1


def test_smap_zip():
    result = smap(lambda a, b: a - b, [5, 6, 7, 8], srange(3))
    assert collect_list(result) == [5, 5, 5]


def test_smap_inverse():
    data = [3, -1, 42, 0, 7]
    as_str = smap(str, data)
    assert collect_list(as_str) == ["3", "-1", "42", "0", "7"]
    assert collect_list(smap(int, as_str)) == data


class CustomException(Exception):
    pass


@pytest.mark.parametrize('evaluation', ['wrap', 'passthrough'])
def test_smap_exceptions(evaluation):
    def do(x):
        del x
        raise CustomException

    data = [random.random() for _ in range(100)]
    m = smap(do, data)

    seterr(evaluation)
    error_t = EvaluationError if evaluation == "wrap" else CustomException

    with pytest.raises(error_t):
        collect_list(m)

    with pytest.raises(error_t):
        next(iter(m))

    with pytest.raises(TypeError):
        smap(None, data)

    with pytest.raises(ValueError):
        smap(do)


def test_wrapped_error_details():
    def do(x):
        if x == 3:
            raise CustomException("boom")
        return x

    m = smap(do, range(10))

    with pytest.raises(EvaluationError) as excinfo:
        collect_list(m)

    assert "item 3" in str(excinfo.value)
    assert "Mapping" in str(excinfo.value)
    assert "test_wrapped_error_details" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, CustomException)

    # upstream errors are not wrapped twice
    with pytest.raises(EvaluationError) as excinfo:
        collect_list(smap(lambda x: x, m))
    assert isinstance(excinfo.value.__cause__, CustomException)


def test_seterr():
    assert seterr() == 'wrap'
    assert seterr('passthrough') == 'passthrough'
    assert seterr() == 'passthrough'
    with pytest.raises(ValueError):
        seterr('ignore')


def test_starmap():
    n = 100
    data = [(random.random(),) for _ in range(n)]

    def do(x):
        do.call_cnt += 1
        return x + 1

    do.call_cnt = 0

    result = starmap(do, data)
    assert do.call_cnt == 0
    assert collect_list(result) == [x + 1 for (x,) in data]
    assert do.call_cnt == n

    pairs = from_pairs([("a", 1), ("b", 2)])
    assert collect_list(starmap(lambda k, v: k * v, pairs)) == ["a", "bb"]


def test_sfilter():
    data = list(range(20))

    assert collect_list(sfilter(lambda x: x % 3 == 0, data)) \
        == [0, 3, 6, 9, 12, 15, 18]
    assert collect_list(sfilter(lambda x: True, data)) == data
    assert collect_list(sfilter(lambda x: False, data)) == []

    # rejected values do not stop the traversal
    seen = []
    sfilter(lambda x: x > 15, data)(seen.append)
    assert seen == [16, 17, 18, 19]

    with pytest.raises(EvaluationError):
        collect_list(sfilter(lambda x: 1 / x, data))

    with pytest.raises(TypeError):
        sfilter(None, data)


def test_try_map():
    outcomes = list(try_map(int, ["1", "x", "3", ""]))

    assert [r for r, _ in outcomes] == [1, None, 3, None]
    assert outcomes[0][1] is None
    assert isinstance(outcomes[1][1], ValueError)
    assert outcomes[2][1] is None
    assert isinstance(outcomes[3][1], ValueError)

    # errors are forwarded, the consumer decides to stop
    seen = []

    def consumer(result, error):
        seen.append(result)
        return error is None

    try_map(int, from_iterable(["1", "x", "3"]))(consumer)
    assert seen == [1, None]
