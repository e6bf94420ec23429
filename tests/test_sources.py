import pytest
from pushseq import srange, between, split, chars, collect_list, first, nth


def test_srange():
    assert collect_list(srange(5)) == [0, 1, 2, 3, 4]
    assert collect_list(srange(0)) == []
    assert collect_list(srange(-3)) == []
    assert len(srange(5)) == 5

    with pytest.raises(TypeError):
        srange(2.5)


def test_between():
    assert collect_list(between(5, 10)) == [5, 6, 7, 8, 9]
    assert collect_list(between(5, 5)) == []
    assert collect_list(between(9, 3)) == []
    assert collect_list(between(-2, 1)) == [-2, -1, 0]


@pytest.mark.parametrize("string,sep", [
    ("a,b,c", ","),
    ("a,,b,", ","),
    (",", ","),
    ("", ","),
    ("no separator", ","),
    ("one::two::::three", "::"),
    ("añb→c→", "→"),
])
def test_split(string, sep):
    assert collect_list(split(string, sep)) == string.split(sep)


def test_split_edge_cases():
    assert collect_list(split("abc", "")) == ["a", "b", "c"]
    assert collect_list(split("", "")) == []

    with pytest.raises(TypeError):
        split(b"a,b", ",")


def test_split_lazy():
    text = "x," * 1000
    assert first(split(text, ",")) == ("x", True)
    assert nth(split(text, ","), 1001) == ("", True)
    assert nth(split(text, ","), 1002) == (None, False)


def test_chars():
    assert collect_list(chars("hello")) == ["h", "e", "l", "l", "o"]
    assert collect_list(chars("añ→😀")) == ["a", "ñ", "→", "😀"]
    assert collect_list(chars("añ→😀".encode())) == ["a", "ñ", "→", "😀"]
    assert collect_list(chars(b"a\xffb")) == ["a", "\ufffd", "b"]
    assert collect_list(chars("")) == []

    with pytest.raises(TypeError):
        chars(42)
