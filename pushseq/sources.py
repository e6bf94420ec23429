"""Producers generated from scratch, with no upstream producer."""

from .producer import Producer
from .utils import isint


class Range(Producer):
    def __init__(self, start, stop):
        if not isint(start) or not isint(stop):
            raise TypeError("range limits must be integers")

        self.start = start
        self.stop = max(start, stop)

    def __len__(self):
        return self.stop - self.start

    def __iter__(self):
        return iter(range(self.start, self.stop))


def srange(n):
    """Produce the integers from 0 to `n` (excluded).

    A negative or null `n` gives an empty producer.

    Example:

        >>> pushseq.collect_list(pushseq.srange(5))
        [0, 1, 2, 3, 4]
    """
    return Range(0, n)


def between(start, stop):
    """Produce the integers from `start` to `stop` (excluded).

    Nothing is produced if `start >= stop`.

    Example:

        >>> pushseq.collect_list(pushseq.between(5, 10))
        [5, 6, 7, 8, 9]
        >>> pushseq.collect_list(pushseq.between(5, 5))
        []
    """
    return Range(start, stop)


class Split(Producer):
    def __init__(self, string, sep):
        if not isinstance(string, str) or not isinstance(sep, str):
            raise TypeError("split only supports str arguments")

        self.string = string
        self.sep = sep

    def __iter__(self):
        if self.sep == "":  # cut after each code point
            return iter(self.string)

        return self.chunks()

    def chunks(self):
        string, sep = self.string, self.sep
        start = 0
        while True:
            stop = string.find(sep, start)
            if stop < 0:
                yield string[start:]
                return

            yield string[start:stop]
            start = stop + len(sep)


def split(string, sep):
    """Produce the substrings of `string` delimited by `sep`.

    Empty substrings are kept, as with :meth:`python:str.split` given
    an explicit separator. An empty separator produces each character.
    The string is scanned progressively, stopping the traversal early
    leaves the rest of it untouched.

    Example:

        >>> pushseq.collect_list(pushseq.split("a,b,,c", ","))
        ['a', 'b', '', 'c']
        >>> pushseq.collect_list(pushseq.split("abc", ""))
        ['a', 'b', 'c']
    """
    return Split(string, sep)


class Chars(Producer):
    def __init__(self, string):
        if isinstance(string, (bytes, bytearray)):
            string = bytes(string).decode("utf-8", errors="replace")
        elif not isinstance(string, str):
            raise TypeError(
                "chars expects str or bytes, not " + string.__class__.__name__)

        self.string = string

    def __iter__(self):
        return iter(self.string)


def chars(string):
    """Produce each character (code point) of a string.

    UTF-8 encoded bytes are accepted too, invalid byte sequences are
    produced as U+FFFD replacement characters.

    Example:

        >>> pushseq.collect_list(pushseq.chars("añb"))
        ['a', 'ñ', 'b']
        >>> pushseq.collect_list(pushseq.chars("añb".encode()))
        ['a', 'ñ', 'b']
    """
    return Chars(string)
