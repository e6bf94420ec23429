"""
A python library to compose lazy sequence operations.

The pushseq package provides producers: restartable descriptions of
sequences which compute nothing until they are traversed. A producer
is traversed either by iterating over it or by calling it with a
consumer callback, in which case the consumer can stop production at
any time by returning `False`.

Operations such as :func:`smap`, :func:`sfilter` or :func:`join` build
new producers on top of existing ones (or of plain iterables) without
materializing intermediate results, and terminal functions such as
:func:`reduce`, :func:`nth` or :func:`collect_list` drain them.

Key/value sequences are represented by :class:`PairProducer` which
bridges with native mappings.
"""

from . import instrument
from .channel import Channel, consume_channel
from .collect import collect_array, collect_dict, collect_list
from .dicts import from_mapping, keys, values
from .errors import EvaluationError, seterr
from .mapping import sfilter, smap, starmap, try_map
from .producer import PairProducer, Producer, from_iterable, from_pairs, generator
from .reduction import (
    each,
    each_pair,
    first,
    last,
    maximum,
    minimum,
    nth,
    position,
    reduce,
)
from .shape import join, join_pairs, partition
from .sources import between, chars, split, srange

__all__ = [
    "Producer",
    "PairProducer",
    "from_iterable",
    "from_pairs",
    "generator",
    "EvaluationError",
    "seterr",
    "smap",
    "starmap",
    "sfilter",
    "try_map",
    "join",
    "join_pairs",
    "partition",
    "srange",
    "between",
    "split",
    "chars",
    "Channel",
    "consume_channel",
    "reduce",
    "first",
    "last",
    "nth",
    "position",
    "minimum",
    "maximum",
    "each",
    "each_pair",
    "collect_list",
    "collect_dict",
    "collect_array",
    "from_mapping",
    "keys",
    "values",
]
