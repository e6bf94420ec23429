"""Adapters between native mappings and producers.

A dict iterates in insertion order but other mappings may not, none of
these adapters promise a particular order.

To merge several mappings, chain their producers with
:func:`~pushseq.join_pairs` and collect the result with
:func:`~pushseq.collect_dict`.
"""

from .producer import Producer, PairProducer


def _check_mapping(mapping):
    if not callable(getattr(mapping, "items", None)):
        raise TypeError(
            "expected a mapping, not " + mapping.__class__.__name__)


class MappingItems(PairProducer):
    def __init__(self, mapping):
        _check_mapping(mapping)
        self.mapping = mapping

    def __iter__(self):
        for key, value in self.mapping.items():
            yield key, value


class MappingKeys(Producer):
    def __init__(self, mapping):
        _check_mapping(mapping)
        self.mapping = mapping

    def __iter__(self):
        return iter(self.mapping.keys())


class MappingValues(Producer):
    def __init__(self, mapping):
        _check_mapping(mapping)
        self.mapping = mapping

    def __iter__(self):
        return iter(self.mapping.values())


def from_mapping(mapping):
    """Return a key/value producer over the items of a mapping.

    Example:

        >>> items = pushseq.from_mapping({'pushseq': 2})
        >>> items(lambda k, v: print(k, v))
        pushseq 2
    """
    return MappingItems(mapping)


def keys(mapping):
    """Return a producer over the keys of a mapping."""
    return MappingKeys(mapping)


def values(mapping):
    """Return a producer over the values of a mapping."""
    return MappingValues(mapping)
