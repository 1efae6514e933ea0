# -*- coding: utf-8 -*-
"""Conversions between tuples, containers and iterator triples.

    tuple     -> iterator    values (in ``stepwise.it``)
    iterator  -> tuple       spread (in ``stepwise.it``)
    container -> iterator    pairs, ipairs
    iterator  -> container   unpairs
    tuple     -> container   pack
    container -> tuple       unpack

Plus the bridges to native Python iteration: ``fromiter`` (iterable -> iterator
function) and ``iterate`` (iterator triple -> generator).
"""

__all__ = ["pairs", "ipairs", "unpairs",
           "pack", "unpack",
           "fromiter", "iterate"]

from collections import namedtuple
from collections.abc import Mapping, Sequence

from .funutil import Values
from .step import Triple, Done, classify, checkcallable

_Snapshot = namedtuple("_Snapshot", ["items", "positions"])

def _nextpair(snapshot, key):
    i = 0 if key is None else snapshot.positions[key] + 1
    if i < len(snapshot.items):
        return Values(*snapshot.items[i])
    return None

def pairs(mapping):
    """Container -> iterator. Return an iterator triple over the ``(key, value)`` pairs of ``mapping``.

    The control is the key. The order is the iteration order of the mapping,
    as it was when ``pairs`` was called; later changes to the mapping do not
    affect an iterator that has already been created.

    Example::

        assert unpairs(*pairs({"a": 1, "b": 2})) == {"a": 1, "b": 2}
        assert spread(*pairs({"a": 1, "b": 2})) == ("a", "b")

    A ``None`` key cannot be enumerated, because it would read as exhaustion;
    this raises ``ValueError``.
    """
    if not isinstance(mapping, Mapping):
        raise TypeError(f"Expected a mapping, got {type(mapping)} with value {repr(mapping)}")
    items = tuple(mapping.items())
    positions = {}
    for j, (k, _) in enumerate(items):
        if k is None:
            raise ValueError(f"Cannot enumerate a None key; got mapping {repr(mapping)}")
        positions[k] = j
    return Triple(_nextpair, _Snapshot(items, positions), None)

def _nextitem(seq, i):
    i += 1
    if i < len(seq):
        return Values(i, seq[i])
    return None

def ipairs(sequence):
    """Container -> iterator. Return an iterator triple over the ``(index, item)`` pairs of ``sequence``.

    Indices are 0-based. The control is the index, so the items themselves
    may be anything, including ``None``, as long as the triple is consumed
    directly::

        assert list(iterate(*ipairs(("a", None, "c")))) == [(0, "a"), (1, None), (2, "c")]

    Use ``df`` to drop the indices::

        assert spread(df(*ipairs((10, 20, 30)))) == (10, 20, 30)

    but ``df`` puts the items in first position, so a ``None`` item then reads
    as exhaustion and ends the iteration early.
    """
    if not isinstance(sequence, Sequence):
        raise TypeError(f"Expected a sequence, got {type(sequence)} with value {repr(sequence)}")
    return Triple(_nextitem, sequence, -1)

def unpairs(step, invariant=None, control=None):
    """Iterator -> container. Consume a key/value iterator into a new ``dict``.

    Each element's first value is the key, the second value is the value
    (``None`` if the element has only one value). On duplicate keys, the
    later one wins.
    """
    checkcallable(step, "step")
    new = {}
    while True:
        item = classify(step(invariant, control))
        if item is Done:
            break
        control = item.control
        k, v, *_ = item.values + (None,)
        new[k] = v
    return new

def pack(*args):
    """Tuple -> container. Multi-argument constructor for tuples.

    In other words, the inverse of tuple unpacking, as a function.
    E.g. ``pack(a, b, c)`` is the same as ``(a, b, c)``.
    """
    return args

def unpack(sequence, start=0, stop=None):
    """Container -> tuple. Return the items ``sequence[start:stop]`` as multiple values.

    The result is a ``Values``, so it can be returned from a step function or
    a transform to produce several values::

        map(lambda k, v: unpack(v), *pairs(d))  # each value is a sequence
    """
    return Values(*sequence[start:stop])

def fromiter(iterable):
    """Python iterable -> iterator. Return a lazy iterator function over ``iterable``.

    Each call returns the next item, then ``None`` forever once the underlying
    iterator is exhausted. Like ``values``, but lazy in the source too::

        spread(map(double, fromiter(range(5))))  # --> (0, 2, 4, 6, 8)

    Note a ``None`` item will read as exhaustion.
    """
    it = iter(iterable)
    def iterator(*_):
        return next(it, None)
    return iterator

def iterate(step, invariant=None, control=None):
    """Iterator triple -> Python generator.

    This is the generic ``for`` loop. Single-value elements are yielded as-is,
    multi-value elements as a ``tuple``::

        for k, v in iterate(*pairs(d)):
            ...
        for x in iterate(values(1, 2, 3)):
            ...
    """
    checkcallable(step, "step")  # now, not on first next()
    def gen(control):
        while True:
            item = classify(step(invariant, control))
            if item is Done:
                return
            control = item.control
            yield item.values[0] if len(item.values) == 1 else item.values
    return gen(control)
