# -*- coding: utf-8 -*-
"""Lazy combinators over iterator triples.

Every combinator takes an iterator triple ``step, invariant, control`` as its
last three arguments (``invariant`` and ``control`` default to ``None``), so a
triple returned by e.g. ``pairs`` can be splatted in::

    unpairs(map(f, *pairs(d)))

and a zero-argument lazy iterator function can be passed alone::

    spread(map(double, values(20, 4, 18, 6)))  # --> (40, 8, 36, 12)

``map``, ``filter`` and ``df`` return a new lazy iterator function. Nothing is
evaluated until it is called; each call advances one logical element and
returns it, or ``None`` when the source is exhausted. A lazy iterator function
ignores any arguments, so it is itself a valid ``step`` for another combinator.

Once a source has signaled exhaustion, the combinator remembers that and never
calls the source's ``step`` again.

The names ``map`` and ``filter`` shadow the builtins on purpose. If you
star-import this module, use ``builtins.map`` for the stdlib version.
"""

__all__ = ["values", "map", "filter", "spread", "df",
           "find", "some", "every"]

from .funutil import rets, unrets
from .step import Done, Keep, Drop, classify, verdict, checkcallable

def _truth(result):
    """Truth value of a plain predicate's result, in the ``Values`` convention."""
    vals = rets(result)
    return bool(vals) and bool(vals[0])

def values(*vals):
    """Tuple -> iterator. Return a lazy iterator function over ``vals``.

    Each call returns the next captured value, in order, then ``None`` forever.

    The count of values is taken at call time, so ``None``s at fixed positions
    are captured too. Note a consumer will read a ``None`` as exhaustion.
    Likewise, a captured ``Values`` object is read as several values, so only
    its first value survives e.g. ``spread``: ``spread(values(Values(1, 2)))``
    is ``(1,)``. Pass a ``tuple`` to capture several values as one.
    """
    n = len(vals)
    i = 0
    def iterator(*_):
        nonlocal i
        if i < n:
            i += 1
            return vals[i - 1]
        return None
    return iterator

def map(transform, step, invariant=None, control=None):
    """Map ``transform`` lazily over an iterator.

    The transform receives all values of the current element as positional
    arguments. Its return value, in the ``Values`` convention, becomes the
    element of the new iterator.

    If the transform returns nothing (``None``, or a result whose first value
    is ``None``), the element is skipped and the next one is pulled immediately,
    so ``map`` also acts as a filter. Only exhaustion of the source ends the
    mapped iterator.

    Example::

        def strkeys(k, v):
            if isinstance(k, str):
                return Values(k, v)
        assert unpairs(map(strkeys, *pairs({"foo": 45, "bar": 7, 1: 55}))) == {"foo": 45, "bar": 7}
    """
    checkcallable(transform, "transform")
    checkcallable(step, "step")
    exhausted = False
    def mapped(*_):
        nonlocal control, exhausted
        while not exhausted:
            item = classify(step(invariant, control))
            if item is Done:
                exhausted = True
                break
            control = item.control
            result = transform(*item.values)
            if classify(result) is not Done:
                return result
        return None
    return mapped

def filter(predicate, step, invariant=None, control=None):
    """Lazily keep the elements of an iterator that satisfy ``predicate``.

    The predicate returns a keep flag. It may also return ``Values(flag, replacement)``;
    if the element is kept and ``replacement`` is not ``None``, the replacement
    becomes the element in place of the original values. Only one replacement
    value is supported.

    Example::

        def initial_a(name, phone):
            return Values(name.startswith("A"), phone)
        filter(initial_a, *pairs(people))  # phone numbers of the A-people
    """
    checkcallable(predicate, "predicate")
    def keep(*vals):
        v = verdict(predicate(*vals))
        if v is Drop:
            return None
        if v is Keep:
            return unrets(vals)
        return v.value
    return map(keep, step, invariant, control)

def spread(step, invariant=None, control=None):
    """Iterator -> tuple. Consume the iterator, return the first value of each element.

    Example::

        assert spread(values(1, 2, 3)) == (1, 2, 3)
        assert spread(*pairs({"a": 1, "b": 2})) == ("a", "b")  # keys only
    """
    checkcallable(step, "step")
    out = []
    while True:
        item = classify(step(invariant, control))
        if item is Done:
            break
        control = item.control
        out.append(item.control)
    return tuple(out)

def df(step, invariant=None, control=None):
    """Drop-first. Wrap an iterator, dropping the first value of each element.

    The dropped value still drives the iteration as the control; the consumer
    only sees the rest. This adapts control-leading sources, such as ``ipairs``,
    into value-only ones::

        some(is_seated, df(*ipairs(players)))

    instead of::

        some(lambda _, player: is_seated(player), *ipairs(players))

    An element that has nothing beyond its first value comes out as ``None``,
    which the consumer will read as exhaustion. The same goes for an element
    whose second value is ``None``: after dropping, it is in first position,
    so the iteration ends there and the rest of the source is not seen.
    Consume the source directly instead if its data may contain ``None``.
    """
    checkcallable(step, "step")
    exhausted = False
    def dropped(*_):
        nonlocal control, exhausted
        if exhausted:
            return None
        item = classify(step(invariant, control))
        if item is Done:
            exhausted = True
            return None
        control = item.control
        return unrets(item.values[1:])
    return dropped

def find(predicate, step, invariant=None, control=None):
    """Return the first element satisfying ``predicate``, or ``None`` if there is none.

    The predicate follows the ``filter`` convention, so it may replace the
    element it finds::

        find(lambda card: card.suit == "Hearts", df(*ipairs(cards)))

    The source is pulled only up to and including the match.
    """
    return filter(predicate, step, invariant, control)()

def some(predicate, step, invariant=None, control=None):
    """Return whether at least one element satisfies ``predicate``.

    ``False`` for an empty iterator. Stops at the first match.

    The predicate returns a truth value; ``Values(flag, ...)`` is read by its
    first value.
    """
    checkcallable(predicate, "predicate")
    def witness(*vals):
        if _truth(predicate(*vals)):
            return True
    return map(witness, step, invariant, control)() or False

def every(predicate, step, invariant=None, control=None):
    """Return whether all elements satisfy ``predicate``.

    ``True`` for an empty iterator. Stops at the first counterexample.
    """
    checkcallable(predicate, "predicate")
    def counterexample(*vals):
        if not _truth(predicate(*vals)):
            return False
    return map(counterexample, step, invariant, control)() is None
