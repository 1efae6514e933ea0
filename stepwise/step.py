# -*- coding: utf-8 -*-
"""The iterator triple, and the tagged forms of step results and filter verdicts.

An *iterator triple* is ``(step, invariant, control)``:

  - ``step(invariant, control)`` computes one step of the iteration,
  - ``invariant`` is passed unchanged to every call of ``step``,
  - ``control`` is where we are; each step's first value becomes the next control.

When the first value of a step is ``None`` (this includes a step that returns
nothing at all), the sequence is exhausted. This is the user-facing protocol,
the same one used by e.g. Lua's generic ``for``.

Internally the combinators work on the tagged form: ``classify`` maps a raw
step result to either ``Done`` or ``Item(control, values)``.

Since ``None`` doubles as the exhaustion marker, a producer cannot yield
``None`` as the first value of a live element. This is a limitation of the
protocol. If your data may contain ``None``, use an index-leading source such
as ``ipairs`` and consume it directly with ``map``, ``filter`` or ``iterate``,
where the index stays in first position. Note ``df`` does not help here: it
moves the data into first position, so a ``None`` item there ends the
iteration for every consumer downstream.
"""

__all__ = ["Triple", "Done", "Item", "classify",
           "Keep", "Drop", "KeepReplaced", "verdict",
           "checkcallable"]

from collections import namedtuple

from .funutil import rets

Triple = namedtuple("Triple", ["step", "invariant", "control"], defaults=(None, None))
Triple.__doc__ = """An iterator triple. Splat it into a combinator: ``map(f, *triple)``."""

class _Marker:
    """A named singleton marker."""
    def __init__(self, name):
        self.name = name
    def __repr__(self):
        return self.name

Done = _Marker("Done")

class Item(namedtuple("Item", ["control", "values"])):
    """A live element: the new control state, and the full tuple of values
    (including the control value in first position)."""
    __slots__ = ()

def classify(result):
    """Tag a raw step result. Return ``Done`` or ``Item(control, values)``."""
    vals = rets(result)
    if not vals or vals[0] is None:
        return Done
    return Item(vals[0], vals)

# Filter verdicts.
Keep = _Marker("Keep")
Drop = _Marker("Drop")

class KeepReplaced(namedtuple("KeepReplaced", ["value"])):
    """Keep the element, but replace it with ``value``."""
    __slots__ = ()

def verdict(result):
    """Decode the return value of a filter predicate.

    The predicate returns a keep flag, optionally followed by a replacement::

        return ok                         # -> Keep or Drop
        return Values(ok, replacement)    # -> KeepReplaced(replacement) or Drop

    A replacement of ``None`` means no replacement. Values beyond the second
    are ignored; an element can be replaced by one value only.

    A predicate may also return a verdict (``Keep``, ``Drop``, ``KeepReplaced``)
    directly; it passes through as-is.
    """
    if result is Keep or result is Drop or isinstance(result, KeepReplaced):
        return result
    vals = rets(result)
    if not vals or not vals[0]:
        return Drop
    if len(vals) >= 2 and vals[1] is not None:
        return KeepReplaced(vals[1])
    return Keep

def checkcallable(f, role):
    """Raise `TypeError` at the call site if `f` is not callable."""
    if not callable(f):
        raise TypeError(f"{role} must be callable; got {type(f)} with value {repr(f)}")
    return f
