# -*- coding: utf-8 -*-
"""Multiple-return-values for step functions.

A step function, transform or lazy iterator function in `stepwise` returns:

  - ``None``, meaning *nothing* (zero values),
  - ``Values(a, b, ...)``, meaning several values,
  - any other object, meaning exactly one value. A ``tuple`` is one value
    that happens to be a ``tuple``.
"""

__all__ = ["Values", "valuify", "rets", "unrets"]

from functools import wraps

class Values:
    """Structured multiple-return-values.

    This is what a step function returns when one step of the iteration
    produces several values, e.g. a key and a value::

        def step(invariant, control):
            ...
            return Values(key, value)

    Having a `Values` type separate from `tuple` keeps the distinction between
    *one value that is a tuple* and *several values*, which the combinators
    need in order to know how many arguments to pass on to the next function
    in the chain.

    `Values` behaves like a read-only sequence of its positional values::

        result = Values(1, 2, 3)
        assert result.rets == (1, 2, 3)
        assert result[0] == 1
        assert result[:-1] == (1, 2)
        assert len(result) == 3
        a, b, c = result

        result = Values(42)
        assert result.ret == 42  # shorthand for single-value case

    `Values(42)` is legal, but it is preferable to just return `42` when it is
    known that there is only one value.
    """
    def __init__(self, *rets):
        """Create a `Values` object.

        `rets`: positional return values
        """
        self.rets = rets

    # Shorthand for one-value case
    def _ret(self):
        return self.rets[0]
    ret = property(fget=_ret, doc="Shorthand for `self.rets[0]`. Read-only.")

    def __iter__(self):
        return iter(self.rets)
    def __len__(self):
        return len(self.rets)
    def __getitem__(self, idx):
        """Indexing by an `int` or `slice` indexes the positional values.

        Indexing by any other type raises `TypeError`.
        """
        if isinstance(idx, (int, slice)):
            return self.rets[idx]
        raise TypeError(f"Expected either int or slice subscript, got {type(idx)} with value {repr(idx)}")

    def __eq__(self, other):
        """Two `Values` objects are equal if their `rets` are."""
        if not isinstance(other, Values):
            return False
        return other.rets == self.rets
    def __ne__(self, other):
        return not (self == other)
    def __hash__(self):
        return hash((Values, self.rets))

    def __repr__(self):
        """Pretty-printing. Eval-able if the contents are."""
        rets_str = ", ".join(repr(x) for x in self.rets)
        return f"Values({rets_str})"

def valuify(f):
    """Decorator. Convert the pythonic tuple-as-multiple-return-values idiom into `Values`.

    If `f` returns `tuple` (exactly, no subclass), convert into `Values`, else pass through.

    Handy for writing step functions the pythonic way::

        @valuify
        def step(seq, i):
            i += 1
            if i < len(seq):
                return i, seq[i]
    """
    @wraps(f)
    def valuified(*args, **kwargs):
        result = f(*args, **kwargs)
        if type(result) is tuple:  # yes, exactly tuple
            result = Values(*result)
        return result
    return valuified

def rets(result):
    """Normalize a return value into a `tuple` of values.

    ``None`` -> ``()``; ``Values(a, b)`` -> ``(a, b)``; anything else ``x`` -> ``(x,)``.
    """
    if result is None:
        return ()
    if isinstance(result, Values):
        return result.rets
    return (result,)

def unrets(vals):
    """The inverse of `rets`: pack a `tuple` of values into a return value.

    ``()`` -> ``None``; ``(x,)`` -> ``x``; longer -> ``Values(...)``.
    """
    if not vals:
        return None
    if len(vals) == 1:
        return vals[0]
    return Values(*vals)
