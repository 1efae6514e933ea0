# -*- coding: utf-8 -*-
"""Miscellaneous constructs."""

__all__ = ["CountingStep"]

from .step import checkcallable

class CountingStep:
    """Step function that counts how many times it has been called.

    Wraps the original ``step``. Simply use ``CountingStep(step)`` in place
    of ``step`` in an iterator triple::

        counted = CountingStep(values(1, 2, 3))
        assert some(lambda x: x == 2, counted)
        assert counted.count == 2

    Useful for checking how far a combinator pulled its source.
    """
    def __init__(self, step):
        self._step = checkcallable(step, "step")
        self.count = 0
    def __call__(self, *args):
        self.count += 1
        return self._step(*args)
