# -*- coding: utf-8 -*
"""A generic-iteration toolkit over stateless iterator triples.

Convert between tuples, containers and iterator triples ``(step, invariant, control)``,
and combine iterators lazily with ``map``, ``filter``, ``df``, ``spread``,
``find``, ``some`` and ``every``.

See ``dir(stepwise)`` and submodule docstrings for more.
"""

__version__ = '0.1.0'

from .adapters import *  # noqa: F401, F403
from .funutil import *  # noqa: F401, F403
from .it import *  # noqa: F401, F403
from .misc import *  # noqa: F401, F403
from .step import *  # noqa: F401, F403
