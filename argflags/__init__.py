"""argflags: a small command-line argument parser.

Typical use::

    import argflags

    args = argflags.parse()
    count = args.get("count", int, default=1)
    verbose = args.alias("verbose", "v").get("verbose", default=False)
"""

from __future__ import annotations

from .aliases import AliasRegistry
from .args import Args, parse
from .coercion import FALSITIES, CoercionRegistry, register_coercer, unregister_coercer
from .config import FlagsConfig, get_runtime_config, reload_config
from .errors import AliasConflictError, DuplicateOptionError, FlagsError, UnknownNumericModeError
from .parser import Parser
from .validator import HelpEntry, Validator
from .version import __version__

__all__ = [
    "AliasConflictError",
    "AliasRegistry",
    "Args",
    "CoercionRegistry",
    "DuplicateOptionError",
    "FALSITIES",
    "FlagsConfig",
    "FlagsError",
    "HelpEntry",
    "Parser",
    "UnknownNumericModeError",
    "Validator",
    "__version__",
    "get_runtime_config",
    "parse",
    "register_coercer",
    "reload_config",
    "unregister_coercer",
]
