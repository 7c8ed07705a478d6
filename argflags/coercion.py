"""Conversion of stored option strings into typed values.

Every conversion goes through a *coercer*: a callable taking the raw string
and returning ``(value, ok)``. Registries map a requested kind (usually a
type) to its coercer, with built-ins for ``str``, ``bool``, ``int`` and
``float``. Kinds nobody registered fall back to calling ``kind(raw)``.

Numeric coercers come in two flavours:

``strict``
    The whole value (surrounding whitespace aside) must be a decimal
    literal, so ``"42abc"`` and ``"42.5"`` (as ``int``) are rejected.
``prefix``
    The longest numeric prefix is converted and anything after it is
    ignored, so ``"42abc"`` becomes ``42`` and ``"42.42"`` as ``int``
    becomes ``42``.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Dict, Optional, Tuple

from .errors import UnknownNumericModeError

__all__ = [
    "Coercer",
    "CoercionRegistry",
    "DEFAULT_NUMERIC_MODE",
    "FALSITIES",
    "NUMERIC_MODES",
    "coerce_bool",
    "coerce_str",
    "register_coercer",
    "unregister_coercer",
]

Coercer = Callable[[str], Tuple[Any, bool]]

FALSITIES: frozenset[str] = frozenset({"0", "n", "no", "f", "false"})

NUMERIC_MODES: frozenset[str] = frozenset({"strict", "prefix"})
DEFAULT_NUMERIC_MODE = "strict"

_INT_PATTERN = r"[+-]?[0-9]+"
_FLOAT_PATTERN = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"

_INT_FULL = re.compile(rf"\s*({_INT_PATTERN})\s*")
_FLOAT_FULL = re.compile(rf"\s*({_FLOAT_PATTERN})\s*")
_INT_PREFIX = re.compile(rf"\s*({_INT_PATTERN})")
_FLOAT_PREFIX = re.compile(rf"\s*({_FLOAT_PATTERN})")

# Process-wide registrations: consulted after a registry's explicit
# registrations and before its built-ins.
_GLOBAL_COERCERS: Dict[Any, Coercer] = {}


def coerce_str(raw: str) -> Tuple[str, bool]:
    return raw, True


def coerce_bool(raw: str) -> Tuple[bool, bool]:
    return raw not in FALSITIES, True


def _numeric_coercer(pattern: re.Pattern[str], convert: Callable[[str], Any], *, full: bool) -> Coercer:
    def _coerce(raw: str) -> Tuple[Any, bool]:
        match = pattern.fullmatch(raw) if full else pattern.match(raw)
        if match is None:
            return None, False
        value = convert(match.group(1))
        if isinstance(value, float) and not math.isfinite(value):
            return None, False
        return value, True

    return _coerce


_NUMERIC_COERCERS: Dict[str, Dict[type, Coercer]] = {
    "strict": {
        int: _numeric_coercer(_INT_FULL, int, full=True),
        float: _numeric_coercer(_FLOAT_FULL, float, full=True),
    },
    "prefix": {
        int: _numeric_coercer(_INT_PREFIX, int, full=False),
        float: _numeric_coercer(_FLOAT_PREFIX, float, full=False),
    },
}


def _construct_with(kind: Any) -> Coercer:
    def _coerce(raw: str) -> Tuple[Any, bool]:
        return kind(raw), True

    return _coerce


def register_coercer(kind: Any, coercer: Optional[Coercer] = None):
    """Register ``coercer`` for ``kind`` in every registry.

    It takes precedence over the built-in coercers (so ``int`` can be
    replaced process-wide) but not over ``CoercionRegistry.register``.
    Usable directly or as a decorator::

        @register_coercer(Point)
        def _point(raw):
            ...
    """

    if coercer is None:
        def _decorator(fn: Coercer) -> Coercer:
            _GLOBAL_COERCERS[kind] = fn
            return fn

        return _decorator
    _GLOBAL_COERCERS[kind] = coercer
    return coercer


def unregister_coercer(kind: Any) -> Optional[Coercer]:
    return _GLOBAL_COERCERS.pop(kind, None)


class CoercionRegistry:
    """Per-parser table of coercers keyed by the requested kind."""

    def __init__(self, numeric_mode: str = DEFAULT_NUMERIC_MODE) -> None:
        if numeric_mode not in NUMERIC_MODES:
            raise UnknownNumericModeError(
                f"Unknown numeric mode {numeric_mode!r}; expected one of {', '.join(sorted(NUMERIC_MODES))}."
            )
        self.numeric_mode = numeric_mode
        self._builtins: Dict[Any, Coercer] = {
            str: coerce_str,
            bool: coerce_bool,
        }
        self._builtins.update(_NUMERIC_COERCERS[numeric_mode])
        self._coercers: Dict[Any, Coercer] = {}

    def register(self, kind: Any, coercer: Optional[Coercer] = None):
        if coercer is None:
            def _decorator(fn: Coercer) -> Coercer:
                self._coercers[kind] = fn
                return fn

            return _decorator
        self._coercers[kind] = coercer
        return coercer

    def lookup(self, kind: Any) -> Coercer:
        coercer = self._coercers.get(kind)
        if coercer is not None:
            return coercer
        coercer = _GLOBAL_COERCERS.get(kind)
        if coercer is not None:
            return coercer
        coercer = self._builtins.get(kind)
        if coercer is not None:
            return coercer
        return _construct_with(kind)

    def coerce(self, raw: Optional[str], kind: Any) -> Optional[Any]:
        """Convert ``raw`` into ``kind``; ``None`` when it cannot be converted.

        ``raw`` is ``None`` for a bare flag, which is ``True`` as a ``bool``
        and a failed conversion for every other kind.
        """

        if raw is None:
            return True if kind is bool else None
        try:
            value, ok = self.lookup(kind)(raw)
        except (ValueError, TypeError, ArithmeticError):
            return None
        return value if ok else None
