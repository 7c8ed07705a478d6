"""Query surface over parsed command-line arguments."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from .aliases import AliasRegistry
from .coercion import CoercionRegistry
from .config import FlagsConfig, get_runtime_config
from .parser import OptionMap, Parser
from .validator import Validator

__all__ = ["Args", "parse"]

Key = Union[str, int]

_MISSING: Any = object()


class Args:
    """Parsed arguments with typed, alias-aware lookups.

    ``argv`` excludes the program name; ``None`` reads ``sys.argv[1:]``.
    Lookups never raise: a missing key, an out-of-range index and a value
    that does not convert all come back as ``None`` (or the default).
    """

    def __init__(
        self,
        argv: Optional[Iterable[str]] = None,
        *,
        config: Optional[FlagsConfig] = None,
        numeric_mode: Optional[str] = None,
        end_of_options: Optional[bool] = None,
        coercers: Optional[CoercionRegistry] = None,
    ) -> None:
        config = config or get_runtime_config()
        tokens = list(argv) if argv is not None else sys.argv[1:]
        separator = config.end_of_options if end_of_options is None else end_of_options
        self._parser = Parser(tokens, end_of_options=separator)
        self._coercers = coercers or CoercionRegistry(numeric_mode or config.numeric_mode)
        self._aliases = AliasRegistry()

    # -----------------
    # Raw structures
    # -----------------
    def options(self) -> OptionMap:
        return self._parser.options

    def positional(self) -> List[str]:
        return self._parser.positional

    def skipped(self) -> List[str]:
        return self._parser.skipped

    @property
    def aliases(self) -> AliasRegistry:
        return self._aliases

    @property
    def coercers(self) -> CoercionRegistry:
        return self._coercers

    def alias(self, primary: str, *aliases: str) -> "Args":
        self._aliases.add(primary, *aliases)
        return self

    def has(self, key: str) -> bool:
        """Whether ``key`` or one of its aliases was supplied at all."""

        return any(self._parser.has(name) for name in self._aliases.candidates(key))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    # -----------------
    # Typed lookups
    # -----------------
    def get(self, key: Key, kind: Any = None, default: Any = _MISSING) -> Any:
        """Return ``key`` (an option name or positional index) converted to ``kind``.

        ``kind`` defaults to the type of ``default`` when one is given, and to
        ``str`` otherwise. Option names fall back through their aliases and the
        first candidate whose value converts wins.
        """

        kind = _resolve_kind(kind, default)
        if _is_index(key):
            value = self._get_positional(key, kind)  # type: ignore[arg-type]
        else:
            value = self._get_option(str(key), kind)
        if value is None and default is not _MISSING:
            return default
        return value

    def get_multiple(self, key: str, kind: Any = None, default: Any = _MISSING) -> List[Any]:
        """Return every value of the first supplied candidate of ``key``.

        Values that do not convert become ``None``, or ``default`` when given.
        An empty list means neither ``key`` nor its aliases were supplied.
        """

        kind = _resolve_kind(kind, default)
        for name in self._aliases.candidates(key):
            if not self._parser.has(name):
                continue
            results = [self._coercers.coerce(raw, kind) for raw in self._parser.values(name)]
            if default is not _MISSING:
                results = [default if value is None else value for value in results]
            return results
        return []

    def _get_option(self, key: str, kind: Any) -> Any:
        result: Any = None

        def _visit(name: str) -> bool:
            nonlocal result
            values = self._parser.values(name)
            if not values:
                return True
            result = self._coercers.coerce(values[0], kind)
            return result is None

        self._aliases.for_each_in_priority_order(key, _visit)
        return result

    def _get_positional(self, index: int, kind: Any) -> Any:
        positional = self._parser.positional
        if index < 0 or index >= len(positional):
            return None
        return self._coercers.coerce(positional[index], kind)

    # -----------------
    # Validation
    # -----------------
    def validate(self, program_name: Optional[str] = None, description: Optional[str] = None) -> Validator:
        if program_name is None:
            program_name = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "program"
        return Validator(self, program_name, description)

    def __repr__(self) -> str:
        return (
            f"Args(options={self._parser.options!r}, positional={self._parser.positional!r}, "
            f"skipped={self._parser.skipped!r})"
        )


def _is_index(key: Key) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _resolve_kind(kind: Any, default: Any) -> Any:
    if kind is not None:
        return kind
    if default is not _MISSING and default is not None:
        return type(default)
    return str


def parse(argv: Optional[Iterable[str]] = None, **kwargs: Any) -> Args:
    """Parse ``argv`` (``sys.argv[1:]`` when omitted) into :class:`Args`."""

    args = Args(argv, **kwargs)
    _LOGGER.debug("%r", args)
    return args


_LOGGER = logging.getLogger("argflags.args")
