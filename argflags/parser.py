"""Single-pass tokenizer that splits raw arguments into options and positionals.

Rules, applied left to right with one pending option at a time:

* A token starting with ``-`` is an option key. All leading dashes are
  stripped, and ``key=value`` attaches ``value`` immediately.
* Any other token (the empty string included) is a value for the pending
  option, or a positional argument when nothing is pending.
* An option still pending when the next key or the end of input arrives is
  recorded without a value.
* A literal ``--`` ends option parsing when ``end_of_options`` is enabled;
  everything after it is kept verbatim as *skipped*.

Parsing never fails.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

__all__ = ["OptionMap", "Parser", "SEPARATOR"]

SEPARATOR = "--"

OptionMap = Dict[str, List[Optional[str]]]


class Parser:
    """Parse ``tokens`` (program name excluded) once at construction."""

    def __init__(self, tokens: Iterable[str], *, end_of_options: bool = True) -> None:
        self.end_of_options = end_of_options
        self._options: OptionMap = {}
        self._positional: List[str] = []
        self._skipped: List[str] = []
        self._pending: Optional[str] = None

        remaining = iter(list(tokens))
        for token in remaining:
            if end_of_options and token == SEPARATOR:
                self._flush()
                self._skipped.extend(remaining)
                break
            self._churn(token)
        self._flush()

        _LOGGER.debug(
            "Parsed %d option key(s), %d positional, %d skipped",
            len(self._options),
            len(self._positional),
            len(self._skipped),
        )

    # -----------------
    # Read-only queries
    # -----------------
    @property
    def options(self) -> OptionMap:
        return {key: list(values) for key, values in self._options.items()}

    @property
    def positional(self) -> List[str]:
        return list(self._positional)

    @property
    def skipped(self) -> List[str]:
        return list(self._skipped)

    def has(self, key: str) -> bool:
        return key in self._options

    def values(self, key: str) -> List[Optional[str]]:
        """Return every stored value for ``key`` in encounter order."""

        return list(self._options.get(key, ()))

    # -----------------
    # State machine
    # -----------------
    def _churn(self, token: str) -> None:
        if token.startswith("-"):
            self._on_option(token)
        else:
            self._on_value(token)

    def _flush(self) -> None:
        if self._pending is not None:
            self._on_value(None)

    def _on_option(self, token: str) -> None:
        self._flush()
        key = token.lstrip("-")
        key, delimiter, value = key.partition("=")
        self._pending = key
        if delimiter:
            self._on_value(value)

    def _on_value(self, value: Optional[str]) -> None:
        if self._pending is None:
            # _flush only passes None while a key is pending.
            self._positional.append(value)  # type: ignore[arg-type]
            return
        self._options.setdefault(self._pending, []).append(value)
        self._pending = None


_LOGGER = logging.getLogger("argflags.parser")
