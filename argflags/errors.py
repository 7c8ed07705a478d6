"""Exception types raised for configuration mistakes.

Parsing and value lookups never raise; these only surface when the caller
wires the library up inconsistently.
"""

from __future__ import annotations

__all__ = ["FlagsError", "AliasConflictError", "DuplicateOptionError", "UnknownNumericModeError"]


class FlagsError(Exception):
    """Base class for argflags errors."""


class AliasConflictError(FlagsError, ValueError):
    """An alias is already bound to a different primary option."""

    def __init__(self, alias: str, existing: str, requested: str) -> None:
        super().__init__(
            f"Alias {alias!r} already belongs to {existing!r}; cannot bind it to {requested!r}."
        )
        self.alias = alias
        self.existing = existing
        self.requested = requested


class UnknownNumericModeError(FlagsError, ValueError):
    """A numeric mode other than ``strict`` or ``prefix`` was requested."""


class DuplicateOptionError(FlagsError, ValueError):
    """The same option was declared twice on one validator."""
