"""Alternate option names that fall back to a primary option."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from .errors import AliasConflictError

__all__ = ["AliasRegistry"]


class AliasRegistry:
    """Map aliases to their primary option and walk them in priority order.

    Each primary owns a group ``[primary, alias_1, alias_2, ...]`` in the
    order the aliases were declared. An alias belongs to exactly one primary.
    """

    def __init__(self) -> None:
        self._groups: Dict[str, List[str]] = {}
        self._primary_of: Dict[str, str] = {}

    def add(self, primary: str, *aliases: str) -> "AliasRegistry":
        if primary in self._primary_of:
            raise AliasConflictError(primary, self._primary_of[primary], primary)
        for alias in aliases:
            existing = self._primary_of.get(alias)
            if existing is not None and existing != primary:
                raise AliasConflictError(alias, existing, primary)
            if alias != primary and alias in self._groups:
                raise AliasConflictError(alias, alias, primary)

        group = self._groups.setdefault(primary, [primary])
        for alias in aliases:
            if alias == primary or alias in self._primary_of:
                continue
            self._primary_of[alias] = primary
            group.append(alias)
        _LOGGER.debug("Aliases for %r: %s", primary, group[1:])
        return self

    def resolve_primary(self, name: str) -> Optional[str]:
        """Return the primary ``name`` is an alias of, if any."""

        return self._primary_of.get(name)

    def aliases_of(self, primary: str) -> List[str]:
        return list(self._groups.get(primary, [primary])[1:])

    def candidates(self, key: str) -> List[str]:
        """Names to try for ``key``: itself, then its aliases if it is a primary."""

        return list(self._groups.get(key, [key]))

    def for_each_in_priority_order(self, key: str, visitor: Callable[[str], bool]) -> bool:
        """Call ``visitor`` for each candidate until it returns ``False``.

        Returns ``True`` when the visitor stopped the walk early.
        """

        for candidate in self.candidates(key):
            if not visitor(candidate):
                return True
        return False

    def __contains__(self, name: object) -> bool:
        return name in self._groups or name in self._primary_of

    def __len__(self) -> int:
        return len(self._primary_of)


_LOGGER = logging.getLogger("argflags.aliases")
