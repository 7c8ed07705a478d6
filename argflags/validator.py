"""Schema declarations, validity checks, and usage text."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, Any, List, Optional, Tuple

from .colors import color
from .errors import DuplicateOptionError

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .args import Args

__all__ = ["HelpEntry", "Validator"]


@dataclass(frozen=True)
class HelpEntry:
    """One declared option and the verdict computed when it was declared."""

    option: str
    description: str
    kind: Any
    required: bool
    valid: bool
    aliases: Tuple[str, ...] = ()

    @property
    def usage(self) -> str:
        return f"--{self.option}=arg" if self.required else f"[{self.option}]"

    @property
    def kind_name(self) -> str:
        return getattr(self.kind, "__name__", str(self.kind))


class Validator:
    """Check parsed arguments against declared options and render help.

    Verdicts are computed once per declaration against the already parsed
    arguments, so the order of ``require``/``optional`` calls never changes
    an individual verdict. Nothing here exits the process except
    :meth:`print_and_exit_on_failure`.
    """

    def __init__(self, args: "Args", program_name: str, description: Optional[str] = None) -> None:
        self._args = args
        self.program_name = program_name
        self.description = description
        self._entries: List[HelpEntry] = []

    def require(self, option: str, description: str = "", *aliases: str, kind: Any = str) -> "Validator":
        return self._declare(option, description, aliases, kind=kind, required=True)

    def optional(self, option: str, description: str = "", *aliases: str, kind: Any = str) -> "Validator":
        return self._declare(option, description, aliases, kind=kind, required=False)

    def _declare(
        self,
        option: str,
        description: str,
        aliases: Tuple[str, ...],
        *,
        kind: Any,
        required: bool,
    ) -> "Validator":
        if any(entry.option == option for entry in self._entries):
            raise DuplicateOptionError(f"Option {option!r} is already declared.")
        if aliases:
            self._args.alias(option, *aliases)
        valid = self._check(option, kind, required)
        self._entries.append(
            HelpEntry(
                option=option,
                description=description,
                kind=kind,
                required=required,
                valid=valid,
                aliases=tuple(aliases),
            )
        )
        _LOGGER.debug(
            "%s option %r as %s: %s",
            "Required" if required else "Optional",
            option,
            getattr(kind, "__name__", kind),
            "valid" if valid else "invalid",
        )
        return self

    def _check(self, option: str, kind: Any, required: bool) -> bool:
        if not required and not self._args.has(option):
            return True
        return self._args.get(option, kind) is not None

    # -----------------
    # Queries
    # -----------------
    @property
    def entries(self) -> List[HelpEntry]:
        return list(self._entries)

    def failures(self) -> List[HelpEntry]:
        return [entry for entry in self._entries if not entry.valid]

    def is_valid(self) -> bool:
        return all(entry.valid for entry in self._entries)

    def help_text(self) -> str:
        lines = ["usage: " + " ".join([self.program_name] + [entry.usage for entry in self._entries])]
        if self.description:
            lines.extend(["", self.description])
        if self._entries:
            width = max(len(entry.option) for entry in self._entries) + 1
            lines.extend(["", "options:"])
            for entry in self._entries:
                lines.append(f"  --{entry.option.ljust(width)} {entry.description}".rstrip())
        return "\n".join(lines) + "\n"

    # -----------------
    # Output
    # -----------------
    def print_help(self, stream: Optional[IO[str]] = None) -> None:
        out = stream if stream is not None else sys.stdout
        out.write(self.help_text())

    def print_and_exit_on_failure(self, stream: Optional[IO[str]] = None, exit_code: int = 1) -> None:
        """Print help and raise ``SystemExit`` when any declared option is invalid."""

        failures = self.failures()
        if not failures:
            return
        out = stream if stream is not None else sys.stderr
        for entry in failures:
            reason = "missing or invalid" if entry.required else "invalid"
            out.write(color(f"error: {reason} --{entry.option} ({entry.kind_name})", fg="red", stream=out) + "\n")
        self.print_help(out)
        _LOGGER.info("Exiting with status %d: %d invalid option(s)", exit_code, len(failures))
        raise SystemExit(exit_code)


_LOGGER = logging.getLogger("argflags.validator")
