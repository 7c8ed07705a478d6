"""Inspector CLI that shows how argflags splits a token list.

Everything after the first ``--`` is handed to :class:`argflags.Args`; the
flags before it configure the inspector itself::

    argflags-inspect --json --require count:int -- --count=5 --laugh
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from argflags.args import Args
from argflags.coercion import NUMERIC_MODES
from argflags.colors import color
from argflags.config import get_runtime_config
from argflags.errors import FlagsError
from argflags.validator import Validator
from argflags.version import __version__

KINDS: Dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
}


@dataclass(frozen=True)
class OptionSpec:
    """A ``NAME[,ALIAS...][:TYPE]`` declaration from the command line."""

    name: str
    aliases: Tuple[str, ...]
    kind: type


def _option_spec(value: str) -> OptionSpec:
    names, _, kind_name = value.partition(":")
    kind_name = kind_name.strip() or "str"
    kind = KINDS.get(kind_name)
    if kind is None:
        raise argparse.ArgumentTypeError(
            f"unknown type {kind_name!r} (choose from {', '.join(KINDS)})"
        )
    parts = [part.strip() for part in names.split(",") if part.strip()]
    if not parts:
        raise argparse.ArgumentTypeError(f"missing option name in {value!r}")
    return OptionSpec(name=parts[0], aliases=tuple(parts[1:]), kind=kind)


def setup_logging(level: str) -> None:
    """Configure root logging for the inspector run."""

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    config = get_runtime_config()
    parser = argparse.ArgumentParser(
        prog="argflags-inspect",
        description="Show how argflags classifies the tokens given after '--'.",
    )
    parser.add_argument("--json", action="store_true", help="Print the parse result as JSON.")
    parser.add_argument(
        "--numeric-mode",
        choices=sorted(NUMERIC_MODES),
        default=config.numeric_mode,
        help=f"Numeric conversion mode (default: {config.numeric_mode}).",
    )
    parser.add_argument(
        "--no-separator",
        dest="end_of_options",
        action="store_false",
        help="Treat a later '--' as an ordinary option instead of the end of options.",
    )
    parser.set_defaults(end_of_options=config.end_of_options)
    parser.add_argument(
        "--require",
        metavar="NAME[,ALIAS...][:TYPE]",
        type=_option_spec,
        action="append",
        default=[],
        help="Declare a required option (TYPE: str, int, float, bool).",
    )
    parser.add_argument(
        "--optional",
        metavar="NAME[,ALIAS...][:TYPE]",
        type=_option_spec,
        action="append",
        default=[],
        help="Declare an optional option (TYPE: str, int, float, bool).",
    )
    parser.add_argument("--program", default="program", help="Program name shown in usage text.")
    parser.add_argument("--description", default=None, help="Program description shown in usage text.")
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging level (default: {config.log_level}).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def split_tokens(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split ``argv`` at the first ``--`` into inspector flags and inspected tokens."""

    items = list(argv)
    if "--" not in items:
        return items, []
    index = items.index("--")
    return items[:index], items[index + 1:]


def parse_args(argv: Optional[Sequence[str]]) -> Tuple[argparse.Namespace, List[str]]:
    own, tokens = split_tokens(list(argv) if argv is not None else sys.argv[1:])
    return build_parser().parse_args(own), tokens


def _build_validator(args: Args, ns: argparse.Namespace) -> Optional[Validator]:
    if not ns.require and not ns.optional:
        return None
    validator = args.validate(ns.program, ns.description)
    for spec in ns.require:
        validator.require(spec.name, f"required {spec.kind.__name__}", *spec.aliases, kind=spec.kind)
    for spec in ns.optional:
        validator.optional(spec.name, f"optional {spec.kind.__name__}", *spec.aliases, kind=spec.kind)
    return validator


def _report(args: Args, validator: Optional[Validator]) -> Dict[str, Any]:
    report: Dict[str, Any] = {
        "options": args.options(),
        "positional": args.positional(),
        "skipped": args.skipped(),
    }
    if validator is not None:
        report["valid"] = validator.is_valid()
        report["failures"] = [entry.option for entry in validator.failures()]
    return report


def _print_section(title: str, lines: List[str]) -> None:
    print(color(f"{title}:", fg="yellow", bold=True))
    if not lines:
        print("  (none)")
    for line in lines:
        print(f"  {line}")


def _print_report(report: Dict[str, Any]) -> None:
    option_lines = []
    for key, values in report["options"].items():
        rendered = ", ".join("(flag)" if value is None else repr(value) for value in values)
        option_lines.append(f"{key or '(empty)'} = {rendered}")
    _print_section("options", option_lines)
    _print_section("positional", [repr(token) for token in report["positional"]])
    _print_section("skipped", [repr(token) for token in report["skipped"]])
    if "valid" in report:
        status = color("valid", fg="green") if report["valid"] else color("invalid", fg="red")
        print(color("schema:", fg="yellow", bold=True) + f" {status}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    ns, tokens = parse_args(argv)
    setup_logging(ns.log_level)

    args = Args(tokens, numeric_mode=ns.numeric_mode, end_of_options=ns.end_of_options)
    try:
        validator = _build_validator(args, ns)
    except FlagsError as exc:
        print(f"argflags-inspect: error: {exc}", file=sys.stderr)
        return 2
    report = _report(args, validator)

    if ns.json:
        print(json.dumps(report, ensure_ascii=False, indent=2))
    else:
        _print_report(report)

    if validator is not None:
        try:
            validator.print_and_exit_on_failure(sys.stderr)
        except SystemExit as exc:
            return int(exc.code or 1)
    return 0


__all__ = ["build_parser", "parse_args", "main", "split_tokens", "setup_logging"]
