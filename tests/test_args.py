from __future__ import annotations

import sys
from typing import Tuple

from argflags import Args, FlagsConfig, parse
from argflags.coercion import CoercionRegistry


def test_count_and_laugh_scenario() -> None:
    args = Args(["--count=5", "--laugh"])
    assert args.get("count", int) == 5
    assert args.get("laugh", bool, False) is True
    assert args.get("laugh", default=False) is True
    assert args.positional() == []


def test_paths_and_verbose_scenario() -> None:
    args = Args(["/tmp/a", "/tmp/b", "--verbose"])
    assert args.positional() == ["/tmp/a", "/tmp/b"]
    assert args.get("verbose", default=False) is True


def test_bool_lookups() -> None:
    args = Args(["--foo", "1", "--bar", "no", "--verbose"])
    assert args.get("foo", bool) is True
    assert args.get("foo", default=False) is True
    assert args.get("bar", bool) is False
    assert args.get("bar", default=True) is False
    assert args.get("verbose", bool) is True
    assert args.get("nonexistent", bool) is None
    assert args.get("nonexistent", default=False) is False


def test_number_lookups() -> None:
    args = Args(["--foo", "42", "--bar", "42.42"])
    assert args.get("foo", int) == 42
    assert args.get("foo", float) == 42.0
    assert args.get("bar", float) == 42.42
    assert args.get("bar", int) is None
    assert args.get("foobar", int, 42) == 42
    assert args.get("foobar", default=42.4242) == 42.4242
    assert args.get("foobar", int) is None
    assert args.get("foobar", float) is None


def test_prefix_mode_truncates_like_stream_extraction() -> None:
    args = Args(["--bar", "42.42", "--baz", "7px"], numeric_mode="prefix")
    assert args.get("bar", int) == 42
    assert args.get("baz", int) == 7


def test_string_is_the_default_kind() -> None:
    args = Args(["--name", "alpha", "--flag"])
    assert args.get("name") == "alpha"
    assert args.get("flag") is None
    assert args.get("flag", default="fallback") == "fallback"


def test_single_lookup_uses_first_occurrence() -> None:
    args = Args(["--f", "1", "--f", "2"])
    assert args.get("f", int) == 1


def test_get_multiple_preserves_order() -> None:
    args = Args(["--f", "1", "--f", "2", "--f", "3"])
    assert args.get_multiple("f", int) == [1, 2, 3]


def test_get_multiple_marks_failures() -> None:
    args = Args(["--f", "1", "--f", "x", "--f"])
    assert args.get_multiple("f", int) == [1, None, None]
    assert args.get_multiple("f", int, default=0) == [1, 0, 0]
    assert args.get_multiple("f", bool) == [True, True, True]
    assert args.get_multiple("missing", int) == []
    assert args.get_multiple("missing", int, default=0) == []


def test_positional_lookups() -> None:
    args = Args(["positional", "arguments", "--bar", "42", "7"])
    assert args.positional() == ["positional", "arguments", "7"]
    assert args.get(0) == "positional"
    assert args.get(1, str, "default") == "arguments"
    assert args.get(2, int) == 7
    assert args.get(3) is None
    assert args.get(3, str, "default") == "default"
    assert args.get(-1) is None


def test_absent_positionals() -> None:
    args = Args(["--no", "positional", "--arguments"])
    assert args.positional() == []
    assert args.get(0, int) is None
    assert args.get(0, int, 3) == 3


def test_skipped_tokens() -> None:
    args = Args(["--mode", "fast", "--", "--raw", "tail"])
    assert args.get("mode") == "fast"
    assert args.skipped() == ["--raw", "tail"]
    assert args.get("raw") is None


def test_separator_can_be_disabled() -> None:
    args = Args(["--", "x"], end_of_options=False)
    assert args.skipped() == []
    assert args.options() == {"": ["x"]}


def test_config_supplies_defaults() -> None:
    config = FlagsConfig(numeric_mode="prefix", end_of_options=False)
    args = Args(["--n", "3x", "--", "y"], config=config)
    assert args.get("n", int) == 3
    assert args.skipped() == []


def test_alias_fallback() -> None:
    args = Args(["-v", "true"]).alias("verbose", "v")
    assert args.get("verbose", bool) is True
    assert "verbose" in args
    assert args.has("verbose")


def test_primary_name_wins_over_alias() -> None:
    args = Args(["--verbose=false", "-v=true"]).alias("verbose", "v")
    assert args.get("verbose", bool) is False


def test_alias_used_when_primary_does_not_convert() -> None:
    args = Args(["--count", "many", "-c", "3"]).alias("count", "c")
    assert args.get("count", int) == 3
    assert args.get("count") == "many"


def test_get_multiple_reads_first_present_candidate() -> None:
    args = Args(["-n", "1", "-n", "2"]).alias("number", "num", "n")
    assert args.get_multiple("number", int) == [1, 2]


def test_custom_registry() -> None:
    registry = CoercionRegistry()

    @registry.register(tuple)
    def _pair(raw: str) -> Tuple[tuple, bool]:
        parts = tuple(raw.split(":"))
        return parts, len(parts) == 2

    args = Args(["--range", "1:5", "--bad", "1"], coercers=registry)
    assert args.get("range", tuple) == ("1", "5")
    assert args.get("bad", tuple) is None
    assert args.coercers is registry


def test_defaults_to_process_arguments(monkeypatch) -> None:
    monkeypatch.setattr(sys, "argv", ["prog", "--count", "2", "file"])
    args = parse()
    assert args.get("count", int) == 2
    assert args.positional() == ["file"]


def test_results_are_copies() -> None:
    args = Args(["--name", "a", "pos"])
    args.positional().append("x")
    args.options()["name"].append("b")
    assert args.positional() == ["pos"]
    assert args.get_multiple("name") == ["a"]
