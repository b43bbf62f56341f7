"""Tests for binding command line tokens to the option table."""

from __future__ import annotations

import pytest

from mediaopts.features.values import ArgumentParseError
from mediaopts.ui.cli.args import OPTIONS, ArgumentParser


def test_defaults_when_no_tokens() -> None:
    raw = ArgumentParser.parse([])

    assert set(raw.options) == {option.dest for option in OPTIONS}
    assert raw.string("action") == "move"
    assert raw.string("conflict") == "skip"
    assert raw.string("order") == "Airdate"
    assert raw.string("lang") == "en"
    assert raw.string("log") == "all"
    assert raw.flag("log_lock") is True
    assert raw.flag("rename") is False
    assert raw.string("output") is None
    assert dict(raw.bindings("defines")) == {}
    assert raw.arguments == ()


def test_options_and_files_interleave() -> None:
    raw = ArgumentParser.parse(["a.mkv", "-rename", "b.mkv", "--db", "TheTVDB", "c.mkv", "-r"])

    assert raw.arguments == ("a.mkv", "b.mkv", "c.mkv")
    assert raw.flag("rename")
    assert raw.flag("recursive")
    assert raw.string("db") == "TheTVDB"


def test_unknown_option_names_the_token() -> None:
    with pytest.raises(ArgumentParseError) as excinfo:
        _ = ArgumentParser.parse(["-rename", "-bogus", "file.mkv"])

    assert excinfo.value.token == "-bogus"


def test_missing_value_names_the_option() -> None:
    with pytest.raises(ArgumentParseError) as excinfo:
        _ = ArgumentParser.parse(["-rename", "--lang"])

    assert excinfo.value.token == "--lang"


@pytest.mark.parametrize(
    ("tokens", "offending"),
    [
        (["--lan", "de"], "--lan"),
        (["-che"], "-che"),
        (["-vers"], "-vers"),
        (["-mediai"], "-mediai"),
        (["-no-x"], "-no-x"),
        (["-clear-c"], "-clear-c"),
        (["-extr"], "-extr"),
        (["-scr", "x"], "-scr"),
        (["-re"], "-re"),
        (["-ren"], "-ren"),
        (["-rx"], "-rx"),
        (["a.mkv", "-r", "-chec=yes"], "-chec=yes"),
    ],
)
def test_option_names_must_match_exactly(tokens: list[str], offending: str) -> None:
    """Prefixes of single-dash options are unknown options, not abbreviations."""

    with pytest.raises(ArgumentParseError) as excinfo:
        _ = ArgumentParser.parse(tokens)

    assert excinfo.value.token == offending


def test_values_that_look_like_options_are_left_to_their_option() -> None:
    raw = ArgumentParser.parse(["--q", "-5", "-", "--lang=de"])

    assert raw.string("query") == "-5"
    assert raw.string("lang") == "de"
    assert raw.arguments == ("-",)


def test_repeated_definitions_accumulate() -> None:
    raw = ArgumentParser.parse(["--def", "a=1", "--def", "b=x=y", "--def", "a=2", "--def", "empty="])

    assert dict(raw.bindings("defines")) == {"a": "2", "b": "x=y", "empty": ""}


@pytest.mark.parametrize("definition", ["novalue", "=value"])
def test_malformed_definition_is_rejected(definition: str) -> None:
    with pytest.raises(ArgumentParseError) as excinfo:
        _ = ArgumentParser.parse(["--def", definition])

    assert excinfo.value.token == "--def"


def test_explicit_boolean_words() -> None:
    assert ArgumentParser.parse(["--log-lock", "no"]).flag("log_lock") is False
    assert ArgumentParser.parse(["--log-lock", "On"]).flag("log_lock") is True

    with pytest.raises(ArgumentParseError) as excinfo:
        _ = ArgumentParser.parse(["--log-lock", "maybe"])
    assert excinfo.value.token == "--log-lock"


def test_separator_ends_option_parsing() -> None:
    raw = ArgumentParser.parse(["-check", "--", "-rename", "--lang", "x.sfv"])

    assert raw.flag("check")
    assert not raw.flag("rename")
    assert raw.string("lang") == "en"
    assert raw.arguments == ("-rename", "--lang", "x.sfv")


def test_values_may_contain_spaces_and_dashes() -> None:
    raw = ArgumentParser.parse(["--format={n} - {t}", "--q=-dash", "--filter", "n =~ /x/"])

    assert raw.string("format") == "{n} - {t}"
    assert raw.string("query") == "-dash"
    assert raw.string("filter") == "n =~ /x/"


def test_tokens_are_kept_but_not_compared() -> None:
    first = ArgumentParser.parse(["-rename", "a.mkv"])
    second = ArgumentParser.parse(["a.mkv", "-rename"])

    assert first == second
    assert first.tokens == ("-rename", "a.mkv")
    assert second.tokens == ("a.mkv", "-rename")


def test_equal_configurations_hash_alike() -> None:
    first = ArgumentParser.parse(["--def", "a=1", "--def", "b=2", "-rename", "x.mkv"])
    second = ArgumentParser.parse(["x.mkv", "--def", "b=2", "-rename", "--def", "a=1"])

    assert hash(first) == hash(second)
    assert len({first, second, ArgumentParser.parse(["-check"])}) == 2


def test_bound_configuration_is_read_only() -> None:
    raw = ArgumentParser.parse(["--def", "a=1"])

    with pytest.raises(TypeError):
        raw.options["rename"] = True  # type: ignore[index]
    with pytest.raises(TypeError):
        raw.bindings("defines")["b"] = "2"  # type: ignore[index]


def test_usage_lists_options() -> None:
    usage = ArgumentParser.format_usage()

    assert "-rename" in usage
    assert "--log-lock" in usage
    assert "--def" in usage
