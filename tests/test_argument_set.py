"""Argument set tests: required arguments, defaulted parameters, shared alias space."""

import pytest

from aliasargs.core.argument_set import ArgumentSet
from aliasargs.core.values import ValueType
from aliasargs.errors import (
    AliasError,
    DuplicateAliasError,
    InvalidAliasNameError,
    KeyNotFoundError,
    TypeCoercionError,
)


@pytest.fixture
def argument_set():
    args = ArgumentSet()
    args.add_required(["first", "f"], "first integer argument", ValueType.INT)
    args.add_parameter_with_default(["name", "n"], "who to greet", ValueType.STR, "world")
    args.add_parameter_with_default(["loud", "l"], "shout", ValueType.BOOL, False)
    args.add_parameter_with_default(["ratio", "r"], "scale factor", ValueType.FLOAT, 1)
    return args


def test_defaults_readable_without_parsing(argument_set):
    assert argument_set.get_str("name") == "world"
    assert argument_set.get_str("n") == "world"
    assert argument_set.get_bool("loud") is False
    assert argument_set.get_float("r") == 1.0
    assert isinstance(argument_set.get_float("r"), float)


def test_required_missing_until_parsed(argument_set):
    with pytest.raises(KeyNotFoundError):
        argument_set.get_int("first")

    argument_set.parse(["-f", "10"])
    assert argument_set.get_int("first") == 10


def test_parse_overrides_defaults(argument_set):
    argument_set.parse(["--n=there", "--ratio", "0.5", "--first=3", "-l"])
    assert argument_set.get_str("name") == "there"
    assert argument_set.get_bool("l") is True
    assert argument_set.get_float("ratio") == pytest.approx(0.5)
    assert argument_set.get_int("f") == 3


def test_bad_value_keeps_default(argument_set):
    argument_set.parse(["--ratio", "big"])
    assert argument_set.get_float("ratio") == 1.0


def test_duplicate_across_registries_rejected(argument_set):
    with pytest.raises(DuplicateAliasError) as exc_info:
        argument_set.add_parameter_with_default(["other", "f"], "clash", ValueType.INT, 0)

    assert exc_info.value.alias == "f"
    assert not argument_set.has_alias("other")
    assert "clash" not in argument_set.help_text()


def test_duplicate_parameter_as_required_rejected(argument_set):
    with pytest.raises(DuplicateAliasError):
        argument_set.add_required(["n"], "clash", ValueType.STR)
    assert len(argument_set.arguments) == 1


def test_duplicate_within_one_call_rejected():
    args = ArgumentSet()
    with pytest.raises(DuplicateAliasError):
        args.add_required(["x", "y", "x"], "repeated", ValueType.INT)
    assert not args.has_alias("y")


@pytest.mark.parametrize("aliases", [["1a"], ["ok", "-a"], [""], ["a b"], ["_x"]])
def test_invalid_alias_names_rejected(aliases):
    args = ArgumentSet()
    with pytest.raises(InvalidAliasNameError):
        args.add_required(aliases, "bad", ValueType.INT)
    assert args.help_text() == ""
    assert not args.has_alias("ok")


def test_empty_alias_list_rejected():
    args = ArgumentSet()
    with pytest.raises(InvalidAliasNameError):
        args.add_parameter_with_default([], "nothing", ValueType.INT, 0)


def test_alias_errors_are_value_errors():
    args = ArgumentSet()
    args.add_required(["a"], "a", ValueType.INT)
    with pytest.raises(AliasError):
        args.add_required(["a"], "again", ValueType.INT)
    with pytest.raises(ValueError):
        args.add_required(["9"], "digit", ValueType.INT)


@pytest.mark.parametrize(
    "value_type,default",
    [(ValueType.INT, "1"), (ValueType.INT, True), (ValueType.BOOL, 1), (ValueType.STR, 3), (ValueType.FLOAT, "0.5")],
)
def test_default_must_match_type(value_type, default):
    args = ArgumentSet()
    with pytest.raises(TypeError):
        args.add_parameter_with_default(["p"], "param", value_type, default)
    assert not args.has_alias("p")


def test_required_registry_checked_first(argument_set):
    argument_set.parse(["-f", "7"])
    assert argument_set.get(alias="f", value_type=ValueType.INT) == 7
    with pytest.raises(KeyNotFoundError):
        argument_set.get_str("f")


def test_strict_parse(argument_set):
    with pytest.raises(TypeCoercionError):
        argument_set.parse(["--first", "ten"], strict=True)


def test_help_text_sections(argument_set):
    text = argument_set.help_text()
    assert text.startswith("ARGUMENTS\n --first, --f\tfirst integer argument\n\n\n")
    assert "OPTIONS\n" in text
    assert " --name, --n\twho to greet\n" in text
    assert text.index("ARGUMENTS") < text.index("OPTIONS")


def test_help_text_omits_empty_sections():
    args = ArgumentSet()
    assert args.help_text() == ""

    args.add_parameter_with_default(["v"], "verbose", ValueType.BOOL, False)
    assert args.help_text() == "OPTIONS\n --v\tverbose\n\n\n"
