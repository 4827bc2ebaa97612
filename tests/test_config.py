import dataclasses

import pytest

from minigrep.core.config import parse_config
from minigrep.core.errors import (
    ArgumentCountError,
    ConfigError,
    InvalidOptionError,
    MinigrepError,
)
from minigrep.core.models import USAGE, Config


def test_query_and_file():
    config = parse_config(["prog", "duct", "poem.txt"])
    assert config == Config(query="duct", filename="poem.txt", case_sensitive=True)


def test_ignore_case_flag():
    config = parse_config(["prog", "-i", "rUsT", "poem.txt"])
    assert config == Config(query="rUsT", filename="poem.txt", case_sensitive=False)


@pytest.mark.parametrize("args", [[], ["prog"], ["prog", "only-one"]])
def test_not_enough_arguments(args):
    with pytest.raises(ArgumentCountError) as exc_info:
        parse_config(args)
    assert str(exc_info.value) == f"Not enough arguments\n{USAGE}"


def test_too_many_arguments():
    with pytest.raises(ArgumentCountError) as exc_info:
        parse_config(["prog", "-i", "q", "f", "extra"])
    assert str(exc_info.value) == f"Too many arguments\n{USAGE}"


def test_invalid_option_quotes_token():
    with pytest.raises(InvalidOptionError) as exc_info:
        parse_config(["prog", "-x", "q", "f"])
    err = exc_info.value
    assert err.option == "-x"
    assert str(err) == f"First argument '-x' is not a valid option\n{USAGE}"


def test_error_hierarchy():
    assert issubclass(ArgumentCountError, ConfigError)
    assert issubclass(InvalidOptionError, ConfigError)
    assert issubclass(ConfigError, MinigrepError)


def test_usage_text_is_exact():
    assert USAGE == "Usage:\nminigrep [-i] <QUERY> <FILE>"


def test_flag_looking_query_in_three_argument_form():
    """Only the four-argument shape looks for a flag."""
    assert parse_config(["prog", "-i", "poem.txt"]) == Config("-i", "poem.txt", True)


def test_config_is_immutable():
    config = parse_config(["prog", "q", "f"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.query = "other"
