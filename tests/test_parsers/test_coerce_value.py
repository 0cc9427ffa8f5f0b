from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal

import pytest

from declargs.parser.utils import coerce_bool, coerce_value


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("3.14", float, 3.14),
        ("True", bool, True),
        ("hello", str, "hello"),
        ("", str, ""),
        ("False", bool, False),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int | float, 42),
        ("3.14", int | float, 3.14),
        ("hello", str | int, "hello"),
        ("1", bool | str, True),
    ],
)
def test_coerce_value_union_success(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_union_failure():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be coerced" in str(excinfo.value)


def test_coerce_bool_rejects_unknown_spelling():
    assert coerce_bool("yes") is True
    assert coerce_bool("off") is False
    with pytest.raises(ValueError):
        coerce_bool("maybe")


def test_coerce_value_enum():
    class Color(Enum):
        RED = "red"
        GREEN = "green"

    assert coerce_value("red", Color) == Color.RED
    assert coerce_value("GREEN", Color) == Color.GREEN

    with pytest.raises(ValueError):
        coerce_value("yellow", Color)


def test_coerce_value_int_enum():
    class Level(Enum):
        LOW = 1
        HIGH = 2

    assert coerce_value("2", Level) == Level.HIGH


def test_coerce_value_literal():
    assert coerce_value("fast", Literal["fast", "slow"]) == "fast"
    with pytest.raises(ValueError):
        coerce_value("medium", Literal["fast", "slow"])


def test_coerce_value_datetime():
    assert coerce_value("2024-05-01 10:30", datetime) == datetime(2024, 5, 1, 10, 30)
    with pytest.raises(ValueError):
        coerce_value("not a date", datetime)


def test_coerce_value_callable_type():
    assert coerce_value("some/file.txt", Path) == Path("some/file.txt")
