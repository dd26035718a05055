# topmark:header:start
#
#   project      : ArgFlag
#   file         : test_value.py
#   file_relpath : tests/flag/test_value.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the tagged value slot in [`argflag.flag.value`][]."""

from __future__ import annotations

from enum import IntEnum

import pytest

from argflag.flag.value import FlagValue, ValueKind, classify, format_float32, to_float32
from tests.conftest import parametrize


class _Level(IntEnum):
    LOW = 1


@parametrize(
    ("obj", "kind"),
    [
        ("text", ValueKind.TEXT),
        ("", ValueKind.TEXT),
        (True, ValueKind.BOOL),
        (False, ValueKind.BOOL),
        (0, ValueKind.INT32),
        (2**31 - 1, ValueKind.INT32),
        (-(2**31), ValueKind.INT32),
        (2**31, ValueKind.UNKNOWN),
        (-(2**31) - 1, ValueKind.UNKNOWN),
        (_Level.LOW, ValueKind.INT32),
        (3.5, ValueKind.FLOAT32),
        (float("inf"), ValueKind.FLOAT32),
        (1e39, ValueKind.UNKNOWN),
        (b"bytes", ValueKind.UNKNOWN),
        ([1], ValueKind.UNKNOWN),
        (1 + 2j, ValueKind.UNKNOWN),
    ],
)
def test_classify_priority_order(obj: object, kind: ValueKind) -> None:
    """Values are classified as text, then boolean, then integer, then float."""
    assert classify(obj) is kind
    assert FlagValue.wrap(obj).kind is kind


def test_wrap_returns_existing_flag_value_unchanged() -> None:
    """Wrapping a `FlagValue` does not nest it."""
    value: FlagValue = FlagValue.wrap(7)

    assert FlagValue.wrap(value) is value


def test_downcast_matches_kind_not_subclassing() -> None:
    """Booleans never downcast to `int`, integers never to `float`."""
    assert FlagValue.wrap(True).downcast(bool) is True
    assert FlagValue.wrap(True).downcast(int) is None
    assert FlagValue.wrap(3).downcast(int) == 3
    assert FlagValue.wrap(3).downcast(float) is None
    assert FlagValue.wrap(3).downcast(str) is None
    assert FlagValue.wrap(2.5).downcast(float) == 2.5


def test_downcast_unknown_value_by_exact_type() -> None:
    """Unknown payloads can still be recovered with their exact type."""
    value: FlagValue = FlagValue.wrap([1, 2])

    assert value.kind is ValueKind.UNKNOWN
    assert not value.is_known
    assert value.downcast(list) == [1, 2]
    assert value.downcast(tuple) is None


def test_out_of_range_int_is_unknown_but_recoverable() -> None:
    """An integer beyond 32 bits is kept as-is with kind UNKNOWN."""
    value: FlagValue = FlagValue.wrap(2**40)

    assert value.render() is None
    assert value.downcast(int) == 2**40


@parametrize(
    ("obj", "text"),
    [
        ("output.txt", "output.txt"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-42, "-42"),
        (_Level.LOW, "1"),
    ],
)
def test_render_natural_form(obj: object, text: str) -> None:
    """Supported values render in their natural text form."""
    assert FlagValue.wrap(obj).render() == text


@parametrize(
    ("number", "text"),
    [
        (1.0, "1"),
        (1.5, "1.5"),
        (0.1, "0.1"),
        (3.14, "3.14"),
        (-2.25, "-2.25"),
        (-0.0, "-0"),
        (1e20, "100000000000000000000"),
        (1.5e-7, "0.00000015"),
        (16777217.0, "16777216"),
        (float("nan"), "NaN"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
    ],
)
def test_format_float32(number: float, text: str) -> None:
    """Floats render as the shortest 32-bit round-tripping decimal, without exponent."""
    assert format_float32(number) == text


def test_to_float32_overflow() -> None:
    """Finite values beyond the 32-bit range cannot be narrowed."""
    with pytest.raises(OverflowError):
        to_float32(1e39)


def test_value_kind_metadata() -> None:
    """Kinds expose their Python type and parse from common aliases."""
    assert ValueKind.supported() == (
        ValueKind.TEXT,
        ValueKind.BOOL,
        ValueKind.INT32,
        ValueKind.FLOAT32,
    )
    assert ValueKind.INT32.python_type is int
    assert ValueKind.UNKNOWN.python_type is None
    assert ValueKind.parse("int") is ValueKind.INT32
    assert ValueKind.parse("f32") is ValueKind.FLOAT32
    assert ValueKind.parse("string") is ValueKind.TEXT
