# topmark:header:start
#
#   project      : ArgFlag
#   file         : test_errors.py
#   file_relpath : tests/flag/test_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for flag error kinds and their display labels."""

from __future__ import annotations

from argflag.diagnostic.model import ErrType
from argflag.flag.errors import FlagError, FlagErrorKind, error_label
from tests.conftest import parametrize


@parametrize(
    ("kind", "label"),
    [
        (FlagErrorKind.NO_VALUE, "No value provided"),
        (FlagErrorKind.INVALID_FLAG, "Invalid flag"),
        (FlagErrorKind.MISSING_ARGUMENT, "Missing Argument"),
    ],
)
def test_error_labels(kind: FlagErrorKind, label: str) -> None:
    """Every error kind has a fixed label, also used as the exception text."""
    assert error_label(kind) == label
    assert kind.label == label
    assert str(FlagError(kind)) == label


@parametrize("kind", [None, 3, "bogus", ErrType.EXIT, object()])
def test_unrecognized_kind_renders_unknown_value(kind: object) -> None:
    """Anything that is not a flag error kind renders as 'Unknown value'."""
    assert error_label(kind) == "Unknown value"


def test_error_label_accepts_keys() -> None:
    """Stable keys resolve to their kind's label."""
    assert error_label("missing_argument") == "Missing Argument"
    assert error_label("NO_VALUE") == "No value provided"


def test_flag_error_carries_kind() -> None:
    """The raised exception exposes its kind for callers to branch on."""
    error = FlagError(FlagErrorKind.INVALID_FLAG)

    assert error.kind is FlagErrorKind.INVALID_FLAG
    assert error.label == "Invalid flag"
    assert repr(error) == "FlagError(INVALID_FLAG)"


def test_flag_error_with_unrecognized_kind_is_still_printable() -> None:
    """An error built from a non-member kind renders and reprs without failing."""
    error = FlagError("bogus")  # type: ignore[arg-type]

    assert str(error) == "Unknown value"
    assert repr(error) == "FlagError('bogus')"
