# topmark:header:start
#
#   project      : ArgFlag
#   file         : test_descriptor_property.py
#   file_relpath : tests/flag/test_descriptor_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for descriptor rendering and membership.

For arbitrary descriptors these tests assert that:
1) supported defaults always render as ``Default: `<natural form>```,
2) absent defaults never render a default clause,
3) unsupported defaults render the ``[unknown type]`` marker,
4) `set_value` on a value-less descriptor always fails with NO_VALUE, and
5) `is_in` is exact membership in ``args``.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from argflag.flag.descriptor import FlagDescriptor
from argflag.flag.errors import FlagError, FlagErrorKind
from argflag.flag.value import FlagValue
from tests.strategies_argflag import (
    s_arg,
    s_args,
    s_supported_value,
    s_text,
    s_unsupported_value,
)


@settings(max_examples=100)
@given(
    name=s_text,
    args=s_args,
    desc=s_text,
    notes=st.none() | s_text,
    value=s_supported_value,
)
def test_supported_value_renders_default_clause(
    name: str,
    args: list[str],
    desc: str,
    notes: str | None,
    value: object,
) -> None:
    """Supported defaults are rendered verbatim in backticks at the end."""
    flag = FlagDescriptor(name, args, desc, notes, value)
    natural: str | None = FlagValue.wrap(value).render()

    assert natural is not None
    rendered: str = flag.format()
    assert rendered.endswith(f" | Default: `{natural}`")
    assert rendered == flag.format()


@given(name=s_text, args=s_args, desc=s_text, notes=st.none() | s_text)
def test_absent_value_renders_no_default_clause(
    name: str,
    args: list[str],
    desc: str,
    notes: str | None,
) -> None:
    """Without a value the rendering ends with the description or the notes."""
    flag = FlagDescriptor(name, args, desc, notes)

    expected: str = f"{name}\n\t" + "".join(f"{a} " for a in args) + f"| {desc}"
    if notes is not None:
        expected += f" | {notes}"
    assert flag.format() == expected


@given(args=s_args, value=s_unsupported_value)
def test_unsupported_value_renders_marker(args: list[str], value: object) -> None:
    """Unsupported defaults never break rendering."""
    flag = FlagDescriptor("flag", args, "desc", value=value)

    assert flag.format().endswith(" | Default: [unknown type]")


@given(args=s_args, new_value=s_supported_value | s_unsupported_value)
def test_set_value_on_absent_value_always_fails(args: list[str], new_value: object) -> None:
    """The presence check does not depend on the type of the new value."""
    flag = FlagDescriptor("flag", args, "desc")

    with pytest.raises(FlagError) as excinfo:
        flag.set_value(new_value)

    assert excinfo.value.kind is FlagErrorKind.NO_VALUE
    assert flag.get_value() is None


@given(args=s_args, candidate=s_arg)
def test_is_in_is_exact_membership(args: list[str], candidate: str) -> None:
    """`is_in` agrees with list membership."""
    flag = FlagDescriptor("flag", args, "desc")

    assert flag.is_in(candidate) == (candidate in args)
    for arg in args:
        assert flag.is_in(arg)
