# topmark:header:start
#
#   project      : ArgFlag
#   file         : cli_types.py
#   file_relpath : src/argflag/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI parameter types and value conversion helpers for ArgFlag.

This module holds the custom Click parameter type used for keyed enums
(`EnumChoiceParam`) and `coerce_value()`, which turns the text given on the
command line into a Python value of a requested `ValueKind`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar, cast

import click

from argflag.constants import INT32_MAX, INT32_MIN
from argflag.flag.value import ValueKind, to_float32

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    from argflag.core.enum_mixins import KeyedStrEnum

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound="KeyedStrEnum")


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a token to a member of a `KeyedStrEnum`.

    Tokens are matched with `KeyedStrEnum.parse` (key, member name or alias,
    case-insensitive). ``members`` restricts the accepted subset.
    """

    enum_cls: type[E]
    name: str
    members: tuple[E, ...]
    choices: list[str]

    def __init__(self, enum_cls: type[E], members: Iterable[E] | None = None) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.members = tuple(members) if members is not None else tuple(enum_cls)
        self.choices = [m.key for m in self.members]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the accepted keys in help output."""
        return "[" + "|".join(self.choices) + "]"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a token (or an existing member) to a member of the enum."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls) and value in self.members:
            return cast("E", value)

        member: E | None = self.enum_cls.parse(str(value))
        if member is not None and member in self.members:
            return member

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_ARGFLAG_COMPLETE=bash_source argflag)"`
        Zsh: `eval "$(_ARGFLAG_COMPLETE=zsh_source argflag)"`
        """
        # Runtime import to avoid import-time dependency for non-completion paths
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix = (incomplete or "").lower()
        return [RuntimeCompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"


def coerce_value(kind: ValueKind, raw: str) -> object:
    """Convert command-line text to a Python value of the given kind.

    Args:
        kind (ValueKind): One of the supported (non-UNKNOWN) kinds.
        raw (str): The text supplied on the command line.

    Returns:
        object: ``str``, ``bool``, ``int`` or ``float`` matching ``kind``.

    Raises:
        ValueError: If ``raw`` cannot be represented as ``kind``.
    """
    if kind is ValueKind.TEXT:
        return raw
    if kind is ValueKind.BOOL:
        try:
            return cast("bool", click.BOOL.convert(raw, None, None))
        except click.BadParameter as exc:
            raise ValueError(f"'{raw}' is not a valid boolean") from exc
    if kind is ValueKind.INT32:
        try:
            number = int(raw)
        except ValueError as exc:
            raise ValueError(f"'{raw}' is not a valid integer") from exc
        if not INT32_MIN <= number <= INT32_MAX:
            raise ValueError(f"{number} is outside the 32-bit integer range")
        return number
    if kind is ValueKind.FLOAT32:
        try:
            real = float(raw)
        except ValueError as exc:
            raise ValueError(f"'{raw}' is not a valid float") from exc
        try:
            to_float32(real)
        except OverflowError as exc:
            raise ValueError(f"{raw} is outside the 32-bit float range") from exc
        return real
    raise ValueError(f"Values of kind '{kind.key}' cannot be given on the command line")
