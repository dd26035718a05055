# topmark:header:start
#
#   project      : ArgFlag
#   file         : errors.py
#   file_relpath : src/argflag/flag/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flag error kinds and the exception that carries them.

`FlagErrorKind.NO_VALUE` is raised by
[`FlagDescriptor.set_value`][argflag.flag.descriptor.FlagDescriptor.set_value].
`INVALID_FLAG` and `MISSING_ARGUMENT` are available for argument parsers built on
top of the descriptor; nothing in ArgFlag raises them.
"""

from __future__ import annotations

from argflag.core.enum_mixins import KeyedStrEnum, label_for


class FlagErrorKind(KeyedStrEnum):
    """Kinds of flag errors, each with a fixed display label."""

    NO_VALUE = ("no_value", "No value provided")
    INVALID_FLAG = ("invalid_flag", "Invalid flag")
    MISSING_ARGUMENT = ("missing_argument", "Missing Argument")


def error_label(kind: object) -> str:
    """Return the display label for ``kind``.

    Args:
        kind (object): A `FlagErrorKind`, one of its keys, or anything else.

    Returns:
        str: The kind's label, or ``"Unknown value"`` for unrecognized kinds.
    """
    return label_for(FlagErrorKind, kind)


class FlagError(Exception):
    """Recoverable error raised by flag operations.

    Attributes:
        kind (FlagErrorKind): What went wrong.
    """

    kind: FlagErrorKind

    def __init__(self, kind: FlagErrorKind) -> None:
        super().__init__(kind)
        self.kind = kind

    @property
    def label(self) -> str:
        """Human-readable label of the error kind."""
        return error_label(self.kind)

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        if isinstance(self.kind, FlagErrorKind):
            return f"{type(self).__name__}({self.kind.name})"
        return f"{type(self).__name__}({self.kind!r})"
