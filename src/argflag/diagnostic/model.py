# topmark:header:start
#
#   project      : ArgFlag
#   file         : model.py
#   file_relpath : src/argflag/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic notes for ArgFlag.

Sections:
    * Note: immutable informational message, rendered as ``[NOTE]: <text>``.
    * ErrType: severity tag of an error note, with a terminal color.
    * ErrorNote: error message printed when its scope ends, with opt-in
      process exit and unrecoverable panic.
    * ErrorNotePanic: exception raised by `ErrorNote.panic`.

An `ErrorNote` is meant to be used as a context manager. Leaving the ``with``
block prints the note, whether the block completed or raised. Code that cannot
use a ``with`` block calls `ErrorNote.close` on every exit path instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn, TextIO, cast

import click
from yachalk import chalk

from argflag.config.logging import get_logger
from argflag.core.enum_mixins import KeyedStrEnum, label_for

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from argflag.config.logging import ArgflagLogger


logger: ArgflagLogger = get_logger(__name__)


@dataclass(frozen=True)
class Note:
    """Informational note."""

    note: str

    def __str__(self) -> str:
        return f"[NOTE]: {self.note}"


class ErrType(KeyedStrEnum):
    """Severity tag of an `ErrorNote`."""

    EXIT = ("exit", "EXIT")
    ASSERTION = ("assertion", "ASSERTION", ("assert",))

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this error type.

        Intended for human-readable output only; the rendered note text is never colored.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this error type.
        """
        return cast(
            "Callable[[str], str]",
            {
                ErrType.EXIT: chalk.red_bright,
                ErrType.ASSERTION: chalk.yellow,
            }[self],
        )


class ErrorNotePanic(RuntimeError):
    """Unrecoverable error raised by `ErrorNote.panic`; the message is the rendered note."""


class ErrorNote:
    """Error message that is printed when its scope ends.

    Args:
        err_note (str): The error message.
        type_ (ErrType): Severity tag shown in the rendered prefix.
        exit (bool): Whether `exit()` terminates the process.
        out (TextIO | None): Stream the note is printed to. Defaults to the current
            ``sys.stdout`` at print time.
        color (bool): Whether the printed line is colored by `ErrType.color`.

    Attributes:
        err_note (str): The error message.
        type_ (ErrType): Severity tag.
        should_exit (bool): Value of the ``exit`` argument.
        out (TextIO | None): Output stream override.
        color (bool): Whether printing applies the error type color.
        closed (bool): True once the note has been printed.
    """

    def __init__(
        self,
        err_note: str,
        type_: ErrType,
        exit: bool = False,  # noqa: A002
        *,
        out: TextIO | None = None,
        color: bool = False,
    ) -> None:
        self.err_note: str = err_note
        self.type_: ErrType = type_
        self.should_exit: bool = exit
        self.out: TextIO | None = out
        self.color: bool = color
        self.closed: bool = False

    def render(self) -> str:
        """Return the note as ``[<TYPE> ERROR]: <message>``."""
        return f"[{label_for(ErrType, self.type_)} ERROR]: {self.err_note}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(err_note={self.err_note!r}, type_={self.type_!r}, "
            f"exit={self.should_exit!r})"
        )

    def _emit(self) -> None:
        self.closed = True
        text: str = self.render()
        if self.color and isinstance(self.type_, ErrType):
            text = self.type_.color(text)
        click.echo(text, file=self.out, color=self.color or None)

    def close(self) -> None:
        """Print the note; later calls do nothing."""
        if self.closed:
            return
        logger.trace("Closing error note %r", self.err_note)
        self._emit()

    def exit(self) -> None:
        """Print the note and terminate the process with status 1 if ``exit`` was set.

        Raises:
            SystemExit: With code 1, when the note was created with ``exit=True``.
        """
        if not self.should_exit:
            return
        logger.debug("Error note requested process exit: %r", self.err_note)
        self._emit()
        raise SystemExit(1)

    def panic(self) -> NoReturn:
        """Abort with an unrecoverable error carrying the rendered note.

        Raises:
            ErrorNotePanic: Always.
        """
        raise ErrorNotePanic(self.render())

    def __enter__(self) -> ErrorNote:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
