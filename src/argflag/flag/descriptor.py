# topmark:header:start
#
#   project      : ArgFlag
#   file         : descriptor.py
#   file_relpath : src/argflag/flag/descriptor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line flag descriptor.

A `FlagDescriptor` describes one flag: its name, the argument spellings that
select it, a description, optional notes and an optional default value. It is a
building block for argument parsers and help generators; it does not parse
command lines itself.

Rendering (``format()`` / ``str()``) is a stable text contract:

```text
<name>
\t<arg1> <arg2> ... | <desc>[ | <notes>][ | Default: `<value>`]
```

Every argument spelling is followed by a single space (including the last one).
A value whose type has no natural text form renders as
``Default: [unknown type]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from argflag.config.logging import get_logger
from argflag.constants import UNKNOWN_TYPE_MARKER
from argflag.flag.errors import FlagError, FlagErrorKind
from argflag.flag.value import FlagValue

if TYPE_CHECKING:
    from collections.abc import Sequence

    from argflag.config.logging import ArgflagLogger


logger: ArgflagLogger = get_logger(__name__)


class FlagDescriptor:
    """Descriptor of a single command-line flag.

    ``name``, ``args``, ``desc`` and ``notes`` are read-only after construction.
    ``value`` is the only mutable field: the owner may assign it directly, while
    `set_value` only replaces a value that is already present.

    Args:
        name (str): Short identifier, e.g. ``"verbose"``.
        args (Sequence[str]): Accepted spellings in display order, e.g.
            ``["-v", "--verbose"]``. May be empty.
        desc (str): Human-readable description.
        notes (str | None): Optional annotation such as ``"To be deprecated"``,
            ``"Not implemented"`` or ``"Developer use only"``.
        value (object | None): Optional default/current value. Raw objects are
            wrapped with `FlagValue.wrap`.

    Attributes:
        value (FlagValue | None): The current value, or ``None``.
    """

    __slots__ = ("_name", "_args", "_desc", "_notes", "value")

    value: FlagValue | None

    def __init__(
        self,
        name: str,
        args: Sequence[str],
        desc: str,
        notes: str | None = None,
        value: object | None = None,
    ) -> None:
        self._name: str = name
        self._args: tuple[str, ...] = tuple(args)
        self._desc: str = desc
        self._notes: str | None = notes
        self.value = None if value is None else FlagValue.wrap(value)
        logger.trace(
            "Created flag %r args=%r value_kind=%s",
            name,
            self._args,
            self.value.kind.key if self.value is not None else None,
        )

    @classmethod
    def new(
        cls,
        name: str,
        args: Sequence[str],
        desc: str,
        notes: str | None = None,
        value: object | None = None,
    ) -> FlagDescriptor:
        """Construct a descriptor; no validation is performed."""
        return cls(name, args, desc, notes, value)

    @property
    def name(self) -> str:
        """Short identifier of the flag."""
        return self._name

    @property
    def args(self) -> tuple[str, ...]:
        """Accepted argument spellings, in display order."""
        return self._args

    @property
    def desc(self) -> str:
        """Human-readable description."""
        return self._desc

    @property
    def notes(self) -> str | None:
        """Optional free-text annotation."""
        return self._notes

    def get_name(self) -> str:
        """Return the flag name."""
        return self._name

    def get_args(self) -> tuple[str, ...]:
        """Return the accepted argument spellings."""
        return self._args

    def get_value(self) -> FlagValue | None:
        """Return the current value, or ``None`` if the flag has none."""
        return self.value

    def set_value(self, new_value: object) -> None:
        """Replace the current value with ``new_value``.

        The new value's type is not constrained by the old one. Only a value that
        is already present can be replaced: a descriptor without a value does not
        acquire one here (assign ``value`` directly for that).

        Unlike the constructor, where ``value=None`` means "no value", passing
        ``None`` here stores it as a payload of kind ``UNKNOWN``: the flag keeps a
        value and renders ``Default: [unknown type]``. Assign ``value = None`` to
        clear the value instead.

        Args:
            new_value (object): The replacement value (raw object or `FlagValue`).

        Raises:
            FlagError: With kind ``NO_VALUE`` when the descriptor has no value;
                the descriptor is left unchanged.
        """
        if self.value is None:
            logger.debug("Refusing to set a value on flag %r: no current value", self._name)
            raise FlagError(FlagErrorKind.NO_VALUE)
        self.value = FlagValue.wrap(new_value)
        logger.trace("Flag %r value replaced (kind=%s)", self._name, self.value.kind.key)

    def is_in(self, s: str) -> bool:
        """Return True if ``s`` is exactly one of the accepted argument spellings."""
        return s in self._args

    def __contains__(self, s: object) -> bool:
        return isinstance(s, str) and self.is_in(s)

    def format(self) -> str:
        """Render the descriptor as human-readable text.

        Returns:
            str: The rendering described in the module docstring.
        """
        parts: list[str] = [f"{self._name}\n\t"]
        parts.extend(f"{arg} " for arg in self._args)
        parts.append(f"| {self._desc}")
        if self._notes is not None:
            parts.append(f" | {self._notes}")
        if self.value is not None:
            rendered: str | None = self.value.render()
            if rendered is None:
                parts.append(f" | Default: {UNKNOWN_TYPE_MARKER}")
            else:
                parts.append(f" | Default: `{rendered}`")
        return "".join(parts)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, args={self._args!r}, "
            f"desc={self._desc!r}, notes={self._notes!r}, value={self.value!r})"
        )
