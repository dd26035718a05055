# topmark:header:start
#
#   project      : ArgFlag
#   file         : enum_mixins.py
#   file_relpath : src/argflag/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for ArgFlag (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``:
        ``str`` enum whose ``.value`` is a stable machine key and whose human
        label lives on ``.label``.
    - ``label_for(enum_cls, kind)``:
        Label lookup that never fails: anything that is not (and does not
        parse to) a member of ``enum_cls`` renders as ``"Unknown value"``.

Design:
    - Keep the functions *pure* and side-effect free.
    - Avoid bringing UI libraries (e.g. yachalk) into this module.

Example:
    ```python
    class Mode(KeyedStrEnum):
        A = ("alpha", "Alpha mode")
        B = ("beta", "Beta mode", ("b",))

    assert Mode.parse("B") is Mode.B
    assert label_for(Mode, "b") == "Beta mode"
    assert label_for(Mode, 42) == "Unknown value"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from argflag.constants import UNKNOWN_LABEL

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.

    Example:
        class ErrType(KeyedStrEnum):
            EXIT = ("exit", "EXIT")
            ASSERTION = ("assertion", "ASSERTION", ("assert",))
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        """Return the stable machine key."""
        return str.__str__(self)

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against:
          - the stable key (`.value`)
          - the member name (`.name`)
          - any configured aliases

        Matching is case-insensitive and normalizes '-', ' ' to '_' via `_norm_token()`.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.value):
                return m
            if token == _norm_token(m.name):
                return m
            for a in m.aliases:
                if token == _norm_token(a):
                    return m
        return None


def label_for(enum_cls: type[KeyedStrEnum], kind: object) -> str:
    """Return the human label of ``kind`` or ``"Unknown value"``.

    Args:
        enum_cls (type[KeyedStrEnum]): The enum the label is looked up in.
        kind (object): A member of ``enum_cls``, a token accepted by
            ``enum_cls.parse()``, or anything else.

    Returns:
        str: The member's label, or the unknown-value label when ``kind`` is not
            recognized.
    """
    member: KeyedStrEnum | None = None
    if isinstance(kind, enum_cls):
        member = kind
    elif isinstance(kind, str):
        member = enum_cls.parse(kind)
    return member.label if member is not None else UNKNOWN_LABEL
