# topmark:header:start
#
#   project      : ArgFlag
#   file         : value.py
#   file_relpath : src/argflag/flag/value.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tagged value slot for flag defaults.

A flag carries at most one value whose type is chosen from a small closed set
(text, boolean, 32-bit signed integer, 32-bit float). The descriptor itself is
not generic over that type: the value is stored as a `FlagValue`, which pairs
the raw Python payload with the `ValueKind` it was classified as.

Classification happens once, in `FlagValue.wrap()`, using a fixed priority order
(text, boolean, integer, float). Payloads outside the supported set, including
integers outside the signed 32-bit range and floats too large for 32-bit
precision, are kept as `ValueKind.UNKNOWN`: they remain observable but have no
natural text form.

Sections:
    * ValueKind: the closed set of value kinds.
    * FlagValue: immutable (kind, payload) pair with downcast and rendering.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeVar, cast

from argflag.constants import INT32_MAX, INT32_MIN
from argflag.core.enum_mixins import KeyedStrEnum

_T = TypeVar("_T")


class ValueKind(KeyedStrEnum):
    """Kinds of values a flag can carry.

    Members are listed in classification priority order; `UNKNOWN` is the
    catch-all for payloads outside the supported set.
    """

    TEXT = ("text", "text", ("str", "string"))
    BOOL = ("bool", "boolean", ("boolean",))
    INT32 = ("int32", "32-bit integer", ("int", "integer", "i32"))
    FLOAT32 = ("float32", "32-bit float", ("float", "f32"))
    UNKNOWN = ("unknown", "unknown type")

    @property
    def python_type(self) -> type | None:
        """Return the Python type values of this kind are exposed as (``None`` for UNKNOWN)."""
        return _TYPE_BY_KIND.get(self)

    @classmethod
    def supported(cls) -> tuple[ValueKind, ...]:
        """Return the renderable kinds in classification priority order."""
        return tuple(k for k in cls if k is not cls.UNKNOWN)


_TYPE_BY_KIND: dict[ValueKind, type] = {
    ValueKind.TEXT: str,
    ValueKind.BOOL: bool,
    ValueKind.INT32: int,
    ValueKind.FLOAT32: float,
}

_KIND_BY_TYPE: dict[type, ValueKind] = {t: k for k, t in _TYPE_BY_KIND.items()}


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest 32-bit float.

    Raises:
        OverflowError: If ``value`` is finite but outside the 32-bit float range.
    """
    return cast("float", struct.unpack("<f", struct.pack("<f", value))[0])


def format_float32(value: float) -> str:
    """Return the natural text form of a 32-bit float.

    The shortest decimal that reads back as the same 32-bit float, written in
    fixed-point notation without a trailing ``.0`` (``1.0`` -> ``"1"``,
    ``1e20`` -> ``"100000000000000000000"``). Non-finite values render as
    ``NaN``, ``inf`` and ``-inf``.
    """
    single: float = to_float32(value)
    if math.isnan(single):
        return "NaN"
    if math.isinf(single):
        return "inf" if single > 0 else "-inf"

    text: str = repr(single)
    # Nine significant digits always round-trip a 32-bit float.
    for precision in range(1, 10):
        candidate: str = f"{single:.{precision}g}"
        if to_float32(float(candidate)) == single:
            text = candidate
            break

    rendered: str = format(Decimal(text), "f")
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return rendered


def classify(obj: object) -> ValueKind:
    """Return the `ValueKind` of ``obj`` (first match in priority order)."""
    if isinstance(obj, str):
        return ValueKind.TEXT
    if isinstance(obj, bool):
        return ValueKind.BOOL
    if isinstance(obj, int):
        return ValueKind.INT32 if INT32_MIN <= obj <= INT32_MAX else ValueKind.UNKNOWN
    if isinstance(obj, float):
        try:
            to_float32(obj)
        except OverflowError:
            return ValueKind.UNKNOWN
        return ValueKind.FLOAT32
    return ValueKind.UNKNOWN


@dataclass(frozen=True, slots=True)
class FlagValue:
    """A flag value: the raw payload plus the kind it was classified as.

    Build instances with `FlagValue.wrap()` so that ``kind`` always agrees with
    ``raw``.

    Attributes:
        kind (ValueKind): Classification of ``raw``.
        raw (object): The payload exactly as supplied by the caller.
    """

    kind: ValueKind
    raw: object

    @classmethod
    def wrap(cls, obj: object) -> FlagValue:
        """Classify ``obj`` and wrap it; an existing `FlagValue` is returned unchanged.

        Args:
            obj (object): Any Python object.

        Returns:
            FlagValue: The wrapped value.
        """
        if isinstance(obj, FlagValue):
            return obj
        return cls(kind=classify(obj), raw=obj)

    @property
    def is_known(self) -> bool:
        """Whether the payload belongs to the supported set of kinds."""
        return self.kind is not ValueKind.UNKNOWN

    def downcast(self, py_type: type[_T]) -> _T | None:
        """Return the payload as ``py_type``, or ``None`` when the kinds disagree.

        Supported kinds match on the kind associated with ``py_type``, so a
        boolean never downcasts to ``int``. Unknown payloads match only their
        exact type.

        Args:
            py_type (type[_T]): The requested Python type.

        Returns:
            _T | None: The payload, or ``None`` on mismatch.
        """
        if self.kind is ValueKind.UNKNOWN:
            return cast("_T", self.raw) if type(self.raw) is py_type else None
        if _KIND_BY_TYPE.get(py_type) is self.kind:
            return cast("_T", self.raw)
        return None

    def render(self) -> str | None:
        """Return the natural text form of the payload, or ``None`` for unknown kinds."""
        if self.kind is ValueKind.TEXT:
            return str.__str__(cast("str", self.raw))
        if self.kind is ValueKind.BOOL:
            return "true" if self.raw else "false"
        if self.kind is ValueKind.INT32:
            return str(int(cast("int", self.raw)))
        if self.kind is ValueKind.FLOAT32:
            return format_float32(cast("float", self.raw))
        return None
