# topmark:header:start
#
#   project      : ArgFlag
#   file         : __init__.py
#   file_relpath : src/argflag/flag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flag descriptors and their value slot.

Design:
    - `FlagDescriptor` holds read-only text fields and one mutable `FlagValue`.
    - `FlagValue` is a tagged union over `ValueKind`; unsupported payloads are
      kept as `ValueKind.UNKNOWN` and render as ``[unknown type]``.
    - `FlagError` carries a `FlagErrorKind` whose label never fails to render.
"""

from __future__ import annotations

from argflag.flag.descriptor import FlagDescriptor
from argflag.flag.errors import FlagError, FlagErrorKind, error_label
from argflag.flag.value import FlagValue, ValueKind, classify, format_float32

__all__ = [
    "FlagDescriptor",
    "FlagError",
    "FlagErrorKind",
    "FlagValue",
    "ValueKind",
    "classify",
    "error_label",
    "format_float32",
]
