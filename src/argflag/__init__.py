# topmark:header:start
#
#   project      : ArgFlag
#   file         : __init__.py
#   file_relpath : src/argflag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArgFlag package.

ArgFlag provides a descriptor type for command-line flags (name, argument
spellings, description, notes and an optional typed default value) together
with a stable human-readable rendering, plus small diagnostic note helpers.
"""

from __future__ import annotations

from argflag.diagnostic import ErrorNote, ErrorNotePanic, ErrType, Note
from argflag.flag import (
    FlagDescriptor,
    FlagError,
    FlagErrorKind,
    FlagValue,
    ValueKind,
    error_label,
)

__all__ = [
    "ErrType",
    "ErrorNote",
    "ErrorNotePanic",
    "FlagDescriptor",
    "FlagError",
    "FlagErrorKind",
    "FlagValue",
    "Note",
    "ValueKind",
    "error_label",
]
