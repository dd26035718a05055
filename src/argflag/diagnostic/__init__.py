# topmark:header:start
#
#   project      : ArgFlag
#   file         : __init__.py
#   file_relpath : src/argflag/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic notes.

`Note` and `ErrorNote` are independent of flag descriptors. `ErrorNote` is the
only place in ArgFlag where process termination (`ErrorNote.exit`) or an
unrecoverable abort (`ErrorNote.panic`) can happen, and both are opt-in.
"""

from __future__ import annotations

from argflag.diagnostic.model import ErrorNote, ErrorNotePanic, ErrType, Note

__all__ = [
    "ErrType",
    "ErrorNote",
    "ErrorNotePanic",
    "Note",
]
