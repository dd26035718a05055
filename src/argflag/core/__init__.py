# topmark:header:start
#
#   project      : ArgFlag
#   file         : __init__.py
#   file_relpath : src/argflag/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared, UI-agnostic building blocks used across ArgFlag."""

from __future__ import annotations
