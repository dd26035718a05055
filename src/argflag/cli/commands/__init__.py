# topmark:header:start
#
#   project      : ArgFlag
#   file         : __init__.py
#   file_relpath : src/argflag/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArgFlag CLI subcommands (`render`, `note`, `version`)."""

from __future__ import annotations
