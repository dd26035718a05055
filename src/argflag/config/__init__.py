# topmark:header:start
#
#   project      : ArgFlag
#   file         : __init__.py
#   file_relpath : src/argflag/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for ArgFlag.

ArgFlag has no configuration files. The only runtime knob is the internal log
level, resolved from ``ARGFLAG_LOG_LEVEL`` by
[`argflag.config.logging`][argflag.config.logging].
"""

from __future__ import annotations
