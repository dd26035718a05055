# topmark:header:start
#
#   project      : ArgFlag
#   file         : constants.py
#   file_relpath : src/argflag/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArgFlag Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

ARGFLAG_VERSION: str = get_version("argflag")

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "ARGFLAG_LOG_LEVEL"

# Rendered in place of a default value whose type has no natural text form:
UNKNOWN_TYPE_MARKER: str = "[unknown type]"

# Label used when an enum-like kind has no registered label:
UNKNOWN_LABEL: str = "Unknown value"

# Inclusive bounds of a signed 32-bit integer value:
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
