# topmark:header:start
#
#   project      : ArgFlag
#   file         : __main__.py
#   file_relpath : src/argflag/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ArgFlag via ``python -m argflag``.

Delegates to :func:`argflag.cli.main.cli`, the same Click group behind the
``argflag`` console script.

Examples:
    Render a flag descriptor::

        python -m argflag render --name verbose --arg -v --arg --verbose
"""

from __future__ import annotations

from argflag.cli.main import cli

if __name__ == "__main__":
    cli()
