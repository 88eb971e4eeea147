# topmark:header:start
#
#   project      : PromptStream
#   file         : __main__.py
#   file_relpath : src/promptstream/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PromptStream via ``python -m promptstream``.

Delegates to :func:`promptstream.cli.main.cli`, the same entry point as the
``promptstream`` console script.
"""

from __future__ import annotations

from promptstream.cli.main import cli

if __name__ == "__main__":
    cli()
