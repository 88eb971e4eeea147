# topmark:header:start
#
#   project      : PromptStream
#   file         : errors.py
#   file_relpath : src/promptstream/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for PromptStream.

The stream core raises no custom exceptions: sink failures propagate as the
sink's own `OSError`, and use after close raises `ValueError` like any `io` object.
CLI-facing exceptions live in `promptstream.cli.errors`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(ValueError):
    """Raised when a configuration source cannot be parsed or has invalid values.

    Args:
        message (str): Human-readable description of the problem.
        source (Path | None): The configuration file involved, if any.
    """

    def __init__(self, message: str, *, source: Path | None = None) -> None:
        self.source = source
        super().__init__(f"{source}: {message}" if source is not None else message)
