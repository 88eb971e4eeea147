# topmark:header:start
#
#   project      : PromptStream
#   file         : errors.py
#   file_relpath : src/promptstream/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PromptStream CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from promptstream.cli.exit_codes import ExitCode


class PromptStreamError(click.ClickException):
    """Base class for all PromptStream CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class PromptStreamUsageError(PromptStreamError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PromptStreamConfigError(PromptStreamError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class PromptStreamIOError(PromptStreamError):
    """Error for I/O failures while writing output or reading input."""

    exit_code = ExitCode.IO_ERROR


class PromptStreamEncodingError(PromptStreamError):
    """Error for text encoding failures (e.g. a prompt the output encoding cannot represent)."""

    exit_code = ExitCode.ENCODING_ERROR
