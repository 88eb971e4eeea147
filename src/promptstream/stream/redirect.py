# topmark:header:start
#
#   project      : PromptStream
#   file         : redirect.py
#   file_relpath : src/promptstream/stream/redirect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers for routing text output, and `sys.stdout` in particular, through a prompt stream.

The prompt stream itself never touches process-wide state; swapping `sys.stdout`
is left to the caller and these helpers.
"""

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

from promptstream.config.logging import get_logger
from promptstream.constants import DEFAULT_ENCODING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from promptstream.config.logging import PromptStreamLogger
    from promptstream.stream.prompt import PromptOutputStream

logger: PromptStreamLogger = get_logger(__name__)


def wrap_text(
    stream: PromptOutputStream,
    *,
    encoding: str = DEFAULT_ENCODING,
    errors: str = "strict",
) -> io.TextIOWrapper:
    """Return a text layer over ``stream`` that forwards every write immediately.

    The wrapper is write-through and line-buffered, so each ``print()`` reaches the
    prompt stream as soon as it is called and a trailing newline triggers the prompt.

    Args:
        stream (PromptOutputStream): The prompt stream to write to.
        encoding (str): Text encoding used by the wrapper.
        errors (str): Encoding error policy used by the wrapper.

    Returns:
        io.TextIOWrapper: The text stream.
    """
    return io.TextIOWrapper(
        stream,  # type: ignore[arg-type]
        encoding=encoding,
        errors=errors,
        line_buffering=True,
        write_through=True,
    )


@contextmanager
def redirect_stdout(
    stream: PromptOutputStream,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> Iterator[io.TextIOWrapper]:
    """Temporarily replace `sys.stdout` with a text layer over ``stream``.

    On exit the previous `sys.stdout` is restored and the text layer is detached,
    so neither ``stream`` nor its sink is closed.

    Args:
        stream (PromptOutputStream): The prompt stream that receives stdout.
        encoding (str): Text encoding used for the redirected stdout.

    Yields:
        io.TextIOWrapper: The text stream installed as `sys.stdout`.
    """
    text: io.TextIOWrapper = wrap_text(stream, encoding=encoding)
    previous = sys.stdout
    sys.stdout = text
    logger.debug("stdout redirected through %r", stream)
    try:
        yield text
    finally:
        sys.stdout = previous
        if not stream.closed:
            # detach() flushes; the prompt stream stays open for the caller.
            text.detach()
        logger.debug("stdout restored")
