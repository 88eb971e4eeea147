# topmark:header:start
#
#   project      : PromptStream
#   file         : prompt.py
#   file_relpath : src/promptstream/stream/prompt.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte stream that re-displays a prompt after every line it writes.

`PromptOutputStream` wraps a writable byte sink. Whenever a write ends with a line
feed, the current status icon and prompt are appended and the sink is flushed, so
an interactive user always sees a fresh prompt below the last printed line. The
next write starts with a carriage return, which moves the cursor back to column 0
and lets the new output overwrite the prompt that was just shown.

Typical usage:

```python
stream = PromptOutputStream(sys.stdout.buffer).set_prompt("$ ").set_status_icon("🧪")
with redirect_stdout(stream):
    print("ready")  # -> "ready\\n🧪 $ "
```

Thread safety:
    Every operation that touches the sink, or swaps the prompt/icon bytes, runs under
    a single reentrant lock owned by the stream. Concurrent writers therefore never
    interleave the bytes of one write, or of one prompt trailer, with each other.

    The cursor-reset flag is cleared *outside* the lock when a write does not end
    with a line feed. Losing that race only produces an extra carriage return on a
    later write; it never corrupts the payload.
"""

from __future__ import annotations

import io
import threading
from typing import TYPE_CHECKING

from promptstream.config.logging import get_logger
from promptstream.constants import (
    CURSOR_RESET,
    DEFAULT_ENCODING,
    DEFAULT_PROMPT,
    LINE_TERMINATOR,
)

if TYPE_CHECKING:
    from promptstream.config.logging import PromptStreamLogger
    from promptstream.stream.sink import SinkLike

logger: PromptStreamLogger = get_logger(__name__)


def normalize_status_icon(icon: str | None) -> str:
    """Return ``icon`` with exactly one trailing space, or ``""`` for no icon.

    Args:
        icon (str | None): Icon text as provided by the caller.

    Returns:
        str: ``""`` when ``icon`` is None, otherwise the icon with its trailing
            spaces collapsed to a single one.

    Examples:
        >>> normalize_status_icon("⏳")
        '⏳ '
        >>> normalize_status_icon("⏳   ")
        '⏳ '
        >>> normalize_status_icon("")
        ' '
    """
    if icon is None:
        return ""
    return icon.rstrip(" ") + " "


class PromptOutputStream(io.RawIOBase):
    """Writable byte stream that prints a prompt after each line feed.

    With no prompt and no status icon no trailer bytes are added, only the
    carriage return that starts each write following a line feed. Mutators
    return the stream itself so calls can be chained.

    Args:
        sink (SinkLike): Destination for all bytes (for example ``sys.stdout.buffer``).
        prompt (str | None): Initial prompt text; None disables the prompt.
        status_icon (str | None): Initial status icon; None disables the icon.
        encoding (str): Encoding applied to prompt and icon text.
        close_sink (bool): If True, `close()` also closes ``sink``. Garbage collection
            of the stream never closes the sink.

    Attributes:
        sink (SinkLike): The wrapped destination (read-only).
    """

    def __init__(
        self,
        sink: SinkLike,
        prompt: str | None = None,
        status_icon: str | None = None,
        *,
        encoding: str = DEFAULT_ENCODING,
        close_sink: bool = True,
    ) -> None:
        super().__init__()
        self._sink: SinkLike = sink
        self._encoding: str = encoding
        self._close_sink: bool = close_sink
        # Guards the sink and the prompt/icon bytes; reentrant for print_prompt(icon).
        self._lock = threading.RLock()
        self._prompt: bytes = b""
        self._status_icon: bytes = b""
        self._pending_cursor_reset: bool = False

        self.set_prompt(prompt)
        self.set_status_icon(status_icon)

    @classmethod
    def with_default_prompt(
        cls,
        sink: SinkLike,
        status_icon: str | None = None,
        *,
        encoding: str = DEFAULT_ENCODING,
        close_sink: bool = True,
    ) -> PromptOutputStream:
        """Create a stream that shows `DEFAULT_PROMPT` after every line.

        Args:
            sink (SinkLike): Destination for all bytes.
            status_icon (str | None): Initial status icon; None disables the icon.
            encoding (str): Encoding applied to prompt and icon text.
            close_sink (bool): If True, `close()` also closes ``sink``.

        Returns:
            PromptOutputStream: The new stream.
        """
        return cls(sink, DEFAULT_PROMPT, status_icon, encoding=encoding, close_sink=close_sink)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sink={self._sink!r}, prompt={self.get_prompt()!r}, "
            f"status_icon={self.get_status_icon()!r})"
        )

    def __del__(self) -> None:
        # Releasing the wrapper must leave a shared sink (e.g. stdout) open.
        self._close_sink = False

    # --- Prompt and status icon ---

    @property
    def sink(self) -> SinkLike:
        """The wrapped destination."""
        return self._sink

    @property
    def prompt(self) -> str:
        """The current prompt as text (see `get_prompt`)."""
        return self.get_prompt()

    @property
    def prompt_bytes(self) -> bytes:
        """The encoded prompt written after each line."""
        return self._prompt

    @property
    def status_icon(self) -> str:
        """The current status icon as text, including its trailing space."""
        return self.get_status_icon()

    @property
    def status_icon_bytes(self) -> bytes:
        """The encoded status icon written before the prompt."""
        return self._status_icon

    @property
    def pending_cursor_reset(self) -> bool:
        """True when the next write starts with a carriage return."""
        return self._pending_cursor_reset

    def set_prompt(self, prompt: str | None) -> PromptOutputStream:
        """Set the prompt printed after each line.

        This operation does not write to the sink. It is safe to call while other
        threads are writing: they observe either the old or the new prompt, never
        a mix of both.

        Args:
            prompt (str | None): The prompt text. If None, no prompt is shown.

        Returns:
            PromptOutputStream: The same stream, for chaining.
        """
        prompt_bytes: bytes = prompt.encode(self._encoding) if prompt is not None else b""
        with self._lock:
            self._prompt = prompt_bytes
        logger.trace("prompt set to %r", prompt)
        return self

    def get_prompt(self) -> str:
        """Return the prompt decoded as text.

        Decoding is best effort (undecodable bytes are replaced), so the result is
        only guaranteed to equal the text given to `set_prompt` when that text was
        encodable.

        Returns:
            str: The prompt text, or ``""`` when no prompt is set.
        """
        return self._prompt.decode(self._encoding, errors="replace")

    def set_status_icon(self, icon: str | None) -> PromptOutputStream:
        """Set the icon (an emoji, preferably) shown in front of the prompt.

        A single trailing space is kept after the icon; it is added when missing
        and never duplicated. This operation does not write to the sink.

        Setting the icon and then writing from two different threads can still
        show the "wrong" icon for one of them, because the other thread may swap
        it in between. Use `print_prompt` with an icon to change the icon and
        redraw the prompt as one atomic step.

        Args:
            icon (str | None): The icon text. If None, no icon is shown.

        Returns:
            PromptOutputStream: The same stream, for chaining.
        """
        icon_bytes: bytes = normalize_status_icon(icon).encode(self._encoding)
        with self._lock:
            self._status_icon = icon_bytes
        logger.trace("status icon set to %r", icon)
        return self

    def get_status_icon(self) -> str:
        """Return the status icon decoded as text (best effort).

        Returns:
            str: The icon including its trailing space, or ``""`` when unset.
        """
        return self._status_icon.decode(self._encoding, errors="replace")

    def print_prompt(self, icon: str | None = None) -> PromptOutputStream:
        """Redraw the status icon and prompt at the start of the current line.

        The cursor is moved to column 0 first, so anything already on the line may
        be overwritten; call this right after a line feed to avoid that.

        When ``icon`` is given, the icon is changed and the prompt redrawn inside
        one critical section, so no other writer can slip in between.

        Redrawing is cosmetic: sink failures are logged and swallowed.

        Args:
            icon (str | None): New status icon, or None to keep the current one.

        Returns:
            PromptOutputStream: The same stream, for chaining.
        """
        try:
            with self._lock:
                self._check_open()
                if icon is not None:
                    self.set_status_icon(icon)
                self._sink.write(CURSOR_RESET + self._status_icon + self._prompt)
                self._sink.flush()
        except (OSError, ValueError) as exc:
            logger.debug("prompt redraw skipped: %s", exc)
        return self

    # --- io.RawIOBase interface ---

    def readable(self) -> bool:
        return False

    def writable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def isatty(self) -> bool:
        """Return whether the sink is an interactive terminal."""
        self._check_open()
        isatty = getattr(self._sink, "isatty", None)
        return bool(isatty()) if callable(isatty) else False

    def write(self, b: bytes | bytearray | memoryview, offset: int = 0, length: int | None = None) -> int:  # type: ignore[override]
        """Write ``b[offset:offset + length]`` and print the prompt after a line feed.

        Args:
            b (bytes | bytearray | memoryview): Any bytes-like object.
            offset (int): Index of the first byte to write.
            length (int | None): Number of bytes to write; defaults to the rest of ``b``.

        Returns:
            int: The number of payload bytes written (prompt bytes are not counted).

        Raises:
            ValueError: If the slice lies outside ``b`` or the stream is closed.
        """
        view = memoryview(b).cast("B")
        end: int = len(view) if length is None else offset + length
        if offset < 0 or end < offset or end > len(view):
            raise ValueError(
                f"slice [{offset}:{end}] out of range for buffer of length {len(view)}"
            )
        return self._write(bytes(view[offset:end]))

    def write_byte(self, value: int) -> int:
        """Write a single byte (0..255).

        Args:
            value (int): The byte value.

        Returns:
            int: Always 1.
        """
        return self._write(bytes((value,)))

    def flush(self) -> None:
        self._check_open()
        with self._lock:
            self._sink.flush()

    def close(self) -> None:
        """Flush and close the stream, and the sink too when ``close_sink`` is set."""
        if self.closed:
            return
        with self._lock:
            try:
                super().close()
            finally:
                if self._close_sink:
                    self._sink.close()

    # --- internals ---

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed prompt stream")

    def _write(self, data: bytes) -> int:
        """Single choke point shared by every write entry point."""
        self._check_open()
        if not data:
            return 0

        with self._lock:
            if self._pending_cursor_reset:
                self._sink.write(CURSOR_RESET)
            self._sink.write(data)

        if data[-1] == LINE_TERMINATOR:
            with self._lock:
                trailer: bytes = self._status_icon + self._prompt
                try:
                    if trailer:
                        self._sink.write(trailer)
                    self._sink.flush()
                finally:
                    # A partial trailer is overwritten by the next write's "\r".
                    self._pending_cursor_reset = True
        else:
            # Unlocked: a lost race only costs an extra "\r" on a later write.
            self._pending_cursor_reset = False

        return len(data)
