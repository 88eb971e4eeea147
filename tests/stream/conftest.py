# topmark:header:start
#
#   project      : PromptStream
#   file         : conftest.py
#   file_relpath : tests/stream/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sink doubles and fixtures for prompt stream tests.

`RecordingSink` keeps every chunk it receives (and counts flushes) so tests can
assert on the exact byte protocol. `FailingSink` raises `OSError` on a chosen
write or flush to exercise the error paths.
"""

from __future__ import annotations

import pytest

from promptstream.stream.prompt import PromptOutputStream


class RecordingSink:
    """In-memory sink that records writes, flushes and closing."""

    def __init__(self) -> None:
        self.chunks: list[bytes] = []
        self.flushes: int = 0
        self.closed: bool = False

    @property
    def data(self) -> bytes:
        """Everything written so far."""
        return b"".join(self.chunks)

    def write(self, data: bytes, /) -> int:
        if self.closed:
            raise ValueError("write to closed sink")
        chunk = bytes(data)
        self.chunks.append(chunk)
        return len(chunk)

    def flush(self) -> None:
        if self.closed:
            raise ValueError("flush of closed sink")
        self.flushes += 1

    def close(self) -> None:
        self.closed = True

    def isatty(self) -> bool:
        return False


class FailingSink(RecordingSink):
    """Recording sink that raises `OSError` on the n-th write or on every flush.

    Args:
        fail_on_write (int | None): 1-based index of the write call that fails.
        fail_on_flush (bool): If True, every flush fails.
    """

    def __init__(self, *, fail_on_write: int | None = None, fail_on_flush: bool = False) -> None:
        super().__init__()
        self.fail_on_write = fail_on_write
        self.fail_on_flush = fail_on_flush
        self.write_calls: int = 0

    def write(self, data: bytes, /) -> int:
        self.write_calls += 1
        if self.write_calls == self.fail_on_write:
            raise OSError(5, "Input/output error")
        return super().write(data)

    def flush(self) -> None:
        if self.fail_on_flush:
            raise BrokenPipeError(32, "Broken pipe")
        super().flush()


@pytest.fixture
def sink() -> RecordingSink:
    """A fresh recording sink."""
    return RecordingSink()


@pytest.fixture
def stream(sink: RecordingSink) -> PromptOutputStream:
    """A prompt stream over ``sink`` with prompt ``"$ "`` and no icon."""
    return PromptOutputStream(sink).set_prompt("$ ")
