# topmark:header:start
#
#   project      : PromptStream
#   file         : sink.py
#   file_relpath : src/promptstream/stream/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic interface for the byte sink behind a prompt stream.

Any binary file-like object qualifies: ``sys.stdout.buffer``, an open file,
a pipe, or an ``io.BytesIO`` in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SinkLike(Protocol):
    """Minimal writable byte destination wrapped by `PromptOutputStream`.

    Implementations are expected to raise `OSError` (or `ValueError` once closed)
    on failure; the decorator never retries.
    """

    def write(self, data: bytes, /) -> object:
        """Write ``data`` to the destination."""
        ...

    def flush(self) -> None:
        """Flush any buffered bytes to the destination."""
        ...

    def close(self) -> None:
        """Close the destination."""
        ...
