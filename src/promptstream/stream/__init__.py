# topmark:header:start
#
#   project      : PromptStream
#   file         : __init__.py
#   file_relpath : src/promptstream/stream/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prompt-aware output streams."""

from __future__ import annotations

from promptstream.stream.prompt import PromptOutputStream, normalize_status_icon
from promptstream.stream.redirect import redirect_stdout, wrap_text
from promptstream.stream.sink import SinkLike

__all__ = [
    "PromptOutputStream",
    "SinkLike",
    "normalize_status_icon",
    "redirect_stdout",
    "wrap_text",
]
