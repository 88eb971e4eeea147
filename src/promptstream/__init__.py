# topmark:header:start
#
#   project      : PromptStream
#   file         : __init__.py
#   file_relpath : src/promptstream/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PromptStream package.

PromptStream decorates a byte stream (usually stdout) so that an interactive
prompt, with an optional status icon, is shown again after every printed line.
It exposes the `PromptOutputStream` decorator, a stdout redirection helper and a
small CLI demonstrating both.
"""

from __future__ import annotations

from promptstream.constants import DEFAULT_PROMPT
from promptstream.stream import PromptOutputStream, SinkLike, redirect_stdout, wrap_text

__all__ = [
    "DEFAULT_PROMPT",
    "PromptOutputStream",
    "SinkLike",
    "redirect_stdout",
    "wrap_text",
]
