# topmark:header:start
#
#   project      : PromptStream
#   file         : __init__.py
#   file_relpath : src/promptstream/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PromptStream configuration: model, TOML loading and logging setup."""

from __future__ import annotations

from promptstream.config.loaders import load_config, load_default_config_template_text
from promptstream.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
    "load_config",
    "load_default_config_template_text",
]
