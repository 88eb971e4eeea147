# topmark:header:start
#
#   project      : PromptStream
#   file         : constants.py
#   file_relpath : src/promptstream/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PromptStream Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    PROMPTSTREAM_VERSION: str = get_version("promptstream")
except PackageNotFoundError:  # running from a source checkout without install
    PROMPTSTREAM_VERSION = "0.0.0"

# Byte written to move the cursor back to column 0 before overwriting a prompt.
CURSOR_RESET: Final[bytes] = b"\r"

# Byte that triggers the prompt trailer when it ends a write.
LINE_TERMINATOR: Final[int] = 0x0A

DEFAULT_PROMPT: Final[str] = "> "
DEFAULT_ENCODING: Final[str] = "utf-8"

# Name of the bundled default config inside the package `promptstream.config`:
DEFAULT_TOML_CONFIG_PACKAGE: Final[str] = "promptstream.config"
DEFAULT_TOML_CONFIG_NAME: Final[str] = "promptstream-default.toml"

# On-disk configuration sources, in discovery order.
LOCAL_CONFIG_NAME: Final[str] = "promptstream.toml"
PYPROJECT_CONFIG_NAME: Final[str] = "pyproject.toml"

CONFIG_TABLE: Final[str] = "promptstream"

LOG_LEVEL_ENV_VAR: Final[str] = "PROMPTSTREAM_LOG_LEVEL"
