# topmark:header:start
#
#   project      : PromptStream
#   file         : model.py
#   file_relpath : src/promptstream/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot consumed by the CLI.
    - `MutableConfig`: a mutable builder used while loading and merging sources;
      it can be frozen into `Config` and thawed back for edits.

TOML I/O and discovery live in `promptstream.config.loaders`.

Unset values:
    A `MutableConfig` field set to ``None`` means "not specified by this source".
    Merging keeps the value of the base unless the override specifies one.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from promptstream.config.logging import get_logger
from promptstream.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from promptstream.config.logging import PromptStreamLogger

logger: PromptStreamLogger = get_logger(__name__)

_STRING_KEYS: tuple[str, ...] = ("prompt", "status_icon", "quit_command", "echo_template")
_LIST_KEYS: tuple[str, ...] = ("prompts", "status_icons")


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for PromptStream.

    Attributes:
        prompt (str): Prompt shown after every printed line (``""`` disables it).
        status_icon (str): Icon shown in front of the prompt (``""`` disables it).
        prompts (tuple[str, ...]): Prompts cycled by the demo, one step per input line.
        status_icons (tuple[str, ...]): Icons cycled by the demo, one step per input line.
        quit_command (str): Input line (case-insensitive) that ends the demo.
        echo_template (str): Template with a ``{line}`` field used to echo input.
        config_files (tuple[Path, ...]): On-disk sources merged into this snapshot.
    """

    prompt: str
    status_icon: str
    prompts: tuple[str, ...]
    status_icons: tuple[str, ...]
    quit_command: str
    echo_template: str
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            prompt=self.prompt,
            status_icon=self.status_icon,
            prompts=list(self.prompts),
            status_icons=list(self.status_icons),
            quit_command=self.quit_command,
            echo_template=self.echo_template,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> dict[str, Any]:
        """Return the settings as a ``{"promptstream": {...}}`` TOML table."""
        return {
            "promptstream": {
                "prompt": self.prompt,
                "status_icon": self.status_icon,
                "prompts": list(self.prompts),
                "status_icons": list(self.status_icons),
                "quit_command": self.quit_command,
                "echo_template": self.echo_template,
            }
        }


@dataclass
class MutableConfig:
    """Mutable configuration builder used during discovery and merging.

    All fields default to ``None`` ("not specified") so that layered sources can be
    merged with `merge_with`. Call `freeze` to obtain a `Config`.
    """

    prompt: str | None = None
    status_icon: str | None = None
    prompts: list[str] | None = None
    status_icons: list[str] | None = None
    quit_command: str | None = None
    echo_template: str | None = None
    config_files: list[Path] = field(default_factory=list)

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Returns:
            Config: The immutable snapshot.

        Raises:
            ConfigError: If a required value is missing or the echo template is invalid.
        """
        missing: list[str] = [
            name for name in (*_STRING_KEYS, *_LIST_KEYS) if getattr(self, name) is None
        ]
        if missing:
            raise ConfigError(f"missing configuration values: {', '.join(missing)}")

        assert self.prompt is not None
        assert self.status_icon is not None
        assert self.prompts is not None
        assert self.status_icons is not None
        assert self.quit_command is not None
        assert self.echo_template is not None

        try:
            self.echo_template.format(line="")
        except (AttributeError, KeyError, IndexError, ValueError) as exc:
            raise ConfigError(
                f"echo_template may only use the '{{line}}' field: {self.echo_template!r}"
            ) from exc

        return Config(
            prompt=self.prompt,
            status_icon=self.status_icon,
            prompts=tuple(self.prompts),
            status_icons=tuple(self.status_icons),
            quit_command=self.quit_command,
            echo_template=self.echo_template,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Load the defaults from the bundled ``promptstream-default.toml``.

        Returns:
            MutableConfig: A builder populated with every default value.
        """
        # Local import: the loaders module depends on this one.
        from promptstream.config.loaders import load_defaults_dict

        return cls.from_toml_dict(load_defaults_dict().get("promptstream", {}))

    @classmethod
    def from_toml_dict(
        cls,
        table: Mapping[str, Any],
        *,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Build a draft from the contents of a ``[promptstream]`` table.

        Unknown keys are logged and ignored.

        Args:
            table (Mapping[str, Any]): The (plain Python) table contents.
            config_file (Path | None): The file the table came from, if any.

        Returns:
            MutableConfig: The draft; keys absent from ``table`` stay ``None``.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        draft = cls()
        for key, value in table.items():
            if key in _STRING_KEYS:
                if not isinstance(value, str):
                    raise ConfigError(
                        f"'{key}' must be a string, got {type(value).__name__}",
                        source=config_file,
                    )
                setattr(draft, key, value)
            elif key in _LIST_KEYS:
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ConfigError(f"'{key}' must be a list of strings", source=config_file)
                setattr(draft, key, list(value))
            else:
                logger.warning("Ignoring unknown configuration key '%s' (%s)", key, config_file)

        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values specified by ``other`` override this draft.

        Args:
            other (MutableConfig): The draft whose specified values win.

        Returns:
            MutableConfig: The merged draft.
        """
        return MutableConfig(
            prompt=other.prompt if other.prompt is not None else self.prompt,
            status_icon=other.status_icon if other.status_icon is not None else self.status_icon,
            prompts=other.prompts if other.prompts is not None else self.prompts,
            status_icons=other.status_icons
            if other.status_icons is not None
            else self.status_icons,
            quit_command=other.quit_command
            if other.quit_command is not None
            else self.quit_command,
            echo_template=other.echo_template
            if other.echo_template is not None
            else self.echo_template,
            config_files=self.config_files + other.config_files,
        )
