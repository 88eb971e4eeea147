# topmark:header:start
#
#   project      : PromptStream
#   file         : main.py
#   file_relpath : src/promptstream/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the PromptStream CLI.

Group-level options (verbosity, color, config file) are resolved once and placed
into ``ctx.obj``; subcommands read them from there.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from promptstream.cli.commands.config_defaults import config_defaults_command
from promptstream.cli.commands.demo import demo_command
from promptstream.cli.commands.version import version_command
from promptstream.cli.console import ClickConsole
from promptstream.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from promptstream.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from promptstream.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, logging, color, config path) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit configuration file from ``--config``.
    """
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose

    # PROMPTSTREAM_LOG_LEVEL wins over -v/-q so diagnostics can be forced in scripts.
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    )
    enable_color: bool = resolve_color_mode(color_mode_override=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["config_path"] = config_path
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PromptStream CLI: keep an interactive prompt below the last printed line.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the PromptStream CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'promptstream demo' to try the prompt stream interactively.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(demo_command)

cli.add_command(config_defaults_command)

if __name__ == "__main__":
    cli()
