# topmark:header:start
#
#   project      : PromptStream
#   file         : config_defaults.py
#   file_relpath : src/promptstream/cli/commands/config_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PromptStream `config-defaults` command.

Prints the bundled default configuration, comments included, so it can be saved
as a starting point (``promptstream config-defaults > promptstream.toml``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from promptstream.config.loaders import load_default_config_template_text

if TYPE_CHECKING:
    from promptstream.cli.console_api import ConsoleLike


@click.command(
    name="config-defaults",
    help="Print the default configuration as TOML.",
)
@click.pass_context
def config_defaults_command(ctx: click.Context) -> None:
    """Print the default configuration as TOML."""
    console: ConsoleLike = ctx.obj["console"]
    console.print(load_default_config_template_text(), nl=False)
