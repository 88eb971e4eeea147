# topmark:header:start
#
#   project      : PromptStream
#   file         : version.py
#   file_relpath : src/promptstream/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PromptStream `version` command.

Prints the current PromptStream version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from promptstream.constants import PROMPTSTREAM_VERSION

if TYPE_CHECKING:
    from promptstream.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of PromptStream.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (text or json).",
)
@click.pass_context
def version_command(ctx: click.Context, output_format: str) -> None:
    """Show the current version of PromptStream.

    Args:
        ctx (click.Context): Current Click context.
        output_format (str): ``"text"`` (default) or ``"json"``.
    """
    console: ConsoleLike = ctx.obj["console"]

    if output_format == "json":
        console.print(json.dumps({"version": PROMPTSTREAM_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("PromptStream version:", bold=True, underline=True))
        console.print(f"    {console.styled(PROMPTSTREAM_VERSION, bold=True)}")
    else:
        console.print(console.styled(PROMPTSTREAM_VERSION, bold=True))
