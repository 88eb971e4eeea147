# topmark:header:start
#
#   project      : PromptStream
#   file         : demo.py
#   file_relpath : src/promptstream/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PromptStream `demo` command.

Redirects stdout through a `PromptOutputStream`, then echoes every line read from
stdin. After each line the prompt and status icon move one step through the
configured cycles, so the effect of changing them is visible right away.

The session ends at end of input or when the quit command is entered.
"""

from __future__ import annotations

import sys
from collections import deque
from typing import TYPE_CHECKING

import click

from promptstream.cli.errors import (
    PromptStreamConfigError,
    PromptStreamEncodingError,
    PromptStreamIOError,
)
from promptstream.config.loaders import load_config
from promptstream.config.logging import get_logger
from promptstream.config.model import MutableConfig
from promptstream.errors import ConfigError
from promptstream.stream.prompt import PromptOutputStream
from promptstream.stream.redirect import redirect_stdout

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from promptstream.cli.console_api import ConsoleLike
    from promptstream.config.logging import PromptStreamLogger
    from promptstream.config.model import Config

logger: PromptStreamLogger = get_logger(__name__)


def rotate(items: deque[str]) -> str | None:
    """Return the head of ``items`` and move it to the tail; None if empty."""
    if not items:
        return None
    head: str = items.popleft()
    items.append(head)
    return head


def run_demo(
    stream: PromptOutputStream,
    lines: Iterable[str],
    config: Config,
    console: ConsoleLike,
) -> int:
    """Echo ``lines`` through ``console`` while cycling the prompt and icon of ``stream``.

    Args:
        stream (PromptOutputStream): The stream behind the console's output.
        lines (Iterable[str]): Input lines (line endings are stripped).
        config (Config): Effective configuration.
        console (ConsoleLike): Console writing to ``stream``.

    Returns:
        int: Number of lines echoed.
    """
    prompts: deque[str] = deque(config.prompts)
    status_icons: deque[str] = deque(config.status_icons)
    quit_command: str = config.quit_command.casefold()

    console.print("Input multiple lines of text and see how the prompt and icon change")
    console.print(f'Enter "{config.quit_command}" to exit')

    count = 0
    for raw in lines:
        line: str = raw.rstrip("\r\n")
        if line.strip().casefold() == quit_command:
            logger.debug("Quit command received after %d line(s)", count)
            break

        icon: str | None = rotate(status_icons)
        if icon is not None:
            # An empty configured icon means "no icon".
            stream.set_status_icon(icon or None)
        prompt: str | None = rotate(prompts)
        if prompt is not None:
            stream.set_prompt(prompt)

        console.print(config.echo_template.format(line=line))
        count += 1
    return count


@click.command(
    name="demo",
    help="Echo stdin lines with a prompt that is redrawn after every printed line.",
)
@click.option("--prompt", "prompt", default=None, help="Initial prompt (overrides config).")
@click.option(
    "--status-icon",
    "status_icon",
    default=None,
    help="Initial status icon (overrides config).",
)
@click.option(
    "--quit-command",
    "quit_command",
    default=None,
    help="Input line that ends the demo (overrides config).",
)
@click.pass_context
def demo_command(
    ctx: click.Context,
    prompt: str | None,
    status_icon: str | None,
    quit_command: str | None,
) -> None:
    """Run the interactive prompt demo.

    Args:
        ctx (click.Context): Current Click context.
        prompt (str | None): Initial prompt override.
        status_icon (str | None): Initial status icon override.
        quit_command (str | None): Quit command override.

    Raises:
        PromptStreamConfigError: If the configuration is invalid.
        PromptStreamEncodingError: If a prompt or icon cannot be encoded.
        PromptStreamIOError: If writing to stdout fails.
    """
    console: ConsoleLike = ctx.obj["console"]
    config_path: Path | None = ctx.obj.get("config_path")

    overrides = MutableConfig(prompt=prompt, status_icon=status_icon, quit_command=quit_command)
    try:
        config: Config = load_config(config_path, overrides=overrides)
    except ConfigError as exc:
        raise PromptStreamConfigError(str(exc)) from exc

    # Anything already buffered in the text layer must reach the terminal first.
    sys.stdout.flush()
    sink = sys.stdout.buffer
    stdin = sys.stdin

    try:
        stream = PromptOutputStream(
            sink,
            config.prompt,
            config.status_icon or None,
            close_sink=False,
        )
        with redirect_stdout(stream):
            count: int = run_demo(stream, stdin, config, console)
    except UnicodeEncodeError as exc:
        raise PromptStreamEncodingError(f"Cannot encode prompt or icon: {exc}") from exc
    except OSError as exc:
        raise PromptStreamIOError(f"Cannot write to stdout: {exc}") from exc

    logger.info("Demo finished after %d line(s)", count)
