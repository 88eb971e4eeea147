# topmark:header:start
#
#   project      : PromptStream
#   file         : test_demo.py
#   file_relpath : tests/cli/test_demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: the `demo` command.

Each echoed line reaches the prompt stream as one write, so the expected stdout is
fully determined: every line is followed by ``icon + prompt`` and every later line
starts with a carriage return.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

import pytest

from promptstream.cli.commands.demo import rotate, run_demo
from promptstream.cli.console import ClickConsole
from promptstream.config.model import Config, MutableConfig
from promptstream.stream.prompt import PromptOutputStream
from promptstream.stream.redirect import wrap_text
from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli_in
from tests.stream.conftest import RecordingSink

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli

INTRO: str = "Input multiple lines of text and see how the prompt and icon change\n"


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_demo_default_session(isolation: Path) -> None:
    """The demo runs against the process streams without deprecation warnings."""
    result = run_cli_in(isolation, ["demo"], input_text="hello\nworld\nquit\n")

    assert_SUCCESS(result)

    assert result.stdout == (
        INTRO
        + "🧪 $ "
        + '\rEnter "quit" to exit\n'
        + "🧪 $ "
        + "\rText entered: hello\n"
        + "⏳ >>> "
        + "\rText entered: world\n"
        + "💀 # "
    )


def test_demo_quit_is_case_insensitive(isolation: Path) -> None:
    result = run_cli_in(isolation, ["demo"], input_text="a\n  QuIt \nnot echoed\n")

    assert_SUCCESS(result)

    assert "Text entered: a\n" in result.stdout
    assert "not echoed" not in result.stdout


def test_demo_ends_at_end_of_input(isolation: Path) -> None:
    result = run_cli_in(isolation, ["demo"], input_text="only line")

    assert_SUCCESS(result)

    assert result.stdout.endswith("\rText entered: only line\n⏳ >>> ")


def test_demo_empty_input(isolation: Path) -> None:
    result = run_cli_in(isolation, ["demo"], input_text="")

    assert_SUCCESS(result)

    assert result.stdout == INTRO + "🧪 $ " + '\rEnter "quit" to exit\n' + "🧪 $ "


def test_demo_option_overrides(isolation: Path) -> None:
    result = run_cli_in(
        isolation,
        ["demo", "--prompt", "% ", "--status-icon", "", "--quit-command", "bye"],
        input_text="bye\n",
    )

    assert_SUCCESS(result)

    assert result.stdout == INTRO + "% " + '\rEnter "bye" to exit\n' + "% "


def test_demo_reads_local_config(isolation: Path) -> None:
    (isolation / "promptstream.toml").write_text(
        "[promptstream]\n"
        'prompt = "> "\n'
        'status_icon = ""\n'
        'prompts = ["A ", "B "]\n'
        "status_icons = []\n"
        'echo_template = "<{line}>"\n',
        encoding="utf-8",
    )

    result = run_cli_in(isolation, ["demo"], input_text="x\ny\nz\nquit\n")

    assert_SUCCESS(result)

    assert result.stdout == (
        INTRO
        + "> "
        + '\rEnter "quit" to exit\n'
        + "> "
        + "\r<x>\nA "
        + "\r<y>\nB "
        + "\r<z>\nA "
    )


def test_demo_explicit_config_file(isolation: Path, tmp_path: Path) -> None:
    config_file: Path = tmp_path / "custom.toml"
    config_file.write_text('[promptstream]\nquit_command = "stop"\n', encoding="utf-8")

    result = run_cli_in(
        isolation, ["--config", str(config_file), "demo"], input_text="stop\nquit\n"
    )

    assert_SUCCESS(result)

    assert 'Enter "stop" to exit' in result.stdout
    assert "Text entered" not in result.stdout


def test_demo_invalid_config_exits_with_config_error(isolation: Path) -> None:
    (isolation / "promptstream.toml").write_text("[promptstream\n", encoding="utf-8")

    result = run_cli_in(isolation, ["demo"], input_text="quit\n")

    assert_CONFIG_ERROR(result)

    assert "invalid TOML" in result.output
    assert result.stdout == ""


def test_demo_missing_config_file(isolation: Path) -> None:
    result = run_cli_in(isolation, ["--config", "absent.toml", "demo"], input_text="quit\n")

    assert_CONFIG_ERROR(result)

    assert "cannot read configuration" in result.output


def test_rotate() -> None:
    items: deque[str] = deque(["a", "b", "c"])

    assert [rotate(items) for _ in range(4)] == ["a", "b", "c", "a"]
    assert rotate(deque()) is None


def test_run_demo_without_click() -> None:
    """`run_demo` works against any console whose output feeds the stream."""
    sink = RecordingSink()
    config: Config = MutableConfig.from_defaults().freeze()
    stream = PromptOutputStream(sink, "$ ", None)
    text = wrap_text(stream)
    console = ClickConsole(enable_color=False, out=text)

    count: int = run_demo(stream, ["one\n", "two\r\n", "QUIT\n", "never\n"], config, console)

    text.detach()
    assert count == 2
    assert stream.get_prompt() == "# "
    assert stream.get_status_icon() == "💀 "
    assert sink.data.decode().endswith("\rText entered: two\n💀 # ")
