# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from _pytest.logging import LogCaptureFixture
from pathlib import Path
from spellfix.argx import arg, CommandLineTool, Config, UserError
from spellfix.cli import SpellCLI

import pytest


class ExampleCLI(CommandLineTool):
    @arg("word")
    def show_word(self) -> None:
        """Show a word"""
        print(self.args.word)

    @arg()
    def fail(self) -> None:
        """Always fails"""
        raise UserError("broken input")

    def helper(self) -> None:
        pass


def test_spellfix_commands_are_registered() -> None:
    cli = SpellCLI()
    cli.add_cmds()
    assert sorted(cli.subparsers.choices) == ["check", "correct", "distance", "edits"]


def test_command_help_is_the_docstring() -> None:
    cli = SpellCLI()
    cli.add_cmds()
    help_text = cli.subparsers.choices["distance"].format_help()
    assert cli.distance.__doc__ is not None
    assert cli.distance.__doc__ in help_text


def test_only_tagged_methods_become_commands(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli = ExampleCLI("example")
    assert not cli.run(args=["--config", str(tmp_path / "missing.json"), "show-word", "hello"])
    assert capsys.readouterr().out == "hello\n"
    assert sorted(cli.subparsers.choices) == ["fail", "show-word"]


def test_user_error_exits_cleanly(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    ret = ExampleCLI("spellfix").run(args=["--config", str(tmp_path / "missing.json"), "fail"])
    assert ret == 1
    assert "command failed: UserError: broken input" in caplog.text


def test_config_missing_file_is_empty(tmp_path: Path) -> None:
    assert Config(tmp_path / "missing.json") == {}


def test_config_loads_json(tmp_path: Path) -> None:
    path = tmp_path / "spellfix.json"
    path.write_text('{"max_distance": 2}', encoding="utf-8")
    assert Config(path) == {"max_distance": 2}


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_config_invalid_content(tmp_path: Path, content: str) -> None:
    path = tmp_path / "spellfix.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(UserError):
        Config(path)
