from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from smash.cli.main import cli


def test_help_then_quit() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, [], input="HELP\nquit\n")
    assert result.exit_code == 0
    assert result.output.startswith("user@smash $ ")
    assert "Welcome to smash v1.0!" in result.output
    assert "Thanks for choosing smash!" in result.output


def test_errors_do_not_end_session() -> None:
    runner = CliRunner()
    session = "\n".join(
        [
            "frobnicate",
            "copy a b c",
            "run",
            "list " + "d" * 101,
            "run nonexistent",
            "quit",
        ]
    )
    result = runner.invoke(cli, [], input=session + "\n")
    assert result.exit_code == 0
    assert 'Unrecognized command: "frobnicate".' in result.output
    assert "Usage: copy <old-filename> <new-filename>" in result.output
    assert "Usage: run <executable-file>" in result.output
    assert "Parameter 1 exceeds maximum allowed characters: 100." in result.output
    assert 'Unable to find executable file "nonexistent".' in result.output
    assert result.output.count("user@smash $ ") == 6


def test_copy_and_list_round_trip(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        Path("notes.txt").write_text("hello")
        result = runner.invoke(cli, [], input="copy notes.txt Backup.TXT\nlist\nquit\n")
        assert result.exit_code == 0
        assert Path("Backup.TXT").read_text() == "hello"
        assert "Backup.TXT" in result.output
        assert "notes.txt" in result.output


def test_copy_overwrite_declined(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        Path("a.txt").write_text("new")
        Path("b.txt").write_text("old")
        result = runner.invoke(cli, [], input="copy a.txt b.txt\nn\nquit\n")
        assert result.exit_code == 0
        assert "Operation aborted." in result.output
        assert Path("b.txt").read_text() == "old"


def test_end_of_input_exits_cleanly() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, [], input="help\n")
    assert result.exit_code == 0
    assert result.output.count("user@smash $ ") == 2


def test_prompt_from_environment() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, [], input="quit\n", env={"SMASH_PROMPT": "smash> "})
    assert result.exit_code == 0
    assert result.output.startswith("smash> ")


def test_invalid_configuration_rejected() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, [], input="quit\n", env={"SMASH_MAX_PARAMS": "0"})
    assert result.exit_code == 1
    assert "invalid configuration" in result.output


def test_prod_env_from_dotenv_selects_json_logging(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("APP_ENV", raising=False)
    calls: list[tuple[str, bool | None]] = []

    def _configure(level: str, json_output: bool | None = None) -> None:
        calls.append((level, json_output))

    monkeypatch.setattr("smash.cli.main.configure_logging", _configure)
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        Path(".env").write_text("APP_ENV=prod\n")
        result = runner.invoke(cli, [], input="quit\n")
    assert result.exit_code == 0
    assert calls == [("WARNING", True)]
