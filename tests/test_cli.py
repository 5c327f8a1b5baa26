from pathlib import Path

import pytest
from click.testing import CliRunner

from tudu.cli import cli


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> CliRunner:
    for name in ("TUDU_QUIT_WORD", "TUDU_COMPLETE_WORD", "TUDU_PROMPT", "TUDU_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def test_session(runner: CliRunner) -> None:
    result = runner.invoke(cli, [], input="buy milk\ndone\nquit\n")

    assert result.exit_code == 0, result.output
    assert "Tasks:\n  1. buy milk\nCompleted:\n  (none)" in result.output
    assert "Tasks:\n  (none)\nCompleted:\n  1. buy milk" in result.output


def test_empty_input_exits(runner: CliRunner) -> None:
    result = runner.invoke(cli, [], input="")

    assert result.exit_code == 0
    assert "Tasks:" not in result.output


def test_custom_words(runner: CliRunner) -> None:
    result = runner.invoke(
        cli, ["--quit-word", "bye", "--complete-word", "finish", "--prompt", ">> "], input="quit\nfinish\nbye\n"
    )

    assert result.exit_code == 0, result.output
    assert ">> " in result.output
    assert "Completed:\n  1. quit" in result.output


def test_config_file(runner: CliRunner, tmp_path: Path) -> None:
    config_path = tmp_path / "tudu.yml"
    config_path.write_text("quit_word: bye\n")

    result = runner.invoke(cli, ["--config", str(config_path)], input="quit\nbye\n")

    assert result.exit_code == 0, result.output
    assert "Tasks:\n  1. quit" in result.output


def test_clashing_words_fail(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--quit-word", "done"], input="")

    assert result.exit_code == 1
    assert "Invalid settings" in result.output


def test_missing_config_file(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["--config", str(tmp_path / "missing.yml")])

    assert result.exit_code == 2


def test_broken_config_file(runner: CliRunner, tmp_path: Path) -> None:
    config_path = tmp_path / "bad.yml"
    config_path.write_text("quit_word: [unclosed\n")

    result = runner.invoke(cli, ["--config", str(config_path)], input="")

    assert result.exit_code == 1
    assert "is not valid YAML" in result.output
