"""Unit tests for the global git identity check."""

from __future__ import annotations

import io
from pathlib import Path

from bootstrap_tool.config import BootstrapSettings, RunOptions
from bootstrap_tool.report import Reporter
from bootstrap_tool.steps import InitGitRepository, StepContext, check_global_identity, read_global_setting
from tests.conftest import FakeRunner


def test_read_global_setting_is_quiet_and_trimmed(fake_runner: FakeRunner) -> None:
    value = read_global_setting(fake_runner, "user.name")

    assert value == "Ada"
    command, _cwd, echo = fake_runner.calls[0]
    assert command == ("git", "config", "--global", "--get", "user.name")
    assert echo is False
    # Echo is back on for whatever runs next.
    fake_runner.run(["git", "init"])
    assert fake_runner.calls[-1][2] is True


def test_read_global_setting_unset_returns_empty(fake_runner: FakeRunner) -> None:
    fake_runner.git_config.pop("user.email")

    assert read_global_setting(fake_runner, "user.email") == ""


def test_check_global_identity_lists_missing(fake_runner: FakeRunner) -> None:
    fake_runner.git_config = {"user.name": "Ada"}

    missing = check_global_identity(fake_runner, ["user.name", "user.email"])

    assert missing == ["user.email"]


def test_missing_identity_warns_and_continues(
    tmp_path: Path,
    settings: BootstrapSettings,
    fake_runner: FakeRunner,
    reporter: Reporter,
    output: io.StringIO,
) -> None:
    fake_runner.git_config = {}
    directory = tmp_path / "demo"
    directory.mkdir()
    context = StepContext(
        options=RunOptions(directory=directory),
        settings=settings,
        directory=directory,
        runner=fake_runner,
        reporter=reporter,
    )

    result = InitGitRepository().execute(context)

    text = output.getvalue()
    assert "Warning: Global git setting 'user.name' is not set." in text
    assert "Warning: Global git setting 'user.email' is not set." in text
    assert ("git", "commit", "-m", "bootstrapped") in fake_runner.commands
    assert result.details is not None
    assert result.details["missing_identity"] == ["user.name", "user.email"]
