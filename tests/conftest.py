"""Test configuration and fixtures."""

from __future__ import annotations

import io
import json
import os
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

import pytest
from rich.console import Console

from bootstrap_tool.config import BootstrapSettings
from bootstrap_tool.report import Reporter
from bootstrap_tool.runner import CommandResult


class FakeRunner:
    """In-memory `CommandRunner`.

    - `npm init --yes` writes a default package.json into `cwd`
    - `git init` creates a `.git` directory in `cwd`
    - commands listed in `failures` exit non-zero
    - `git config --global --get <name>` answers from `git_config`
    """

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[str, ...], Path | None, bool]] = []
        self.failures: dict[tuple[str, ...], int] = {}
        self.git_config: dict[str, str] = {"user.name": "Ada", "user.email": "ada@example.com"}
        self.init_manifest: dict[str, object] = {
            "name": "",
            "version": "1.0.0",
            "description": "",
            "main": "index.js",
            "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
            "keywords": [],
            "author": "",
            "license": "ISC",
        }
        self._echo = True

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [command for command, _cwd, _echo in self.calls]

    @contextmanager
    def quiet(self) -> Iterator[None]:
        previous = self._echo
        self._echo = False
        try:
            yield
        finally:
            self._echo = previous

    def run(self, command: Sequence[str], *, cwd: Path | None = None) -> CommandResult:
        argv = tuple(command)
        self.calls.append((argv, cwd, self._echo))

        if argv in self.failures:
            return CommandResult(command=argv, returncode=self.failures[argv], stderr="boom")

        if argv[:2] == ("npm", "init") and cwd is not None:
            manifest = dict(self.init_manifest)
            manifest["name"] = manifest["name"] or cwd.name
            (cwd / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
        elif argv[:2] == ("git", "init") and cwd is not None:
            (cwd / ".git").mkdir()
        elif argv[:4] == ("git", "config", "--global", "--get"):
            value = self.git_config.get(argv[4], "")
            return CommandResult(command=argv, returncode=0 if value else 1, stdout=value + "\n")

        return CommandResult(command=argv, returncode=0)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def output() -> io.StringIO:
    """Captures everything the reporter prints, stdout and stderr alike."""
    return io.StringIO()


@pytest.fixture
def reporter(output: io.StringIO) -> Reporter:
    console = Console(file=output, force_terminal=False, highlight=False, width=200)
    return Reporter(console=console, err_console=console)


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> BootstrapSettings:
    """Default settings, isolated from the developer's environment and .env."""
    for var in list(os.environ):
        if var == "LOG_LEVEL" or var.startswith("BOOTSTRAP_"):
            monkeypatch.delenv(var)
    return BootstrapSettings(_env_file=None)


@pytest.fixture
def which_all() -> Callable[[str], str | None]:
    return lambda program: f"/usr/bin/{program}"


@pytest.fixture(autouse=True)
def _restore_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """The pipeline changes the working directory; undo it after each test."""
    monkeypatch.chdir(tmp_path)
