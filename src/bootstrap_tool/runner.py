"""External command execution.

Everything the tool delegates (npm, npx, git) goes through the small
`CommandRunner` protocol so the orchestration can be exercised against a fake
in tests.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    command: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Run an external command and wait for it to exit."""

    def run(self, command: Sequence[str], *, cwd: Path | None = None) -> CommandResult: ...

    def quiet(self) -> AbstractContextManager[None]:
        """Suppress command echo and capture output while the context is active."""
        ...


class SubprocessRunner:
    """`CommandRunner` backed by `subprocess.run`.

    With echo on, the command line is printed and the child writes straight to
    the terminal (output is not captured). Inside `quiet()` nothing is printed
    and stdout/stderr are captured as text.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False, soft_wrap=True)
        self._echo = True

    @property
    def echo(self) -> bool:
        return self._echo

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
        if not argv:
            raise ValueError("command must not be empty")

        # Resolve through PATH so Windows shims (npm.cmd, npx.cmd) are found.
        executable = shutil.which(argv[0]) or argv[0]

        logger.debug("Running command", extra={"command": list(argv), "cwd": str(cwd or "")})
        if self._echo:
            self._console.print(f"[dim]$ {escape(' '.join(argv))}[/dim]")

        try:
            completed = subprocess.run(
                [executable, *argv[1:]],
                cwd=cwd,
                check=False,
                text=True,
                capture_output=not self._echo,
            )
        except OSError as exc:
            logger.debug("Command could not be started", extra={"command": list(argv)})
            return CommandResult(command=argv, returncode=127, stderr=str(exc))

        result = CommandResult(
            command=argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        if not result.ok:
            logger.debug(
                "Command exited non-zero",
                extra={"command": list(argv), "returncode": result.returncode},
            )
        return result
