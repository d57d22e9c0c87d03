"""Exception types raised by bootstrap-tool.

Every expected failure derives from `BootstrapError`, so `main()` can tell an
operator-facing error apart from a bug.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


class BootstrapError(Exception):
    """Base class for all bootstrap-tool errors."""


class MissingPrerequisiteError(BootstrapError):
    """Raised when a required executable is not on PATH."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Error: Required command not found: {executable}")
        self.executable = executable


class DirectoryNotEmptyError(BootstrapError):
    """Raised when the target directory already has entries."""

    def __init__(self, directory: Path) -> None:
        super().__init__(f"{directory} is not empty!")
        self.directory = directory


class ManifestError(BootstrapError):
    """Raised when the package manifest cannot be read, parsed or written."""


@dataclass(eq=False)
class CommandFailedError(BootstrapError):
    """Raised when an external command exits non-zero or cannot be spawned."""

    command: Sequence[str]
    returncode: int
    stderr: str = ""

    def __str__(self) -> str:
        message = f"Command failed with exit code {self.returncode}: {' '.join(self.command)}"
        if self.stderr.strip():
            message += f"\n{self.stderr.strip()}"
        return message
