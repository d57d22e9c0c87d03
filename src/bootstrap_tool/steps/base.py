from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from bootstrap_tool.config import BootstrapSettings, RunOptions
from bootstrap_tool.errors import CommandFailedError
from bootstrap_tool.manifest import ManifestStore, PackageManifest
from bootstrap_tool.report import Reporter
from bootstrap_tool.runner import CommandResult, CommandRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StepResult:
    message: str
    details: dict[str, object] | None = None


@dataclass(slots=True)
class StepContext:
    """Everything a step may read or act on.

    `manifest` is filled in by manifest initialization and read by later
    steps; nothing else on the context changes during a run.
    """

    options: RunOptions
    settings: BootstrapSettings
    directory: Path
    runner: CommandRunner
    reporter: Reporter
    manifest: PackageManifest | None = None

    @property
    def manifest_store(self) -> ManifestStore:
        return ManifestStore(self.directory / self.settings.manifest_filename)

    def run(self, command: Sequence[str]) -> CommandResult:
        """Run `command` in the target directory; non-zero exit is fatal."""

        result = self.runner.run(command, cwd=self.directory)
        if not result.ok:
            raise CommandFailedError(
                command=tuple(command), returncode=result.returncode, stderr=result.stderr
            )
        return result


class Step(Protocol):
    """A named stage of the bootstrap run."""

    name: str

    def enabled(self, options: RunOptions) -> bool: ...

    def execute(self, context: StepContext) -> StepResult: ...
