"""Run a full bootstrap: prerequisites, directory, then the ordered steps."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from bootstrap_tool.config import BootstrapSettings, RunOptions
from bootstrap_tool.directory import prepare_directory
from bootstrap_tool.errors import ManifestError
from bootstrap_tool.prerequisites import check_prerequisites
from bootstrap_tool.report import Reporter
from bootstrap_tool.runner import CommandRunner
from bootstrap_tool.steps import Step, StepContext, StepResult, build_steps

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BootstrapOutcome:
    directory: str
    project_name: str
    completed_steps: list[str] = field(default_factory=list)
    git_initialized: bool = False


def run_bootstrap(
    options: RunOptions,
    *,
    settings: BootstrapSettings,
    runner: CommandRunner,
    reporter: Reporter,
    which: Callable[[str], str | None] = shutil.which,
    steps: Sequence[Step] | None = None,
) -> BootstrapOutcome:
    """Bootstrap a project according to `options`.

    Any `BootstrapError` aborts the run where it happens. Nothing done by
    earlier steps is rolled back.
    """

    check_prerequisites(settings.prerequisites, which=which)
    directory = prepare_directory(options.directory)

    # The rest of the run, and anything the operator does afterwards in this
    # process, works from inside the new project.
    os.chdir(directory)

    context = StepContext(
        options=options,
        settings=settings,
        directory=directory,
        runner=runner,
        reporter=reporter,
    )

    completed: list[str] = []
    for step in steps if steps is not None else build_steps():
        if not step.enabled(options):
            logger.debug("Step skipped", extra={"step": step.name})
            continue
        logger.info("Step started", extra={"step": step.name})
        reporter.step(f"Running step: {step.name}")
        result: StepResult = step.execute(context)
        logger.info(
            result.message,
            extra={"step": step.name, "details": result.details or {}},
        )
        completed.append(step.name)

    if context.manifest is None:
        raise ManifestError("Manifest was not initialized")

    outcome = BootstrapOutcome(
        directory=str(directory),
        project_name=context.manifest.name,
        completed_steps=completed,
        git_initialized="git" in completed,
    )
    reporter.success(outcome.project_name, git_initialized=outcome.git_initialized)
    return outcome
