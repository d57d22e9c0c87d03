from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from bootstrap_tool.config import RunOptions
from bootstrap_tool.runner import CommandRunner

from .base import Step, StepContext, StepResult

logger = logging.getLogger(__name__)


def read_global_setting(runner: CommandRunner, setting_name: str, *, git: str = "git") -> str:
    """Return a global git config value, or "" when it is unset or unreadable.

    The query runs with command echo suppressed; echo is restored afterwards
    even if the query raises.
    """

    with runner.quiet():
        result = runner.run([git, "config", "--global", "--get", setting_name])
    if not result.ok:
        return ""
    return result.stdout.strip()


def check_global_identity(
    runner: CommandRunner, settings_to_check: Iterable[str], *, git: str = "git"
) -> list[str]:
    """Return the names of the global git settings that are not set."""

    return [name for name in settings_to_check if not read_global_setting(runner, name, git=git)]


@dataclass(frozen=True, slots=True)
class InitGitRepository(Step):
    """Initialize a repository in the target directory with one commit.

    Missing identity settings only produce warnings; git itself will report
    the commit failure if it cannot work around them.
    """

    name: str = "git"

    def enabled(self, options: RunOptions) -> bool:
        return options.git

    def execute(self, context: StepContext) -> StepResult:
        settings = context.settings
        git = settings.git_executable

        missing = check_global_identity(context.runner, settings.identity_settings, git=git)
        for setting_name in missing:
            logger.warning("Global git setting is not set", extra={"setting": setting_name})
            context.reporter.warning(f"Warning: Global git setting '{setting_name}' is not set.")

        context.run([git, "init"])
        if context.options.gitignore:
            context.run(
                [settings.package_runner, settings.gitignore_generator, settings.gitignore_template]
            )
        context.run([git, "add", "."])
        context.run([git, "commit", "-m", settings.commit_message])

        return StepResult(
            message="Created initial commit",
            details={"gitignore": context.options.gitignore, "missing_identity": missing},
        )
