from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from bootstrap_tool.config import RunOptions
from bootstrap_tool.errors import BootstrapError

from .base import Step, StepContext, StepResult
from .git import InitGitRepository

logger = logging.getLogger(__name__)

PresetOption = Literal["editorconfig", "prettier", "eslint"]

README_TEMPLATE = "# {name}\n\n...\n"


@dataclass(frozen=True, slots=True)
class InitManifest(Step):
    """Create the manifest with the package manager, then apply the run's overrides."""

    name: str = "manifest"

    def enabled(self, options: RunOptions) -> bool:
        return True

    def execute(self, context: StepContext) -> StepResult:
        context.run([context.settings.package_manager, "init", "--yes"])

        store = context.manifest_store
        manifest = store.load().with_overrides(context.options)
        store.save(manifest)
        context.manifest = manifest

        return StepResult(
            message="Initialized manifest",
            details={"name": manifest.name, "version": manifest.version, "type": manifest.type},
        )


@dataclass(frozen=True, slots=True)
class InstallDependencies(Step):
    """Install every requested package in one package-manager invocation."""

    name: str = "dependencies"

    def enabled(self, options: RunOptions) -> bool:
        return len(options.packages) > 0

    def execute(self, context: StepContext) -> StepResult:
        packages = list(context.options.packages)
        context.run([context.settings.package_manager, "install", *packages])
        return StepResult(message="Installed packages", details={"packages": packages})


@dataclass(frozen=True, slots=True)
class ApplyPreset(Step):
    """Apply one lint/format/editor preset through the config generator.

    The preset name doubles as the `RunOptions` flag that gates it.
    """

    preset: PresetOption
    name: str = "preset"

    def enabled(self, options: RunOptions) -> bool:
        return bool(getattr(options, self.preset))

    def execute(self, context: StepContext) -> StepResult:
        settings = context.settings
        context.run([settings.package_runner, settings.preset_generator, self.preset])
        return StepResult(message=f"Applied {self.preset} preset")


@dataclass(frozen=True, slots=True)
class WriteReadme(Step):
    """Write a minimal README named after the persisted manifest."""

    name: str = "readme"

    def enabled(self, options: RunOptions) -> bool:
        return options.readme

    def execute(self, context: StepContext) -> StepResult:
        project_name = context.manifest_store.load().name
        path = context.directory / context.settings.readme_filename
        try:
            path.write_text(README_TEMPLATE.format(name=project_name), encoding="utf-8")
        except OSError as exc:
            raise BootstrapError(f"Could not write {path}: {exc}") from exc
        return StepResult(message="Wrote README", details={"path": str(path)})


def build_steps() -> list[Step]:
    """Return every step in run order; callers skip the ones not enabled."""

    return [
        InitManifest(),
        InstallDependencies(),
        ApplyPreset(preset="editorconfig", name="editorconfig"),
        ApplyPreset(preset="prettier", name="prettier"),
        ApplyPreset(preset="eslint", name="eslint"),
        WriteReadme(),
        InitGitRepository(),
    ]
