"""Bootstrap steps.

Each step is a small, independently enabled unit that runs against a shared
`StepContext`. `build_steps` returns them in the fixed order they must run:

1. manifest initialization
2. dependency installation
3. editorconfig, prettier and eslint presets
4. README
5. git repository and initial commit
"""

from bootstrap_tool.steps.base import Step, StepContext, StepResult
from bootstrap_tool.steps.git import InitGitRepository, check_global_identity, read_global_setting
from bootstrap_tool.steps.project import (
    ApplyPreset,
    InitManifest,
    InstallDependencies,
    WriteReadme,
    build_steps,
)

__all__ = [
    "ApplyPreset",
    "InitGitRepository",
    "InitManifest",
    "InstallDependencies",
    "Step",
    "StepContext",
    "StepResult",
    "WriteReadme",
    "build_steps",
    "check_global_identity",
    "read_global_setting",
]
