"""Configuration for bootstrap-tool.

Two layers:
- `BootstrapSettings`: tool-level settings loaded from environment variables
  and a local `.env` file (if present). These name the external executables
  and the fixed strings the tool writes.
- `RunOptions`: the per-run options parsed from the command line. Immutable
  for the duration of a run.

Notes:
    Pydantic-settings supports overriding the env file in tests via:
    `BootstrapSettings(_env_file=path_to_env)`.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

IDENTITY_SETTINGS: tuple[str, ...] = ("user.name", "user.email")

_PACKAGE_SEPARATORS = re.compile(r"[\s,]+")


class BootstrapSettings(BaseSettings):
    """Settings for the bootstrap tool.

    Environment variables:
    - LOG_LEVEL                      (optional)
    - BOOTSTRAP_GIT                  (optional)
    - BOOTSTRAP_NODE                 (optional)
    - BOOTSTRAP_PACKAGE_MANAGER      (optional)
    - BOOTSTRAP_PACKAGE_RUNNER       (optional)
    - BOOTSTRAP_PRESET_GENERATOR     (optional)
    - BOOTSTRAP_GITIGNORE_GENERATOR  (optional)
    - BOOTSTRAP_GITIGNORE_TEMPLATE   (optional)
    - BOOTSTRAP_COMMIT_MESSAGE       (optional)
    - BOOTSTRAP_MANIFEST_FILENAME    (optional)
    - BOOTSTRAP_README_FILENAME      (optional)
    """

    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    git_executable: str = Field(
        default="git",
        validation_alias="BOOTSTRAP_GIT",
        description="Version-control CLI",
    )
    node_executable: str = Field(
        default="node",
        validation_alias="BOOTSTRAP_NODE",
        description="Node runtime; only checked for presence",
    )
    package_manager: str = Field(
        default="npm",
        validation_alias="BOOTSTRAP_PACKAGE_MANAGER",
        description="Package-manager CLI used for `init` and `install`",
    )
    package_runner: str = Field(
        default="npx",
        validation_alias="BOOTSTRAP_PACKAGE_RUNNER",
        description="Runner used to invoke the config generators",
    )

    preset_generator: str = Field(
        default="mrm",
        validation_alias="BOOTSTRAP_PRESET_GENERATOR",
        description="Generator package that applies editorconfig/prettier/eslint presets",
    )
    gitignore_generator: str = Field(
        default="gitignore",
        validation_alias="BOOTSTRAP_GITIGNORE_GENERATOR",
        description="Generator package that fetches .gitignore templates",
    )
    gitignore_template: str = Field(
        default="node",
        validation_alias="BOOTSTRAP_GITIGNORE_TEMPLATE",
        description="Template name passed to the .gitignore generator",
    )

    commit_message: str = Field(
        default="bootstrapped",
        validation_alias="BOOTSTRAP_COMMIT_MESSAGE",
        description="Message of the initial commit",
    )
    manifest_filename: str = Field(
        default="package.json",
        validation_alias="BOOTSTRAP_MANIFEST_FILENAME",
        description="Manifest file produced by the package manager",
    )
    readme_filename: str = Field(
        default="README.md",
        validation_alias="BOOTSTRAP_README_FILENAME",
        description="README written into the new project",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _require_executables(self) -> BootstrapSettings:
        for field in ("git_executable", "node_executable", "package_manager", "package_runner"):
            if not getattr(self, field).strip():
                raise ValueError(f"{field} must not be blank")
        return self

    @property
    def prerequisites(self) -> tuple[str, ...]:
        """Executables that must be resolvable before anything runs."""

        return (self.git_executable, self.node_executable, self.package_manager, self.package_runner)

    @property
    def identity_settings(self) -> tuple[str, ...]:
        """Global git settings checked before the initial commit."""

        return IDENTITY_SETTINGS


class RunOptions(BaseModel):
    """Options for a single bootstrap run."""

    model_config = ConfigDict(frozen=True)

    directory: Path = Field(default=Path("."))
    name: str | None = Field(default=None, description="Manifest name override")
    version: str | None = Field(default=None, description="Manifest version override")
    module_type: str = Field(default="module", description="Value written to the manifest `type`")
    packages: tuple[str, ...] = Field(default=())

    editorconfig: bool = True
    eslint: bool = True
    readme: bool = True
    git: bool = True
    gitignore: bool = True
    prettier: bool = True

    @field_validator("packages", mode="before")
    @classmethod
    def _split_packages(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple)):
            out: list[str] = []
            for item in value:
                out.extend(p for p in _PACKAGE_SEPARATORS.split(str(item)) if p)
            return tuple(out)
        return value

    @field_validator("name", "version", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("module_type")
    @classmethod
    def _require_module_type(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("module type must not be blank")
        return stripped
