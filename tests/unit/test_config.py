"""Unit tests for settings and run options."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from bootstrap_tool.config import BootstrapSettings, RunOptions


def test_settings_defaults(settings: BootstrapSettings) -> None:
    assert settings.log_level == "WARNING"
    assert settings.prerequisites == ("git", "node", "npm", "npx")
    assert settings.identity_settings == ("user.name", "user.email")
    assert settings.commit_message == "bootstrapped"
    assert settings.manifest_filename == "package.json"
    assert settings.readme_filename == "README.md"


def test_settings_loads_from_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("BOOTSTRAP_PACKAGE_MANAGER", raising=False)
    monkeypatch.delenv("BOOTSTRAP_COMMIT_MESSAGE", raising=False)
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "LOG_LEVEL=DEBUG",
                "BOOTSTRAP_PACKAGE_MANAGER=pnpm",
                "BOOTSTRAP_COMMIT_MESSAGE=chore: scaffold",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = BootstrapSettings()

    assert settings.log_level == "DEBUG"
    assert settings.package_manager == "pnpm"
    assert settings.commit_message == "chore: scaffold"
    assert "pnpm" in settings.prerequisites


def test_settings_reject_blank_executable(settings: BootstrapSettings) -> None:
    with pytest.raises(ValidationError):
        BootstrapSettings(_env_file=None, git_executable="  ")


def test_run_options_defaults() -> None:
    options = RunOptions()

    assert options.directory == Path(".")
    assert options.name is None
    assert options.version is None
    assert options.module_type == "module"
    assert options.packages == ()
    assert all(
        [
            options.editorconfig,
            options.eslint,
            options.readme,
            options.git,
            options.gitignore,
            options.prettier,
        ]
    )


def test_run_options_split_packages_on_spaces_and_commas() -> None:
    options = RunOptions(packages=["left-pad,lodash@4.17.21", "  chalk  express@^4 ", ""])

    assert options.packages == ("left-pad", "lodash@4.17.21", "chalk", "express@^4")


def test_run_options_blank_overrides_are_unset() -> None:
    options = RunOptions(name="", version="  ")

    assert options.name is None
    assert options.version is None


def test_run_options_reject_blank_module_type() -> None:
    with pytest.raises(ValidationError):
        RunOptions(module_type=" ")


def test_run_options_are_immutable() -> None:
    options = RunOptions()

    with pytest.raises(ValidationError):
        options.git = False  # type: ignore[misc]
