"""Prepare the target directory for a new project."""

from __future__ import annotations

import logging
from pathlib import Path

from bootstrap_tool.errors import BootstrapError, DirectoryNotEmptyError

logger = logging.getLogger(__name__)


def is_empty(directory: Path) -> bool:
    return next(directory.iterdir(), None) is None


def prepare_directory(project: Path | str) -> Path:
    """Resolve `project` to an absolute path and make sure it is usable.

    An existing directory must be empty. A missing one is created along with
    any missing parents.

    Returns:
        The resolved absolute path.
    """

    target_dir = Path(project).expanduser().resolve()

    if target_dir.exists():
        if not target_dir.is_dir():
            raise BootstrapError(f"{target_dir} exists and is not a directory!")
        try:
            empty = is_empty(target_dir)
        except OSError as exc:
            raise BootstrapError(f"Could not read {target_dir}: {exc}") from exc
        if not empty:
            raise DirectoryNotEmptyError(target_dir)
        logger.info("Using existing empty directory", extra={"path": str(target_dir)})
        return target_dir

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BootstrapError(f"Could not create {target_dir}: {exc}") from exc
    logger.info("Created directory", extra={"path": str(target_dir)})
    return target_dir
