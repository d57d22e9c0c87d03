"""Check that the external executables the run depends on are installed."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable, Iterable

from bootstrap_tool.errors import MissingPrerequisiteError

logger = logging.getLogger(__name__)


def check_prerequisites(
    programs: Iterable[str],
    *,
    which: Callable[[str], str | None] = shutil.which,
) -> None:
    """Raise `MissingPrerequisiteError` for the first program not found on PATH.

    Checks stop at the first miss.
    """

    for program in programs:
        resolved = which(program)
        if resolved is None:
            raise MissingPrerequisiteError(program)
        logger.debug("Prerequisite found", extra={"program": program, "path": resolved})
