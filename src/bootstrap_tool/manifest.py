"""Package manifest (`package.json`) persistence and patching.

The package manager writes the manifest; this module only reads it back,
overrides a few top-level fields and rewrites it. Every other field is kept
as the package manager produced it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from bootstrap_tool.config import RunOptions
from bootstrap_tool.errors import ManifestError

logger = logging.getLogger(__name__)


class PackageManifest(BaseModel):
    """The fields this tool reads or writes; anything else rides along as extras."""

    model_config = ConfigDict(extra="allow")

    name: str
    version: str | None = None
    type: str | None = None

    def with_overrides(self, options: RunOptions) -> PackageManifest:
        """Return a copy with the run's overrides applied.

        `name` and `version` change only when an override was given. `type`
        is always written because the option has a default.
        """

        update: dict[str, object] = {"type": options.module_type}
        if options.name:
            update["name"] = options.name
        if options.version:
            update["version"] = options.version
        return self.model_copy(update=update)

    def to_json(self) -> dict[str, object]:
        return self.model_dump(mode="json", exclude_unset=True)


class ManifestStore:
    """Reads and writes a JSON manifest file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> PackageManifest:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ManifestError(f"Manifest not found: {self._path}") from exc
        except OSError as exc:
            raise ManifestError(f"Could not read manifest {self._path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ManifestError(f"Manifest is not valid JSON: {self._path} ({exc})") from exc

        if not isinstance(raw, dict):
            raise ManifestError(f"Manifest has unexpected shape (expected an object): {self._path}")

        try:
            return PackageManifest.model_validate(raw)
        except ValidationError as exc:
            raise ManifestError(f"Manifest is malformed: {self._path}\n{exc}") from exc

    def save(self, manifest: PackageManifest) -> None:
        payload = json.dumps(manifest.to_json(), indent=2, ensure_ascii=False) + "\n"
        try:
            self._path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise ManifestError(f"Could not write manifest {self._path}: {exc}") from exc
        logger.debug("Manifest written", extra={"path": str(self._path)})
