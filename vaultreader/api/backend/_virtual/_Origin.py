"""Bundled default contents for a virtual vault."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ...errors import IOFailure, NotFound
from ._demo import DEMO_CONTENTS, demo_manifest

MANIFEST_NAME = "manifest.json"


class _Origin:
    """Read-only source of bootstrap manifest and per-path default content.

    Backed either by a directory (``<origin_dir>/<path>``, as for a statically
    hosted vault) or, when no directory is configured, by the built-in demo.
    """

    def __init__(self, origin_dir: Path | None = None, manifest_path: Path | None = None):
        self.origin_dir = origin_dir
        self.manifest_path = manifest_path
        if manifest_path is None and origin_dir is not None:
            self.manifest_path = origin_dir / MANIFEST_NAME

    def manifest(self) -> dict[str, Any]:
        """Return the bootstrap manifest.

        Raises:
            NotFound: If the manifest file does not exist.
            IOFailure: If it cannot be read or parsed.
        """
        if self.manifest_path is None:
            return demo_manifest()
        if not self.manifest_path.is_file():
            raise NotFound(f"Manifest not found: {self.manifest_path}")
        try:
            return json.loads(self.manifest_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise IOFailure(f"Failed to load manifest {self.manifest_path}: {e}") from e

    def get(self, path: str) -> str | None:
        """Default content for ``path``, or None when nothing is bundled."""
        if self.origin_dir is None:
            if self.manifest_path is None:
                return DEMO_CONTENTS.get(path)
            return None
        candidate = self.origin_dir / path
        if not candidate.is_file():
            return None
        try:
            return candidate.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IOFailure(f"Failed to read bundled content {candidate}: {e}") from e
