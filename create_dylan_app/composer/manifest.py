"""``package.json`` patching."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import ManifestMissing, ManifestParseError
from ..utils import load_json, save_json

MANIFEST_NAME = "package.json"


def patch_manifest(project_root: str | Path, project_name: str) -> dict[str, Any]:
    """Set the manifest's ``name`` field to *project_name* and rewrite it.

    Every other key keeps its value and position.

    Returns:
        The patched manifest mapping.

    Raises:
        ManifestMissing: If the project has no ``package.json``.
        ManifestParseError: If the file is not a JSON object.
    """
    path = Path(project_root) / MANIFEST_NAME
    if not path.is_file():
        raise ManifestMissing(path)

    try:
        manifest = load_json(path)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ManifestParseError(path, "file is not valid UTF-8") from exc

    if not isinstance(manifest, dict):
        raise ManifestParseError(
            path, f"expected a JSON object, got {type(manifest).__name__}"
        )

    manifest["name"] = project_name
    save_json(manifest, path)
    return manifest
