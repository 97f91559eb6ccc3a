"""Shared pytest fixtures for the create-dylan-app test suite.

Provides reusable fixtures for:
- A small throwaway template content tree
- A template catalog and config pointing at that tree
- Sample selections
- Mock subprocess helpers (the package manager is never really invoked)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from create_dylan_app.composer import (
    Language,
    Selection,
    StyleLibrary,
    TemplateCatalog,
)
from create_dylan_app.config import Config


# ---------------------------------------------------------------------------
# Template content
# ---------------------------------------------------------------------------

SAMPLE_MANIFEST: dict[str, Any] = {
    "name": "app",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {"dev": "vite", "build": "vite build"},
}


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Minimal content tree with the same layer names as the bundled one.

    ``src/index.css`` and ``vite.config.js`` exist in more than one layer so
    overwrite order is observable.
    """
    root = tmp_path / "content"

    _write(root / "common" / "package.json", json.dumps(SAMPLE_MANIFEST, indent=2))
    _write(root / "common" / "README.md.j2", "# {{ project_name }}\n")

    _write(root / "javascript" / "vite.config.js", "// javascript vite config\n")
    _write(root / "javascript" / "src" / "main.jsx", "// javascript entry\n")
    _write(root / "javascript" / "src" / "index.css", "/* javascript css */\n")

    _write(root / "typescript" / "vite.config.ts", "// typescript vite config\n")
    _write(root / "typescript" / "src" / "main.tsx", "// typescript entry\n")
    _write(root / "typescript" / "src" / "index.css", "/* typescript css */\n")

    _write(root / "tailwindcss" / "vite.config.js", "// tailwind vite config\n")
    _write(root / "tailwindcss" / "tailwind.config.js", "export default {};\n")
    _write(root / "tailwindcss" / "src" / "index.css", "@tailwind base;\n")

    return root


@pytest.fixture
def catalog(content_dir: Path) -> TemplateCatalog:
    """Template catalog rooted at the throwaway content tree."""
    return TemplateCatalog(content_dir)


@pytest.fixture
def config(content_dir: Path) -> Config:
    """Config pointing at the throwaway content tree, screen clearing off."""
    return Config(content_dir=content_dir, clear_screen=False)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory the new project is created in (the user's cwd)."""
    ws = tmp_path / "workspace"
    ws.mkdir()
    return ws


# ---------------------------------------------------------------------------
# Selections
# ---------------------------------------------------------------------------

@pytest.fixture
def js_selection() -> Selection:
    """JavaScript project with no style library."""
    return Selection(
        project_name="my-app",
        language=Language.JAVASCRIPT,
        style_library=StyleLibrary.NONE,
    )


@pytest.fixture
def ts_tailwind_selection() -> Selection:
    """TypeScript project styled with Tailwind CSS."""
    return Selection(
        project_name="my-app",
        language=Language.TYPESCRIPT,
        style_library=StyleLibrary.TAILWINDCSS,
    )


# ---------------------------------------------------------------------------
# Mock Subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


@pytest.fixture
def npm_on_path():
    """Pretend every package manager executable is installed."""
    with patch(
        "create_dylan_app.composer.installer.shutil.which",
        side_effect=lambda name: f"/usr/bin/{name}",
    ) as which:
        yield which
