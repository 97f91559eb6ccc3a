"""Static template configuration tables.

Maps every ``Language`` and ``StyleLibrary`` variant to its ``TemplateConfig``.
Content paths are resolved against an explicit content root so tests (or a
``CDA_CONTENT_DIR`` override) can point the composer at a different tree.
"""

from __future__ import annotations

from pathlib import Path

from .models import DependencySet, Language, StyleLibrary, TemplateConfig

DEFAULT_CONTENT_DIR = Path(__file__).resolve().parent.parent / "content"

COMMON_TEMPLATE = "common"

# ---------------------------------------------------------------------------
# Raw tables (relative content directories, package specifiers)
# ---------------------------------------------------------------------------

_REACT_RUNTIME: list[str] = ["react@18", "react-dom@18"]
_VITE_DEV: list[str] = ["vite@4", "@vitejs/plugin-react@4"]

LANGUAGE_TABLE: dict[Language, tuple[str, DependencySet]] = {
    Language.JAVASCRIPT: (
        "javascript",
        DependencySet(runtime=_REACT_RUNTIME, dev=_VITE_DEV),
    ),
    Language.TYPESCRIPT: (
        "typescript",
        DependencySet(
            runtime=_REACT_RUNTIME,
            dev=[
                *_VITE_DEV,
                "@types/react@18",
                "@types/react-dom@18",
                "@types/node@18",
            ],
        ),
    ),
}

STYLE_TABLE: dict[StyleLibrary, tuple[str | None, DependencySet]] = {
    StyleLibrary.NONE: (None, DependencySet()),
    StyleLibrary.MUI: (
        None,
        DependencySet(dev=["@mui/material@5", "@emotion/react@11", "@emotion/styled@11"]),
    ),
    StyleLibrary.TAILWINDCSS: (
        "tailwindcss",
        DependencySet(dev=["tailwindcss@3", "postcss@8", "autoprefixer@10"]),
    ),
    StyleLibrary.BOOTSTRAP: (None, DependencySet(dev=["bootstrap@5"])),
}


# ---------------------------------------------------------------------------
# TemplateCatalog
# ---------------------------------------------------------------------------


class TemplateCatalog:
    """Resolved template configuration rooted at a content directory."""

    def __init__(self, content_dir: str | Path | None = None) -> None:
        self.content_dir = Path(content_dir) if content_dir else DEFAULT_CONTENT_DIR
        self.languages: dict[Language, TemplateConfig] = {
            language: TemplateConfig(
                content_path=self.content_dir / subdir, dependencies=deps
            )
            for language, (subdir, deps) in LANGUAGE_TABLE.items()
        }
        self.styles: dict[StyleLibrary, TemplateConfig] = {
            style: TemplateConfig(
                content_path=self.content_dir / subdir if subdir else None,
                dependencies=deps,
            )
            for style, (subdir, deps) in STYLE_TABLE.items()
        }

    @property
    def common_path(self) -> Path:
        """Template tree copied first for every project."""
        return self.content_dir / COMMON_TEMPLATE

    def language(self, language: Language) -> TemplateConfig:
        return self.languages[language]

    def style(self, style_library: StyleLibrary) -> TemplateConfig:
        return self.styles[style_library]
