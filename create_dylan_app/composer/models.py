"""Typed models for the project composer.

Selections made at the prompt, the static per-language/per-style template
configuration, and the derived plan that drives materialization are all
Pydantic v2 models so they are validated at construction time.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Language(str, Enum):
    """Source language of the generated project."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"

    @property
    def label(self) -> str:
        return _LANGUAGE_LABELS[self]


class StyleLibrary(str, Enum):
    """Optional CSS/UI framework layered onto the base template."""

    NONE = "none"
    MUI = "mui"
    TAILWINDCSS = "tailwindcss"
    BOOTSTRAP = "bootstrap"

    @property
    def label(self) -> str:
        """Display name shown at the prompt."""
        return _STYLE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "StyleLibrary":
        """Parse a prompt display name back into a variant.

        Raises:
            ValueError: If *label* matches no style library.
        """
        for variant, text in _STYLE_LABELS.items():
            if text == label:
                return variant
        raise ValueError(f"Unknown style library: {label!r}")

    @classmethod
    def labels(cls) -> list[str]:
        """All display names in prompt order."""
        return [_STYLE_LABELS[variant] for variant in cls]


_LANGUAGE_LABELS: dict[Language, str] = {
    Language.JAVASCRIPT: "JavaScript",
    Language.TYPESCRIPT: "TypeScript",
}

_STYLE_LABELS: dict[StyleLibrary, str] = {
    StyleLibrary.NONE: "None",
    StyleLibrary.MUI: "MUI",
    StyleLibrary.TAILWINDCSS: "Tailwind CSS",
    StyleLibrary.BOOTSTRAP: "Bootstrap",
}


class DependencySet(BaseModel):
    """Package specifiers grouped by install kind, in install order."""

    model_config = ConfigDict(frozen=True)

    runtime: list[str] = Field(default_factory=list)
    dev: list[str] = Field(default_factory=list)


class TemplateConfig(BaseModel):
    """Template tree and dependencies contributed by one language or style."""

    model_config = ConfigDict(frozen=True)

    content_path: Path | None = Field(
        default=None, description="Directory tree copied into the project, if any"
    )
    dependencies: DependencySet = Field(default_factory=DependencySet)


class Selection(BaseModel):
    """The user's answers."""

    project_name: str
    language: Language = Language.JAVASCRIPT
    style_library: StyleLibrary = StyleLibrary.NONE

    @field_validator("project_name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project_name must not be blank")
        return value


class ComposedPlan(BaseModel):
    """Everything needed to build the project, derived from a ``Selection``."""

    model_config = ConfigDict(frozen=True)

    content_paths: list[Path]
    runtime_deps: list[str]
    dev_deps: list[str]
    project_root: Path
