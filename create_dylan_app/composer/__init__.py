"""Project composer -- turns prompt answers into a ready React + Vite project.

Resolves the ordered template layers and dependency lists for a selection,
copies the layers into the project root, patches ``package.json`` and
installs dependencies.

Quick usage::

    from create_dylan_app.composer import (
        Language, Selection, StyleLibrary, TemplateCatalog, resolve_config,
    )

    selection = Selection(
        project_name="my-app",
        language=Language.TYPESCRIPT,
        style_library=StyleLibrary.TAILWINDCSS,
    )
    plan = resolve_config(selection, TemplateCatalog(), cwd=Path.cwd())
"""

from .catalog import TemplateCatalog
from .installer import PackageManager, install_dependencies
from .manifest import patch_manifest
from .materializer import build_context, materialize
from .models import (
    ComposedPlan,
    DependencySet,
    Language,
    Selection,
    StyleLibrary,
    TemplateConfig,
)
from .resolver import resolve_config, validate_name
from .templates import TemplateRenderer

__all__ = [
    "ComposedPlan",
    "DependencySet",
    "Language",
    "PackageManager",
    "Selection",
    "StyleLibrary",
    "TemplateCatalog",
    "TemplateConfig",
    "TemplateRenderer",
    "build_context",
    "install_dependencies",
    "materialize",
    "patch_manifest",
    "resolve_config",
    "validate_name",
]
