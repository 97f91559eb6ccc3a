"""create-dylan-app configuration.

Typed settings for a scaffolding run.  Pydantic v2 validates them at
construction time; ``Config.from_env`` lets every knob be overridden from the
environment without adding CLI flags.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .composer.catalog import DEFAULT_CONTENT_DIR, TemplateCatalog
from .composer.installer import PackageManager

_FALSY = {"0", "false", "no", "off"}


class Config(BaseModel):
    """Global configuration for one scaffolding run.

    Created once by the CLI entry point and passed to ``ProjectPipeline``.
    """

    content_dir: Path = Field(
        default=DEFAULT_CONTENT_DIR, description="Root of the template content trees"
    )
    package_manager: PackageManager = Field(default=PackageManager.NPM)
    install_timeout: int = Field(
        default=600, ge=30, description="Per-invocation install timeout in seconds"
    )
    clear_screen: bool = Field(
        default=True, description="Clear the terminal before printing the banner"
    )

    @property
    def catalog(self) -> TemplateCatalog:
        """Template tables rooted at ``content_dir``."""
        return TemplateCatalog(self.content_dir)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CDA_CONTENT_DIR, CDA_PACKAGE_MANAGER, CDA_INSTALL_TIMEOUT,
            CDA_CLEAR_SCREEN.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CDA_CONTENT_DIR"):
            kwargs["content_dir"] = Path(os.environ["CDA_CONTENT_DIR"])
        if os.environ.get("CDA_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CDA_PACKAGE_MANAGER"].strip().lower()
        if os.environ.get("CDA_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["CDA_INSTALL_TIMEOUT"])
        if os.environ.get("CDA_CLEAR_SCREEN"):
            kwargs["clear_screen"] = (
                os.environ["CDA_CLEAR_SCREEN"].strip().lower() not in _FALSY
            )
        return cls(**kwargs)
