"""Exception hierarchy for the project scaffolder.

Every failure the pipeline can raise derives from ``ScaffoldError`` so the CLI
can catch a single type and map it to an exit code.  Name validation errors
are the only recoverable ones; the prompt layer re-asks instead of exiting.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


# ---------------------------------------------------------------------------
# Name validation (recovered by re-prompting)
# ---------------------------------------------------------------------------


class InvalidProjectName(ScaffoldError):
    """Raised when a project name cannot be used."""


class EmptyName(InvalidProjectName):
    """Raised when the project name is blank."""

    def __init__(self) -> None:
        super().__init__("Please enter a name")


class NameConflict(InvalidProjectName):
    """Raised when the target path already holds something non-empty."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(
            f'Cannot use name "{name}"; this directory already exists and is not empty'
        )


# ---------------------------------------------------------------------------
# Template / manifest corruption
# ---------------------------------------------------------------------------


class TemplateMissing(ScaffoldError):
    """Raised when a bundled template directory cannot be found."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Template directory not found: {path}")


class ManifestMissing(ScaffoldError):
    """Raised when no ``package.json`` exists after materialization."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Manifest not found: {path}")


class ManifestParseError(ScaffoldError):
    """Raised when ``package.json`` is not a JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse manifest {path}: {reason}")


# ---------------------------------------------------------------------------
# Dependency installation
# ---------------------------------------------------------------------------


class InstallFailed(ScaffoldError):
    """Raised when the package manager exits with a non-zero status."""

    def __init__(self, exit_code: int, stderr: str = "", command: str = "") -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        self.command = command
        message = f"Dependency installation failed (exit {exit_code})"
        if command:
            message += f": {command}"
        super().__init__(message)
