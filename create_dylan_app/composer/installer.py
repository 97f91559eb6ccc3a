"""Dependency installation through an external package manager.

The subprocess is an implementation detail behind ``install_dependencies``:
callers hand over specifier lists and a project root and get back either
nothing or an ``InstallFailed`` carrying the exit code and captured stderr.
"""

from __future__ import annotations

import shlex
import shutil
from enum import Enum
from pathlib import Path

from ..errors import InstallFailed
from ..utils import run_command


class PackageManager(str, Enum):
    """Supported Node package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


# (base install command, flag marking dev dependencies)
_INSTALL_COMMANDS: dict[PackageManager, tuple[list[str], str]] = {
    PackageManager.NPM: (["npm", "install"], "--save-dev"),
    PackageManager.YARN: (["yarn", "add"], "--dev"),
    PackageManager.PNPM: (["pnpm", "add"], "--save-dev"),
}


def build_install_command(
    specifiers: list[str],
    *,
    dev: bool = False,
    package_manager: PackageManager = PackageManager.NPM,
) -> list[str]:
    """Argument vector installing *specifiers* with *package_manager*."""
    base, dev_flag = _INSTALL_COMMANDS[package_manager]
    cmd = list(base)
    if dev:
        cmd.append(dev_flag)
    cmd.extend(specifiers)
    return cmd


async def install(
    specifiers: list[str],
    project_root: str | Path,
    *,
    dev: bool = False,
    package_manager: PackageManager = PackageManager.NPM,
    timeout: int = 600,
) -> str:
    """Run one install invocation inside *project_root*.

    Returns:
        Captured stdout of the package manager.

    Raises:
        InstallFailed: On a non-zero exit, a timeout, or a missing executable.
    """
    cmd = build_install_command(specifiers, dev=dev, package_manager=package_manager)
    cmd_str = shlex.join(cmd)

    # npm is a .cmd shim on Windows; exec needs the resolved path.
    executable = shutil.which(cmd[0])
    if executable is None:
        raise InstallFailed(
            127, f"{cmd[0]}: command not found", command=cmd_str
        )
    cmd[0] = executable

    returncode, stdout, stderr = await run_command(
        cmd, cwd=project_root, timeout=timeout
    )
    if returncode != 0:
        raise InstallFailed(returncode, stderr, command=cmd_str)
    return stdout


async def install_dependencies(
    runtime_deps: list[str],
    dev_deps: list[str],
    project_root: str | Path,
    *,
    package_manager: PackageManager = PackageManager.NPM,
    timeout: int = 600,
) -> None:
    """Install runtime, then dev dependencies.  Empty lists are skipped.

    The first failure aborts; the dev install is not attempted after a
    failed runtime install.
    """
    if runtime_deps:
        await install(
            runtime_deps,
            project_root,
            dev=False,
            package_manager=package_manager,
            timeout=timeout,
        )
    if dev_deps:
        await install(
            dev_deps,
            project_root,
            dev=True,
            package_manager=package_manager,
            timeout=timeout,
        )
