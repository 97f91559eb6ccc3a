"""create-dylan-app pipeline orchestrator.

Implements the linear scaffolding pipeline:

Step 1: RESOLVE      -- Look up template layers and dependency lists.
Step 2: MATERIALIZE  -- Copy the layers into the new project directory.
Step 3: MANIFEST     -- Write the chosen name into ``package.json``.
Step 4: INSTALL      -- Install runtime, then dev dependencies.

A failing step stops the run.  Nothing is rolled back: a partially created
project directory stays on disk.

Usage::

    create-dylan-app
    python -m create_dylan_app
"""

from __future__ import annotations

import asyncio
import sys
import time
from pathlib import Path
from typing import Any

from rich.panel import Panel

from .composer import (
    Selection,
    TemplateRenderer,
    build_context,
    install_dependencies,
    materialize,
    patch_manifest,
    resolve_config,
)
from .config import Config
from .errors import InstallFailed, ScaffoldError
from .prompts import collect_selection
from .utils import (
    STEP_NAMES,
    console,
    create_progress,
    format_duration,
    print_banner,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class ProjectPipeline:
    """Drives the four scaffolding steps for one ``Selection``.

    Attributes:
        config: Run configuration.
        renderer: Jinja2 renderer rooted at the configured content directory.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self.renderer = TemplateRenderer(config.content_dir)

    async def run(self, selection: Selection, cwd: str | Path) -> dict[str, Any]:
        """Scaffold *selection* under *cwd*.

        Returns:
            A result dictionary with ``project_root``, ``files_written``,
            ``runtime_deps``, ``dev_deps``, ``elapsed`` and ``success``.

        Raises:
            ScaffoldError: From whichever step failed.
        """
        start = time.monotonic()
        console.print("\n[bold]Setting up project...[/bold]")

        print_step_header(1, STEP_NAMES[1])
        plan = resolve_config(selection, self.config.catalog, cwd)
        for path in plan.content_paths:
            console.print(f"  [green]+[/green] template: {path.name}")

        print_step_header(2, STEP_NAMES[2])
        context = build_context(selection, self.config.package_manager.value)
        written = await materialize(plan, plan.project_root, self.renderer, context)
        console.print(f"  [green]+[/green] {len(written)} file(s) written to {plan.project_root}")

        print_step_header(3, STEP_NAMES[3])
        patch_manifest(plan.project_root, selection.project_name)
        console.print(f'  [green]+[/green] package.json name set to "{selection.project_name}"')

        print_step_header(4, STEP_NAMES[4])
        pm = self.config.package_manager.value
        with create_progress() as progress:
            progress.add_task(f"Installing dependencies with {pm}...", total=None)
            await install_dependencies(
                plan.runtime_deps,
                plan.dev_deps,
                plan.project_root,
                package_manager=self.config.package_manager,
                timeout=self.config.install_timeout,
            )
        console.print(
            f"  [green]+[/green] {len(plan.runtime_deps)} runtime, "
            f"{len(plan.dev_deps)} dev dependencies installed"
        )

        return {
            "project_root": plan.project_root,
            "files_written": written,
            "runtime_deps": plan.runtime_deps,
            "dev_deps": plan.dev_deps,
            "elapsed": time.monotonic() - start,
            "success": True,
        }

    def print_final_summary(self, selection: Selection, result: dict[str, Any]) -> None:
        """Print the outcome table and the commands to start developing."""
        print_summary_table(
            {
                "Project": selection.project_name,
                "Location": str(result["project_root"]),
                "Language": selection.language.label,
                "Style library": selection.style_library.label,
                "Dependencies": ", ".join(result["runtime_deps"]),
                "Dev dependencies": ", ".join(result["dev_deps"]),
                "Elapsed": format_duration(result["elapsed"]),
            },
            title="Project created",
        )
        pm = self.config.package_manager.value
        console.print(
            Panel(
                f"cd {selection.project_name}\n{pm} run dev",
                title="[bold]Next steps[/bold]",
                border_style="bright_cyan",
                expand=False,
            )
        )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def report_failure(exc: ScaffoldError) -> None:
    """Print *exc*, including any captured installer output verbatim."""
    print_error(f"Error: {exc}")
    if isinstance(exc, InstallFailed) and exc.stderr:
        console.print(exc.stderr, markup=False, highlight=False)


def run(config: Config, cwd: Path) -> int:
    """Prompt, scaffold and report.  Returns the process exit code."""
    print_banner(clear=config.clear_screen)

    try:
        selection = collect_selection(cwd)
        pipeline = ProjectPipeline(config)
        result = asyncio.run(pipeline.run(selection, cwd))
    except (KeyboardInterrupt, EOFError):
        print_error("\nAborted.")
        return EXIT_INTERRUPTED
    except ScaffoldError as exc:
        report_failure(exc)
        return EXIT_FAILURE

    pipeline.print_final_summary(selection, result)
    print_success("Done!")
    return EXIT_OK


def main() -> None:
    """CLI entry point for ``create-dylan-app``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="create-dylan-app",
        description="Interactively scaffold a React + Vite project.",
        epilog=(
            "Environment:\n"
            "  CDA_PACKAGE_MANAGER  npm, yarn or pnpm (default: npm)\n"
            "  CDA_INSTALL_TIMEOUT  seconds per install invocation (default: 600)\n"
            "  CDA_CONTENT_DIR      alternative template content root\n"
            "  CDA_CLEAR_SCREEN     set to 0 to keep the terminal contents\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.parse_args()

    config = Config.from_env()
    sys.exit(run(config, Path.cwd()))


if __name__ == "__main__":
    main()
