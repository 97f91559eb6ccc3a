"""Shared utility functions for create-dylan-app.

Provides async command execution, JSON I/O, file-system helpers and
Rich-based terminal reporting.  All user-facing output goes through the
module-level ``console`` so tests can capture or silence it in one place.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 120,
) -> tuple[int, str, str]:
    """Run *cmd* as a child process and capture its output.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A timeout yields a
        return code of ``-1`` with the reason in *stderr*.

    Raises:
        FileNotFoundError: If the executable does not exist.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return -1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}"

    stdout_str = stdout_bytes.decode("utf-8", errors="replace").strip()
    stderr_str = stderr_bytes.decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON with a trailing newline.

    Parent directories are created automatically.  Key order is preserved.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False)
    file_path.write_text(content + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def is_directory_empty(path: str | Path) -> bool:
    """Return ``True`` if *path* is a directory with no entries."""
    return not any(Path(path).iterdir())


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


BANNER: tuple[str, ...] = (
    "    ___       ___       ___   ",
    "   /\\  \\     /\\  \\     /\\  \\  ",
    "  /::\\  \\   /::\\  \\   /::\\  \\ ",
    " /:/\\:\\__\\ /:/\\:\\__\\ /::\\:\\__\\",
    " \\:\\ \\/__/ \\:\\/:/  / \\/\\::/  /",
    "  \\:\\__\\    \\::/  /    /:/  / ",
    "   \\/__/     \\/__/     \\/__/  ",
)

STEP_NAMES: dict[int, str] = {
    1: "RESOLVE",
    2: "MATERIALIZE",
    3: "MANIFEST",
    4: "INSTALL",
}

STEP_COLORS: dict[int, str] = {
    1: "bright_cyan",
    2: "bright_green",
    3: "bright_yellow",
    4: "bright_magenta",
}


def print_banner(clear: bool = True) -> None:
    """Optionally clear the terminal, then print the CDA letters."""
    if clear:
        console.clear()
    for line in BANNER:
        console.print(line, style="bold bright_cyan", highlight=False)
    console.print()


def print_step_header(step: int, name: str) -> None:
    """Print a full-width rule announcing a pipeline step."""
    color = STEP_COLORS.get(step, "white")
    console.print()
    console.print(
        Rule(
            f"[bold {color}] Step {step}: {name.upper()} [/bold {color}]",
            style=color,
        )
    )


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def create_progress() -> Progress:
    """Create a transient Rich spinner for long-running steps."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
