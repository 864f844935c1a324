"""Shared utility functions for reactforge.

Provides async command execution, Rich-based console reporting, duration
formatting and a local port probe.  Commands are awaited one at a time by the
pipeline, so every helper here blocks the workflow until the child exits.
"""

from __future__ import annotations

import asyncio
import socket
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from reactforge.models import Stage

console = Console()


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class CommandError(Exception):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, cmd: Sequence[str], returncode: int) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        super().__init__(f"Command failed with exit code {returncode}: {' '.join(self.cmd)}")


# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run a command asynchronously and return its exit code.

    The child inherits the parent's stdin, stdout and stderr, so the user
    sees the package manager's own output and can answer its prompts.

    Args:
        cmd: Executable and arguments.  Nothing goes through a shell.
        cwd: Working directory for the child process.

    Raises:
        FileNotFoundError: If the executable is not on ``PATH``.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


async def run_checked(cmd: list[str], cwd: str | Path | None = None) -> None:
    """Run *cmd* and raise ``CommandError`` on a non-zero exit.

    This is the runner every pipeline stage uses.
    """
    returncode = await run_command(cmd, cwd=cwd)
    if returncode != 0:
        raise CommandError(cmd, returncode)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
        format_duration(3661.0) -> "1h 1m 1s"
    """
    if seconds < 0:
        return "0.0s"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    if hours > 0 or minutes > 0:
        parts.append(f"{int(secs)}s")
    else:
        parts.append(f"{secs:.1f}s")

    return " ".join(parts)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


STAGE_COLORS: dict[Stage, str] = {
    Stage.PROMPT: "bright_cyan",
    Stage.SCAFFOLD: "bright_green",
    Stage.CONFIGURE: "bright_yellow",
    Stage.INSTALL: "bright_magenta",
    Stage.TAILWIND: "bright_blue",
}


def print_stage_header(stage: Stage) -> None:
    """Print a full-width rule announcing a stage, coloured per stage."""
    color = STAGE_COLORS.get(stage, "white")
    console.print()
    console.print(
        Rule(
            f"[bold {color}] Stage {stage.value}: {stage.label} [/bold {color}]",
            style=color,
        )
    )
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_info(message: str) -> None:
    """Print a blue status message."""
    console.print(f"[bold blue]{escape(message)}[/bold blue]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


# ---------------------------------------------------------------------------
# Port helpers
# ---------------------------------------------------------------------------


async def check_port_available(port: int) -> bool:
    """Check whether a TCP port on localhost is free.

    Attempts a ``connect`` to localhost:port.  If the connection is *refused*
    the port is available; if it *succeeds* something is already listening.
    """
    loop = asyncio.get_running_loop()

    def _probe() -> bool:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.settimeout(1)
        try:
            # connect_ex returns 0 on success (port in use), nonzero on failure (port free)
            return sock.connect_ex(("127.0.0.1", port)) != 0
        finally:
            sock.close()

    return await loop.run_in_executor(None, _probe)
