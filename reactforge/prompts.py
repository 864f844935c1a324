"""Interactive prompts for collecting project options.

Two questions are asked: a free-text project name (blank input yields the
default) and a multi-select checklist of optional features where zero
selections are allowed.  Cancellation is not handled here; it propagates to
the caller, which aborts the run.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import IO, Optional

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from reactforge.config import Config
from reactforge.models import Feature, ProjectOptions
from reactforge.utils import console as default_console

KeyReader = Callable[[], str]

PROJECT_NAME_QUESTION = "Project name?"
FEATURES_QUESTION = "Select features"

_ENTER_KEYS = {readchar.key.ENTER, readchar.key.CR, readchar.key.LF}
_CANCEL_KEYS = {readchar.key.ESC, readchar.key.CTRL_C}


class PromptCancelled(Exception):
    """Raised when the user dismisses a prompt without answering."""


def ask_project_name(
    default: str,
    console: Optional[Console] = None,
    stream: Optional[IO[str]] = None,
) -> str:
    """Ask for the project name; blank input returns *default*."""
    answer = Prompt.ask(
        PROJECT_NAME_QUESTION,
        default=default,
        console=console or default_console,
        stream=stream,
    )
    return answer.strip() or default


def _render_checklist(options: list[Feature], selected: set[Feature], cursor: int) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", justify="left", width=3)
    table.add_column(style="white", justify="left")

    for i, feature in enumerate(options):
        pointer = "▶" if i == cursor else " "
        mark = "[green]◉[/green]" if feature in selected else "◯"
        label = f"{mark} {feature.display_name}"
        if i == cursor:
            label = f"[cyan]{label}[/cyan]"
        table.add_row(pointer, label)

    table.add_row("", "")
    table.add_row(
        "",
        "[dim]Use ↑/↓ to navigate, Space to toggle, Enter to confirm, Esc to cancel[/dim]",
    )
    return Panel(
        table,
        title=f"[bold]{FEATURES_QUESTION}[/bold]",
        border_style="cyan",
        padding=(1, 2),
    )


def select_features(
    console: Optional[Console] = None,
    read_key: KeyReader = readchar.readkey,
) -> list[Feature]:
    """Show the feature checklist and return the chosen features.

    The result keeps the fixed router, query, tailwind order regardless of
    the order in which items were toggled.

    Raises:
        PromptCancelled: If the user presses Esc or Ctrl+C.
    """
    console = console or default_console
    options = list(Feature)
    selected: set[Feature] = set()
    cursor = 0

    with Live(
        _render_checklist(options, selected, cursor),
        console=console,
        transient=True,
        auto_refresh=False,
    ) as live:
        while True:
            try:
                key = read_key()
            except KeyboardInterrupt:
                raise PromptCancelled("Feature selection cancelled") from None

            if key in _CANCEL_KEYS:
                raise PromptCancelled("Feature selection cancelled")
            if key in _ENTER_KEYS:
                break
            if key == readchar.key.UP:
                cursor = (cursor - 1) % len(options)
            elif key == readchar.key.DOWN:
                cursor = (cursor + 1) % len(options)
            elif key == readchar.key.SPACE:
                selected ^= {options[cursor]}

            live.update(_render_checklist(options, selected, cursor), refresh=True)

    chosen = [f for f in options if f in selected]
    summary = ", ".join(f.display_name for f in chosen) or "none"
    console.print(f"[bold]{FEATURES_QUESTION}:[/bold] {summary}")
    return chosen


def collect_options(
    config: Config,
    name: Optional[str] = None,
    features: Optional[list[Feature]] = None,
    console: Optional[Console] = None,
    read_key: KeyReader = readchar.readkey,
    stream: Optional[IO[str]] = None,
) -> ProjectOptions:
    """Ask for whatever was not supplied and return normalised options.

    A ``name`` or ``features`` value passed in (e.g. from command-line flags)
    skips its prompt.
    """
    if name is None:
        name = ask_project_name(config.default_project_name, console=console, stream=stream)
    if features is None:
        features = select_features(console=console, read_key=read_key)
    return ProjectOptions.from_answers(name, features, default_name=config.default_project_name)
