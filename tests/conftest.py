"""Shared pytest fixtures for the reactforge test suite.

Provides reusable fixtures for:
- Temporary output directories
- A recording command runner that fakes the package manager
- Isolation from REACTFORGE_* environment variables
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Optional

import pytest

from reactforge.utils import CommandError


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure no REACTFORGE_* variable leaks into Config.from_env()."""
    for name in (
        "REACTFORGE_PACKAGE_MANAGER",
        "REACTFORGE_TEMPLATE",
        "REACTFORGE_DEFAULT_NAME",
        "REACTFORGE_OUTPUT_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory the generated project folder is created in."""
    out = tmp_path / "projects"
    out.mkdir()
    return out


# ---------------------------------------------------------------------------
# Fake package manager
# ---------------------------------------------------------------------------

PLACEHOLDER_VITE_CONFIG = "// generated by create-vite\n"
PLACEHOLDER_CSS = ":root { color: black; }\n"


class RecordingRunner:
    """Async command runner that records calls instead of spawning processes.

    A ``create`` command materialises a minimal vite project (a placeholder
    ``vite.config.ts`` and ``src/index.css``) in the working directory, the
    way ``create-vite`` would.  When *fail_on* appears among a command's
    arguments the runner raises ``CommandError`` without side effects.
    """

    def __init__(self, fail_on: Optional[str] = None, returncode: int = 1) -> None:
        self.fail_on = fail_on
        self.returncode = returncode
        self.calls: list[tuple[list[str], Path]] = []

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.calls]

    async def __call__(self, cmd: list[str], cwd: Path) -> None:
        self.calls.append((list(cmd), Path(cwd)))
        if self.fail_on is not None and self.fail_on in cmd:
            raise CommandError(cmd, self.returncode)
        if "create" in cmd:
            name = cmd[cmd.index("create") + 2]
            project = Path(cwd) / name
            (project / "src").mkdir(parents=True, exist_ok=True)
            (project / "vite.config.ts").write_text(PLACEHOLDER_VITE_CONFIG, encoding="utf-8")
            (project / "src" / "index.css").write_text(PLACEHOLDER_CSS, encoding="utf-8")


@pytest.fixture
def make_runner() -> Callable[..., RecordingRunner]:
    """Factory for ``RecordingRunner`` instances."""
    return RecordingRunner


@pytest.fixture
def runner() -> RecordingRunner:
    """A RecordingRunner on which every command succeeds."""
    return RecordingRunner()
