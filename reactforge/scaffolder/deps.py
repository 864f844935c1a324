"""Dependency planning and installation.

The runtime list starts from a fixed base pair and gains one fixed pair per
enabled feature, in router, query, tailwind order.  The dev list never
changes.  Installation issues the runtime install strictly before the dev
install.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path

from reactforge.config import PackageManagerConfig
from reactforge.models import Feature, ProjectOptions

CommandRunner = Callable[[list[str], Path], Awaitable[None]]

BASE_RUNTIME_DEPENDENCIES: tuple[str, ...] = ("react-router-dom", "@types/react-router-dom")
BASE_DEV_DEPENDENCIES: tuple[str, ...] = ("prettier", "eslint")

FEATURE_DEPENDENCIES: dict[Feature, tuple[str, str]] = {
    Feature.ROUTER: ("@tanstack/react-router", "@tanstack/react-router-devtools"),
    Feature.QUERY: ("@tanstack/react-query", "@tanstack/react-query-devtools"),
    Feature.TAILWIND: ("tailwindcss", "@tailwindcss/vite"),
}


@dataclass(frozen=True)
class DependencyPlan:
    """Packages to install, split by dependency kind."""

    runtime: list[str] = field(default_factory=list)
    dev: list[str] = field(default_factory=list)


def plan_dependencies(options: ProjectOptions) -> DependencyPlan:
    """Compute the runtime and dev package lists for *options*."""
    runtime = list(BASE_RUNTIME_DEPENDENCIES)
    for feature in options.features:
        runtime.extend(FEATURE_DEPENDENCIES[feature])
    return DependencyPlan(runtime=runtime, dev=list(BASE_DEV_DEPENDENCIES))


def install_commands(plan: DependencyPlan, commands: PackageManagerConfig) -> list[list[str]]:
    """Return the install commands for *plan*, runtime first."""
    return [
        commands.add_command(plan.runtime),
        commands.add_command(plan.dev, dev=True),
    ]


async def install_dependencies(
    plan: DependencyPlan,
    project_dir: Path,
    commands: PackageManagerConfig,
    runner: CommandRunner,
) -> list[list[str]]:
    """Run the install commands inside *project_dir*.

    The first failing command raises and the remaining install is never
    issued.  Returns the commands that were run.
    """
    executed: list[list[str]] = []
    for cmd in install_commands(plan, commands):
        await runner(cmd, project_dir)
        executed.append(cmd)
    return executed
