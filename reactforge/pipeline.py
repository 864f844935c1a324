"""reactforge pipeline orchestrator.

Implements the five-stage scaffolding workflow:

Stage 1: PROMPT     -- Collect the project name and optional features.
Stage 2: SCAFFOLD   -- Create the Vite + React + TypeScript project.
Stage 3: CONFIGURE  -- Rewrite vite.config.ts.
Stage 4: INSTALL    -- Install runtime, then dev dependencies.
Stage 5: TAILWIND   -- Initialise Tailwind CSS (only when selected).

Stages run strictly in order.  Each returns a ``StageResult``; the first
failed result stops the run and later stages never execute.

Usage::

    reactforge
    reactforge --name shop --features router,tailwind
    python -m reactforge --package-manager npm -o ./projects
"""

from __future__ import annotations

import asyncio
import sys
import time
import traceback
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from rich.panel import Panel

from reactforge.config import PACKAGE_MANAGERS, Config
from reactforge.models import (
    PipelineResult,
    ProjectOptions,
    Stage,
    StageResult,
    StageStatus,
    parse_feature_list,
)
from reactforge.prompts import PromptCancelled, collect_options
from reactforge.scaffolder import ProjectGenerator
from reactforge.scaffolder.deps import CommandRunner
from reactforge.scaffolder.vite_config import DEV_SERVER_PORT
from reactforge.utils import (
    CommandError,
    check_port_available,
    console,
    format_duration,
    print_error,
    print_info,
    print_stage_header,
    print_success,
    print_summary_table,
    print_warning,
)

if TYPE_CHECKING:
    import argparse

# Failures a stage reports as a result instead of raising.
STAGE_ERRORS: tuple[type[BaseException], ...] = (CommandError, OSError)


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Drives stages 2-5 for one set of options.

    The project root is computed once from the config and the options and
    handed to every stage explicitly.

    Attributes:
        config: Run configuration.
        options: The user's answers.
        project_dir: Root of the generated project.
        generator: Performs the actual commands and file writes.
    """

    def __init__(
        self,
        config: Config,
        options: ProjectOptions,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config
        self.options = options
        self.project_dir = config.project_dir(options.project_name)
        self.generator = ProjectGenerator(config, runner=runner)

    _STAGE_METHODS: dict[Stage, str] = {
        Stage.SCAFFOLD: "stage_scaffold",
        Stage.CONFIGURE: "stage_configure",
        Stage.INSTALL: "stage_install",
        Stage.TAILWIND: "stage_tailwind",
    }

    async def run(self) -> PipelineResult:
        """Execute every stage in order, stopping at the first failure."""
        result = PipelineResult(options=self.options, project_dir=self.project_dir)

        for stage, method_name in self._STAGE_METHODS.items():
            print_stage_header(stage)
            stage_result: StageResult = await getattr(self, method_name)()
            result.stages.append(stage_result)

            if stage_result.status == StageStatus.FAILED:
                break
            if stage_result.status == StageStatus.SKIPPED:
                console.print(f"  [dim]{stage_result.message}[/dim]")
            else:
                print_success(
                    f"Stage {stage.value} ({stage.label}) completed in "
                    f"{format_duration(stage_result.duration)}"
                )

        return result

    async def _execute(
        self, stage: Stage, step: Callable[[], Awaitable[str]]
    ) -> StageResult:
        """Run *step* and turn its outcome into a ``StageResult``."""
        started = time.monotonic()
        try:
            message = await step()
        except STAGE_ERRORS as exc:
            return StageResult.failed(stage, str(exc), duration=time.monotonic() - started)
        return StageResult.success(stage, message, duration=time.monotonic() - started)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    async def stage_scaffold(self) -> StageResult:
        async def step() -> str:
            project_dir = await self.generator.create_project(self.options)
            return f"Created {project_dir}"

        return await self._execute(Stage.SCAFFOLD, step)

    async def stage_configure(self) -> StageResult:
        async def step() -> str:
            path = await self.generator.write_vite_config(self.project_dir, self.options)
            return f"Wrote {path.name}"

        return await self._execute(Stage.CONFIGURE, step)

    async def stage_install(self) -> StageResult:
        async def step() -> str:
            plan = await self.generator.install(self.project_dir, self.options)
            return f"Installed {len(plan.runtime)} runtime and {len(plan.dev)} dev packages"

        return await self._execute(Stage.INSTALL, step)

    async def stage_tailwind(self) -> StageResult:
        if not self.options.tailwind:
            return StageResult.skipped(Stage.TAILWIND, "Tailwind CSS not selected -- skipping.")

        async def step() -> str:
            paths = await self.generator.configure_tailwind(self.project_dir)
            return "Wrote " + ", ".join(str(p.relative_to(self.project_dir)) for p in paths)

        return await self._execute(Stage.TAILWIND, step)


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def next_steps(config: Config, options: ProjectOptions) -> list[str]:
    """Commands the user runs to start the generated project.

    The ``cd`` target is relative to the current directory when the project
    lies beneath it and absolute otherwise.
    """
    project_dir = config.project_dir(options.project_name).resolve()
    try:
        target = project_dir.relative_to(Path.cwd().resolve())
    except ValueError:
        target = project_dir
    return [
        f"cd {target}",
        " ".join(config.commands.run_dev),
    ]


def _print_summary(config: Config, result: PipelineResult) -> None:
    rows = {
        "Project": result.options.project_name,
        "Location": str(result.project_dir.resolve()),
        "Package manager": config.package_manager,
        "Features": ", ".join(f.display_name for f in result.options.features) or "none",
    }
    for stage_result in result.stages:
        status = stage_result.status.value
        if stage_result.status == StageStatus.SUCCESS:
            status = f"{status} ({format_duration(stage_result.duration)})"
        rows[f"Stage {stage_result.stage.value} {stage_result.stage.label}"] = status
    print_summary_table(rows, title="reactforge")


async def _warn_if_dev_port_busy() -> None:
    if not await check_port_available(DEV_SERVER_PORT):
        print_warning(
            f"Port {DEV_SERVER_PORT} is already in use -- the dev server uses "
            f"strictPort and will refuse to start until it is free."
        )


def report_failure(failure: StageResult) -> None:
    """Print the failed stage and its diagnostic."""
    print_error(f"Stage {failure.stage.value} ({failure.stage.label}) failed: {failure.error}")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    import argparse

    parser = argparse.ArgumentParser(
        prog="reactforge",
        description="reactforge -- scaffold a Vite + React + TypeScript project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  reactforge\n"
            "  reactforge --name shop --features router,tailwind\n"
            "  reactforge --name demo --features '' --package-manager npm\n"
        ),
    )
    parser.add_argument(
        "--name", "-n",
        default=None,
        help="Project name (prompted for when omitted)",
    )
    parser.add_argument(
        "--features", "-f",
        default=None,
        help="Comma-separated features: router, query, tailwind "
             "(prompted for when omitted; pass '' for none)",
    )
    parser.add_argument(
        "--package-manager", "-p",
        choices=sorted(PACKAGE_MANAGERS),
        default=None,
        help="Package manager to drive (default: pnpm)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: .)",
    )
    return parser


def run(argv: Optional[list[str]] = None, runner: CommandRunner | None = None) -> int:
    """Run the whole workflow and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config.from_env()
    if args.package_manager:
        config.package_manager = args.package_manager
    if args.output:
        config.output_dir = Path(args.output)

    features = None
    if args.features is not None:
        try:
            features = parse_feature_list(args.features)
        except ValueError as exc:
            parser.error(str(exc))

    # Stage 1: PROMPT
    started = time.monotonic()
    try:
        options = collect_options(config, name=args.name, features=features)
    except (PromptCancelled, KeyboardInterrupt, EOFError) as exc:
        report_failure(
            StageResult.failed(
                Stage.PROMPT,
                str(exc) or type(exc).__name__,
                duration=time.monotonic() - started,
            )
        )
        return 1

    print_info("Creating React project...")

    pipeline = Pipeline(config, options, runner=runner)
    result = asyncio.run(pipeline.run())

    failure = result.failed_stage
    if failure is not None:
        report_failure(failure)
        return 1

    _print_summary(config, result)
    asyncio.run(_warn_if_dev_port_busy())
    print_success("Project setup complete!")
    console.print(
        Panel(
            "\n".join(f"- {step}" for step in next_steps(config, options)),
            title="[bold yellow]Next steps[/bold yellow]",
            border_style="yellow",
        )
    )
    return 0


def main() -> None:
    """CLI entry point for ``reactforge`` and ``python -m reactforge``."""
    try:
        code = run()
    except KeyboardInterrupt:
        print_error("Aborted.")
        sys.exit(130)
    except Exception as exc:
        print_error(f"Error: {exc}")
        console.print(traceback.format_exc(), style="dim", markup=False)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
