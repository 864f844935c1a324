"""Project generation steps.

``ProjectGenerator`` owns the package-manager command table, the command
runner and the template renderer, and exposes one coroutine per generation
step.  Every step takes the project root explicitly; nothing changes the
process working directory.
"""

from __future__ import annotations

from pathlib import Path

from reactforge.config import Config
from reactforge.models import ProjectOptions
from reactforge.utils import run_checked

from .deps import CommandRunner, DependencyPlan, install_dependencies, plan_dependencies
from .tailwind import TailwindConfigurer
from .templates import TemplateRenderer
from .vite_config import write_vite_config


class ProjectGenerator:
    """Creates and configures a Vite + React project.

    Given a ``Config``, provides:
    - the package manager's create-project command
    - the ``vite.config.ts`` rewrite
    - runtime and dev dependency installation
    - Tailwind CSS initialisation
    """

    def __init__(
        self,
        config: Config,
        runner: CommandRunner | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.runner: CommandRunner = runner or run_checked
        self.renderer = renderer or TemplateRenderer()
        self.tailwind = TailwindConfigurer(self.config.commands, self.runner, self.renderer)

    # -- Commands ----------------------------------------------------------

    def create_command(self, project_name: str) -> list[str]:
        """Return the create-project command for *project_name*."""
        return self.config.commands.create_command(project_name, self.config.template)

    # -- Steps -------------------------------------------------------------

    async def create_project(self, options: ProjectOptions) -> Path:
        """Run the create command in the output directory.

        The package manager's own prompts (e.g. overwrite confirmation) reach
        the user because stdio is inherited.

        Returns:
            Path to the generated project root.
        """
        output_dir = self.config.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        await self.runner(self.create_command(options.project_name), output_dir)
        return self.config.project_dir(options.project_name)

    async def write_vite_config(self, project_dir: Path, options: ProjectOptions) -> Path:
        """Overwrite the ``vite.config.ts`` created by the scaffold."""
        return await write_vite_config(project_dir, options.tailwind, self.renderer)

    async def install(self, project_dir: Path, options: ProjectOptions) -> DependencyPlan:
        """Install runtime dependencies, then dev dependencies."""
        plan = plan_dependencies(options)
        await install_dependencies(plan, project_dir, self.config.commands, self.runner)
        return plan

    async def configure_tailwind(self, project_dir: Path) -> list[Path]:
        """Initialise Tailwind and write its config and stylesheet."""
        return await self.tailwind.configure(project_dir)
