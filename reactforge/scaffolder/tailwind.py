"""Tailwind CSS setup for the generated project.

Runs ``tailwindcss init -p`` through the package manager, then overwrites the
config and stylesheet entry point with fixed content.  Neither file depends on
the project name or on the other features.
"""

from __future__ import annotations

from pathlib import Path

from reactforge.config import PackageManagerConfig

from .deps import CommandRunner
from .templates import TemplateRenderer

TAILWIND_CONFIG_FILENAME = "tailwind.config.js"
STYLESHEET_PATH = Path("src") / "index.css"

CONTENT_GLOBS: tuple[str, ...] = ("./index.html", "./src/**/*.{js,ts,jsx,tsx}")

INIT_ARGS: tuple[str, ...] = ("tailwindcss", "init", "-p")


def tailwind_config_content(renderer: TemplateRenderer | None = None) -> str:
    """Return the content of ``tailwind.config.js``."""
    renderer = renderer or TemplateRenderer()
    return renderer.render("tailwind.config.js.j2", {"content": CONTENT_GLOBS})


def stylesheet_content(renderer: TemplateRenderer | None = None) -> str:
    """Return the content of ``src/index.css``."""
    renderer = renderer or TemplateRenderer()
    return renderer.render("index.css.j2")


class TailwindConfigurer:
    """Initialises Tailwind and writes its two fixed files."""

    def __init__(
        self,
        commands: PackageManagerConfig,
        runner: CommandRunner,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.commands = commands
        self.runner = runner
        self.renderer = renderer or TemplateRenderer()

    def init_command(self) -> list[str]:
        return self.commands.exec_command(*INIT_ARGS)

    async def configure(self, project_dir: Path) -> list[Path]:
        """Run the initializer and write both files inside *project_dir*.

        Returns:
            The written paths, config file first.
        """
        await self.runner(self.init_command(), project_dir)

        config_path = await self.renderer.write(
            project_dir / TAILWIND_CONFIG_FILENAME,
            tailwind_config_content(self.renderer),
        )
        css_path = await self.renderer.write(
            project_dir / STYLESHEET_PATH,
            stylesheet_content(self.renderer),
        )
        return [config_path, css_path]
