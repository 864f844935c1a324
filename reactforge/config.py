"""reactforge configuration.

Typed configuration for a scaffolding run.  Settings use Pydantic v2 models so
they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

PackageManagerName = Literal["pnpm", "npm", "yarn"]

DEFAULT_PROJECT_NAME = "my-react-app"
DEFAULT_TEMPLATE = "react-ts"


class PackageManagerConfig(BaseModel):
    """Command shapes for one package manager.

    Each field is an argument prefix; the pipeline appends project names,
    package names or flags to it.
    """

    name: str
    create: list[str] = Field(description="Prefix for creating a vite project")
    template_args_prefix: list[str] = Field(
        default_factory=list,
        description="Separator placed before --template (npm needs '--')",
    )
    add: list[str] = Field(description="Prefix for adding dependencies")
    dev_flag: str = Field(default="-D")
    exec: list[str] = Field(description="Prefix for running a locally installed binary")
    run_dev: list[str] = Field(description="Command that starts the dev server")

    def create_command(self, project_name: str, template: str) -> list[str]:
        """Return the create-project command for *project_name*."""
        return [
            *self.create,
            project_name,
            *self.template_args_prefix,
            "--template",
            template,
        ]

    def add_command(self, packages: list[str], dev: bool = False) -> list[str]:
        """Return the install command for *packages*."""
        flags = [self.dev_flag] if dev else []
        return [*self.add, *flags, *packages]

    def exec_command(self, *args: str) -> list[str]:
        """Return a command running a project-local binary."""
        return [*self.exec, *args]


PACKAGE_MANAGERS: dict[str, PackageManagerConfig] = {
    "pnpm": PackageManagerConfig(
        name="pnpm",
        create=["pnpm", "create", "vite"],
        add=["pnpm", "add"],
        exec=["pnpm"],
        run_dev=["pnpm", "dev"],
    ),
    "npm": PackageManagerConfig(
        name="npm",
        create=["npm", "create", "vite@latest"],
        template_args_prefix=["--"],
        add=["npm", "install"],
        exec=["npx"],
        run_dev=["npm", "run", "dev"],
    ),
    "yarn": PackageManagerConfig(
        name="yarn",
        create=["yarn", "create", "vite"],
        add=["yarn", "add"],
        exec=["yarn"],
        run_dev=["yarn", "dev"],
    ),
}


class Config(BaseModel):
    """Global reactforge configuration.

    Created once by the CLI entry point and passed to the prompt collector and
    the pipeline.
    """

    package_manager: PackageManagerName = Field(default="pnpm")
    template: str = Field(default=DEFAULT_TEMPLATE, min_length=1)
    default_project_name: str = Field(default=DEFAULT_PROJECT_NAME, min_length=1)
    output_dir: Path = Field(default=Path("."))

    @property
    def commands(self) -> PackageManagerConfig:
        """Command table for the selected package manager."""
        return PACKAGE_MANAGERS[self.package_manager]

    def project_dir(self, project_name: str) -> Path:
        """Root of the project generated for *project_name*."""
        return self.output_dir / project_name

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            REACTFORGE_PACKAGE_MANAGER, REACTFORGE_TEMPLATE,
            REACTFORGE_DEFAULT_NAME, REACTFORGE_OUTPUT_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("REACTFORGE_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["REACTFORGE_PACKAGE_MANAGER"]
        if os.environ.get("REACTFORGE_TEMPLATE"):
            kwargs["template"] = os.environ["REACTFORGE_TEMPLATE"]
        if os.environ.get("REACTFORGE_DEFAULT_NAME"):
            kwargs["default_project_name"] = os.environ["REACTFORGE_DEFAULT_NAME"]
        if os.environ.get("REACTFORGE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["REACTFORGE_OUTPUT_DIR"])
        return cls(**kwargs)
