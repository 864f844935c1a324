"""reactforge scaffolder -- creates and configures a Vite + React project.

Quick usage::

    from reactforge.config import Config
    from reactforge.models import ProjectOptions
    from reactforge.scaffolder import ProjectGenerator

    generator = ProjectGenerator(Config())
    options = ProjectOptions(project_name="demo", tailwind=True)
    project_dir = await generator.create_project(options)
    await generator.write_vite_config(project_dir, options)
"""

from reactforge.scaffolder.deps import DependencyPlan, plan_dependencies
from reactforge.scaffolder.generator import ProjectGenerator
from reactforge.scaffolder.tailwind import TailwindConfigurer
from reactforge.scaffolder.templates import TemplateRenderer
from reactforge.scaffolder.vite_config import generate_vite_config

__all__ = [
    "DependencyPlan",
    "ProjectGenerator",
    "TailwindConfigurer",
    "TemplateRenderer",
    "generate_vite_config",
    "plan_dependencies",
]
