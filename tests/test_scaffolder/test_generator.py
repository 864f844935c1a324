"""Tests for ProjectGenerator.

Covers:
- create command shape and working directory
- Explicit project root (no working-directory changes)
- Each generation step against a recording runner
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from reactforge.config import Config
from reactforge.models import ProjectOptions
from reactforge.scaffolder import ProjectGenerator
from reactforge.utils import run_checked

pytestmark = pytest.mark.unit


class TestCreateProject:
    def test_default_runner(self):
        assert ProjectGenerator(Config()).runner is run_checked

    def test_create_command_uses_template(self):
        generator = ProjectGenerator(Config(template="react-swc-ts"))
        assert generator.create_command("demo") == [
            "pnpm", "create", "vite", "demo", "--template", "react-swc-ts",
        ]

    @pytest.mark.asyncio
    async def test_runs_in_output_dir(self, runner, output_dir: Path):
        generator = ProjectGenerator(Config(output_dir=output_dir), runner=runner)

        project_dir = await generator.create_project(ProjectOptions(project_name="demo"))

        assert project_dir == output_dir / "demo"
        assert runner.calls == [
            (["pnpm", "create", "vite", "demo", "--template", "react-ts"], output_dir)
        ]

    @pytest.mark.asyncio
    async def test_creates_missing_output_dir(self, runner, tmp_path: Path):
        out = tmp_path / "does" / "not" / "exist"
        generator = ProjectGenerator(Config(output_dir=out), runner=runner)
        await generator.create_project(ProjectOptions(project_name="demo"))
        assert out.is_dir()

    @pytest.mark.asyncio
    async def test_does_not_change_cwd(self, runner, output_dir: Path):
        before = os.getcwd()
        generator = ProjectGenerator(Config(output_dir=output_dir), runner=runner)
        await generator.create_project(ProjectOptions(project_name="demo"))
        assert os.getcwd() == before


class TestSteps:
    @pytest.mark.asyncio
    async def test_write_vite_config(self, runner, output_dir: Path):
        generator = ProjectGenerator(Config(output_dir=output_dir), runner=runner)
        options = ProjectOptions(project_name="demo", tailwind=True)
        project_dir = await generator.create_project(options)

        path = await generator.write_vite_config(project_dir, options)

        assert path == project_dir / "vite.config.ts"
        assert "tailwindcss()" in path.read_text(encoding="utf-8")

    @pytest.mark.asyncio
    async def test_install_runs_in_project_dir(self, runner, output_dir: Path):
        generator = ProjectGenerator(Config(output_dir=output_dir, package_manager="yarn"), runner=runner)
        options = ProjectOptions(project_name="demo", router=True)

        plan = await generator.install(output_dir / "demo", options)

        assert runner.commands == [
            ["yarn", "add", *plan.runtime],
            ["yarn", "add", "-D", *plan.dev],
        ]
        assert {cwd for _, cwd in runner.calls} == {output_dir / "demo"}

    @pytest.mark.asyncio
    async def test_configure_tailwind(self, runner, output_dir: Path):
        generator = ProjectGenerator(Config(output_dir=output_dir, package_manager="npm"), runner=runner)
        project_dir = output_dir / "demo"

        written = await generator.configure_tailwind(project_dir)

        assert runner.commands == [["npx", "tailwindcss", "init", "-p"]]
        assert [p.name for p in written] == ["tailwind.config.js", "index.css"]
