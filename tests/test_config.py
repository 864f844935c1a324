"""Unit tests for Config and PackageManagerConfig (reactforge.config).

Tests cover:
- Config defaults and project_dir
- Command shapes for pnpm, npm and yarn
- Config.from_env overrides
- Validation of the package manager name
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from reactforge.config import (
    DEFAULT_PROJECT_NAME,
    DEFAULT_TEMPLATE,
    PACKAGE_MANAGERS,
    Config,
)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.package_manager == "pnpm"
        assert config.template == DEFAULT_TEMPLATE == "react-ts"
        assert config.default_project_name == DEFAULT_PROJECT_NAME == "my-react-app"
        assert config.output_dir == Path(".")

    @pytest.mark.unit
    def test_project_dir_is_explicit(self, tmp_path: Path):
        config = Config(output_dir=tmp_path)
        assert config.project_dir("demo") == tmp_path / "demo"

    @pytest.mark.unit
    def test_commands_follow_package_manager(self):
        assert Config().commands is PACKAGE_MANAGERS["pnpm"]
        assert Config(package_manager="npm").commands is PACKAGE_MANAGERS["npm"]

    @pytest.mark.unit
    def test_unknown_package_manager_rejected(self):
        with pytest.raises(ValidationError):
            Config(package_manager="bun")

    @pytest.mark.unit
    def test_empty_template_rejected(self):
        with pytest.raises(ValidationError):
            Config(template="")


# ---------------------------------------------------------------------------
# Command shapes
# ---------------------------------------------------------------------------


class TestPackageManagerCommands:
    @pytest.mark.unit
    def test_pnpm_create(self):
        cmd = PACKAGE_MANAGERS["pnpm"].create_command("demo", "react-ts")
        assert cmd == ["pnpm", "create", "vite", "demo", "--template", "react-ts"]

    @pytest.mark.unit
    def test_npm_create_separates_template_args(self):
        cmd = PACKAGE_MANAGERS["npm"].create_command("demo", "react-ts")
        assert cmd == ["npm", "create", "vite@latest", "demo", "--", "--template", "react-ts"]

    @pytest.mark.unit
    def test_yarn_create(self):
        cmd = PACKAGE_MANAGERS["yarn"].create_command("demo", "react-ts")
        assert cmd == ["yarn", "create", "vite", "demo", "--template", "react-ts"]

    @pytest.mark.unit
    def test_add_runtime(self):
        cmd = PACKAGE_MANAGERS["pnpm"].add_command(["a", "b"])
        assert cmd == ["pnpm", "add", "a", "b"]

    @pytest.mark.unit
    def test_add_dev(self):
        assert PACKAGE_MANAGERS["pnpm"].add_command(["x"], dev=True) == ["pnpm", "add", "-D", "x"]
        assert PACKAGE_MANAGERS["npm"].add_command(["x"], dev=True) == ["npm", "install", "-D", "x"]

    @pytest.mark.unit
    def test_exec(self):
        assert PACKAGE_MANAGERS["pnpm"].exec_command("tailwindcss", "init") == [
            "pnpm", "tailwindcss", "init",
        ]
        assert PACKAGE_MANAGERS["npm"].exec_command("tailwindcss") == ["npx", "tailwindcss"]

    @pytest.mark.unit
    def test_run_dev(self):
        assert PACKAGE_MANAGERS["pnpm"].run_dev == ["pnpm", "dev"]
        assert PACKAGE_MANAGERS["npm"].run_dev == ["npm", "run", "dev"]


# ---------------------------------------------------------------------------
# from_env
# ---------------------------------------------------------------------------


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_no_variables_gives_defaults(self):
        assert Config.from_env() == Config()

    @pytest.mark.unit
    def test_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("REACTFORGE_PACKAGE_MANAGER", "yarn")
        monkeypatch.setenv("REACTFORGE_TEMPLATE", "react-swc-ts")
        monkeypatch.setenv("REACTFORGE_DEFAULT_NAME", "starter")
        monkeypatch.setenv("REACTFORGE_OUTPUT_DIR", str(tmp_path))

        config = Config.from_env()
        assert config.package_manager == "yarn"
        assert config.template == "react-swc-ts"
        assert config.default_project_name == "starter"
        assert config.output_dir == tmp_path

    @pytest.mark.unit
    def test_invalid_package_manager_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("REACTFORGE_PACKAGE_MANAGER", "pip")
        with pytest.raises(ValidationError):
            Config.from_env()
