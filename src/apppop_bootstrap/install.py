"""npm dependency installation and Supabase CLI setup."""

from __future__ import annotations

from pathlib import Path

from .runner import CommandRunner, run_checked


def install_dependencies(project_path: Path, runner: CommandRunner) -> None:
    run_checked(runner, ["npm", "install"], "Failed to install dependencies", cwd=project_path)


def setup_supabase_cli(project_path: Path, runner: CommandRunner) -> None:
    run_checked(
        runner,
        ["npm", "install", "supabase", "--save-dev"],
        "Failed to setup Supabase CLI",
        cwd=project_path,
    )
    run_checked(runner, ["npx", "supabase", "init"], "Failed to setup Supabase CLI", cwd=project_path)
