"""The non-interactive bootstrap phases, run in order under a step tracker."""

from __future__ import annotations

from typing import Optional

import httpx

from .config import BootstrapSettings
from .customize import customize_project
from .envfiles import write_env_files
from .install import install_dependencies, setup_supabase_cli
from .models import ProjectConfig, SupabaseConfig
from .runner import CommandRunner
from .template import clone_template, init_git_repo
from .ui import StepTracker

SETUP_STEPS = [
    ("clone", "Clone template repository"),
    ("git", "Initialize git repository"),
    ("customize", "Customize project files"),
    ("env", "Create environment files"),
    ("install", "Install dependencies"),
    ("supabase-cli", "Set up Supabase CLI"),
]


def add_setup_steps(tracker: StepTracker) -> None:
    for key, label in SETUP_STEPS:
        tracker.add(key, label)


def run_setup_phases(
    config: ProjectConfig,
    supabase_config: Optional[SupabaseConfig],
    settings: BootstrapSettings,
    runner: CommandRunner,
    tracker: StepTracker,
    client: Optional[httpx.Client] = None,
) -> None:
    """Clone, commit, customize, write env files and install.

    Raises :class:`~apppop_bootstrap.errors.BootstrapError` on the first
    failure, leaving that step marked as running for the caller to report.
    """
    project_path = config.project_path
    options = config.setup_options
    use_supabase = options.include_supabase and supabase_config is not None
    add_setup_steps(tracker)

    tracker.start("clone", settings.template_repo)
    clone_template(project_path, runner, settings, client=client)
    tracker.complete("clone", "template cloned and cleaned")

    tracker.start("git")
    init_git_repo(project_path, runner, settings)
    tracker.complete("git", "initial commit created")

    tracker.start("customize")
    updated = customize_project(project_path, config.project_name, supabase_config if use_supabase else None)
    tracker.complete("customize", f"{len(updated)} file(s) updated")

    tracker.start("env")
    write_env_files(project_path, config.project_name, options, supabase_config if use_supabase else None)
    tracker.complete("env", ".env, .env.example, .gitignore")

    tracker.start("install", "npm install")
    install_dependencies(project_path, runner)
    tracker.complete("install")

    if use_supabase:
        tracker.start("supabase-cli", "npx supabase init")
        setup_supabase_cli(project_path, runner)
        tracker.complete("supabase-cli")
    else:
        tracker.skip("supabase-cli", "Supabase not selected")
