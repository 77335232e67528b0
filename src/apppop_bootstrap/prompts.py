"""Interactive collection of the project configuration."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Optional, Protocol

import typer
from rich.markup import escape
from rich.panel import Panel

from .errors import BootstrapError
from .models import FEATURE_CHOICES, ProjectConfig, SetupOptions, SupabaseConfig
from .ui import console, toggle_with_arrows
from .validators import validate_project_id, validate_supabase_key, validate_supabase_url


class Prompter(Protocol):
    def text(self, message: str, default: str) -> str:
        ...

    def confirm(self, message: str, default: bool) -> bool:
        ...

    def features(self, options: dict[str, str], defaults: dict[str, bool]) -> dict[str, bool]:
        ...


class ConsolePrompter:
    """Prompts on the terminal; feature toggles use an arrow-key checklist on a TTY."""

    def text(self, message: str, default: str) -> str:
        answer = typer.prompt(typer.style(message.rstrip(":"), fg=typer.colors.BLUE), default=default)
        return answer.strip() or default

    def confirm(self, message: str, default: bool) -> bool:
        return typer.confirm(typer.style(message, fg=typer.colors.BLUE), default=default)

    def features(self, options: dict[str, str], defaults: dict[str, bool]) -> dict[str, bool]:
        if sys.stdin.isatty():
            return toggle_with_arrows(options, defaults, "Select features to include")
        return {key: self.confirm(f"Include {label}?", defaults.get(key, True)) for key, label in options.items()}


def collect_setup_options(prompter: Prompter) -> SetupOptions:
    console.print("\n[cyan]Setup Options[/cyan]")
    console.print("[dim]Select which features you want to include in your project:[/dim]")
    defaults = {key: True for key in FEATURE_CHOICES}
    answers = prompter.features(FEATURE_CHOICES, defaults)
    return SetupOptions(**{key: bool(answers.get(key, defaults[key])) for key in FEATURE_CHOICES})


def collect_project_config(prompter: Prompter, default_name: str, cwd: Optional[Path] = None) -> ProjectConfig:
    """Ask for name, directory and features, then create the target directory."""
    console.print("\n[bold]1. Project Configuration[/bold]")
    project_name = prompter.text("Enter project name:", default_name)
    project_dir = prompter.text("Enter directory to create project in:", f"./{project_name}")
    setup_options = collect_setup_options(prompter)

    project_path = ((cwd or Path.cwd()) / project_dir).resolve()
    try:
        project_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BootstrapError("Failed to create project structure", detail=str(e))
    console.print(f"[green]✓[/green] Project structure created at [cyan]{escape(str(project_path))}[/cyan]")

    return ProjectConfig(
        project_name=project_name,
        project_dir=project_dir,
        project_path=project_path,
        setup_options=setup_options,
    )


URL_GUIDE = """• Open your project in the Supabase dashboard
• Go to [bold]Project Settings[/bold] (gear icon in the top navigation)
• Look under [bold]Project Configuration[/bold] → [green]Project URL[/green] (https://xxx.supabase.co)"""

KEY_GUIDE = """• Stay in Project Settings
• Go to the [bold]API[/bold] section in the sidebar
• Look under [bold]Project API keys[/bold]
• Copy the [green]anon public[/green] key ([red]NOT[/red] the service_role key!)"""

PROJECT_ID_GUIDE = """• Go to [bold]General[/bold] settings in the sidebar
• Find [green]Reference ID[/green] under Project Settings
• This is used for CLI configuration and API access"""


def _prompt_until_accepted(
    prompter: Prompter,
    message: str,
    default: str,
    validate: Callable[[str], bool],
    field_label: str,
) -> str:
    while True:
        value = prompter.text(message, default)
        if validate(value):
            return value
        if prompter.confirm(f"Continue with this {field_label} anyway?", False):
            console.print(f"[yellow]Using unvalidated {field_label}[/yellow]")
            return value


def configure_supabase(prompter: Prompter) -> SupabaseConfig:
    """Collect and format-check the Supabase URL, anon key and project id."""
    console.print("\n[bold]2. Supabase Configuration[/bold]")
    console.print("\n[yellow]Please create a new Supabase project at https://app.supabase.com if you haven't already.[/yellow]")

    console.print(Panel(URL_GUIDE, title="1. Project URL", border_style="cyan", padding=(0, 2)))
    supabase_url = _prompt_until_accepted(
        prompter,
        "Enter Supabase Project URL:",
        "https://your-project-url.supabase.co",
        validate_supabase_url,
        "URL",
    )

    console.print(Panel(KEY_GUIDE, title="2. Anon/Public Key", border_style="cyan", padding=(0, 2)))
    supabase_anon_key = _prompt_until_accepted(
        prompter,
        "Enter Supabase Anon Key:",
        "your-anon-key",
        validate_supabase_key,
        "key",
    )

    console.print(Panel(PROJECT_ID_GUIDE, title="3. Project ID", border_style="cyan", padding=(0, 2)))
    supabase_project_id = _prompt_until_accepted(
        prompter,
        "Enter Supabase Project ID:",
        "your-project-id",
        validate_project_id,
        "project ID",
    )

    return SupabaseConfig(supabase_url, supabase_anon_key, supabase_project_id)
