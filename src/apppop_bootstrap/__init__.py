"""
AppPop bootstrap CLI - create a new project from the AppPop template

Usage:
    apppop-bootstrap
    apppop-bootstrap init --debug
    apppop-bootstrap check
"""

import shutil
import ssl
import sys
from pathlib import Path
from typing import Optional, Sequence

import httpx
import truststore
import typer
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from typer.core import TyperGroup

from .bootstrap import run_setup_phases
from .config import BootstrapSettings, load_settings
from .errors import BootstrapError
from .instructions import show_final_instructions
from .models import ProjectConfig, SupabaseConfig
from .prompts import ConsolePrompter, collect_project_config, configure_supabase
from .runner import SubprocessRunner
from .ui import StepTracker, console, show_banner

__version__ = "0.1.0"

ssl_context = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)

TOOL_LABELS = {
    "node": "Node.js runtime",
    "npm": "npm package manager",
    "git": "Git version control",
}


class BannerGroup(TyperGroup):
    """Custom group that shows banner before help."""

    def format_help(self, ctx, formatter):
        show_banner()
        super().format_help(ctx, formatter)


app = typer.Typer(
    name="apppop-bootstrap",
    help="Create a new project from the AppPop template",
    add_completion=False,
    invoke_without_command=True,
    cls=BannerGroup,
)


def first_missing_tool(tools: Sequence[str]) -> Optional[str]:
    """Return the first tool not found on PATH, without checking the rest."""
    for tool in tools:
        if not shutil.which(tool):
            return tool
    return None


def check_tool_for_tracker(tool: str, tracker: StepTracker) -> bool:
    """Check if a tool is installed and update tracker."""
    if shutil.which(tool):
        tracker.complete(tool, "available")
        return True
    else:
        tracker.error(tool, "not found")
        return False


def report_failure(error: BootstrapError, debug: bool = False) -> None:
    lines = [f"[red]{escape(error.message)}[/red]"]
    if error.detail:
        lines += ["", "[bold]Error details:[/bold]", f"[yellow]{escape(error.detail)}[/yellow]"]
    if error.hints:
        lines += ["", "[cyan]Possible solutions:[/cyan]"]
        lines += [f"[dim]{i}. {escape(hint)}[/dim]" for i, hint in enumerate(error.hints, start=1)]
    console.print()
    console.print(Panel("\n".join(lines), title="[red]Setup Failed[/red]", border_style="red", padding=(1, 2)))

    if debug:
        _env_pairs = [
            ("Python", sys.version.split()[0]),
            ("Platform", sys.platform),
            ("CWD", str(Path.cwd())),
        ]
        _label_width = max(len(k) for k, _ in _env_pairs)
        env_lines = [f"{k.ljust(_label_width)} → [bright_black]{v}[/bright_black]" for k, v in _env_pairs]
        console.print(Panel("\n".join(env_lines), title="Debug Environment", border_style="magenta"))


def _collect(settings: BootstrapSettings) -> tuple[ProjectConfig, Optional[SupabaseConfig]]:
    missing = first_missing_tool(settings.required_tools)
    if missing:
        raise BootstrapError(
            f"{missing} is not installed. Please install it first.",
            hints=[f"Install {TOOL_LABELS.get(missing, missing)} and make sure '{missing}' is on your PATH"],
        )

    prompter = ConsolePrompter()
    config = collect_project_config(prompter, settings.default_project_name)
    supabase_config = None
    if config.setup_options.include_supabase:
        supabase_config = configure_supabase(prompter)
    return config, supabase_config


@app.callback()
def callback(ctx: typer.Context):
    """Run the interactive setup when no subcommand is provided."""
    if ctx.invoked_subcommand is None:
        init(debug=False, skip_tls=False)


@app.command()
def init(
    debug: bool = typer.Option(False, "--debug", help="Show diagnostic environment output on failure"),
    skip_tls: bool = typer.Option(False, "--skip-tls", help="Skip SSL/TLS verification when probing the template repository"),
):
    """
    Create a new AppPop project interactively.

    This command will:
    1. Check that node, npm and git are installed
    2. Ask for the project name, directory and features to include
    3. Collect Supabase settings (if selected)
    4. Clone the AppPop template and start a fresh git history
    5. Rename the template to your project and write .env files
    6. Install npm dependencies (and the Supabase CLI if selected)
    """
    show_banner()

    try:
        settings = load_settings()
        config, supabase_config = _collect(settings)
    except BootstrapError as e:
        report_failure(e, debug)
        raise typer.Exit(1)
    except (typer.Exit, typer.Abort):
        raise
    except Exception as e:
        report_failure(BootstrapError("Unexpected error", detail=str(e)), debug)
        raise typer.Exit(1)

    tracker = StepTracker("Set up AppPop Project")
    tracker.add("precheck", "Check required tools")
    tracker.complete("precheck", ", ".join(settings.required_tools))
    tracker.add("collect", "Collect project configuration")
    tracker.complete("collect", config.project_name)
    tracker.add("supabase", "Configure Supabase")
    if supabase_config is not None:
        tracker.complete("supabase", supabase_config.supabase_url)
    else:
        tracker.skip("supabase", "not selected")

    failure = None
    with httpx.Client(verify=ssl_context if not skip_tls else False) as client:
        with Live(tracker.render(), console=console, refresh_per_second=8, transient=True) as live:
            tracker.attach_refresh(lambda: live.update(tracker.render()))
            try:
                run_setup_phases(config, supabase_config, settings, SubprocessRunner(), tracker, client=client)
            except BootstrapError as e:
                failure = e
            except Exception as e:
                failure = BootstrapError("Unexpected error", detail=str(e))
            if failure is not None:
                tracker.error(tracker.running or "final", failure.message)

    console.print(tracker.render())
    if failure is not None:
        report_failure(failure, debug)
        raise typer.Exit(1)

    show_final_instructions(config.project_dir, config.setup_options)


@app.command()
def check():
    """Check that all required tools are installed."""
    show_banner()
    console.print("[bold]Checking for installed tools...[/bold]\n")

    try:
        settings = load_settings()
    except BootstrapError as e:
        report_failure(e)
        raise typer.Exit(1)
    tracker = StepTracker("Check Available Tools")
    for tool in settings.required_tools:
        tracker.add(tool, TOOL_LABELS.get(tool, tool))

    results = [check_tool_for_tracker(tool, tracker) for tool in settings.required_tools]
    console.print(tracker.render())

    if not all(results):
        console.print("\n[red]Some required tools are missing.[/red]")
        raise typer.Exit(1)
    console.print("\n[bold green]AppPop bootstrap is ready to use![/bold green]")


def main():
    app()


if __name__ == "__main__":
    main()
