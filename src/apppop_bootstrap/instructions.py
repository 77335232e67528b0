"""Next-step guidance printed once the project is ready."""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel

from .models import SetupOptions
from .ui import console

COLOR_SCHEMES = {
    "default": "Classic blue Material Design",
    "indigo": "Deep purple and pink accents",
    "emerald": "Nature-inspired green",
    "sunset": "Warm orange and yellow",
    "ocean": "Calming blue tones",
}

FONT_SCHEMES = {
    "modern": "Inter font",
    "classic": "Roboto/Roboto Slab",
    "minimal": "System fonts",
}


def next_steps(project_dir: str, options: SetupOptions) -> list[str]:
    lines = [f"1. Go to the project folder: [cyan]cd {escape(project_dir)}[/cyan]"]
    lines.append("2. Review and update [cyan]package.json[/cyan] with your project details")
    step_num = 3

    if options.include_supabase:
        lines.append(f"{step_num}. Configure Authentication:")
        lines.append("   • Check [cyan]Auth.md[/cyan] in your project root for detailed setup instructions")
        lines.append("   • Set up email verification")
        lines.append("   • Configure SMTP for auth emails")
        lines.append("   • Implement security best practices")
        step_num += 1

    if options.include_theme_system:
        lines.append(f"{step_num}. Configure Theme System:")
        lines.append("   • Review [cyan]theme-system.md[/cyan] for the complete theming guide")
        lines.append("   • Choose from available color schemes:")
        for name, description in COLOR_SCHEMES.items():
            lines.append(f"     - {name} ({description})")
        lines.append("   • Select font scheme:")
        for name, description in FONT_SCHEMES.items():
            lines.append(f"     - {name} ({description})")
        lines.append("   • Set defaults in [cyan]src/config/theme.config.ts[/cyan]")
        step_num += 1

    lines.append(f"{step_num}. Run [cyan]npm run dev[/cyan] to start the development server")
    step_num += 1

    if options.include_analytics or options.include_error_tracking:
        lines.append(f"{step_num}. Set up additional services:")
        if options.include_analytics:
            lines.append("   - Microsoft Clarity for analytics")
            lines.append("   - Google Tag Manager for analytics")
        if options.include_error_tracking:
            lines.append("   - Sentry for error monitoring")
    return lines


SECURITY_REMINDER = """• Review Auth.md for security best practices
• Set up Row Level Security (RLS) policies
• Configure proper email verification
• Never commit sensitive keys or .env files"""

THEMING_REFERENCE = """• Theme system supports both light and dark modes
• Each color scheme includes:
  - Primary, Secondary, and Tertiary colors
  - Background and surface variants
  - Text colors and state colors
• Font system includes:
  - Multiple weights (light to bold)
  - Configurable letter spacing
  - Primary and secondary font families"""


def show_final_instructions(project_dir: str, options: SetupOptions) -> None:
    console.print("\n[bold green]✓ Project setup complete![/bold green]")

    console.print()
    console.print(Panel("\n".join(next_steps(project_dir, options)), title="Next Steps", border_style="cyan", padding=(1, 2)))

    if options.include_supabase:
        console.print()
        console.print(Panel(SECURITY_REMINDER, title="[yellow]Important Security Reminder[/yellow]", border_style="yellow", padding=(1, 2)))

    if options.include_theme_system:
        console.print()
        console.print(Panel(THEMING_REFERENCE, title="Theming Quick Reference", border_style="cyan", padding=(1, 2)))

    console.print("\n[bold]Happy coding! 🎉[/bold]")
