"""Generation of ``.env``, ``.env.example`` and the ``.gitignore`` entry."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .errors import BootstrapError
from .models import SetupOptions, SupabaseConfig

GITIGNORE_BLOCK = "# Environment Variables\n.env\n.env.local\n.env.*.local\n"


def render_env(project_name: str, options: SetupOptions, supabase_config: Optional[SupabaseConfig] = None) -> str:
    content = (
        f"# Environment Variables for {project_name}\n"
        "# ⚠️  WARNING: NEVER commit this file to version control\n"
        "# ⚠️  WARNING: Keep this file secure and private\n"
        "\n"
        "# App Configuration\n"
        f"VITE_APP_NAME={project_name}\n"
    )
    if options.include_supabase and supabase_config is not None:
        content += (
            "\n"
            "# Supabase Configuration\n"
            f"VITE_APP_SUPABASE_URL={supabase_config.supabase_url}\n"
            f"VITE_APP_SUPABASE_ANON_KEY={supabase_config.supabase_anon_key}\n"
        )
    if options.include_analytics:
        content += (
            "\n"
            "# Analytics & Monitoring\n"
            "VITE_CLARITY_TRACKING_CODE=  # Microsoft Clarity\n"
            "VITE_GTM_CONTAINER_ID=       # Google Tag Manager\n"
            "VITE_GA4_MEASUREMENT_ID=     # Google Analytics 4\n"
        )
    if options.include_error_tracking:
        content += (
            "\n"
            "# Error Tracking\n"
            "VITE_SENTRY_DSN=            # Sentry Error Tracking\n"
        )
    return content


def render_env_example(project_name: str, options: SetupOptions, supabase_config: Optional[SupabaseConfig] = None) -> str:
    content = (
        f"# Example Environment Variables for {project_name}\n"
        "# Copy this file to .env and fill in your values\n"
        "\n"
        "# App Configuration\n"
        f"VITE_APP_NAME={project_name}\n"
    )
    if options.include_supabase and supabase_config is not None:
        content += (
            "\n"
            "# Supabase Configuration\n"
            "VITE_APP_SUPABASE_URL=https://your-project.supabase.co\n"
            "VITE_APP_SUPABASE_ANON_KEY=your-anon-key\n"
        )
    if options.include_analytics:
        content += (
            "\n"
            "# Analytics & Monitoring\n"
            "VITE_CLARITY_TRACKING_CODE=xxxxxxxx\n"
            "VITE_GTM_CONTAINER_ID=GTM-XXXXXX\n"
            "VITE_GA4_MEASUREMENT_ID=G-XXXXXXXXXX\n"
        )
    if options.include_error_tracking:
        content += (
            "\n"
            "# Error Tracking\n"
            "VITE_SENTRY_DSN=https://xxx@xxx.ingest.sentry.io/xxx\n"
        )
    return content


def ensure_gitignore(project_path: Path) -> bool:
    """Make sure ``.gitignore`` excludes env files; returns True if it was changed."""
    path = project_path / ".gitignore"
    try:
        existing = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        path.write_text(GITIGNORE_BLOCK, encoding="utf-8")
        return True
    if ".env" in existing:
        return False
    path.write_text(existing + "\n" + GITIGNORE_BLOCK, encoding="utf-8")
    return True


def write_env_files(
    project_path: Path,
    project_name: str,
    options: SetupOptions,
    supabase_config: Optional[SupabaseConfig] = None,
) -> None:
    try:
        (project_path / ".env").write_text(render_env(project_name, options, supabase_config), encoding="utf-8")
        (project_path / ".env.example").write_text(
            render_env_example(project_name, options, supabase_config), encoding="utf-8"
        )
        ensure_gitignore(project_path)
    except OSError as e:
        raise BootstrapError("Failed to create environment files", detail=str(e))
