"""Format-only checks for the Supabase values entered by the user.

Each validator prints a warning describing the expected format and returns
``False`` on mismatch; none of them raise.
"""

from __future__ import annotations

import re

from rich.markup import escape

from .ui import console

SUPABASE_URL_PATTERN = re.compile(r"https://[a-z0-9-]+\.supabase\.co")
# Anon key format: eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...
SUPABASE_KEY_PATTERN = re.compile(r"eyJ[A-Za-z0-9\-_=]+\.[A-Za-z0-9\-_=]+\.?[A-Za-z0-9\-_.+/=]*")
PROJECT_ID_PATTERN = re.compile(r"[a-zA-Z0-9]{20,}")


def _warn(what: str, expected: str, received: str) -> None:
    console.print(f"\n[red]⚠  Warning: The {what} format appears incorrect[/red]")
    console.print(f"[yellow]Expected format: {expected}[/yellow]")
    console.print(f"[yellow]Received: {escape(received)}[/yellow]")


def validate_supabase_url(url: str) -> bool:
    if SUPABASE_URL_PATTERN.fullmatch(url) is None:
        _warn("Supabase URL", "https://your-project.supabase.co", url)
        return False
    return True


def validate_supabase_key(key: str) -> bool:
    if SUPABASE_KEY_PATTERN.fullmatch(key) is None:
        _warn("anon key", "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...", key)
        return False
    return True


def validate_project_id(project_id: str) -> bool:
    if PROJECT_ID_PATTERN.fullmatch(project_id) is None:
        _warn("project ID", "A string of at least 20 letters and numbers", project_id)
        return False
    return True
