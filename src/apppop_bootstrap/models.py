"""Values collected from the user and passed between phases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

FEATURE_CHOICES = {
    "include_supabase": "Supabase setup (Authentication, Database)",
    "include_analytics": "Analytics setup (Google Analytics, Microsoft Clarity)",
    "include_theme_system": "Theme System setup",
    "include_error_tracking": "Error Tracking setup (Sentry)",
}


@dataclass(frozen=True)
class SetupOptions:
    include_supabase: bool = True
    include_analytics: bool = True
    include_theme_system: bool = True
    include_error_tracking: bool = True


@dataclass(frozen=True)
class ProjectConfig:
    project_name: str
    project_dir: str
    project_path: Path
    setup_options: SetupOptions


@dataclass(frozen=True)
class SupabaseConfig:
    supabase_url: str
    supabase_anon_key: str
    supabase_project_id: str


def title_case(name: str) -> str:
    """``my-App`` -> ``My-app``: first letter upper, the rest lower."""
    return name[:1].upper() + name[1:].lower()
