"""Rewriting the template's product name into the new project's files."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Optional

from .config import PRODUCT_TITLE_TOKEN, PRODUCT_TOKEN
from .errors import BootstrapError
from .models import SupabaseConfig, title_case

FILES_TO_UPDATE = (
    "package.json",
    "README.md",
    "index.html",
    "vite.config.ts",
    ".env",
    ".env.example",
    "capacitor.config.ts",
)
CAPACITOR_CONFIG = "capacitor.config.ts"
SUPABASE_CONFIG = "supabase/config.toml"
PACKAGE_JSON = "package.json"
PACKAGE_VERSION = "0.0.1"

APP_ID_PATTERN = re.compile(r"""appId: ['"]com\.apppop\.app['"]""")
APP_NAME_PATTERN = re.compile(r"""appName: ['"](?i:apppop)['"]""")
PROJECT_ID_PATTERN = re.compile(r'project_id = ".*"')
SERVICE_NAME_PATTERN = re.compile(r'name = "apppop"')


def files_to_update(supabase_config: Optional[SupabaseConfig]) -> list[str]:
    files = list(FILES_TO_UPDATE)
    if supabase_config is not None:
        files.append(SUPABASE_CONFIG)
    return files


def substitute_tokens(content: str, replacements: dict[str, str]) -> str:
    """Replace every token in a single pass.

    Text that already equals one of the replacement values is matched first
    and left alone, so substituting twice gives the same result as once.
    Matching runs left to right, so a protected value overlapping the start
    of a token wins: with ``apppop -> xap``, ``xapppop`` is left unchanged.
    """
    protected = {value for value in replacements.values() if value}
    alternatives = sorted(protected | set(replacements), key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(a) for a in alternatives))

    def _replace(match: re.Match) -> str:
        text = match.group(0)
        if text in protected:
            return text
        return replacements[text]

    return pattern.sub(_replace, content)


def customize_content(
    filename: str,
    content: str,
    project_name: str,
    supabase_config: Optional[SupabaseConfig] = None,
) -> str:
    lower = project_name.lower()
    title = title_case(project_name)

    if filename == CAPACITOR_CONFIG:
        content = APP_ID_PATTERN.sub(lambda _: f"appId: 'com.{lower}.app'", content)
        return APP_NAME_PATTERN.sub(lambda _: f"appName: '{title}'", content)

    if filename == SUPABASE_CONFIG:
        if supabase_config is None:
            return content
        content = PROJECT_ID_PATTERN.sub(lambda _: f'project_id = "{supabase_config.supabase_project_id}"', content)
        return SERVICE_NAME_PATTERN.sub(lambda _: f'name = "{lower}"', content)

    return substitute_tokens(content, {PRODUCT_TOKEN: lower, PRODUCT_TITLE_TOKEN: title})


def update_package_metadata(content: str, project_name: str) -> str:
    data = json.loads(content)
    data["name"] = project_name.lower()
    data["version"] = PACKAGE_VERSION
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def customize_project(
    project_path: Path,
    project_name: str,
    supabase_config: Optional[SupabaseConfig] = None,
) -> list[str]:
    """Apply the substitutions to each allow-listed file; returns the files changed.

    Missing files are skipped.
    """
    updated = []
    for filename in files_to_update(supabase_config):
        path = project_path / filename
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            continue
        except OSError as e:
            raise BootstrapError("Failed to update project files", detail=f"{filename}: {e}")

        new_content = customize_content(filename, content, project_name, supabase_config)
        if filename == PACKAGE_JSON:
            try:
                new_content = update_package_metadata(new_content, project_name)
            except ValueError as e:
                raise BootstrapError("Failed to update project files", detail=f"{filename} is not valid JSON: {e}")

        if new_content == content:
            continue
        try:
            path.write_text(new_content, encoding="utf-8")
        except OSError as e:
            raise BootstrapError("Failed to update project files", detail=f"{filename}: {e}")
        updated.append(filename)
    return updated
