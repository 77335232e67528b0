"""Tool settings: built-in defaults, optional user TOML file, environment."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from .errors import BootstrapError

APP_NAME = "apppop-bootstrap"
CONFIG_FILENAME = "config.toml"

TEMPLATE_REPO = "https://github.com/stevengonsalvez/apppop.git"
INITIAL_COMMIT_MESSAGE = "Initial commit from AppPop template"
DEFAULT_PROJECT_NAME = "my-apppop-app"

# Tokens used by the template for the product name
PRODUCT_TOKEN = "apppop"
PRODUCT_TITLE_TOKEN = "AppPop"

REQUIRED_TOOLS = ("node", "npm", "git")

ENV_TEMPLATE_REPO = "APPPOP_TEMPLATE_REPO"
ENV_CONFIG_PATH = "APPPOP_CONFIG"


def is_plain_dir_name(name: str) -> bool:
    """True for a single path component such as ``.claudesync``."""
    return bool(name) and name not in (".", "..") and "/" not in name and "\\" not in name


@dataclass(frozen=True)
class BootstrapSettings:
    template_repo: str = TEMPLATE_REPO
    commit_message: str = INITIAL_COMMIT_MESSAGE
    default_project_name: str = DEFAULT_PROJECT_NAME
    tooling_dirs: tuple[str, ...] = (".claudesync",)
    required_tools: tuple[str, ...] = REQUIRED_TOOLS
    source: Optional[Path] = field(default=None, compare=False)


def default_config_path() -> Path:
    override = os.getenv(ENV_CONFIG_PATH, "").strip()
    if override:
        return Path(override).expanduser()
    return Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME


def _settings_from_toml(settings: BootstrapSettings, path: Path) -> BootstrapSettings:
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as e:
        raise BootstrapError(f"Invalid configuration file: {path}", detail=str(e))
    except OSError as e:
        raise BootstrapError(f"Could not read configuration file: {path}", detail=str(e))

    known = {f.name for f in fields(BootstrapSettings)} - {"source"}
    updates = {}
    for key, value in data.items():
        if key not in known:
            continue
        if key in ("tooling_dirs", "required_tools"):
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise BootstrapError(f"Invalid configuration file: {path}", detail=f"'{key}' must be a list of strings")
            if key == "tooling_dirs":
                bad = [v for v in value if not is_plain_dir_name(v)]
                if bad:
                    raise BootstrapError(
                        f"Invalid configuration file: {path}",
                        detail=f"'tooling_dirs' entries must be directory names inside the project, got {bad}",
                    )
            value = tuple(value)
        elif not isinstance(value, str) or not value.strip():
            raise BootstrapError(f"Invalid configuration file: {path}", detail=f"'{key}' must be a non-empty string")
        updates[key] = value
    return replace(settings, source=path, **updates)


def load_settings(config_path: Optional[Path] = None) -> BootstrapSettings:
    """Load settings; later layers win (defaults, TOML file, environment)."""
    settings = BootstrapSettings()
    path = config_path or default_config_path()
    if path.is_file():
        settings = _settings_from_toml(settings, path)

    repo = os.getenv(ENV_TEMPLATE_REPO, "").strip()
    if repo:
        settings = replace(settings, template_repo=repo)
    return settings
