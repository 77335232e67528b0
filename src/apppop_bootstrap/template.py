"""Cloning the template repository and starting a fresh git history."""

from __future__ import annotations

import os
import shutil
from importlib import resources
from pathlib import Path
from typing import Optional

import httpx

from .config import BootstrapSettings, is_plain_dir_name
from .errors import BootstrapError, CommandError
from .runner import CommandRunner, run_checked

# Documents shipped with the tool that replace the template's own
BUNDLED_DOCS = {
    "tenant_readme.md": Path("README.md"),
    "setup.md": Path("docs") / "setup.md",
}


def _github_token() -> str | None:
    """Return sanitized GitHub token from the environment or None."""
    return ((os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN") or "").strip()) or None


def _github_auth_headers() -> dict:
    """Return Authorization header dict only when a non-empty token exists."""
    token = _github_token()
    return {"Authorization": f"Bearer {token}"} if token else {}


def probe_template_repo(repo_url: str, client: httpx.Client) -> Optional[str]:
    """Best-effort reachability check of an https repository; returns a hint or None."""
    if not repo_url.startswith("https://"):
        return None
    web_url = repo_url[:-4] if repo_url.endswith(".git") else repo_url
    try:
        response = client.get(web_url, timeout=10, follow_redirects=True, headers=_github_auth_headers())
    except httpx.HTTPError as e:
        return f"Could not reach {web_url}: {e}"
    if response.status_code == 404:
        return f"Template repository not found (HTTP 404): {web_url}"
    if response.status_code >= 400:
        return f"Template repository responded with HTTP {response.status_code}: {web_url}"
    return None


def clone_failure_hints(settings: BootstrapSettings, client: Optional[httpx.Client] = None) -> list[str]:
    hints = []
    if client is not None:
        probe = probe_template_repo(settings.template_repo, client)
        if probe:
            hints.append(probe)
    hints.extend([
        f"Check if the repository exists: {settings.template_repo}",
        "Check your internet connection",
        "Check if the target directory already exists and is not empty",
    ])
    return hints


def install_bundled_docs(project_path: Path) -> list[Path]:
    written = []
    docs = resources.files("apppop_bootstrap") / "templates"
    for source_name, target in BUNDLED_DOCS.items():
        destination = project_path / target
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(docs.joinpath(source_name).read_text(encoding="utf-8"), encoding="utf-8")
        written.append(target)
    return written


def clone_template(
    project_path: Path,
    runner: CommandRunner,
    settings: BootstrapSettings,
    client: Optional[httpx.Client] = None,
) -> None:
    """Shallow-clone the template into ``project_path`` and strip its history."""
    if (project_path / ".git").exists():
        raise BootstrapError(
            "Failed to clone template",
            detail=f"{project_path} already contains a git repository",
            hints=["Choose a new or empty directory for the project"],
        )

    result = runner.run(["git", "clone", "--depth", "1", settings.template_repo, str(project_path)])
    if not result.ok:
        raise CommandError("Failed to clone template", result, hints=clone_failure_hints(settings, client))

    try:
        install_bundled_docs(project_path)
        for name in (".git", *settings.tooling_dirs):
            # Only direct children of the project are ever removed
            if not is_plain_dir_name(name):
                continue
            target = project_path / name
            if target.is_symlink():
                target.unlink()
            elif target.is_dir():
                shutil.rmtree(target)
    except OSError as e:
        raise BootstrapError("Failed to clean cloned template", detail=str(e))


def init_git_repo(project_path: Path, runner: CommandRunner, settings: BootstrapSettings) -> None:
    """Initialize a fresh repository with a single commit of the template."""
    run_checked(runner, ["git", "init"], "Failed to initialize git", cwd=project_path)
    run_checked(runner, ["git", "add", "."], "Failed to initialize git", cwd=project_path)
    run_checked(
        runner,
        ["git", "commit", "-m", settings.commit_message],
        "Failed to initialize git",
        cwd=project_path,
        hints=("Make sure git user.name and user.email are configured",),
    )
