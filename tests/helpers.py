from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from apppop_bootstrap.models import ProjectConfig, SetupOptions, SupabaseConfig
from apppop_bootstrap.runner import CommandResult

VALID_URL = "https://example.supabase.co"
VALID_KEY = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.example"
VALID_PROJECT_ID = "abcdefghijklmnopqrst"

TEMPLATE_FILES = {
    "package.json": json.dumps({"name": "apppop", "version": "1.4.2", "private": True}, indent=2),
    "README.md": "# AppPop\n\nThe apppop template.\n",
    "index.html": "<title>AppPop</title>\n<meta name=\"apppop\">\n",
    "vite.config.ts": "export default { base: '/apppop/' };\n",
    "capacitor.config.ts": (
        "const config: CapacitorConfig = {\n"
        "  appId: 'com.apppop.app',\n"
        "  appName: 'apppop',\n"
        "  webDir: 'dist'\n"
        "};\n"
    ),
    "supabase/config.toml": 'project_id = "template-ref"\n\n[analytics]\nname = "apppop"\n',
    ".gitignore": "node_modules\ndist\n",
    ".git/HEAD": "ref: refs/heads/main\n",
    ".claudesync/state.json": "{}\n",
}


def supabase_config() -> SupabaseConfig:
    return SupabaseConfig(VALID_URL, VALID_KEY, VALID_PROJECT_ID)


def project_config(path: Path, name: str = "test-project", **options: bool) -> ProjectConfig:
    return ProjectConfig(
        project_name=name,
        project_dir=f"./{name}",
        project_path=path,
        setup_options=SetupOptions(**options),
    )


def write_template(target: Path, files: Optional[dict[str, str]] = None) -> None:
    for name, content in (TEMPLATE_FILES if files is None else files).items():
        path = target / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


class FakeRunner:
    """Records commands; ``git clone`` writes the template into its target."""

    def __init__(self, failures: Optional[dict[str, CommandResult]] = None, template: Optional[dict[str, str]] = None):
        self.failures = failures or {}
        self.template = template
        self.calls: list[tuple[tuple[str, ...], Optional[Path]]] = []

    @property
    def commands(self) -> list[str]:
        return [" ".join(cmd) for cmd, _ in self.calls]

    def run(self, cmd: list[str], cwd: Optional[Path] = None) -> CommandResult:
        self.calls.append((tuple(cmd), cwd))
        joined = " ".join(cmd)
        for prefix, result in self.failures.items():
            if joined.startswith(prefix):
                return result
        if cmd[:2] == ["git", "clone"]:
            target = Path(cmd[-1])
            target.mkdir(parents=True, exist_ok=True)
            write_template(target, self.template)
        return CommandResult(tuple(cmd), 0, "", "")


class FakePrompter:
    """Scripted answers; a ``None`` text answer accepts the default."""

    def __init__(self, texts=(), confirms=(), features: Optional[dict[str, bool]] = None):
        self.texts = list(texts)
        self.confirms = list(confirms)
        self.feature_answers = features
        self.messages: list[str] = []

    def text(self, message: str, default: str) -> str:
        self.messages.append(message)
        value = self.texts.pop(0)
        return default if value is None else value

    def confirm(self, message: str, default: bool) -> bool:
        self.messages.append(message)
        return self.confirms.pop(0)

    def features(self, options: dict[str, str], defaults: dict[str, bool]) -> dict[str, bool]:
        if self.feature_answers is None:
            return dict(defaults)
        return dict(self.feature_answers)
