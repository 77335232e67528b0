"""Subprocess execution behind a small injectable interface."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from .errors import CommandError


@dataclass(frozen=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def output_summary(self) -> str:
        parts = [f"$ {' '.join(self.args)}", f"exit code: {self.returncode}"]
        if self.stderr.strip():
            parts.append(f"stderr:\n{self.stderr.strip()}")
        if self.stdout.strip():
            parts.append(f"stdout:\n{self.stdout.strip()}")
        return "\n".join(parts)


class CommandRunner(Protocol):
    def run(self, cmd: list[str], cwd: Optional[Path] = None) -> CommandResult:
        ...


class SubprocessRunner:
    """Run commands synchronously, capturing stdout and stderr."""

    def run(self, cmd: list[str], cwd: Optional[Path] = None) -> CommandResult:
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, cwd=cwd)
        except FileNotFoundError as e:
            # Mirror the shell's "command not found" status
            return CommandResult(tuple(cmd), 127, "", str(e))
        return CommandResult(tuple(cmd), result.returncode, result.stdout or "", result.stderr or "")


def run_checked(
    runner: CommandRunner,
    cmd: list[str],
    message: str,
    cwd: Optional[Path] = None,
    hints: tuple[str, ...] = (),
) -> CommandResult:
    """Run ``cmd`` and raise :class:`CommandError` with ``message`` on a non-zero exit."""
    result = runner.run(cmd, cwd=cwd)
    if not result.ok:
        raise CommandError(message, result, hints=hints)
    return result
