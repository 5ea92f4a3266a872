"""
Utilities for working with CLI in tests.
"""

import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]


def _env() -> dict:
    env = os.environ.copy()
    # пакет импортируется из рабочей копии, даже если не установлен
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(REPO_ROOT), env.get("PYTHONPATH", "")) if p)
    return env


def _run(root: Path, module: str, *args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", module, *args],
        cwd=root, env=_env(), capture_output=True, text=True, encoding="utf-8"
    )


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    """Runs inline_assets.cli with specified arguments in the given directory."""
    return _run(root, "inline_assets.cli", *args)


def run_tasks_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    """Runs inline_assets.tasks.cli with specified arguments in the given directory."""
    return _run(root, "inline_assets.tasks.cli", *args)


__all__ = ["REPO_ROOT", "run_cli", "run_tasks_cli"]
