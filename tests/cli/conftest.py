"""CLI test fixtures.

Commands run as `python . <args>` in a subprocess from a scratch directory,
so default output files land in tmp_path.
"""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path
from typing import Callable

import pytest

# Get the project root directory (two levels up from this file)
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def run_cli(tmp_path: Path) -> Callable[..., subprocess.CompletedProcess]:
    """Runner for `python . <args>` with tmp_path as working directory."""

    def run(*args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, str(PROJECT_ROOT), *args],
            capture_output=True,
            text=True,
            cwd=tmp_path,
            timeout=60,
        )

    return run


@pytest.fixture
def run_json(run_cli) -> Callable[..., tuple[int, dict]]:
    """Runner that appends --json and decodes stdout."""

    def run(*args: str) -> tuple[int, dict]:
        result = run_cli(*args, "--json")
        return result.returncode, json.loads(result.stdout)

    return run
