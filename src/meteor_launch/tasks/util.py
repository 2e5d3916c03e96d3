"""
Shared helpers for launch tasks.
"""

import subprocess
from pathlib import Path


def get_repo_root() -> Path:
    """Get the current working directory (project root where user runs launch)."""
    return Path.cwd()


def run_command(cmd, cwd=None, check=True, capture_output=False, env=None):
    """Run an external command once and return the result."""
    return subprocess.run(
        cmd,
        cwd=cwd,
        check=check,
        capture_output=capture_output,
        text=True,
        env=env
    )
