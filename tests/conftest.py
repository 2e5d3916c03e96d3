"""
Root pytest configuration for meteor-launch.

Every test that touches the filesystem runs inside an isolated workspace:
its own working directory, its own HOME, and none of the launch variables
inherited from the developer's shell.
"""

import json
import os
import stat
import pytest
from pathlib import Path
from types import SimpleNamespace

LAUNCH_VARS = [
    'ANDROID_ZIPALIGN',
    'METEOR_INPUT_DIR',
    'METEOR_OUTPUT_DIR',
    'METEOR_OUTPUT_ABSOLUTE',
    'FL_REPORT_PATH',
    'XCODE_PROJECT',
    'XCODE_SCHEME_NAME',
    'SIGH_OUTPUT_PATH',
    'GYM_OUTPUT_DIRECTORY',
    'LOG_LEVEL',
]

MOCK_FASTLANE = """#!/bin/sh
if [ -n "$MOCK_ENV_DUMP" ]; then
  env > "$MOCK_ENV_DUMP"
fi
echo "fastlane $*"
exit ${MOCK_FASTLANE_EXIT:-0}
"""

MOCK_METEOR = """#!/bin/sh
if [ "$1" = "list-platforms" ]; then
  echo "server"
  echo "browser"
  echo "android"
  exit 0
fi
exit 1
"""


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Chdir into a fresh app directory with an isolated HOME."""
    root = tmp_path / "app"
    root.mkdir()
    home = tmp_path / "home"
    home.mkdir()

    monkeypatch.chdir(root)
    monkeypatch.setenv('HOME', str(home))
    for name in LAUNCH_VARS:
        monkeypatch.delenv(name, raising=False)

    def write_launch(data=None, raw=None):
        launch_path = root / "launch.json"
        if raw is not None:
            launch_path.write_text(raw)
        else:
            launch_path.write_text(json.dumps(data if data is not None else {}))
        return launch_path

    return SimpleNamespace(root=root, home=home, write_launch=write_launch)


def _write_executable(path: Path, body: str) -> None:
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


@pytest.fixture
def mock_bin(tmp_path, monkeypatch):
    """Put fake fastlane and meteor executables first on PATH."""
    bin_dir = tmp_path / "mock-bin"
    bin_dir.mkdir()
    _write_executable(bin_dir / "fastlane", MOCK_FASTLANE)
    _write_executable(bin_dir / "meteor", MOCK_METEOR)
    monkeypatch.setenv('PATH', f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return bin_dir


@pytest.fixture
def empty_path(tmp_path, monkeypatch):
    """PATH with no executables at all."""
    empty_dir = tmp_path / "empty-bin"
    empty_dir.mkdir()
    monkeypatch.setenv('PATH', str(empty_dir))
    return empty_dir
