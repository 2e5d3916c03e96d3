"""
Resolved settings display.

Shows the merged launch settings in forms other tools can consume.
"""

import shlex
import sys
import yaml
import logging
from invoke import task

from meteor_launch.settings.loading import DERIVED_KEYS, load_settings, read_launch_file
from .decorators import requires_launch_file

logger = logging.getLogger(__name__)


def format_exports(settings) -> str:
    """Render settings as shell export lines, sorted by key."""
    lines = []
    for key in sorted(settings):
        value = settings[key]
        value = "" if value is None else str(value)
        lines.append(f"export {key}={shlex.quote(value)}")
    return "\n".join(lines)


def launch_view(settings, launch_file) -> dict:
    """Keep only launch.json keys and derived fields from a resolved mapping."""
    return {key: value for key, value in settings.items()
            if key in launch_file or key in DERIVED_KEYS}


@task(help={'all_env': 'Include every inherited environment variable, not just launch.json keys and derived fields'})
@requires_launch_file
def settings(ctx, all_env=False):
    """
    Show resolved launch settings.

    Outputs:
        stdout: YAML settings (parseable)
        stderr: Diagnostic information
    """
    resolved = load_settings()
    if not all_env:
        resolved = launch_view(resolved, read_launch_file())

    print(f"🔍 Resolved {len(resolved)} settings", file=sys.stderr)
    print(f"📁 Output directory: {resolved['METEOR_OUTPUT_ABSOLUTE']}", file=sys.stderr)
    yaml.safe_dump(resolved, sys.stdout, default_flow_style=False, sort_keys=True)


@task(help={'all_env': 'Include every inherited environment variable, not just launch.json keys and derived fields'})
@requires_launch_file
def env(ctx, all_env=False):
    """
    Print resolved settings as shell exports.

    Examples:
        eval "$(launch env)"
    """
    resolved = load_settings()
    if not all_env:
        resolved = launch_view(resolved, read_launch_file())
    print(format_exports(resolved))
