"""
Meteor platform detection.
"""

import logging
import sys
from invoke import task

from meteor_launch.settings.loading import load_settings
from .decorators import requires_launch_file
from .util import run_command

logger = logging.getLogger(__name__)

LIST_PLATFORMS_COMMAND = ["meteor", "list-platforms"]
MOBILE_PLATFORMS = ("ios", "android")


def has_platform(platform: str, cwd=None) -> bool:
    """
    Check whether the Meteor app has a platform added.

    Args:
        platform: Platform name, e.g. "ios" or "android"
        cwd: Meteor app directory (defaults to the current directory)

    Returns:
        True if meteor lists the platform; False otherwise, including when
        meteor is missing or fails
    """
    try:
        result = run_command(LIST_PLATFORMS_COMMAND, cwd=cwd, check=False, capture_output=True)
    except FileNotFoundError:
        logger.warning(f"{LIST_PLATFORMS_COMMAND[0]} not found on PATH")
        return False

    if result.returncode != 0:
        logger.debug(f"'{' '.join(LIST_PLATFORMS_COMMAND)}' exited with {result.returncode}")
        return False

    listed = [line.strip() for line in result.stdout.splitlines()]
    return platform in listed


@task(help={'platform': 'Platform name to look for (e.g. ios, android)'}, name='has-platform')
@requires_launch_file
def has_platform_task(ctx, platform):
    """
    Exit 0 if the Meteor app has the platform, 1 otherwise.

    Examples:
        launch has-platform ios && echo "building ios"
    """
    settings = load_settings()
    if has_platform(platform, cwd=settings['METEOR_INPUT_DIR']):
        print(f"✅ {platform}")
        return
    print(f"❌ {platform}", file=sys.stderr)
    sys.exit(1)


@task
@requires_launch_file
def platforms(ctx):
    """
    Show which mobile platforms the Meteor app has.

    Examples:
        launch platforms
    """
    settings = load_settings()
    for platform in MOBILE_PLATFORMS:
        marker = "✅" if has_platform(platform, cwd=settings['METEOR_INPUT_DIR']) else "➖"
        print(f"{marker} {platform}")
