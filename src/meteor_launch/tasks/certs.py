"""
Certificate import, delegated to fastlane.
"""

import logging
import sys
from typing import Any, Dict, Mapping
from invoke import task

from meteor_launch.settings.exceptions import ExternalCommandError
from meteor_launch.settings.loading import load_settings
from .decorators import requires_launch_file
from .util import run_command

logger = logging.getLogger(__name__)

IMPORT_CERTS_COMMAND = ["fastlane", "import_certs"]


def settings_to_env(settings: Mapping[str, Any]) -> Dict[str, str]:
    """Flatten resolved settings into a subprocess environment."""
    return {key: "" if value is None else str(value) for key, value in settings.items()}


def import_certs(env: Mapping[str, str] = None) -> str:
    """
    Import signing certificates into the keychain.

    Runs the fastlane import lane once with the resolved settings as its
    environment. There is no retry.

    Args:
        env: Environment to resolve settings against (defaults to os.environ)

    Returns:
        "imported" when the lane succeeds

    Raises:
        ExternalCommandError: When fastlane is missing or exits non-zero
    """
    settings = load_settings(env)
    logger.info("Importing certs...")
    try:
        result = run_command(IMPORT_CERTS_COMMAND, check=False, env=settings_to_env(settings))
    except FileNotFoundError as e:
        raise ExternalCommandError(f"{IMPORT_CERTS_COMMAND[0]} not found: {e}", command=IMPORT_CERTS_COMMAND)

    if result.returncode != 0:
        raise ExternalCommandError(
            f"Certificate import failed with exit code {result.returncode}",
            command=IMPORT_CERTS_COMMAND,
            returncode=result.returncode
        )
    return "imported"


@task(name='import-certs')
@requires_launch_file
def import_certs_task(ctx):
    """
    Import signing certificates with fastlane using the launch settings.

    Examples:
        launch import-certs
    """
    try:
        import_certs()
    except ExternalCommandError as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)
    print("✅ Certificates imported")
