"""
Removal of the Meteor build output directory.
"""

import logging
import os
import shutil
from typing import Any, Mapping
from invoke import task

from meteor_launch.settings.loading import load_settings
from .decorators import requires_launch_file

logger = logging.getLogger(__name__)


def clean_meteor_output_dir(settings: Mapping[str, Any]) -> bool:
    """
    Delete the build output, whether it is a directory tree or a single file.

    Args:
        settings: Settings mapping holding METEOR_OUTPUT_ABSOLUTE, or at
            least METEOR_OUTPUT_DIR (resolved against the current directory)

    Returns:
        True if something was removed, False if there was nothing to remove
    """
    output_dir = settings.get('METEOR_OUTPUT_ABSOLUTE') or settings.get('METEOR_OUTPUT_DIR')
    if not output_dir or not os.path.lexists(output_dir):
        logger.debug(f"Nothing to clean at {output_dir!r}")
        return False

    if os.path.isdir(output_dir) and not os.path.islink(output_dir):
        shutil.rmtree(output_dir)
    else:
        os.remove(output_dir)
    logger.info(f"Removed {output_dir}")
    return True


@task
@requires_launch_file
def clean(ctx):
    """
    Delete the Meteor build output directory (METEOR_OUTPUT_DIR).

    Examples:
        launch clean
    """
    settings = load_settings()
    if clean_meteor_output_dir(settings):
        print(f"🧹 Removed {settings['METEOR_OUTPUT_ABSOLUTE']}")
    else:
        print(f"ℹ️  {settings['METEOR_OUTPUT_ABSOLUTE']} does not exist")
