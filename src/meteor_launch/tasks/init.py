"""
Launch file initialization.
"""

import json
import logging
from pathlib import Path
from invoke import task

from meteor_launch.settings.loading import LAUNCH_FILE, DEFAULT_OUTPUT_DIR

logger = logging.getLogger(__name__)

CREATED_MESSAGE = f"{LAUNCH_FILE} created. Open it and fill out the vars"
EXISTS_MESSAGE = f"{LAUNCH_FILE} already exists"

LAUNCH_TEMPLATE = {
    "METEOR_INPUT_DIR": "",
    "METEOR_OUTPUT_DIR": DEFAULT_OUTPUT_DIR,
    "ROOT_URL": "",
    "METEOR_SETTINGS": "",
    "XCODE_SCHEME_NAME": "",
    "APP_IDENTIFIER": "",
    "FASTLANE_USER": "",
    "FASTLANE_PASSWORD": "",
    "FASTLANE_TEAM_ID": "",
    "FASTLANE_ITC_TEAM_ID": "",
    "MATCH_GIT_URL": "",
    "MATCH_PASSWORD": "",
    "CERT_PATH": "",
    "CERT_PASSWORD": "",
    "KEYCHAIN_NAME": "",
    "KEYCHAIN_PASSWORD": "",
    "ANDROID_KEY": "",
    "ANDROID_KEYSTORE": "",
    "ANDROID_KEYSTORE_PASSWORD": "",
    "ANDROID_PACKAGE_NAME": "",
    "ANDROID_ZIPALIGN": "",
    "ANDROID_JSON_KEY_FILE": "",
    "HOCKEY_API_TOKEN": "",
    "CRASHLYTICS_API_TOKEN": "",
    "CRASHLYTICS_BUILD_SECRET": "",
    "SLACK_URL": "",
}


def init_launch_file(repo_root: Path = None) -> str:
    """
    Create a default launch.json unless one already exists.

    Args:
        repo_root: Directory to create launch.json in (defaults to cwd)

    Returns:
        A message saying whether the file was created or already existed
    """
    if repo_root is None:
        repo_root = Path.cwd()

    launch_path = Path(repo_root) / LAUNCH_FILE
    if launch_path.exists():
        logger.debug(f"Leaving existing launch file at {launch_path}")
        return EXISTS_MESSAGE

    with open(launch_path, 'w') as f:
        json.dump(LAUNCH_TEMPLATE, f, indent=2)
        f.write('\n')
    logger.info(f"Wrote launch template to {launch_path}")
    return CREATED_MESSAGE


@task
def init(ctx):
    """
    Create a launch.json template in the current directory.

    Examples:
        launch init
    """
    message = init_launch_file()
    if message == CREATED_MESSAGE:
        print(f"✅ {message}")
    else:
        print(f"ℹ️  {message}")
