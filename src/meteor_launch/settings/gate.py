"""
Decides whether a command-line action needs launch.json.
"""
import logging
from pathlib import Path
from typing import Optional, Sequence

from .exceptions import LaunchFileNotFoundException
from .loading import LAUNCH_FILE

logger = logging.getLogger(__name__)

BYPASS_ACTIONS = ("init", "help", "--version", "-v")


def _action(args: Optional[Sequence[str]]) -> Optional[str]:
    if not args:
        return None
    return args[0]


def launch_file_required(args: Optional[Sequence[str]]) -> bool:
    """Return True unless the action is a bypass action or no action is given.

    Args:
        args: Command-line arguments after the program name
    """
    action = _action(args)
    return action is not None and action not in BYPASS_ACTIONS


def check_launch_file(args: Optional[Sequence[str]], repo_root: Path = None) -> bool:
    """Gate an action on launch.json existing.

    Args:
        args: Command-line arguments after the program name
        repo_root: Directory expected to hold launch.json, defaults to cwd

    Returns:
        False if the action does not need a launch file, True if it does and one exists

    Raises:
        LaunchFileNotFoundException: If the action needs a launch file and none exists
    """
    if not launch_file_required(args):
        return False

    if repo_root is None:
        repo_root = Path.cwd()
    launch_path = Path(repo_root) / LAUNCH_FILE
    if not launch_path.exists():
        raise LaunchFileNotFoundException(
            f"{LAUNCH_FILE} is required for '{_action(args)}' but was not found",
            path=str(launch_path),
            action=_action(args)
        )

    logger.debug(f"Launch file found at {launch_path}")
    return True
