"""
Settings resolution for meteor-launch.

Merges launch.json with environment variables and derives the output paths
consumed by Xcode, Gradle and fastlane.
"""

from .models import ResolveContext, LaunchFields
from .loading import LAUNCH_FILE, read_launch_file, generate_settings, load_settings
from .gate import BYPASS_ACTIONS, launch_file_required, check_launch_file
from .exceptions import LaunchException, LaunchFileNotFoundException, ExternalCommandError


__all__ = [
    'ResolveContext',
    'LaunchFields',
    'LAUNCH_FILE',
    'read_launch_file',
    'generate_settings',
    'load_settings',
    'BYPASS_ACTIONS',
    'launch_file_required',
    'check_launch_file',
    'LaunchException',
    'LaunchFileNotFoundException',
    'ExternalCommandError',
]
