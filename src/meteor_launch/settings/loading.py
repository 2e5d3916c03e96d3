"""
Settings resolution: launch.json merged with environment variables.

The resolved mapping is recomputed on every invocation and never persisted.
Environment values always win over launch.json values for the same key, and
a fixed set of derived path fields is computed on top of the merge.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .models import LaunchFields, ResolveContext

logger = logging.getLogger(__name__)

LAUNCH_FILE = "launch.json"
DEFAULT_OUTPUT_DIR = ".build"
SCHEME_PLACEHOLDER = "undefined"
DERIVED_KEYS = (
    "ANDROID_ZIPALIGN",
    "METEOR_INPUT_DIR",
    "METEOR_OUTPUT_DIR",
    "METEOR_OUTPUT_ABSOLUTE",
    "FL_REPORT_PATH",
    "XCODE_PROJECT",
    "SIGH_OUTPUT_PATH",
    "GYM_OUTPUT_DIRECTORY",
)


def read_launch_file(repo_root: Path = None) -> Dict[str, Any]:
    """Read launch.json from the repository root.

    A missing, unreadable or malformed file means "no overrides", never an error.

    Args:
        repo_root: Directory holding launch.json, defaults to current working directory

    Returns:
        The parsed JSON object, or an empty dict
    """
    if repo_root is None:
        repo_root = Path.cwd()

    launch_path = Path(repo_root) / LAUNCH_FILE
    if not launch_path.exists():
        logger.debug(f"No launch file at {launch_path}")
        return {}

    try:
        with open(launch_path, 'r', encoding='utf-8-sig') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable launch file {launch_path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring launch file {launch_path}: expected a JSON object, got {type(data).__name__}")
        return {}

    logger.debug(f"Loaded {len(data)} keys from {launch_path}")
    return data


def _resolve(cwd: str, *segments: str) -> str:
    return os.path.normpath(os.path.join(cwd, *segments))


def _resolve_zipalign(value: Optional[str], context: ResolveContext) -> Optional[str]:
    if value is None:
        return None
    if value.startswith('~/'):
        return _resolve(context.home, value[2:].lstrip('/'))
    if os.path.isabs(value):
        return value
    return _resolve(context.cwd, value)


def generate_settings(launch_file: Mapping[str, Any], env: Mapping[str, str],
                      context: ResolveContext = None) -> Dict[str, Any]:
    """Resolve launch settings.

    Args:
        launch_file: Parsed launch.json object (empty when absent)
        env: Environment mapping; its keys override launch.json keys
        context: Working and home directories, defaults to the running process

    Returns:
        Merged mapping with the derived fields filled in
    """
    if context is None:
        context = ResolveContext.from_process()

    settings: Dict[str, Any] = dict(launch_file or {})
    settings.update(env or {})

    fields = LaunchFields.from_mapping(settings)

    zipalign = _resolve_zipalign(fields.ANDROID_ZIPALIGN, context)
    if zipalign is not None:
        settings['ANDROID_ZIPALIGN'] = zipalign

    if fields.METEOR_INPUT_DIR is None:
        settings['METEOR_INPUT_DIR'] = context.cwd
    else:
        settings['METEOR_INPUT_DIR'] = _resolve(context.cwd, fields.METEOR_INPUT_DIR)

    # Kept as given (relative or absolute); only the _ABSOLUTE variant is resolved
    output_dir = fields.METEOR_OUTPUT_DIR or DEFAULT_OUTPUT_DIR
    settings['METEOR_OUTPUT_DIR'] = output_dir
    output_absolute = _resolve(context.cwd, output_dir)
    settings['METEOR_OUTPUT_ABSOLUTE'] = output_absolute

    settings['FL_REPORT_PATH'] = os.path.join(output_absolute, 'ios')

    scheme = fields.XCODE_SCHEME_NAME
    if scheme is None:
        logger.warning(f"XCODE_SCHEME_NAME is not set, XCODE_PROJECT will use '{SCHEME_PLACEHOLDER}.xcodeproj'")
        scheme = SCHEME_PLACEHOLDER
    settings['XCODE_PROJECT'] = os.path.join(output_absolute, 'ios', 'project', f"{scheme}.xcodeproj")

    settings['SIGH_OUTPUT_PATH'] = context.cwd
    settings['GYM_OUTPUT_DIRECTORY'] = context.cwd

    return settings


def load_settings(env: Mapping[str, str] = None, repo_root: Path = None) -> Dict[str, Any]:
    """Read launch.json and resolve it against the environment.

    Args:
        env: Environment mapping, defaults to os.environ
        repo_root: Directory holding launch.json and used as the working
            directory for path resolution, defaults to current working directory

    Returns:
        The resolved settings mapping
    """
    if env is None:
        env = os.environ
    if repo_root is None:
        repo_root = Path.cwd()

    launch_file = read_launch_file(repo_root)
    context = ResolveContext.from_process(cwd=os.path.abspath(repo_root))
    return generate_settings(launch_file, dict(env), context)
