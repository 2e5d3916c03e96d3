"""
Task decorators for launch file gating.
"""
import functools
import sys

from meteor_launch.settings.exceptions import LaunchException
from meteor_launch.settings.gate import check_launch_file
from .util import get_repo_root


def _action_name(func) -> str:
    name = func.__name__
    if name.endswith('_task'):
        name = name[:-len('_task')]
    return name.replace('_', '-')


def requires_launch_file(func):
    """Decorator that refuses to run a task when launch.json is missing."""
    @functools.wraps(func)
    def wrapper(ctx, *args, **kwargs):
        try:
            check_launch_file([_action_name(func)], repo_root=get_repo_root())
        except LaunchException as e:
            print(e.guidance, file=sys.stderr)
            sys.exit(1)
        return func(ctx, *args, **kwargs)
    return wrapper
