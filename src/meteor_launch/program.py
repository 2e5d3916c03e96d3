"""
Command-line entry point for meteor-launch.

Applies launch file gating before handing argv to invoke.
"""

import logging
import sys
from typing import List, Optional
from invoke import Program

from . import __version__
from .settings.exceptions import LaunchException
from .settings.gate import check_launch_file
from .settings.logging import bootstrap_logging
from .tasks import namespace

logger = logging.getLogger(__name__)

# Actions invoke spells differently
ARG_ALIASES = {
    'help': '--help',
    '-v': '--version',
}


def build_program() -> Program:
    """Create the invoke program that runs launch tasks."""
    return Program(
        name='launch',
        binary='launch',
        version=__version__,
        namespace=namespace,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Run the launch CLI.

    Args:
        argv: Full argument vector including the program name, defaults to sys.argv
    """
    if argv is None:
        argv = sys.argv
    args = list(argv[1:])

    bootstrap_logging()

    try:
        check_launch_file(args)
    except LaunchException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)

    if args and args[0] in ARG_ALIASES:
        args[0] = ARG_ALIASES[args[0]]

    logger.debug(f"Running launch with {args}")
    build_program().run([argv[0] if argv else 'launch'] + args)


if __name__ == '__main__':
    main()
