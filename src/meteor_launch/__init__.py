"""
Meteor Launch - environment configuration helper for Meteor mobile builds.
"""

__version__ = '0.1.0'


def get_version() -> str:
    """Return the installed meteor-launch version."""
    return __version__
