"""
Exception classes with built-in guidance for launch configuration errors.
"""
import sys
from typing import List, Optional


class LaunchException(Exception):
    """Base exception for all meteor-launch errors."""
    def __init__(self, message: str, error_type: str = None):
        super().__init__(message)
        self.error_type = error_type
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Launch error: {self}
💡 Check your launch.json and try again
"""


class LaunchFileNotFoundException(LaunchException):
    """Raised when an action needs launch.json but it does not exist."""
    def __init__(self, message: str, path: str = None, action: str = None):
        self.path = path
        self.action = action
        super().__init__(message, error_type="launch_file_missing")

    def _generate_guidance(self):
        command = self._get_current_command()
        return f"""
❌ launch.json not found: {self.path or 'launch.json'}
💡 '{command}' needs a launch file in the current directory:
   1. Create one: launch init
   2. Fill out the vars in launch.json, then re-run: {command}
"""


class ExternalCommandError(LaunchException):
    """Raised when a delegated external executable fails or is missing."""
    def __init__(self, message: str, command: Optional[List[str]] = None, returncode: int = None):
        self.command = command or []
        self.returncode = returncode
        super().__init__(message, error_type="external_command")

    def _generate_guidance(self):
        executable = self.command[0] if self.command else 'the external tool'
        exit_info = f" (exit code {self.returncode})" if self.returncode is not None else ""
        return f"""
❌ External command failed{exit_info}: {' '.join(self.command) or self}
💡 Make sure {executable} is installed and on your PATH, then try again
"""
