"""
Exception types raised by the action
Only the entry point turns these into an exit status.
"""

from typing import List, Optional


class ActionError(Exception):
    """Base exception for all action failures."""


class ConfigurationError(ActionError):
    """Raised for missing inputs, a missing package.json or an unknown package manager."""


class SubprocessError(ActionError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(self, cmd: List[str], returncode: Optional[int], message: Optional[str] = None):
        self.cmd = list(cmd)
        self.returncode = returncode
        if message is None:
            rendered = " ".join(self.cmd)
            if returncode is None:
                message = f"Command could not be started: {rendered}"
            else:
                message = f"Command failed with exit code {returncode}: {rendered}"
        super().__init__(message)
