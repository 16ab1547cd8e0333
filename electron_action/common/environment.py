"""
Action input reading and host environment probing
Inputs arrive as INPUT_<NAME> environment variables set by the Actions runner
"""

import os
import sys
import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from electron_action import config
from electron_action.common.errors import ConfigurationError


class ActionEnvironment:
    """Reads action inputs and inspects the host the action runs on"""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        cwd: Optional[Union[str, Path]] = None,
        platform_name: Optional[str] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize ActionEnvironment

        Args:
            environ: Variables to read inputs from (defaults to os.environ)
            cwd: Directory probed for lockfiles (defaults to the current directory)
            platform_name: sys.platform style host name (defaults to sys.platform)
            logger: Optional logger instance
        """
        self.environ = os.environ if environ is None else environ
        self.cwd = Path(cwd) if cwd else Path.cwd()
        self.platform_name = platform_name or sys.platform
        self.logger = logger or logging.getLogger(__name__)

    def get_env(self, name: str) -> Optional[str]:
        """Value of an environment variable, or None when it is unset or empty"""
        return self.environ.get(name.upper()) or None

    def has_input(self, name: str) -> bool:
        """Whether the INPUT_<NAME> variable exists at all, even if empty"""
        return f"{config.INPUT_PREFIX}{name}".upper() in self.environ

    def get_input(self, name: str, required: bool = False, allow_empty: bool = False) -> Optional[str]:
        """
        Get an action input

        Args:
            name: Input name as declared in action.yml
            required: Raise if the input has no value
            allow_empty: For required inputs, only fail when the variable is absent

        Returns:
            Input value, or None when undefined or empty

        Raises:
            ConfigurationError: If a required input is not defined
        """
        value = self.get_env(f"{config.INPUT_PREFIX}{name}")
        if required and value is None:
            if not (allow_empty and self.has_input(name)):
                raise ConfigurationError(f'"{name}" input variable is not defined')
        return value

    def get_bool_input(self, name: str, required: bool = False) -> bool:
        """Boolean inputs are true only for the literal string "true" """
        return self.get_input(name, required) == "true"

    def get_platform(self) -> str:
        """
        Determine the host operating system

        Returns:
            One of "mac", "windows" or "linux"
        """
        if self.platform_name == "darwin":
            return config.PLATFORM_MAC
        if self.platform_name == "win32":
            return config.PLATFORM_WINDOWS
        return config.PLATFORM_LINUX

    def detect_package_manager(self) -> str:
        """
        Pick the default package manager from the lockfile in the working directory

        Returns:
            "yarn" for yarn.lock, "pnpm" for pnpm-lock.yaml, otherwise "npm"
        """
        for lockfile, manager in config.LOCKFILES:
            if (self.cwd / lockfile).exists():
                self.logger.debug(f"Found {lockfile}, defaulting to {manager}")
                return manager
        return config.DEFAULT_PACKAGE_MANAGER

    def with_input_defaults(self, defaults: Mapping[str, str]) -> "ActionEnvironment":
        """
        Copy of this environment with defaults filled in for absent inputs

        Args:
            defaults: Mapping of input name to default value

        Returns:
            New ActionEnvironment; variables already present are never overridden
        """
        merged = dict(self.environ)
        for name, value in defaults.items():
            merged.setdefault(f"{config.INPUT_PREFIX}{name}".upper(), value)
        return ActionEnvironment(merged, self.cwd, self.platform_name, self.logger)

    def is_github_actions(self) -> bool:
        """Whether the action is executed by a GitHub Actions runner"""
        return self.environ.get("GITHUB_ACTIONS") == "true"
