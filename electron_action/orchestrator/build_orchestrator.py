"""
Build orchestration for the Electron Builder action
Install -> build script -> packaging with bounded retry
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from electron_action import config
from electron_action.build.command_builder import BuildCommand
from electron_action.build.package_manager import install_command, run_script_command
from electron_action.common.config_loader import RunConfig
from electron_action.common.errors import ConfigurationError, SubprocessError
from electron_action.common.logging_utils import log_step
from electron_action.common.shell_executor import ShellExecutor


class BuildOrchestrator:
    """
    Runs the action phases strictly in order.

    Only the packaging phase is retried; install and build script failures
    propagate on the first failure.
    """

    def __init__(self, run_config: RunConfig, shell_executor: ShellExecutor,
                 workspace: Optional[Union[str, Path]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize BuildOrchestrator

        Args:
            run_config: Resolved run configuration
            shell_executor: Executor used for every external command
            workspace: Directory relative roots are resolved against (defaults to cwd)
            logger: Optional logger instance
        """
        self.config = run_config
        self.shell_executor = shell_executor
        self.workspace = Path(workspace) if workspace else Path.cwd()
        self.logger = logger or logging.getLogger(__name__)

        self.package_root = self.workspace / run_config.package_root
        self.app_root = self.workspace / run_config.app_root
        self._env: Dict[str, str] = run_config.credentials_env()

    def run(self) -> int:
        """
        Execute the whole action

        Returns:
            Number of packaging attempts made

        Raises:
            ConfigurationError: Missing package.json or unsupported package manager
            SubprocessError: Install/build script failure, or the final packaging attempt failed
        """
        log_step(self.logger, f'Will run {self.config.package_manager} commands in directory "{self.config.package_root}"')

        self.validate_package_root()
        self.install_dependencies()
        self.run_build_script()
        return self.package_app()

    def validate_package_root(self) -> Path:
        """
        Make sure package.json exists in the package root

        Raises:
            ConfigurationError: If package.json is missing
        """
        pkg_json_path = self.package_root / config.PACKAGE_JSON
        if not pkg_json_path.is_file():
            raise ConfigurationError(f'`package.json` file not found at path "{pkg_json_path}"')
        return pkg_json_path

    def install_dependencies(self) -> bool:
        """
        Install dependencies with the configured package manager

        Returns:
            True if the install ran, False if it was skipped
        """
        if self.config.skip_install:
            log_step(self.logger, "Skipping dependency installation because `skip_install` option is set")
            return False

        log_step(self.logger, f"Installing dependencies using {self.config.package_manager}")
        cmd = install_command(self.config.package_manager)
        self.shell_executor.run(cmd, cwd=self.package_root, extra_env=self._env)
        return True

    def run_build_script(self) -> bool:
        """
        Run the package.json build script, if one is named

        Returns:
            True if a script ran
        """
        if self.config.skip_build:
            log_step(self.logger, "Skipping build script because `skip_build` option is set")
            return False

        log_step(self.logger, "Running the build script…")
        if not self.config.build_script_name:
            return False

        cmd = run_script_command(self.config.package_manager, self.config.build_script_name)
        self.shell_executor.run(cmd, cwd=self.package_root, extra_env=self._env)
        return True

    def package_app(self) -> int:
        """
        Run electron-builder, retrying up to max_attempts times

        Attempts follow each other immediately; nothing is reset between them.

        Returns:
            Number of attempts made (the last one succeeded)

        Raises:
            SubprocessError: The final attempt failed
        """
        releasing = " and releasing" if self.config.release else ""
        log_step(self.logger, f"Building{releasing} the Electron app…")

        build_cmd = BuildCommand.from_config(self.config)
        max_attempts = max(1, self.config.max_attempts)

        for attempt in range(1, max_attempts):
            try:
                self.shell_executor.run(build_cmd.as_list(), cwd=self.app_root, extra_env=self._env)
                return attempt
            except SubprocessError as e:
                log_step(self.logger, f"Attempt {attempt} failed:")
                self.logger.warning(str(e))

        # Final attempt: failure propagates to the caller
        self.shell_executor.run(build_cmd.as_list(), cwd=self.app_root, extra_env=self._env)
        return max_attempts
