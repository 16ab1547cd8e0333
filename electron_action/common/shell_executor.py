"""
External command execution with inherited output streams
Commands are token lists; no shell is involved
"""

import os
import shlex
import shutil
import subprocess
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from electron_action.common.errors import SubprocessError


class ShellExecutor:
    """
    Runs package manager and packaging tool commands, streaming their
    output straight to the action log
    """

    def __init__(self, debug_mode: bool = False, logger: Optional[logging.Logger] = None):
        """
        Initialize ShellExecutor

        Args:
            debug_mode: If True, also log the working directory and injected variable names
            logger: Optional logger instance
        """
        self.debug_mode = debug_mode
        self.logger = logger or logging.getLogger(__name__)

    def run(
        self,
        cmd: List[str],
        cwd: Optional[Union[str, Path]] = None,
        extra_env: Optional[Dict[str, str]] = None
    ) -> subprocess.CompletedProcess:
        """
        Run a command and wait for it to exit

        stdout/stderr are inherited from the action process and there is no
        timeout: the call blocks until the child exits on its own.

        Args:
            cmd: Command tokens
            cwd: Working directory
            extra_env: Variables added to a copy of the current environment

        Returns:
            subprocess.CompletedProcess of the finished command

        Raises:
            SubprocessError: Command exited non-zero or could not be started
        """
        cmd_str = self.format_command(cmd)
        cwd_path = Path(cwd) if cwd else Path.cwd()

        self.logger.info(f"RUNNING COMMAND: {cmd_str}")
        if self.debug_mode:
            self.logger.debug(f"   cwd: {cwd_path}")
            if extra_env:
                self.logger.debug(f"   env: {', '.join(sorted(extra_env))}")

        env = os.environ.copy()
        if extra_env:
            env.update(extra_env)

        try:
            return subprocess.run(
                self._resolve(cmd, env),
                cwd=cwd_path,
                env=env,
                check=True,
                shell=False,
            )
        except subprocess.CalledProcessError as e:
            self.logger.debug(f"Command failed ({e.returncode}): {cmd_str}")
            raise SubprocessError(cmd, e.returncode) from e
        except OSError as e:
            self.logger.debug(f"Command could not be started: {cmd_str} ({e})")
            raise SubprocessError(cmd, None, f"Command could not be started: {cmd_str} ({e})") from e

    def _resolve(self, cmd: List[str], env: Dict[str, str]) -> List[str]:
        """Resolve the executable on PATH so npm.cmd and friends work on Windows"""
        if not cmd:
            return cmd
        executable = shutil.which(cmd[0], path=env.get("PATH"))
        if executable is None:
            return list(cmd)
        return [executable] + list(cmd[1:])

    @staticmethod
    def format_command(cmd: List[str]) -> str:
        """Render command tokens as a copy-pasteable shell string"""
        return shlex.join(cmd)
