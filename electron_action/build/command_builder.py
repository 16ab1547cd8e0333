"""
Packaging command construction
"""

import shlex
from dataclasses import dataclass
from typing import List, Tuple

from electron_action import config
from electron_action.build.package_manager import exec_prefix
from electron_action.common.config_loader import RunConfig
from electron_action.common.errors import ConfigurationError


@dataclass(frozen=True)
class BuildCommand:
    """electron-builder invocation derived from a RunConfig"""
    tokens: Tuple[str, ...]

    @classmethod
    def from_config(cls, run_config: RunConfig) -> "BuildCommand":
        return cls(tuple(build_packaging_command(run_config)))

    def as_list(self) -> List[str]:
        return list(self.tokens)

    def __str__(self) -> str:
        return shlex.join(self.tokens)


def _unquote(token: str) -> str:
    if len(token) >= 2 and token[0] == token[-1] and token[0] in "\"'":
        return token[1:-1]
    return token


def split_args(args: str, platform: str = config.PLATFORM_LINUX) -> List[str]:
    """
    Split the free-form `args` input into tokens

    On Windows backslashes are path separators, not escapes, so the string is
    split in non-POSIX mode and one pair of surrounding quotes is removed
    from each token.

    Args:
        args: Value of the `args` input
        platform: Resolved platform name

    Returns:
        Argument tokens

    Raises:
        ConfigurationError: If the quoting cannot be parsed
    """
    try:
        if platform == config.PLATFORM_WINDOWS:
            return [_unquote(token) for token in shlex.split(args, posix=False)]
        return shlex.split(args)
    except ValueError as e:
        raise ConfigurationError(f'Cannot parse "args" input "{args}": {e}') from e


def build_packaging_command(run_config: RunConfig) -> List[str]:
    """
    Build the packaging command tokens

    Layout: exec prefix, packaging tool, --<platform>, optional publish flags,
    mac architecture flags, then the user's extra arguments unchanged.

    Args:
        run_config: Resolved run configuration

    Returns:
        Command tokens

    Raises:
        ConfigurationError: Unsupported package manager or unparsable args
    """
    tool = config.VUE_CLI_BUILD_CMD if run_config.use_vue_cli else config.ELECTRON_BUILDER_CMD

    cmd = exec_prefix(run_config.package_manager) + list(tool)
    cmd.append(f"--{run_config.platform}")

    if run_config.release:
        cmd.extend(config.PUBLISH_FLAGS)

    if run_config.platform == config.PLATFORM_MAC:
        cmd.extend(config.MAC_ARCH_FLAGS)

    cmd.extend(split_args(run_config.args, run_config.platform))
    return cmd
