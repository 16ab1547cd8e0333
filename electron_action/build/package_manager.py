"""
Package manager command mapping
Install, script and exec invocations for npm, yarn and pnpm
"""

from typing import List

from electron_action.common.errors import ConfigurationError

INSTALL_COMMANDS = {
    "pnpm": ["pnpm", "install", "--frozen-lockfile"],
    "yarn": ["yarn", "install", "--frozen-lockfile"],
    "npm": ["npm", "install"],
}

# npx must not install a missing packaging tool on the fly
EXEC_PREFIXES = {
    "pnpm": ["pnpm", "exec"],
    "yarn": ["yarn"],
    "npm": ["npx", "--no-install"],
}


def _unsupported(package_manager: str) -> ConfigurationError:
    return ConfigurationError(f"Unsupported package manager: {package_manager}")


def install_command(package_manager: str) -> List[str]:
    """
    Dependency installation command

    Args:
        package_manager: npm, yarn or pnpm

    Returns:
        Command tokens

    Raises:
        ConfigurationError: If the package manager is not supported
    """
    try:
        return list(INSTALL_COMMANDS[package_manager])
    except KeyError:
        raise _unsupported(package_manager)


def run_script_command(package_manager: str, script_name: str) -> List[str]:
    """`<package manager> run <script>` tokens"""
    return [package_manager, "run", script_name]


def exec_prefix(package_manager: str) -> List[str]:
    """
    Prefix that runs a locally installed binary through the package manager

    Raises:
        ConfigurationError: If the package manager is not supported
    """
    try:
        return list(EXEC_PREFIXES[package_manager])
    except KeyError:
        raise _unsupported(package_manager)
