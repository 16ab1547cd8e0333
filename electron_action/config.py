"""
Configuration constants for the Electron Builder action
Central source of truth for input names, environment variables and tool names.
"""

import os

# --- ACTION INPUTS ---
# GitHub Actions exposes `with:` inputs as INPUT_<NAME> environment variables
INPUT_PREFIX = "INPUT_"

# Every input the action reads, in the order they are resolved
KNOWN_INPUTS = [
    "release",
    "package_root",
    "build_script_name",
    "skip_build",
    "skip_install",
    "use_vue_cli",
    "args",
    "max_attempts",
    "package_manager",
    "app_root",
    "github_token",
    "mac_certs",
    "mac_certs_password",
    "windows_certs",
    "windows_certs_password",
]

REQUIRED_INPUTS = [
    "release",
    "package_root",
    "build_script_name",
    "github_token",
]

# --- ENVIRONMENT FOR electron-builder ---
GH_TOKEN_VAR = "GH_TOKEN"
CSC_LINK_VAR = "CSC_LINK"
CSC_KEY_PASSWORD_VAR = "CSC_KEY_PASSWORD"
ADBLOCK_VAR = "ADBLOCK"

# --- FILES ---
PACKAGE_JSON = "package.json"
ACTION_MANIFEST = "action.yml"

# Checked in this order; the first one found wins
LOCKFILES = [
    ("yarn.lock", "yarn"),
    ("pnpm-lock.yaml", "pnpm"),
]

# --- TOOLS ---
PACKAGE_MANAGERS = ["npm", "yarn", "pnpm"]
DEFAULT_PACKAGE_MANAGER = "npm"

ELECTRON_BUILDER_CMD = ["electron-builder"]
VUE_CLI_BUILD_CMD = ["vue-cli-service", "electron:build"]

# --- PLATFORMS ---
PLATFORM_MAC = "mac"
PLATFORM_WINDOWS = "windows"
PLATFORM_LINUX = "linux"

MAC_ARCH_FLAGS = ["--arm64", "--x64"]
PUBLISH_FLAGS = ["--publish", "always"]

# --- RETRY ---
DEFAULT_MAX_ATTEMPTS = 1


def is_debug_mode() -> bool:
    """Debug logging is enabled by DEBUG_MODE=true or GitHub's step debug flag"""
    return (
        os.getenv("DEBUG_MODE", "false").lower() == "true"
        or os.getenv("RUNNER_DEBUG", "") == "1"
    )
