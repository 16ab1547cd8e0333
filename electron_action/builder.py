"""
Main entry point of the Electron Builder action
Installs NPM dependencies and builds/releases the Electron app
"""

import sys
from pathlib import Path
from typing import Mapping, Optional

from electron_action import config
from electron_action.common.config_loader import ConfigLoader
from electron_action.common.environment import ActionEnvironment
from electron_action.common.errors import ActionError, ConfigurationError, SubprocessError
from electron_action.common.logging_utils import get_logger, setup_logging
from electron_action.common.manifest import ActionManifest
from electron_action.common.shell_executor import ShellExecutor
from electron_action.orchestrator.build_orchestrator import BuildOrchestrator

logger = get_logger(__name__)

# action.yml sits at the repository root, next to the package
ACTION_DIR = Path(__file__).resolve().parent.parent


def _load_manifest(environment: ActionEnvironment) -> Optional[ActionManifest]:
    """Local runs take input defaults from action.yml; the runner fills them otherwise"""
    if environment.is_github_actions():
        return None
    manifest_path = ACTION_DIR / config.ACTION_MANIFEST
    if not manifest_path.exists():
        logger.debug(f"No {config.ACTION_MANIFEST} at {manifest_path}, inputs have no defaults")
        return None
    return ActionManifest.load(manifest_path)


def run_action(environment: ActionEnvironment, shell_executor: Optional[ShellExecutor] = None) -> int:
    """
    Resolve configuration and run every phase

    Args:
        environment: Source of action inputs
        shell_executor: Executor for external commands

    Returns:
        Number of packaging attempts made

    Raises:
        ActionError: On any fatal configuration or command failure
    """
    loader = ConfigLoader(environment, _load_manifest(environment))
    run_config = loader.load()
    run_config.log_summary(logger)

    executor = shell_executor or ShellExecutor(config.is_debug_mode())
    orchestrator = BuildOrchestrator(run_config, executor, workspace=environment.cwd)
    return orchestrator.run()


def main(environ: Optional[Mapping[str, str]] = None,
         shell_executor: Optional[ShellExecutor] = None) -> int:
    """
    Main entry point

    Returns:
        Exit code
    """
    setup_logging(config.is_debug_mode())

    try:
        attempts = run_action(ActionEnvironment(environ), shell_executor)
    except ConfigurationError as e:
        logger.error(f"❌ {e}")
        return 1
    except SubprocessError as e:
        logger.error(f"❌ {e}")
        return 1
    except ActionError as e:
        logger.error(f"❌ Action failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("\n⚠️ Build interrupted")
        return 130

    suffix = "" if attempts == 1 else f" after {attempts} attempts"
    logger.info(f"✅ Electron app built successfully{suffix}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
