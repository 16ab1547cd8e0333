"""
Common utilities
"""
from .logging_utils import setup_logging, get_logger, log_step
from .errors import ActionError, ConfigurationError, SubprocessError
from .environment import ActionEnvironment
from .manifest import ActionManifest
from .config_loader import ConfigLoader, RunConfig
from .shell_executor import ShellExecutor

__all__ = [
    'setup_logging',
    'get_logger',
    'log_step',
    'ActionError',
    'ConfigurationError',
    'SubprocessError',
    'ActionEnvironment',
    'ActionManifest',
    'ConfigLoader',
    'RunConfig',
    'ShellExecutor',
]
