"""
Command construction for package managers and electron-builder
"""
from .package_manager import install_command, run_script_command, exec_prefix
from .command_builder import BuildCommand, build_packaging_command

__all__ = [
    'install_command',
    'run_script_command',
    'exec_prefix',
    'BuildCommand',
    'build_packaging_command',
]
