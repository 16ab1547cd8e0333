"""
Electron Builder action

Installs JavaScript dependencies and builds/releases an Electron app with
electron-builder from a GitHub Actions workflow.
"""

__version__ = "1.0.0"
