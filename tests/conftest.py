import json
from pathlib import Path

import pytest

from electron_action.common.environment import ActionEnvironment
from electron_action.common.errors import SubprocessError
from electron_action.common.shell_executor import ShellExecutor

PACKAGING_TOOLS = ("electron-builder", "vue-cli-service")


class RecordingExecutor(ShellExecutor):
    """ShellExecutor that records commands instead of running them"""

    def __init__(self, fail_packaging=0, fail_install=False, fail_script=False):
        super().__init__()
        self.calls = []
        self.fail_packaging = fail_packaging
        self.fail_install = fail_install
        self.fail_script = fail_script

    def run(self, cmd, cwd=None, extra_env=None):
        self.calls.append({"cmd": list(cmd), "cwd": Path(cwd) if cwd else None, "env": dict(extra_env or {})})

        if any(tool in cmd for tool in PACKAGING_TOOLS):
            if self.fail_packaging > 0:
                self.fail_packaging -= 1
                raise SubprocessError(cmd, 1)
        elif "install" in cmd and self.fail_install:
            raise SubprocessError(cmd, 1)
        elif "run" in cmd and self.fail_script:
            raise SubprocessError(cmd, 2)
        return None

    @property
    def commands(self):
        return [call["cmd"] for call in self.calls]

    def packaging_calls(self):
        return [c for c in self.calls if any(tool in c["cmd"] for tool in PACKAGING_TOOLS)]


@pytest.fixture
def base_inputs():
    return {
        "INPUT_RELEASE": "false",
        "INPUT_PACKAGE_ROOT": "app",
        "INPUT_BUILD_SCRIPT_NAME": "build",
        "INPUT_GITHUB_TOKEN": "ghp_secret",
        "GITHUB_ACTIONS": "true",
    }


@pytest.fixture
def workspace(tmp_path):
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    (app_dir / "package.json").write_text(json.dumps({"name": "demo", "version": "1.0.0"}))
    return tmp_path


@pytest.fixture
def make_env(workspace, base_inputs):
    def _make(platform_name="linux", **inputs):
        environ = dict(base_inputs)
        for name, value in inputs.items():
            key = f"INPUT_{name}".upper()
            if value is None:
                environ.pop(key, None)
            else:
                environ[key] = value
        return ActionEnvironment(environ, cwd=workspace, platform_name=platform_name)
    return _make


@pytest.fixture
def executor():
    return RecordingExecutor()
