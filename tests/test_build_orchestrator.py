import logging

import pytest

from electron_action.common.config_loader import ConfigLoader
from electron_action.common.errors import ConfigurationError, SubprocessError
from electron_action.orchestrator.build_orchestrator import BuildOrchestrator

from tests.conftest import RecordingExecutor


def orchestrate(env, executor, workspace):
    run_config = ConfigLoader(env).load()
    return BuildOrchestrator(run_config, executor, workspace=workspace)


def test_full_run_order(make_env, executor, workspace):
    attempts = orchestrate(make_env(), executor, workspace).run()

    assert attempts == 1
    assert executor.commands == [
        ["npm", "install"],
        ["npm", "run", "build"],
        ["npx", "--no-install", "electron-builder", "--linux"],
    ]
    assert all(call["cwd"] == workspace / "app" for call in executor.calls)


def test_credentials_passed_to_every_command(make_env, executor, workspace):
    orchestrate(make_env(platform_name="darwin", mac_certs="bWFj"), executor, workspace).run()

    for call in executor.calls:
        assert call["env"]["GH_TOKEN"] == "ghp_secret"
        assert call["env"]["CSC_LINK"] == "bWFj"
        assert call["env"]["ADBLOCK"] == "true"


def test_missing_package_json_spawns_nothing(make_env, executor, workspace):
    (workspace / "app" / "package.json").unlink()

    with pytest.raises(ConfigurationError, match="package.json"):
        orchestrate(make_env(), executor, workspace).run()
    assert executor.calls == []


def test_retry_until_success(make_env, workspace, caplog):
    caplog.set_level(logging.INFO)
    executor = RecordingExecutor(fail_packaging=2)

    attempts = orchestrate(make_env(max_attempts="3"), executor, workspace).run()

    assert attempts == 3
    assert len(executor.packaging_calls()) == 3
    assert "Attempt 1 failed:" in caplog.text
    assert "Attempt 2 failed:" in caplog.text
    assert "Attempt 3 failed:" not in caplog.text


def test_single_attempt_failure_is_fatal(make_env, workspace, caplog):
    caplog.set_level(logging.INFO)
    executor = RecordingExecutor(fail_packaging=1)

    with pytest.raises(SubprocessError):
        orchestrate(make_env(max_attempts="1"), executor, workspace).run()
    assert len(executor.packaging_calls()) == 1
    assert "Attempt 1 failed:" not in caplog.text


def test_final_attempt_failure_propagates(make_env, workspace):
    executor = RecordingExecutor(fail_packaging=5)

    with pytest.raises(SubprocessError) as excinfo:
        orchestrate(make_env(max_attempts="3"), executor, workspace).run()
    assert excinfo.value.returncode == 1
    assert len(executor.packaging_calls()) == 3


def test_install_failure_is_not_retried(make_env, workspace):
    executor = RecordingExecutor(fail_install=True)

    with pytest.raises(SubprocessError):
        orchestrate(make_env(max_attempts="3"), executor, workspace).run()
    assert executor.commands == [["npm", "install"]]


def test_build_script_failure_is_not_retried(make_env, workspace):
    executor = RecordingExecutor(fail_script=True)

    with pytest.raises(SubprocessError):
        orchestrate(make_env(max_attempts="3"), executor, workspace).run()
    assert executor.commands == [["npm", "install"], ["npm", "run", "build"]]


@pytest.mark.parametrize("lockfile", [None, "yarn.lock", "pnpm-lock.yaml"])
def test_skip_install(make_env, executor, workspace, lockfile, caplog):
    caplog.set_level(logging.INFO)
    if lockfile:
        (workspace / lockfile).write_text("")

    orchestrate(make_env(skip_install="true"), executor, workspace).run()

    assert not any("install" in cmd for cmd in executor.commands)
    assert "Skipping dependency installation" in caplog.text


def test_skip_build_logs_and_runs_no_script(make_env, executor, workspace, caplog):
    caplog.set_level(logging.INFO)
    orchestrate(make_env(skip_build="true"), executor, workspace).run()

    assert not any("run" in cmd for cmd in executor.commands)
    assert "Skipping build script" in caplog.text


def test_empty_build_script_is_silent_noop(make_env, executor, workspace, caplog):
    caplog.set_level(logging.INFO)
    orchestrate(make_env(build_script_name=""), executor, workspace).run()

    assert executor.commands == [
        ["npm", "install"],
        ["npx", "--no-install", "electron-builder", "--linux"],
    ]
    assert "Skipping build script" not in caplog.text


def test_unsupported_package_manager_fails_at_install(make_env, executor, workspace):
    with pytest.raises(ConfigurationError, match="Unsupported package manager: bun"):
        orchestrate(make_env(package_manager="bun"), executor, workspace).run()
    assert executor.calls == []


def test_packaging_runs_in_app_root(make_env, executor, workspace):
    (workspace / "app" / "electron").mkdir()
    orchestrate(make_env(app_root="app/electron", skip_install="true", skip_build="true"),
                executor, workspace).run()

    assert executor.calls[0]["cwd"] == workspace / "app" / "electron"


def test_pnpm_release_on_mac(make_env, executor, workspace):
    orchestrate(
        make_env(platform_name="darwin", package_manager="pnpm", release="true", skip_build="true"),
        executor,
        workspace,
    ).run()

    assert executor.commands == [
        ["pnpm", "install", "--frozen-lockfile"],
        ["pnpm", "exec", "electron-builder", "--mac", "--publish", "always", "--arm64", "--x64"],
    ]


def test_first_success_stops_retrying(make_env, executor, workspace, caplog):
    caplog.set_level(logging.INFO)
    attempts = orchestrate(make_env(max_attempts="4"), executor, workspace).run()

    assert attempts == 1
    assert len(executor.packaging_calls()) == 1
    assert "failed:" not in caplog.text


def test_final_failure_logs_only_earlier_attempts(make_env, workspace, caplog):
    caplog.set_level(logging.INFO)
    executor = RecordingExecutor(fail_packaging=2)

    with pytest.raises(SubprocessError):
        orchestrate(make_env(max_attempts="2"), executor, workspace).run()
    assert len(executor.packaging_calls()) == 2
    assert "Attempt 1 failed:" in caplog.text
    assert "Attempt 2 failed:" not in caplog.text
