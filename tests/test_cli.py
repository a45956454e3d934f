"""Tests for the command line interface."""
import json
import sys

import pytest
from click.testing import CliRunner

from lambda_deploy.backends import BackendFactory
from lambda_deploy.cli.main import cli, main
from lambda_deploy.constants import ExitCode
from lambda_deploy.services import DeployServiceFactory


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def backend(fake_backend, monkeypatch):
    monkeypatch.setattr(BackendFactory, "create", lambda credentials, config=None: fake_backend)
    return fake_backend


@pytest.fixture
def invoke(runner, config_dir, project_root):
    def run(*args, **kwargs):
        return runner.invoke(
            cli,
            ["--config-dir", str(config_dir), "--project-root", str(project_root), *args],
            **kwargs
        )
    return run


def test_deploy_success(invoke, backend, commit_hash):
    result = invoke("deploy", "-f", "orders", "-e", "prod", "-c", commit_hash)

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "orders_prod" in result.output
    assert "Deploy completed" in result.output
    assert backend.aliases == {("orders_prod", "LIVE"): "1"}


def test_deploy_json_output(invoke, backend, commit_hash):
    result = invoke("deploy", "-f", "orders", "-e", "staging", "-c", commit_hash, "--json")

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert json.loads(result.output) == {
        "FunctionName": "orders_staging", "AliasName": "LIVE", "FunctionVersion": "1"
    }


def test_invalid_commit_hash_fails_before_reading_config(runner, project_root, tmp_path, backend):
    result = runner.invoke(cli, [
        "--config-dir", str(tmp_path / "does-not-exist"),
        "--project-root", str(project_root),
        "deploy", "-f", "orders", "-e", "prod", "-c", "abc123",
    ])

    assert result.exit_code == ExitCode.INVALID_REQUEST
    assert "40" in result.output
    assert backend.calls == []


def test_unknown_environment_exit_code(invoke, backend, commit_hash):
    result = invoke("deploy", "-f", "orders", "-e", "qa", "-c", commit_hash)

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert backend.calls == []


def test_missing_config_file_exit_code(runner, project_root, tmp_path, backend, commit_hash):
    empty = tmp_path / "empty"
    empty.mkdir()

    result = runner.invoke(cli, [
        "--config-dir", str(empty), "--project-root", str(project_root),
        "deploy", "-f", "orders", "-e", "prod", "-c", commit_hash,
    ])

    assert result.exit_code == ExitCode.CONFIG_ERROR


def test_missing_manifest_entry_exit_code(invoke, backend, commit_hash):
    result = invoke("deploy", "-f", "broken", "-e", "prod", "-c", commit_hash)

    assert result.exit_code == ExitCode.MISSING_MANIFEST_ENTRY
    assert "missing.js" in result.output
    assert backend.calls == []


def test_publish_failure_exit_code(invoke, backend, commit_hash):
    backend.publish_error = RuntimeError("throttled")

    result = invoke("deploy", "-f", "orders", "-e", "prod", "-c", commit_hash)

    assert result.exit_code == ExitCode.PUBLISH_FAILED
    assert backend.call_names() == ["publish_code"]


def test_alias_failure_exit_code_and_hint(invoke, backend, commit_hash):
    backend.start_version = 6
    backend.alias_error = RuntimeError("conflict")

    result = invoke("deploy", "-f", "orders", "-e", "prod", "-c", commit_hash)

    assert result.exit_code == ExitCode.ALIAS_UPDATE_FAILED
    assert "[LD007]" in result.output
    assert "set-alias --version 7" in result.output


def test_set_alias(invoke, backend):
    result = invoke("set-alias", "-f", "orders", "-e", "prod", "--version", "3")

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert backend.aliases == {("orders_prod", "LIVE"): "3"}
    assert backend.call_names() == ["update_alias"]


def test_set_alias_failure(invoke, backend):
    backend.alias_error = RuntimeError("denied")

    result = invoke("set-alias", "-f", "orders", "-e", "prod", "--version", "3")

    assert result.exit_code == ExitCode.ALIAS_UPDATE_FAILED


def test_config_dir_from_environment(runner, config_dir, project_root, backend, commit_hash):
    result = runner.invoke(
        cli,
        ["--project-root", str(project_root), "deploy", "-f", "orders", "-e", "prod", "-c", commit_hash],
        env={"LAMBDA_DEPLOY_CONFIG_DIR": str(config_dir)},
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output


def test_missing_required_option(invoke):
    result = invoke("deploy", "-f", "orders", "-e", "prod")

    assert result.exit_code == 2
    assert "--commit-hash" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "lambda-deploy" in result.output


def test_main_exits_130_on_ctrl_c(monkeypatch, config_dir, project_root, commit_hash):
    def interrupt(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(DeployServiceFactory, "create", interrupt)
    monkeypatch.setattr(sys, "argv", [
        "lambda-deploy", "--config-dir", str(config_dir), "--project-root", str(project_root),
        "deploy", "-f", "orders", "-e", "prod", "-c", commit_hash,
    ])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == ExitCode.INTERRUPTED


def test_main_usage_error_exit_code(monkeypatch, project_root):
    monkeypatch.setattr(sys, "argv", [
        "lambda-deploy", "--project-root", str(project_root), "deploy", "-f", "orders",
    ])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 2


def test_main_stage_exit_code(monkeypatch, backend, config_dir, project_root, commit_hash):
    monkeypatch.setattr(sys, "argv", [
        "lambda-deploy", "--config-dir", str(config_dir), "--project-root", str(project_root),
        "deploy", "-f", "broken", "-e", "prod", "-c", commit_hash,
    ])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == ExitCode.MISSING_MANIFEST_ENTRY
