"""Tests for the synchronous Deployer API."""
import pytest

from lambda_deploy import Deployer
from lambda_deploy.api import deployer as deployer_module
from lambda_deploy.api.exceptions import ConfigError, InvalidRequestError


def test_deploy(config_dir, project_root, fake_backend, commit_hash):
    deployer = Deployer(config_dir, project_root, backend=fake_backend)

    result = deployer.deploy("orders", "prod", commit_hash)

    assert result.function_name == "orders_prod"
    assert result.function_version == "1"


def test_set_alias(config_dir, project_root, fake_backend):
    binding = Deployer(config_dir, project_root, backend=fake_backend).set_alias("orders", "prod", "4")

    assert binding.function_version == "4"


def test_invalid_request(config_dir, project_root, fake_backend):
    with pytest.raises(InvalidRequestError):
        Deployer(config_dir, project_root, backend=fake_backend).deploy("orders", "prod", "")


def test_missing_config_directory(tmp_path, project_root):
    with pytest.raises(ConfigError):
        Deployer(tmp_path / "nowhere", project_root)


def test_deploy_convenience_function(config_dir, project_root, fake_backend, commit_hash):
    result = deployer_module.deploy(
        "orders", "staging", commit_hash, config_dir, project_root, backend=fake_backend
    )

    assert result.to_dict()["FunctionName"] == "orders_staging"
