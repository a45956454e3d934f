"""Tests for configuration loading and resolution."""
import json

import pytest

from lambda_deploy.api.exceptions import ConfigError
from lambda_deploy.constants import ErrorCode
from lambda_deploy.models import DeployConfig, DeployRequest
from lambda_deploy.services import ConfigResolver, ConfigService

YAML_CONFIG = """
lambdaFunctions:
  - functionName: orders
    zipContents:
      - index.js
      - lib/
    environments:
      - envName: prod
        nodeEnvValue: ${ORDERS_NODE_ENV}
        liveAliasName: LIVE
"""


@pytest.fixture
def resolver(deploy_config_data, project_root):
    return ConfigResolver(DeployConfig.from_dict(deploy_config_data), project_root)


def test_resolve_builds_context(resolver, project_root, commit_hash):
    context = resolver.resolve(DeployRequest("orders", "prod", commit_hash))

    assert context.full_function_name == "orders_prod"
    assert context.live_alias_name == "LIVE"
    assert context.node_env_value == "production"
    assert context.zip_contents == ("index.js", "lib/")
    assert context.project_root == project_root.resolve()
    assert context.commit_hash == commit_hash


def test_node_env_value_defaults_to_env_name(resolver, commit_hash):
    context = resolver.resolve(DeployRequest("orders", "staging", commit_hash))

    assert context.node_env_value == "staging"


def test_unknown_function(resolver, commit_hash):
    with pytest.raises(ConfigError) as exc_info:
        resolver.resolve(DeployRequest("payments", "prod", commit_hash))

    assert exc_info.value.error_code == ErrorCode.FUNCTION_NOT_FOUND


def test_unknown_environment(resolver, commit_hash):
    with pytest.raises(ConfigError) as exc_info:
        resolver.resolve(DeployRequest("orders", "qa", commit_hash))

    assert exc_info.value.error_code == ErrorCode.ENVIRONMENT_NOT_FOUND
    assert "qa" in str(exc_info.value)


def test_duplicate_environment_is_ambiguous(deploy_config_data, project_root, commit_hash):
    deploy_config_data["lambdaFunctions"][0]["environments"].append(
        {"envName": "prod", "liveAliasName": "BLUE"}
    )
    resolver = ConfigResolver(DeployConfig.from_dict(deploy_config_data), project_root)

    with pytest.raises(ConfigError) as exc_info:
        resolver.resolve(DeployRequest("orders", "prod", commit_hash))

    assert "multiple" in str(exc_info.value)


def test_duplicate_function_is_ambiguous(deploy_config_data, project_root, commit_hash):
    deploy_config_data["lambdaFunctions"].append(deploy_config_data["lambdaFunctions"][0])
    resolver = ConfigResolver(DeployConfig.from_dict(deploy_config_data), project_root)

    with pytest.raises(ConfigError):
        resolver.resolve(DeployRequest("orders", "prod", commit_hash))


def test_load_json_config(config_dir):
    config = ConfigService(config_dir).config

    assert [f.function_name for f in config.functions] == ["orders", "broken"]


def test_config_is_loaded_once(config_dir):
    service = ConfigService(config_dir)
    first = service.config

    (config_dir / "deployConfig.json").write_text("{}")

    assert service.config is first


def test_load_yaml_config_with_env_expansion(tmp_path, monkeypatch):
    monkeypatch.setenv("ORDERS_NODE_ENV", "production")
    (tmp_path / "deployConfig.yaml").write_text(YAML_CONFIG)

    config = ConfigService(tmp_path).load_config()

    environment = config.functions[0].environments[0]
    assert environment.node_env_value == "production"
    assert environment.live_alias_name == "LIVE"


def test_yaml_takes_precedence_over_json(tmp_path):
    (tmp_path / "deployConfig.yaml").write_text(YAML_CONFIG)
    (tmp_path / "deployConfig.json").write_text(json.dumps({"lambdaFunctions": []}))

    config = ConfigService(tmp_path).load_config()

    assert len(config.functions) == 1


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError) as exc_info:
        ConfigService(tmp_path).load_config()

    assert "deployConfig" in str(exc_info.value)


def test_invalid_yaml(tmp_path):
    (tmp_path / "deployConfig.yaml").write_text("lambdaFunctions: [unclosed\n")

    with pytest.raises(ConfigError):
        ConfigService(tmp_path).load_config()


def test_non_mapping_document(tmp_path):
    (tmp_path / "deployConfig.json").write_text("[1, 2, 3]")

    with pytest.raises(ConfigError):
        ConfigService(tmp_path).load_config()


def test_load_credentials_file(config_dir):
    credentials = ConfigService(config_dir).load_credentials()

    assert credentials.access_key_id == "AKIATESTTESTTEST"
    assert credentials.secret_access_key == "test-secret"
    assert credentials.region == "us-east-1"


def test_credentials_fall_back_to_environment(tmp_path, clean_aws_env, monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIAENV")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "env-secret")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-central-1")

    credentials = ConfigService(tmp_path).load_credentials()

    assert credentials.access_key_id == "AKIAENV"
    assert credentials.region == "eu-central-1"


def test_no_credentials_anywhere(tmp_path, clean_aws_env):
    with pytest.raises(ConfigError) as exc_info:
        ConfigService(tmp_path).load_credentials()

    assert exc_info.value.error_code == ErrorCode.CREDENTIALS_MISSING


def test_incomplete_credentials_file(tmp_path):
    (tmp_path / "deployCredentials.json").write_text(json.dumps({
        "awsCredentials": {"accessKeyId": "AKIA"}
    }))

    with pytest.raises(ConfigError) as exc_info:
        ConfigService(tmp_path).load_credentials()

    assert exc_info.value.error_code == ErrorCode.CREDENTIALS_MISSING
