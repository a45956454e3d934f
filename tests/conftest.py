"""Pytest configuration."""
import json
import os
import sys
from pathlib import Path

import pytest

root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from lambda_deploy.backends.base import FunctionBackend  # noqa: E402
from lambda_deploy.models import AwsCredentials  # noqa: E402

COMMIT_HASH = "0123456789abcdef0123456789abcdef01234567"

DEPLOY_CONFIG = {
    "lambdaFunctions": [
        {
            "functionName": "orders",
            "zipContents": ["index.js", "lib/"],
            "environments": [
                {"envName": "staging", "liveAliasName": "LIVE"},
                {"envName": "prod", "nodeEnvValue": "production", "liveAliasName": "LIVE"},
            ],
        },
        {
            "functionName": "broken",
            "zipContents": ["index.js", "missing.js"],
            "environments": [
                {"envName": "prod", "liveAliasName": "LIVE"},
            ],
        },
    ]
}


class FakeFunctionBackend(FunctionBackend):
    """In-memory function service recording every call"""

    def __init__(self, publish_error=None, alias_error=None, start_version=0):
        super().__init__()
        self.publish_error = publish_error
        self.alias_error = alias_error
        self.start_version = start_version
        self.versions = {}
        self.aliases = {}
        self.archives = []
        self.calls = []
        self.initialize_count = 0
        self.close_count = 0

    async def _do_initialize(self):
        self.initialize_count += 1

    async def _do_close(self):
        self.close_count += 1

    async def publish_code(self, function_name, zip_file):
        self.calls.append(("publish_code", function_name))
        if self.publish_error is not None:
            raise self.publish_error
        self.archives.append(zip_file)
        version = self.versions.get(function_name, self.start_version) + 1
        self.versions[function_name] = version
        return {
            "FunctionName": function_name,
            "Version": str(version),
            "CodeSize": len(zip_file),
        }

    async def update_alias(self, function_name, alias_name, version):
        self.calls.append(("update_alias", function_name, alias_name, version))
        if self.alias_error is not None:
            raise self.alias_error
        self.aliases[(function_name, alias_name)] = version
        return {
            "Name": alias_name,
            "FunctionVersion": version,
            "AliasArn": f"arn:aws:lambda:us-east-1:123456789012:function:{function_name}:{alias_name}",
        }

    def call_names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def make_backend():
    """Factory for fake function backends"""
    return FakeFunctionBackend


@pytest.fixture
def fake_backend():
    return FakeFunctionBackend()


@pytest.fixture
def commit_hash():
    return COMMIT_HASH


@pytest.fixture
def credentials():
    return AwsCredentials(
        access_key_id="AKIATESTTESTTEST",
        secret_access_key="test-secret",
        region="us-east-1",
    )


@pytest.fixture
def deploy_config_data():
    return json.loads(json.dumps(DEPLOY_CONFIG))


@pytest.fixture
def project_root(tmp_path):
    """Project with index.js and lib/{a,b}.js"""
    project = tmp_path / "project"
    (project / "lib").mkdir(parents=True)
    (project / "index.js").write_text("exports.handler = require('./lib/a');\n")
    (project / "lib" / "a.js").write_text("module.exports = 'a';\n")
    (project / "lib" / "b.js").write_text("module.exports = 'b';\n")
    return project


@pytest.fixture
def config_dir(tmp_path, deploy_config_data):
    """Config directory with deployConfig.json and deployCredentials.json"""
    directory = tmp_path / "config"
    directory.mkdir()
    (directory / "deployConfig.json").write_text(json.dumps(deploy_config_data))
    (directory / "deployCredentials.json").write_text(json.dumps({
        "awsCredentials": {
            "accessKeyId": "AKIATESTTESTTEST",
            "secretAccessKey": "test-secret",
            "region": "us-east-1",
        }
    }))
    return directory


@pytest.fixture
def clean_aws_env(monkeypatch):
    """Remove AWS credentials from the environment"""
    for name in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_SESSION_TOKEN",
                 "AWS_DEFAULT_REGION", "AWS_REGION"):
        monkeypatch.delenv(name, raising=False)
    return os.environ
