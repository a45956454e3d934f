"""Global constants for lambda-deploy"""

from enum import Enum

# Application
APP_NAME = "lambda-deploy"
LOG_FORMAT = "%(message)s"

# Configuration files (looked up in this order inside the config directory)
CONFIG_FILE_BASENAME = "deployConfig"
CREDENTIALS_FILE_BASENAME = "deployCredentials"
CONFIG_FILE_EXTENSIONS = [".yaml", ".yml", ".json"]

# Archive layout
ENV_FILE_NAME = ".env"
ENV_FILE_KEY = "NODE_ENV"
DEFAULT_ARCHIVE_FORMAT = "zip"
ZIP_MIN_YEAR = 1980
DEFAULT_FILE_MODE = 0o644

# Function naming
FUNCTION_NAME_SEPARATOR = "_"

# Request validation
COMMIT_HASH_LENGTH = 40

# Backends
DEFAULT_PROVIDER = "aws"
LAMBDA_SERVICE_NAME = "lambda"

# Environment variables
ENV_CONFIG_DIR = "LAMBDA_DEPLOY_CONFIG_DIR"
ENV_PROJECT_ROOT = "LAMBDA_DEPLOY_PROJECT_ROOT"
ENV_AWS_ACCESS_KEY = "AWS_ACCESS_KEY_ID"
ENV_AWS_SECRET_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_AWS_SESSION_TOKEN = "AWS_SESSION_TOKEN"
ENV_AWS_REGIONS = ["AWS_DEFAULT_REGION", "AWS_REGION"]


class DeployStage(Enum):
    """Stage of a deploy in which an error was raised"""
    REQUEST = "request"
    CONFIG = "config"
    ARCHIVE = "archive"
    PUBLISH = "publish"
    ALIAS = "alias"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "LD001"
    INVALID_REQUEST = "LD002"
    FUNCTION_NOT_FOUND = "LD003"
    ENVIRONMENT_NOT_FOUND = "LD004"
    MISSING_MANIFEST_ENTRY = "LD005"
    PUBLISH_FAILED = "LD006"
    ALIAS_UPDATE_FAILED = "LD007"
    DEPLOY_FAILED = "LD008"
    CREDENTIALS_MISSING = "LD009"


# CLI exit codes, one per failing stage
class ExitCode:
    SUCCESS = 0
    UNEXPECTED = 1
    INVALID_REQUEST = 2
    CONFIG_ERROR = 3
    MISSING_MANIFEST_ENTRY = 4
    PUBLISH_FAILED = 5
    ALIAS_UPDATE_FAILED = 6
    INTERRUPTED = 130


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_ARROW = "→"
