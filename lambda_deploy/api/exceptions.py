"""Exception definitions for lambda-deploy"""

from typing import Optional

from ..constants import DeployStage, ErrorCode


class DeployToolError(Exception):
    """Base exception for lambda-deploy"""

    stage: Optional[DeployStage] = None

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ValidationError(DeployToolError):
    """Validation error"""

    stage = DeployStage.REQUEST

    def __init__(self, message: str, error_code: str = ErrorCode.INVALID_REQUEST):
        super().__init__(message, error_code)


class InvalidRequestError(ValidationError):
    """Malformed deploy request (missing names, bad commit hash)"""
    pass


class ConfigError(DeployToolError):
    """Static configuration does not match the request or is malformed"""

    stage = DeployStage.CONFIG

    def __init__(self, message: str, error_code: str = ErrorCode.CONFIG_FORMAT_ERROR):
        super().__init__(message, error_code)


class PackError(DeployToolError):
    """Archive building error"""

    stage = DeployStage.ARCHIVE


class MissingManifestEntryError(PackError):
    """A manifest entry does not exist on disk"""

    def __init__(self, entry: str, path: Optional[str] = None):
        message = f"File or directory does not exist: {entry}"
        if path:
            message += f" (resolved to {path})"
        super().__init__(message, ErrorCode.MISSING_MANIFEST_ENTRY)
        self.entry = entry
        self.path = path


class PublishError(DeployToolError):
    """Publishing operation error"""

    stage = DeployStage.PUBLISH


class PublishFailedError(PublishError):
    """Publishing a new function version failed; no alias was touched"""

    def __init__(self, function_name: str, cause: Optional[BaseException] = None):
        message = f"Failed to publish new version of {function_name}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message, ErrorCode.PUBLISH_FAILED)
        self.function_name = function_name
        self.cause = cause


class DeployError(DeployToolError):
    """Deployment operation error"""

    def __init__(self, message: str, error_code: str = ErrorCode.DEPLOY_FAILED):
        super().__init__(message, error_code)


class AliasUpdateFailedError(DeployError):
    """Alias update failed after a successful publish.

    The new version exists but is not live. ``function_name``, ``alias_name``
    and ``version`` are enough to finish the move by hand (``set-alias``).
    """

    stage = DeployStage.ALIAS

    def __init__(self,
                 function_name: str,
                 alias_name: str,
                 version: str,
                 cause: Optional[BaseException] = None):
        message = (
            f"Failed to point alias {alias_name} of {function_name} "
            f"at version {version}"
        )
        if cause is not None:
            message += f": {cause}"
        super().__init__(message, ErrorCode.ALIAS_UPDATE_FAILED)
        self.function_name = function_name
        self.alias_name = alias_name
        self.version = version
        self.cause = cause
