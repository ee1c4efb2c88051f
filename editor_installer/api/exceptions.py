"""Exception definitions for editor-installer"""

from ..constants import ErrorCode


class InstallerError(Exception):
    """Base exception for editor-installer"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(InstallerError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class ConfigNotFoundError(ConfigError):
    """Configuration file not found"""

    def __init__(self, config_path):
        super().__init__(
            f"Configuration file not found: {config_path}\n"
            f"Use --config to point at another file."
        )
        self.error_code = ErrorCode.CONFIG_NOT_FOUND
        self.config_path = config_path


class RequestError(InstallerError):
    """Invalid request, nothing was done"""

    def __init__(self, message: str, error_code: str = ErrorCode.INVALID_REQUEST):
        super().__init__(message, error_code)


class ToolNotFoundError(RequestError):
    """Explicitly requested tool is not configured"""

    def __init__(self, tool_key: str):
        super().__init__(f"Tool not found in configuration: {tool_key}",
                         ErrorCode.TOOL_NOT_FOUND)
        self.tool_key = tool_key


class NoToolsConfiguredError(RequestError):
    """Tools or groups were requested but no tool is configured"""

    def __init__(self):
        super().__init__("No tools are configured", ErrorCode.NO_TOOLS_CONFIGURED)


class DependencyError(InstallerError):
    """Some requested tools or groups have unsatisfied dependencies"""

    def __init__(self, resolution, message: str = None):
        if message is None:
            tools = sorted(resolution.unsatisfied_tools)
            groups = sorted(resolution.unsatisfied_groups)
            parts = []
            if tools:
                parts.append(f"tools: {', '.join(tools)}")
            if groups:
                parts.append(f"groups: {', '.join(groups)}")
            message = f"Invalid dependencies ({'; '.join(parts)})"
        super().__init__(message, ErrorCode.UNSATISFIED_DEPENDENCIES)
        self.resolution = resolution


class PackageValidationError(InstallerError):
    """Declared artifact paths do not exist"""

    def __init__(self, package_name: str, missing: dict):
        details = ", ".join(f"{kind}: {path}" for kind, path in missing.items())
        super().__init__(f"Invalid paths for {package_name} ({details})",
                         ErrorCode.INVALID_PATH)
        self.package_name = package_name
        self.missing = missing


class FileOperationError(InstallerError):
    """Filesystem operation failed"""

    def __init__(self, path, operation: str, cause: Exception = None):
        message = f"Failed to {operation} {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, ErrorCode.FILE_OPERATION_FAILED)
        self.path = path
        self.operation = operation
        self.cause = cause


class ArtifactError(InstallerError):
    """Filesystem failure keyed to a package artifact"""

    def __init__(self, package_key: str, artifact: str, path, cause: Exception = None):
        message = f"{package_key}: {artifact} artifact failed at {path}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message, ErrorCode.ARTIFACT_FAILED)
        self.package_key = package_key
        self.artifact = artifact
        self.path = path
        self.cause = cause
        # Partial PackageResult, filled in by the package service
        self.result = None
