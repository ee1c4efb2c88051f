"""Global constants for editor-installer"""

APP_NAME = "editor-installer"
LOG_FORMAT = "%(message)s"

# Configuration files
DEFAULT_CONFIG_FILE = "editor-installer.yaml"
CONFIG_SUFFIXES = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
    ".json": "json",
}

# Default directories (relative to the user's home)
DEFAULT_BIN_DIR = ".local/bin"
DEFAULT_CONFIG_DIR = ".config"
DEFAULT_DATA_DIR = ".local/share"
DATA_SUBDIR = APP_NAME
DATA_EDITOR_SUBDIR = "editor"
DATA_TOOLS_SUBDIR = "tools"

# Artifact kinds
ARTIFACT_BIN = "bin"
ARTIFACT_LIB = "lib"
ARTIFACT_CONFIG = "config"

# Confirmation tokens
AFFIRMATIVE_ANSWERS = ("y", "yes")
NEGATIVE_ANSWERS = ("n", "no")

# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "EI001"
    CONFIG_NOT_FOUND = "EI002"
    INVALID_REQUEST = "EI003"
    TOOL_NOT_FOUND = "EI004"
    NO_TOOLS_CONFIGURED = "EI005"
    UNSATISFIED_DEPENDENCIES = "EI006"
    INVALID_PATH = "EI007"
    FILE_OPERATION_FAILED = "EI008"
    ARTIFACT_FAILED = "EI009"

# Environment variables
ENV_CONFIG_PATH = "EDITOR_INSTALLER_CONFIG"
ENV_BIN_DIR = "EDITOR_INSTALLER_BIN_DIR"
ENV_CONFIG_DIR = "EDITOR_INSTALLER_CONFIG_DIR"
ENV_DATA_DIR = "EDITOR_INSTALLER_DATA_DIR"
ENV_XDG_BIN_HOME = "XDG_BIN_HOME"
ENV_XDG_CONFIG_HOME = "XDG_CONFIG_HOME"
ENV_XDG_DATA_HOME = "XDG_DATA_HOME"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"

# Diagnostic tags shown by `list`
TAG_NOT_FOUND = "NOT FOUND"
TAG_INVALID_DEPENDENCY = "INVALID DEPENDENCY"
TAG_INVALID_PATH = "INVALID PATH"

# Interactive prompts
PROMPT_CONFIRM_OVERWRITE = "{path} already exists. Overwrite? [y/N] "
PROMPT_CONFIRM_REMOVE = "Remove {path}? [Y/n] "
