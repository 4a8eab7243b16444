"""Centralized constants for wkstd.

Single source of truth for file names, script names, and timeouts used
across tasks, the installer, and the local-check command.
"""

import os
from pathlib import Path

# ============================================================================
# PROJECT FILES
# ============================================================================

MANIFEST_NAME = "package.json"
CONFIGURE_NAME = ".standard.jsonc"
TSCONFIG_NAME = "tsconfig.json"
HUSKY_DIR = ".husky"

# ============================================================================
# COMMANDS WRITTEN INTO THE MANIFEST
# ============================================================================

TOOL_NAME = "wkstd"
LOCAL_CHECK_SCRIPT = "local-check"
LOCAL_CHECK_COMMAND = f"{TOOL_NAME} {LOCAL_CHECK_SCRIPT}"
HUSKY_INSTALL_COMMAND = "husky install"

DEFAULT_GERRIT_HOST = "http://gerrit.wakedata-inc.com"

# ============================================================================
# TIMEOUTS (seconds)
# ============================================================================

INSTALL_TIMEOUT = int(os.environ.get("WKSTD_INSTALL_TIMEOUT_SECONDS", "900"))
CHECK_TIMEOUT = int(os.environ.get("WKSTD_CHECK_TIMEOUT_SECONDS", "300"))
HTTP_TIMEOUT = float(os.environ.get("WKSTD_HTTP_TIMEOUT_SECONDS", "10"))
GIT_TIMEOUT = 30


def state_dir() -> Path:
    """Directory for wkstd's own artifacts (error log)."""
    return Path(os.environ.get("WKSTD_HOME") or Path.home() / ".wkstd")


def error_log_file() -> Path:
    return state_dir() / "error.log"
