"""wkstd utilities package."""

from .constants import (
    CONFIGURE_NAME,
    LOCAL_CHECK_COMMAND,
    MANIFEST_NAME,
    TOOL_NAME,
)
from .env import is_ci, is_dev
from .errors import FatalPreconditionError, ManifestError, WkstdError
from .exit_codes import ExitCodes
from .logging import logger

__all__ = [
    "CONFIGURE_NAME",
    "LOCAL_CHECK_COMMAND",
    "MANIFEST_NAME",
    "TOOL_NAME",
    "is_ci",
    "is_dev",
    "FatalPreconditionError",
    "ManifestError",
    "WkstdError",
    "ExitCodes",
    "logger",
]
