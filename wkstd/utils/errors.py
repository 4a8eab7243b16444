"""Exception hierarchy for wkstd."""

from .exit_codes import ExitCodes


class WkstdError(Exception):
    """Base class for errors wkstd reports to the user."""

    exit_code = 1


class FatalPreconditionError(WkstdError):
    """The target directory cannot be initialized; nothing has been changed."""

    exit_code = ExitCodes.FATAL_PRECONDITION


class ManifestError(WkstdError):
    """package.json could not be parsed into a JSON object."""
