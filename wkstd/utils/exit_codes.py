"""Centralized exit codes for the wkstd CLI."""


class ExitCodes:
    """Standard exit codes for wkstd commands."""

    SUCCESS = 0

    CHECK_FAILED = 1

    FATAL_PRECONDITION = 2

    INSTALL_FAILED = 3

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success",
            cls.CHECK_FAILED: "One or more staged-file checks failed",
            cls.FATAL_PRECONDITION: "Project precondition not met (git repository, package.json)",
            cls.INSTALL_FAILED: "Dependency installation failed; package.json was still updated",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")
