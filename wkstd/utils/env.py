"""Environment detection: development mode and CI runners."""

import os

CI_VARIABLES = (
    "CI",
    "CONTINUOUS_INTEGRATION",
    "BUILD_NUMBER",
    "RUN_ID",
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "JENKINS_URL",
)


def is_dev() -> bool:
    """True when running in development mode (WKSTD_ENV or NODE_ENV)."""
    env = os.environ.get("WKSTD_ENV") or os.environ.get("NODE_ENV") or ""
    return env.lower() == "development"


def is_ci() -> bool:
    """True when any well-known CI variable is set to a non-false value."""
    for name in CI_VARIABLES:
        value = os.environ.get(name)
        if value and value.lower() not in ("0", "false"):
            return True
    return False
