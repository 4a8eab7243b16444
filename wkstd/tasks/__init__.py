"""Initialization tasks, run in order against a shared Context.

Each task receives the Context, may mutate the manifest, queue dependencies
with ctx.add_dep() and post-install hooks with ctx.on_finish().
"""

from .git_hooks import gerrit, husky
from .linters import eslint, prettier
from .project import configuration, preflight

DEFAULT_TASKS = [preflight, husky, gerrit, eslint, prettier, configuration]

__all__ = [
    "DEFAULT_TASKS",
    "configuration",
    "eslint",
    "gerrit",
    "husky",
    "preflight",
    "prettier",
]
