"""Project-level tasks: the git precondition and the local-check configuration file."""

from wkstd.config_runtime import config_for, render_config
from wkstd.pipeline.structures import Context
from wkstd.pipeline.ui import print_info, print_success
from wkstd.utils.errors import FatalPreconditionError
from wkstd.utils.git import is_git_repo


def preflight(ctx: Context) -> None:
    """Abort unless the working directory is a git repository root."""
    if not is_git_repo(ctx.cwd):
        raise FatalPreconditionError(
            f"Not a git repository root: {ctx.cwd}. Run this command inside a git project"
        )


def configuration(ctx: Context) -> None:
    """Create the local-check configuration; an existing file is never overwritten."""
    path = ctx.config_path
    if path.exists():
        print_info(f"Keeping existing {path.name}")
        return

    path.write_text(render_config(config_for(ctx.config)), encoding="utf-8")
    print_success(f"Created {path.name}")
