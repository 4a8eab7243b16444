"""Git repository helpers."""

from pathlib import Path

from .constants import GIT_TIMEOUT
from .process import resolve_executable, run_command_async


def is_git_repo(cwd: Path) -> bool:
    """True if cwd is a repository root (``.git`` directory or worktree file)."""
    return (Path(cwd) / ".git").exists()


async def get_config_value(cwd: Path, key: str) -> str | None:
    """Read a git config value, None when unset."""
    git = resolve_executable("git")
    if git is None:
        raise FileNotFoundError("git executable not found on PATH")

    result = await run_command_async([git, "config", "--get", key], cwd=str(cwd), timeout=GIT_TIMEOUT)
    if not result["success"]:
        return None
    return result["stdout"].strip() or None


async def staged_files(cwd: Path) -> list[str]:
    """Staged (added, copied, modified, renamed) paths under cwd, relative to it."""
    git = resolve_executable("git")
    if git is None:
        raise FileNotFoundError("git executable not found on PATH")

    result = await run_command_async(
        [git, "diff", "--cached", "--name-only", "--relative", "--diff-filter=ACMR"],
        cwd=str(cwd),
        timeout=GIT_TIMEOUT,
    )
    if not result["success"]:
        raise RuntimeError(f"git diff failed: {result['stderr'].strip()}")
    return [line.strip() for line in result["stdout"].splitlines() if line.strip()]
