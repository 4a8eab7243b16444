"""Staged-file checks run from the husky pre-commit hook.

Each tool only sees staged files matching its patterns from
.standard.jsonc. Tools run through ``npx --no-install`` so the project's own
eslint/prettier/stylelint versions are used.
"""

import fnmatch
import shlex
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from wkstd.config_runtime import load_standard_config
from wkstd.utils.constants import CHECK_TIMEOUT
from wkstd.utils.git import staged_files
from wkstd.utils.logging import logger
from wkstd.utils.process import resolve_executable, run_command_async


@dataclass
class CheckResult:
    """Outcome of one tool over its matching files."""
    tool: str
    files: list[str]
    success: bool
    output: str = ""


@dataclass
class CheckPlan:
    tool: str
    args: list[str]
    files: list[str] = field(default_factory=list)


def match_files(files: Sequence[str], patterns: Sequence[str]) -> list[str]:
    """Files matching any pattern; '*' also matches across directories."""
    return [f for f in files if any(fnmatch.fnmatch(f, p) for p in patterns)]


def plan_checks(files: Sequence[str], cfg: dict[str, Any]) -> list[CheckPlan]:
    """Build the tool invocations for the staged files, skipping tools with no matches."""
    plans = [
        CheckPlan("prettier", ["--check", *shlex.split(cfg["prettierArgs"])],
                  match_files(files, cfg["formatPatterns"])),
        CheckPlan("eslint", shlex.split(cfg["eslintArgs"]),
                  match_files(files, cfg["scriptPatterns"])),
        CheckPlan("stylelint", shlex.split(cfg["stylelintArgs"]),
                  match_files(files, cfg["stylePatterns"])),
    ]
    return [plan for plan in plans if plan.files]


async def run_check(plan: CheckPlan, root: Path) -> CheckResult:
    npx = resolve_executable("npx")
    if npx is None:
        return CheckResult(plan.tool, plan.files, False, "npx not found on PATH")

    cmd = [npx, "--no-install", plan.tool, *plan.args, *plan.files]
    result = await run_command_async(cmd, cwd=str(root), timeout=CHECK_TIMEOUT)
    output = (result["stdout"] + result["stderr"]).strip()
    return CheckResult(plan.tool, plan.files, result["success"], output)


async def run_local_check(root: Path) -> list[CheckResult]:
    """Check the staged files of the repository at root, one tool at a time."""
    cfg = load_standard_config(root)
    files = await staged_files(root)
    logger.debug(f"{len(files)} staged files")

    results = []
    for plan in plan_checks(files, cfg):
        results.append(await run_check(plan, root))
    return results
