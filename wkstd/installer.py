"""Dependency installation through the project's package manager."""

from collections.abc import Sequence
from pathlib import Path

from wkstd.package_managers import BasePackageManager, detect_manager, get_manager
from wkstd.pipeline.structures import DependencyEntry, InstallResult
from wkstd.utils.constants import INSTALL_TIMEOUT
from wkstd.utils.logging import logger
from wkstd.utils.process import resolve_executable, run_command_async


def dedupe(deps: Sequence[DependencyEntry]) -> list[DependencyEntry]:
    """Drop repeated package names, keeping the first entry queued."""
    seen: set[str] = set()
    unique = []
    for dep in deps:
        if dep.name in seen:
            continue
        seen.add(dep.name)
        unique.append(dep)
    return unique


def build_commands(mgr: BasePackageManager, deps: Sequence[DependencyEntry]) -> list[list[str]]:
    """One command for runtime dependencies, one for dev, runtime first."""
    unique = dedupe(deps)
    runtime = [dep.spec for dep in unique if not dep.dev]
    dev = [dep.spec for dep in unique if dep.dev]

    commands = []
    if runtime:
        commands.append(mgr.add_command(runtime, dev=False))
    if dev:
        commands.append(mgr.add_command(dev, dev=True))
    return commands


def resolve_manager(cwd: Path, manager_name: str | None = None) -> BasePackageManager:
    """Named manager, else the one whose lockfile is present in cwd."""
    if manager_name:
        mgr = get_manager(manager_name)
        if mgr is None:
            raise ValueError(f"Unknown package manager: {manager_name}")
        return mgr

    return detect_manager(cwd)


async def install(
    deps: Sequence[DependencyEntry],
    cwd: Path,
    manager_name: str | None = None,
) -> InstallResult:
    """Add deps to the project with its package manager.

    Failures are returned, never raised; the caller reports them.
    """
    if not deps:
        return InstallResult(success=True)

    try:
        mgr = resolve_manager(cwd, manager_name)
    except ValueError as e:
        return InstallResult(success=False, stderr=str(e))

    executable = resolve_executable(mgr.executable)
    if executable is None:
        return InstallResult(success=False, stderr=f"{mgr.executable} not found on PATH")

    commands = [[executable, *args] for args in build_commands(mgr, deps)]
    for cmd in commands:
        logger.info(f"Installing with {mgr.manager_name}: {' '.join(cmd[1:])}")
        result = await run_command_async(cmd, cwd=str(cwd), timeout=INSTALL_TIMEOUT)
        if not result["success"]:
            return InstallResult(success=False, commands=commands, stderr=result["stderr"])

    return InstallResult(success=True, commands=commands)
