"""Initialization pipeline runner.

START -> LOAD_MANIFEST -> PROMPT_USER -> RUN_TASKS -> {ABORT | CONTINUE}
CONTINUE -> WRITE_MANIFEST -> INSTALL_DEPS -> RUN_POST_HOOKS -> DONE

Task failures propagate and abort the run before package.json is written.
Post-install hooks are isolated: a failing hook is reported as a warning
and the next one still runs.
"""

import inspect
from collections.abc import Awaitable, Callable, Iterable, Sequence
from pathlib import Path
from typing import Any

from wkstd.manifest import Manifest
from wkstd.package_managers import detect_manager
from wkstd.pipeline.structures import Context, DependencyEntry, Hook, InitConfig, InstallResult, RunReport
from wkstd.pipeline.ui import print_debug, print_error, print_info, print_warning
from wkstd.utils.constants import CONFIGURE_NAME, MANIFEST_NAME
from wkstd.utils.errors import FatalPreconditionError
from wkstd.utils.logging import logger

Task = Callable[[Context], Any]
OptionsProvider = Callable[[Manifest, Path], InitConfig]
Installer = Callable[[Sequence[DependencyEntry], Path, str | None], Awaitable[InstallResult]]


def _task_name(task: Callable[..., Any]) -> str:
    return getattr(task, "__name__", repr(task))


async def run_tasks(tasks: Iterable[Task], ctx: Context) -> None:
    """Run tasks one after another; any exception ends the run."""
    for task in tasks:
        name = _task_name(task)
        print_debug(f"Running task {name}")
        logger.debug(f"Task {name} started")
        result = task(ctx)
        if inspect.isawaitable(result):
            await result
        logger.debug(f"Task {name} finished")


async def run_post_hooks(hooks: Iterable[Hook]) -> int:
    """Run deferred hooks in registration order.

    Returns:
        Number of hooks that failed
    """
    failures = 0
    for hook in hooks:
        name = _task_name(hook)
        try:
            result = hook()
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            failures += 1
            logger.opt(exception=True).warning(f"Post-install hook {name} failed")
            print_warning(e)
    return failures


async def execute(
    cwd: Path,
    tasks: Sequence[Task],
    options_provider: OptionsProvider,
    installer: Installer,
    manager_name: str | None = None,
) -> RunReport:
    """Run one complete initialization in cwd.

    Args:
        cwd: Project root containing package.json
        tasks: Ordered task list
        options_provider: Produces the InitConfig (prompts the user)
        installer: Installs the accumulated dependencies
        manager_name: Package manager override passed to the installer

    Raises:
        FatalPreconditionError: package.json missing, or raised by a task
    """
    cwd = Path(cwd)
    manifest_path = cwd / MANIFEST_NAME

    if not manifest_path.is_file():
        raise FatalPreconditionError(f"{MANIFEST_NAME} not found in {cwd}")

    manifest = Manifest(manifest_path)
    config = options_provider(manifest, cwd)
    logger.debug(f"Resolved configuration: {config.to_dict()}")

    ctx = Context(
        manifest=manifest,
        config=config,
        cwd=cwd,
        config_path=cwd / CONFIGURE_NAME,
    )

    await run_tasks(tasks, ctx)

    written = manifest.write()

    deps = ctx.dependencies
    install_ok: bool | None = None
    if deps:
        print_info("Installing dependencies, this may take a while")
        print_info(f"Pending dependencies: {', '.join(dep.name for dep in deps)}")
        if manager_name is None:
            manager_name = detect_manager(cwd, manifest).manager_name
            logger.debug(f"Detected package manager: {manager_name}")
        try:
            result = await installer(deps, cwd, manager_name)
        except Exception as e:
            logger.opt(exception=True).error("Dependency installer raised")
            result = InstallResult(success=False, stderr=str(e) or type(e).__name__)
        install_ok = result.success
        if not result.success:
            print_error(f"Dependency installation failed: {result.stderr.strip() or 'unknown error'}")

    hook_failures = await run_post_hooks(ctx.hooks)

    return RunReport(
        written=written,
        installed=tuple(dep.name for dep in deps),
        install_ok=install_ok,
        hook_failures=hook_failures,
    )
