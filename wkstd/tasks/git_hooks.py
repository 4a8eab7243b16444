"""Git hooks: husky (pre-commit running local-check) and the Gerrit commit-msg hook."""

import os
from pathlib import Path

import httpx

from wkstd.pipeline.structures import Context, DependencyEntry
from wkstd.pipeline.ui import print_success
from wkstd.utils.constants import (
    CHECK_TIMEOUT,
    HTTP_TIMEOUT,
    HUSKY_DIR,
    HUSKY_INSTALL_COMMAND,
    LOCAL_CHECK_COMMAND,
    LOCAL_CHECK_SCRIPT,
    TOOL_NAME,
)
from wkstd.utils.errors import WkstdError
from wkstd.utils.git import get_config_value
from wkstd.utils.logging import logger
from wkstd.utils.process import resolve_executable, run_command_async

HOOK_MODE = 0o755
# prepare script and pre-commit hook below use the husky 8 layout
HUSKY_VERSION = "^8.0.0"
# husky 8 links .husky, husky 9 links .husky/_
LINKED_HOOKS_PATHS = (HUSKY_DIR, f"{HUSKY_DIR}/_")
GERRIT_HOOK_URL_PATH = "/tools/hooks/commit-msg"

PRE_COMMIT_HOOK = f"""#!/usr/bin/env sh
. "$(dirname -- "$0")/_/husky.sh"

npm run {LOCAL_CHECK_SCRIPT}
"""


def write_hook(path: Path, content: str) -> None:
    """Write an executable git hook script (LF line endings, mode 755)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    os.chmod(path, HOOK_MODE)


def _remove_legacy_config(ctx: Context) -> None:
    pkg = ctx.manifest

    # husky v4 kept its hooks under a top-level "husky" key
    if pkg.unset("husky"):
        logger.info("Removed legacy 'husky' section from package.json")

    postinstall = pkg.get(["scripts", "postinstall"])
    if isinstance(postinstall, str) and TOOL_NAME in postinstall:
        pkg.unset(["scripts", "postinstall"])
        logger.info(f"Removed legacy postinstall script: {postinstall}")


def _add_prepare_script(ctx: Context) -> None:
    pkg = ctx.manifest
    existing = pkg.get(["scripts", "prepare"])

    if not isinstance(existing, str) or not existing.strip():
        pkg.set_script("prepare", HUSKY_INSTALL_COMMAND)
    elif HUSKY_INSTALL_COMMAND not in existing:
        pkg.set_script("prepare", f"{HUSKY_INSTALL_COMMAND} && {existing}")


async def link_husky(cwd: Path) -> None:
    """Run `husky install`; installing husky as a dependency does not run prepare."""
    npx = resolve_executable("npx")
    if npx is None:
        logger.warning("npx not found on PATH, skipping husky install")
        return

    cmd = [npx, "--no-install", *HUSKY_INSTALL_COMMAND.split()]
    result = await run_command_async(cmd, cwd=str(cwd), timeout=CHECK_TIMEOUT)
    if not result["success"]:
        logger.warning(f"husky install failed: {result['stderr'].strip()}")


def husky(ctx: Context) -> None:
    """Configure husky to run local-check before every commit."""
    pkg = ctx.manifest

    _remove_legacy_config(ctx)

    if not pkg.has_install("husky"):
        ctx.add_dep(DependencyEntry("husky", HUSKY_VERSION, dev=True))

    _add_prepare_script(ctx)
    pkg.set_script(LOCAL_CHECK_SCRIPT, LOCAL_CHECK_COMMAND)

    write_hook(ctx.cwd / HUSKY_DIR / "pre-commit", PRE_COMMIT_HOOK)

    cwd = ctx.cwd

    async def verify_husky_linked() -> None:
        """Link husky into git and confirm core.hooksPath points at it."""
        await link_husky(cwd)
        hooks_path = await get_config_value(cwd, "core.hooksPath")
        if hooks_path is None or Path(hooks_path).as_posix().rstrip("/") not in LINKED_HOOKS_PATHS:
            raise WkstdError(
                f"husky is not linked (core.hooksPath={hooks_path!r}); "
                f"run '{HUSKY_INSTALL_COMMAND}' manually"
            )
        print_success("husky git hooks linked")

    ctx.on_finish(verify_husky_linked)


def hook_url(host: str) -> str:
    return host.rstrip("/") + GERRIT_HOOK_URL_PATH


async def fetch_commit_msg_hook(host: str) -> str:
    """Download the commit-msg hook script served by a Gerrit server."""
    url = hook_url(host)
    logger.debug(f"Fetching {url}")
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT, follow_redirects=True) as client:
        response = await client.get(url)
        response.raise_for_status()
    return response.text


def gerrit(ctx: Context) -> None:
    """Queue installation of the Gerrit commit-msg hook into .husky."""
    config = ctx.config
    if not config.gerrit_support or not config.gerrit_host:
        return

    host = config.gerrit_host
    target = ctx.cwd / HUSKY_DIR / "commit-msg"

    async def install_commit_msg_hook() -> None:
        script = await fetch_commit_msg_hook(host)
        write_hook(target, script)
        print_success(f"Installed Gerrit commit-msg hook from {host}")

    ctx.on_finish(install_commit_msg_hook)
