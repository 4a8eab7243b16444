"""Subprocess execution using asyncio memory pipes."""

import asyncio
import shutil
import time

from .logging import logger


def resolve_executable(name: str) -> str | None:
    """Locate an executable on PATH (npm.cmd/npx.cmd on Windows)."""
    return shutil.which(name)


async def run_command_async(cmd: list[str], cwd: str, timeout: float = 900) -> dict:
    """Execute a subprocess and capture its output.

    Args:
        cmd: Command array to execute
        cwd: Working directory
        timeout: Maximum execution time in seconds

    Returns:
        Dict with success, returncode, stdout, stderr, elapsed
    """
    start_time = time.time()
    logger.debug(f"Running {' '.join(cmd)} in {cwd}")

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=cwd,
        )

        try:
            stdout_data, stderr_data = await asyncio.wait_for(
                process.communicate(), timeout=timeout
            )

            return {
                "success": process.returncode == 0,
                "returncode": process.returncode,
                "stdout": stdout_data.decode("utf-8", errors="replace"),
                "stderr": stderr_data.decode("utf-8", errors="replace"),
                "elapsed": time.time() - start_time,
            }

        except TimeoutError:
            logger.warning(f"Command timed out after {timeout}s: {cmd[0]}")
            process.kill()
            await process.wait()
            return {
                "success": False,
                "returncode": -1,
                "stdout": "",
                "stderr": f"Command timed out after {timeout}s",
                "elapsed": time.time() - start_time,
            }

    except OSError as e:
        return {
            "success": False,
            "returncode": -1,
            "stdout": "",
            "stderr": f"Subprocess error: {e}",
            "elapsed": time.time() - start_time,
        }
