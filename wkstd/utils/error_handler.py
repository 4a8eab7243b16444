"""Centralized error handler for wkstd commands."""

import sys
import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from typing import Any

import click

from wkstd.pipeline.ui import print_error
from wkstd.utils.logging import logger

from .constants import error_log_file
from .errors import FatalPreconditionError, WkstdError


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that turns wkstd errors into exit codes and logs the rest."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        """Inner wrapper that implements the try-except logic."""
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.Abort):
            raise
        except FatalPreconditionError as e:
            print_error(str(e))
            sys.exit(e.exit_code)
        except WkstdError as e:
            logger.debug("Command '{cmd}' failed: {err}", cmd=func.__name__, err=str(e))
            print_error(str(e))
            sys.exit(e.exit_code)
        except Exception as e:
            error_type = type(e).__name__
            error_msg = str(e)
            tb = traceback.format_exc()

            logger.opt(exception=True).error(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=error_msg,
            )

            log_path = error_log_file()
            try:
                log_path.parent.mkdir(parents=True, exist_ok=True)
                with open(log_path, "a", encoding="utf-8") as f:
                    f.write("\n" + "=" * 80 + "\n")
                    f.write(f"[{datetime.now().isoformat()}] Error in command: {func.__name__}\n")
                    f.write("=" * 80 + "\n")
                    f.write(f"{error_type}: {error_msg}\n\n")
                    f.write(tb)
                    f.write("=" * 80 + "\n\n")
            except OSError as log_error:
                logger.warning(f"Could not write error log {log_path}: {log_error}")

            user_message = (
                f"{error_type}: {error_msg}\n\n"
                f"Full traceback logged to: {log_path}"
            )

            raise click.ClickException(user_message) from e

    return wrapper
