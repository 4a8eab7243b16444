"""Run the configured checks against staged files (pre-commit)."""

import asyncio
import sys
from pathlib import Path

import click

from wkstd.local_check import run_local_check
from wkstd.pipeline.ui import console, print_error, print_info, print_success
from wkstd.utils.error_handler import handle_exceptions
from wkstd.utils.exit_codes import ExitCodes


@click.command("local-check")
@handle_exceptions
def local_check():
    """Check staged files with prettier, eslint and stylelint.

    Invoked by the husky pre-commit hook through the "local-check" npm script.
    Patterns and extra arguments come from .standard.jsonc.

    \b
    EXIT CODES:
      0 = All checks passed (or no staged file matched)
      1 = At least one tool reported problems
    """
    results = asyncio.run(run_local_check(Path.cwd()))

    if not results:
        print_info("No staged files to check")
        return

    failed = [r for r in results if not r.success]
    for result in results:
        if result.success:
            print_success(f"{result.tool}: {len(result.files)} file(s) passed")
        else:
            print_error(f"{result.tool} reported problems")
            if result.output:
                console.print(result.output, markup=False, highlight=False)

    if failed:
        sys.exit(ExitCodes.CHECK_FAILED)
