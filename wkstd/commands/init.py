"""Initialize eslint/prettier/husky tooling in a JavaScript project."""

import asyncio
import sys
from functools import partial
from pathlib import Path

import click

from wkstd.installer import install
from wkstd.package_managers import manager_names
from wkstd.pipeline.runner import execute
from wkstd.pipeline.ui import print_header, print_summary_panel, print_warning
from wkstd.prompts import collect_options
from wkstd.tasks import DEFAULT_TASKS
from wkstd.utils.env import is_ci
from wkstd.utils.error_handler import handle_exceptions
from wkstd.utils.exit_codes import ExitCodes


@click.command("init")
@click.option("--yes", "-y", is_flag=True, help="Accept default answers instead of prompting")
@click.option(
    "--package-manager",
    type=click.Choice(manager_names()),
    default=None,
    help="Package manager used to install dependencies (default: detected)",
)
@handle_exceptions
def init(yes, package_manager):
    """Set up linting, formatting and git hooks in the current project.

    Must be run at the root of a git repository that contains a package.json.

    \b
    WHAT IT DOES:
      - Asks about the project (TypeScript, archetype, module type, Gerrit)
      - Replaces legacy husky configuration in package.json
      - Adds "prepare" and "local-check" scripts
      - Writes .husky/pre-commit (and .husky/commit-msg for Gerrit)
      - Installs husky, eslint, prettier and archetype plugins
      - Creates .standard.jsonc with local-check patterns

    \b
    EXAMPLES:
      wkstd init
      wkstd init --yes --package-manager pnpm

    \b
    EXIT CODES:
      0 = Success (hook warnings do not fail the run)
      2 = Not a git repository root, or package.json missing
      3 = Dependency installation failed (package.json already updated)
    """
    cwd = Path.cwd()
    assume_defaults = yes or is_ci()
    options_provider = partial(collect_options, assume_defaults=assume_defaults)

    print_header("wkstd init")
    report = asyncio.run(
        execute(cwd, DEFAULT_TASKS, options_provider, install, package_manager)
    )

    lines = [
        f"package.json: {'updated' if report.written else 'unchanged'}",
        f"dependencies: {', '.join(report.installed) or 'none'}",
    ]
    if report.hook_failures:
        lines.append(f"post-install warnings: {report.hook_failures}")
        print_warning("Some post-install steps failed; see warnings above")

    if not report.success:
        lines.append("installation: FAILED")
        print_summary_panel("INCOMPLETE", lines, level="error")
        sys.exit(ExitCodes.INSTALL_FAILED)

    print_summary_panel("INITIALIZED", lines, level="warning" if report.hook_failures else "success")
