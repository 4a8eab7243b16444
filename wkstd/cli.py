"""wkstd CLI - main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click

from wkstd import __version__


@click.group()
@click.version_option(version=__version__, prog_name="wkstd")
@click.help_option("-h", "--help")
def cli():
    """wkstd - lint, format and git hook setup for JavaScript projects

    \b
    QUICK START:
      wkstd init                # Interactive setup in a git project
      wkstd init --yes          # Use defaults (implied on CI)
      wkstd local-check         # Check staged files (pre-commit)

    \b
    For detailed options: wkstd <command> --help"""
    pass


from wkstd.commands.init import init
from wkstd.commands.local_check import local_check

cli.add_command(init)
cli.add_command(local_check)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
