"""Central UI handler for wkstd.

Single source of truth for Rich console styling and the leveled reporter
(Error/Warn/Info/Debug/Success). Import this instead of instantiating
Console() in every module.

Usage:
    from wkstd.pipeline.ui import console, print_error, print_info

    print_info("Installing dependencies")
    print_error("package.json not found")
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

from wkstd.utils.env import is_dev

WKSTD_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "debug": "dim magenta",
    "cmd": "bold magenta",
    "path": "bold cyan",
    "dim": "dim white",
})

# Single console instances - import these, don't create your own
console = Console(
    theme=WKSTD_THEME,
    force_terminal=sys.stdout.isatty()
)
err_console = Console(
    theme=WKSTD_THEME,
    stderr=True,
    force_terminal=sys.stderr.isatty()
)


def print_header(title: str) -> None:
    """Print a styled section header with horizontal rules."""
    console.rule(f"[bold]{escape(title)}[/bold]")


def print_error(msg: object) -> None:
    """Print an error message in red (stderr)."""
    err_console.print(f"[error]ERROR:[/error] {escape(str(msg))}")


def print_warning(msg: object) -> None:
    """Print a warning message in yellow (stderr)."""
    err_console.print(f"[warning]WARNING:[/warning] {escape(str(msg))}")


def print_info(msg: object) -> None:
    console.print(f"[info]INFO:[/info] {escape(str(msg))}")


def print_debug(msg: object) -> None:
    """Print a debug message; suppressed outside development mode."""
    if not is_dev():
        return
    console.print(f"[debug]DEBUG:[/debug] {escape(str(msg))}")


def print_success(msg: object) -> None:
    """Print a success message in green."""
    console.print(f"[success]OK:[/success] {escape(str(msg))}")


def print_summary_panel(title: str, lines: list[str], level: str = "success") -> None:
    """Print a bordered summary panel at the end of a run.

    Args:
        title: Panel title (e.g., "INITIALIZED")
        lines: Body lines, one per fact
        level: One of "success", "warning", "error", "info"
    """
    style_map = {
        "success": ("bold green", "green"),
        "warning": ("bold yellow", "yellow"),
        "error": ("bold red", "red"),
        "info": ("bold cyan", "cyan"),
    }
    text_style, border_style = style_map.get(level, ("white", "white"))

    panel = Panel(
        Text.assemble(
            (f"{title}\n", text_style),
            ("\n".join(lines), border_style),
        ),
        border_style=border_style,
        expand=False
    )
    console.print(panel)
