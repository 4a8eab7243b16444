"""Pipeline execution infrastructure."""
from .structures import (
    Context,
    DependencyEntry,
    Environment,
    InitConfig,
    InstallResult,
    ModuleType,
    ProjectType,
    RunReport,
)
from .runner import execute, run_post_hooks, run_tasks
from .ui import console, print_debug, print_error, print_header, print_info, print_success, print_warning

__all__ = [
    "Context", "DependencyEntry", "Environment", "InitConfig", "InstallResult",
    "ModuleType", "ProjectType", "RunReport",
    "execute", "run_post_hooks", "run_tasks",
    "console", "print_debug", "print_error", "print_header", "print_info", "print_success", "print_warning",
]
