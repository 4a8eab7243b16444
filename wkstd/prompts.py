"""Interactive questions producing the InitConfig."""

from pathlib import Path

import click

from wkstd.manifest import Manifest
from wkstd.pipeline.structures import Environment, InitConfig, ModuleType, ProjectType
from wkstd.utils.constants import DEFAULT_GERRIT_HOST, TSCONFIG_NAME

NO_MODULE_TYPE = "none"

# First installed package decides the suggested archetype
ARCHETYPE_MARKERS = [
    ("@tarojs/taro", ProjectType.TARO),
    ("vue", ProjectType.VUE),
    ("react", ProjectType.REACT),
]


def detect_project_type(manifest: Manifest) -> ProjectType:
    for package, project_type in ARCHETYPE_MARKERS:
        if manifest.has_install(package):
            return project_type
    return ProjectType.STANDARD


def _normalize_host(value: str) -> str:
    value = value.strip().rstrip("/")
    if not value.startswith(("http://", "https://")):
        raise click.BadParameter("Gerrit host must start with http:// or https://")
    return value


def default_options(manifest: Manifest, cwd: Path) -> InitConfig:
    """Answers used when prompting is disabled (--yes, CI)."""
    return InitConfig(
        typescript=(Path(cwd) / TSCONFIG_NAME).exists(),
        type=detect_project_type(manifest),
        loose=True,
        module_type=ModuleType.ES6,
        environment=Environment.BROWSER,
        gerrit_support=True,
        gerrit_host=DEFAULT_GERRIT_HOST,
    )


def collect_options(manifest: Manifest, cwd: Path, assume_defaults: bool = False) -> InitConfig:
    """Ask the project questions in order; Gerrit host only with Gerrit support."""
    defaults = default_options(manifest, cwd)
    if assume_defaults:
        return defaults

    typescript = click.confirm("Enable TypeScript checks?", default=defaults.typescript)

    project_type = click.prompt(
        "Project type",
        type=click.Choice([t.value for t in ProjectType]),
        default=defaults.type.value,
    )

    loose = click.confirm(
        "Enable loose mode (recommended while migrating an existing project)?",
        default=defaults.loose,
    )

    module_type = click.prompt(
        "Module type (es6 = import/export, commonJS = require/exports)",
        type=click.Choice([m.value for m in ModuleType] + [NO_MODULE_TYPE]),
        default=defaults.module_type.value,
    )

    environment = click.prompt(
        "Runtime environment",
        type=click.Choice([e.value for e in Environment]),
        default=defaults.environment.value,
    )

    gerrit_support = click.confirm("Enable Gerrit support?", default=defaults.gerrit_support)

    gerrit_host = None
    if gerrit_support:
        gerrit_host = click.prompt(
            "Gerrit server address",
            default=defaults.gerrit_host,
            value_proc=_normalize_host,
        )

    return InitConfig(
        typescript=typescript,
        type=ProjectType(project_type),
        loose=loose,
        module_type=None if module_type == NO_MODULE_TYPE else ModuleType(module_type),
        environment=Environment(environment),
        gerrit_support=gerrit_support,
        gerrit_host=gerrit_host,
    )
