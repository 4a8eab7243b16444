"""Project configuration (.standard.jsonc) - defaults, loading, generation."""

import copy
import json
from pathlib import Path
from typing import Any

import json5

from wkstd.pipeline.structures import InitConfig, ProjectType
from wkstd.utils.constants import CONFIGURE_NAME
from wkstd.utils.logging import logger

DEFAULTS: dict[str, Any] = {
    "formatPatterns": ["*.js", "*.jsx", "*.json", "*.md", "*.css", "*.less", "*.scss"],
    "scriptPatterns": ["*.js", "*.jsx"],
    "stylePatterns": [],
    "eslintArgs": "",
    "stylelintArgs": "",
    "prettierArgs": "",
}

PATTERN_KEYS = ("formatPatterns", "scriptPatterns", "stylePatterns")
ARG_KEYS = ("eslintArgs", "stylelintArgs", "prettierArgs")

_HEADER = (
    "// wkstd local-check configuration\n"
    "// Patterns are matched against staged paths relative to the repository root.\n"
)


def load_standard_config(root: str | Path = ".") -> dict[str, Any]:
    """
    Load .standard.jsonc from root, merged over built-in defaults.

    Pattern keys accept a string or a list of strings; unknown keys and
    values of the wrong type are ignored with a warning.

    Args:
        root: Project root to look for the config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)
    path = Path(root) / CONFIGURE_NAME

    if not path.exists():
        return cfg

    try:
        user = json5.loads(path.read_text(encoding="utf-8"))
    except (ValueError, OSError) as e:
        logger.warning(f"Could not load {path}: {e}. Continuing with default configuration")
        return cfg

    if not isinstance(user, dict):
        logger.warning(f"{path} must contain an object. Continuing with default configuration")
        return cfg

    for key in PATTERN_KEYS:
        if key not in user:
            continue
        value = user[key]
        if isinstance(value, str):
            cfg[key] = [value]
        elif isinstance(value, list) and all(isinstance(v, str) for v in value):
            cfg[key] = list(value)
        else:
            logger.warning(f"Ignoring {key} in {path}: expected a string or list of strings")

    for key in ARG_KEYS:
        if key not in user:
            continue
        if isinstance(user[key], str):
            cfg[key] = user[key]
        else:
            logger.warning(f"Ignoring {key} in {path}: expected a string")

    return cfg


def config_for(init: InitConfig) -> dict[str, Any]:
    """Check patterns matching the project's archetype and language."""
    cfg = copy.deepcopy(DEFAULTS)

    scripts = ["*.js", "*.jsx"]
    if init.typescript:
        scripts += ["*.ts", "*.tsx"]
    if init.type == ProjectType.VUE:
        scripts.append("*.vue")
    cfg["scriptPatterns"] = scripts

    formats = list(cfg["formatPatterns"])
    for pattern in scripts:
        if pattern not in formats:
            formats.append(pattern)
    cfg["formatPatterns"] = formats

    # answers kept for reference; local-check does not read them
    cfg["project"] = {
        "typescript": init.typescript,
        "type": init.type.value,
        "loose": init.loose,
        "moduleType": init.module_type.value if init.module_type else None,
        "environment": init.environment.value,
    }

    return cfg


def render_config(cfg: dict[str, Any]) -> str:
    """Serialize a configuration as commented JSONC."""
    return _HEADER + json.dumps(cfg, indent=2, ensure_ascii=False) + "\n"
