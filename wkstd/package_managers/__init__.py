"""Package managers module - how dependencies get added to a JavaScript project.

Provides a registry pattern for package manager implementations:
- npm (package-lock.json)
- yarn (yarn.lock)
- pnpm (pnpm-lock.yaml)

Usage:
    from wkstd.package_managers import detect_manager, get_manager

    mgr = get_manager("pnpm")
    mgr = detect_manager(Path("."), manifest)
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from wkstd.utils.logging import logger

from .base import BasePackageManager

if TYPE_CHECKING:
    from wkstd.manifest import Manifest

DEFAULT_MANAGER = "npm"

# Lazy imports to avoid circular dependencies
_REGISTRY: dict[str, type[BasePackageManager]] | None = None


def _init_registry() -> dict[str, type[BasePackageManager]]:
    """Initialize the registry with all package manager implementations."""
    global _REGISTRY
    if _REGISTRY is not None:
        return _REGISTRY

    from .npm import NpmPackageManager
    from .pnpm import PnpmPackageManager
    from .yarn import YarnPackageManager

    # Order matters for lockfile detection
    _REGISTRY = {
        "pnpm": PnpmPackageManager,
        "yarn": YarnPackageManager,
        "npm": NpmPackageManager,
    }
    return _REGISTRY


def manager_names() -> list[str]:
    return list(_init_registry())


def get_manager(manager_name: str) -> BasePackageManager | None:
    """Get package manager instance by name.

    Args:
        manager_name: The manager identifier (e.g., 'npm', 'yarn', 'pnpm')

    Returns:
        Package manager instance or None if not found
    """
    registry = _init_registry()
    cls = registry.get(manager_name.lower())
    return cls() if cls else None


def get_all_managers() -> list[BasePackageManager]:
    """Get all registered package manager instances."""
    registry = _init_registry()
    return [cls() for cls in registry.values()]


def detect_manager(cwd: Path, manifest: Manifest | None = None) -> BasePackageManager:
    """Pick the package manager a project uses.

    Resolution order: the manifest's "packageManager" field
    ("pnpm@8.15.0"), then the first matching lockfile, then npm.
    """
    if manifest is not None:
        declared = manifest.get("packageManager")
        if isinstance(declared, str) and declared:
            mgr = get_manager(declared.split("@", 1)[0])
            if mgr:
                return mgr
            logger.warning(f"Unsupported packageManager '{declared}', falling back to lockfile detection")

    for mgr in get_all_managers():
        if any((Path(cwd) / lockfile).exists() for lockfile in mgr.lockfiles):
            return mgr

    return get_manager(DEFAULT_MANAGER)


__all__ = [
    "DEFAULT_MANAGER",
    "detect_manager",
    "get_manager",
    "get_all_managers",
    "manager_names",
    "BasePackageManager",
]

