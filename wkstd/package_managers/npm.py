"""npm package manager."""

from collections.abc import Sequence

from .base import BasePackageManager


class NpmPackageManager(BasePackageManager):
    """npm (package-lock.json)."""

    @property
    def manager_name(self) -> str:
        return "npm"

    @property
    def lockfiles(self) -> list[str]:
        return ["package-lock.json", "npm-shrinkwrap.json"]

    def add_command(self, specs: Sequence[str], dev: bool) -> list[str]:
        flag = "--save-dev" if dev else "--save"
        return ["install", flag, *specs]
