"""Yarn package manager (classic and berry share the add syntax)."""

from collections.abc import Sequence

from .base import BasePackageManager


class YarnPackageManager(BasePackageManager):
    """yarn (yarn.lock)."""

    @property
    def manager_name(self) -> str:
        return "yarn"

    @property
    def lockfiles(self) -> list[str]:
        return ["yarn.lock"]

    def add_command(self, specs: Sequence[str], dev: bool) -> list[str]:
        return ["add", "--dev", *specs] if dev else ["add", *specs]
