"""pnpm package manager."""

from collections.abc import Sequence

from .base import BasePackageManager


class PnpmPackageManager(BasePackageManager):
    """pnpm (pnpm-lock.yaml)."""

    @property
    def manager_name(self) -> str:
        return "pnpm"

    @property
    def lockfiles(self) -> list[str]:
        return ["pnpm-lock.yaml"]

    def add_command(self, specs: Sequence[str], dev: bool) -> list[str]:
        return ["add", "--save-dev", *specs] if dev else ["add", *specs]
