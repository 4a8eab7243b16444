"""Abstract base class for package manager implementations.

All package managers must inherit from BasePackageManager and describe how
their CLI adds runtime and dev dependencies to a project.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class BasePackageManager(ABC):
    """Abstract base class for all package manager implementations.

    Implementations must provide:
    - manager_name: Identifier for this manager (e.g., 'npm', 'yarn', 'pnpm')
    - lockfiles: Lockfile names that indicate this manager is in use
    - add_command(): Arguments (after the executable) adding packages
    """

    @property
    @abstractmethod
    def manager_name(self) -> str:
        """Return manager identifier, also the executable name."""
        ...

    @property
    @abstractmethod
    def lockfiles(self) -> list[str]:
        """Return lockfile names written by this manager."""
        ...

    @property
    def executable(self) -> str:
        return self.manager_name

    @abstractmethod
    def add_command(self, specs: Sequence[str], dev: bool) -> list[str]:
        """Build the argument list that adds specs to package.json.

        Args:
            specs: Install specifiers ("eslint", "husky@^8.0.0")
            dev: Add as devDependencies

        Returns:
            Arguments following the executable, e.g. ['install', '--save-dev', 'eslint']
        """
        ...

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<{self.__class__.__name__} manager_name={self.manager_name!r}>"
