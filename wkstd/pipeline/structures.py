"""Data contracts for the initialization pipeline."""
from collections.abc import Awaitable, Callable
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from wkstd.manifest import Manifest

Hook = Callable[[], Awaitable[None] | None]


class ProjectType(Enum):
    """Project archetype chosen during the prompt phase."""
    REACT = "react"
    VUE = "vue"
    TARO = "taro"
    STANDARD = "standard"


class ModuleType(Enum):
    ES6 = "es6"
    COMMONJS = "commonJS"


class Environment(Enum):
    BROWSER = "browser"
    NODE = "node"


@dataclass(frozen=True)
class DependencyEntry:
    """One package to add to dependencies or devDependencies."""
    name: str
    version: str | None = None
    dev: bool = True

    @property
    def spec(self) -> str:
        """Install specifier understood by npm, yarn and pnpm."""
        return f"{self.name}@{self.version}" if self.version else self.name


@dataclass(frozen=True)
class InitConfig:
    """Resolved answers of the prompt phase."""
    typescript: bool
    type: ProjectType
    loose: bool
    module_type: ModuleType | None
    environment: Environment
    gerrit_support: bool
    gerrit_host: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        d = asdict(self)
        d["type"] = self.type.value
        d["module_type"] = self.module_type.value if self.module_type else None
        d["environment"] = self.environment.value
        return d


@dataclass
class Context:
    """Shared state handed to every task.

    Tasks mutate the manifest directly but may only append to the
    dependency and hook accumulators, through add_dep() and on_finish().
    """
    manifest: Manifest
    config: InitConfig
    cwd: Path
    config_path: Path
    _dependencies: list[DependencyEntry] = field(default_factory=list, repr=False)
    _hooks: list[Hook] = field(default_factory=list, repr=False)

    def add_dep(self, dep: DependencyEntry) -> None:
        self._dependencies.append(dep)

    def on_finish(self, hook: Hook) -> None:
        """Queue a hook to run after dependency installation."""
        self._hooks.append(hook)

    @property
    def dependencies(self) -> tuple[DependencyEntry, ...]:
        return tuple(self._dependencies)

    @property
    def hooks(self) -> tuple[Hook, ...]:
        return tuple(self._hooks)


@dataclass
class InstallResult:
    """Outcome of one installer run."""
    success: bool
    commands: list[list[str]] = field(default_factory=list)
    stderr: str = ""


@dataclass
class RunReport:
    """Result of a complete init run."""
    written: bool
    installed: tuple[str, ...] = ()
    install_ok: bool | None = None
    hook_failures: int = 0

    @property
    def success(self) -> bool:
        """True unless installation failed. Hook failures are warnings only."""
        return self.install_ok is not False
