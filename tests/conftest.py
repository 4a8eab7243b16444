"""Pytest configuration and fixtures."""
import json
from pathlib import Path

import pytest

from wkstd.manifest import Manifest
from wkstd.pipeline.structures import Context, Environment, InitConfig, ModuleType, ProjectType


def _write_manifest(path: Path, data: dict, indent: int = 2) -> Path:
    """Write a package.json with a trailing newline, like npm does."""
    path.write_text(json.dumps(data, indent=indent) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def write_manifest():
    return _write_manifest


@pytest.fixture(autouse=True)
def isolated_state_dir(tmp_path, monkeypatch):
    """Keep error logs out of the real home directory."""
    monkeypatch.setenv("WKSTD_HOME", str(tmp_path / ".wkstd-home"))


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Minimal git project with a package.json; cwd is set to it."""
    root = tmp_path / "app"
    root.mkdir()
    (root / ".git").mkdir()
    _write_manifest(root / "package.json", {
        "name": "app",
        "version": "1.0.0",
        "scripts": {"build": "vite build"},
        "dependencies": {"react": "^18.0.0"},
    })
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def make_config():
    """Build an InitConfig, overriding any field."""
    def _make(**overrides) -> InitConfig:
        values = {
            "typescript": False,
            "type": ProjectType.REACT,
            "loose": True,
            "module_type": ModuleType.ES6,
            "environment": Environment.BROWSER,
            "gerrit_support": False,
            "gerrit_host": None,
        }
        values.update(overrides)
        return InitConfig(**values)

    return _make


@pytest.fixture
def make_ctx(project, make_config):
    """Context over the project fixture."""
    def _make(**overrides) -> Context:
        return Context(
            manifest=Manifest(project / "package.json"),
            config=make_config(**overrides),
            cwd=project,
            config_path=project / ".standard.jsonc",
        )

    return _make
