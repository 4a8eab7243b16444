"""package.json read/mutate/write handle.

The in-memory object is the single source of truth during a run. Mutations
flip the dirty flag, reads never do, and write() only touches the disk when
something actually changed.
"""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from wkstd.utils.errors import ManifestError
from wkstd.utils.logging import logger

KeyPath = str | Sequence[str]

_MISSING = object()


def split_path(path: KeyPath) -> list[str]:
    """Normalize a dot-addressed path ("scripts.lint") or key sequence."""
    if isinstance(path, str):
        keys = path.split(".")
    else:
        keys = [str(key) for key in path]
    if not keys or any(key == "" for key in keys):
        raise ValueError(f"Invalid key path: {path!r}")
    return keys


def _child(node: Any, key: str) -> Any:
    """Step one key into a JSON container, _MISSING if it isn't there."""
    if isinstance(node, dict):
        return node.get(key, _MISSING)
    if isinstance(node, list) and key.isdigit():
        index = int(key)
        return node[index] if index < len(node) else _MISSING
    return _MISSING


def extract_nested_value(data: Any, keys: list[str]) -> Any:
    """Navigate nested dicts/lists with a key path, _MISSING when absent."""
    current = data
    for key in keys:
        current = _child(current, key)
        if current is _MISSING:
            return _MISSING
    return current


class Manifest:
    """Handle over a project's package.json."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        text = self.path.read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ManifestError(f"Invalid JSON in {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ManifestError(f"{self.path} must contain a JSON object")

        self.obj: dict[str, Any] = data
        self.dirty = False
        self._trailing_newline = text.endswith("\n")

    def __repr__(self) -> str:
        return f"<Manifest path={str(self.path)!r} dirty={self.dirty}>"

    def get(self, path: KeyPath, default: Any = None) -> Any:
        """Value at path, or default when any segment is missing.

        A malformed path ("", "a..b") addresses nothing and also yields default.
        """
        value = self._lookup(path)
        return default if value is _MISSING else value

    def has(self, path: KeyPath) -> bool:
        return self._lookup(path) is not _MISSING

    def _lookup(self, path: KeyPath) -> Any:
        try:
            keys = split_path(path)
        except ValueError:
            return _MISSING
        return extract_nested_value(self.obj, keys)

    def set(self, path: KeyPath, value: Any) -> None:
        """Write value at path, creating (or replacing) intermediate objects."""
        keys = split_path(path)
        node: Any = self.obj
        for key, next_key in zip(keys[:-1], keys[1:]):
            child = _child(node, key)
            if not _can_hold(child, next_key):
                child = {}
                _assign(node, key, child)
            node = child
        _assign(node, keys[-1], value)
        self.dirty = True

    def unset(self, path: KeyPath) -> bool:
        """Remove the value at path. Returns whether anything was removed."""
        keys = split_path(path)
        parent = extract_nested_value(self.obj, keys[:-1])
        last = keys[-1]

        if isinstance(parent, dict) and last in parent:
            del parent[last]
        elif isinstance(parent, list) and last.isdigit() and int(last) < len(parent):
            del parent[int(last)]
        else:
            return False

        self.dirty = True
        return True

    def remove_dep(self, name: str) -> bool:
        """Drop name from dependencies and devDependencies."""
        removed = False
        for section in ("dependencies", "devDependencies"):
            deps = self.obj.get(section)
            if isinstance(deps, dict) and name in deps:
                del deps[name]
                removed = True

        if removed:
            self.dirty = True
        return removed

    def set_script(self, name: str, command: str) -> None:
        # script names like "lint:fix" or "build.prod" must stay one key
        self.set(["scripts", name], command)

    def get_version(self, name: str) -> str | None:
        """Declared version of name; runtime dependencies win over dev."""
        if not name:
            return None
        for section in ("dependencies", "devDependencies"):
            deps = self.obj.get(section)
            if isinstance(deps, dict) and name in deps:
                return deps[name]
        return None

    def has_install(self, name: str) -> bool:
        return self.get_version(name) is not None

    def write(self) -> bool:
        """Persist the manifest if dirty. Returns whether the file was written."""
        if not self.dirty:
            return False

        content = to_pretty_json(self.obj)
        if self._trailing_newline:
            content += "\n"
        self.path.write_text(content, encoding="utf-8")
        self.dirty = False
        logger.debug(f"Wrote {self.path}")
        return True


def _can_hold(node: Any, key: str) -> bool:
    """Whether key can be assigned on node (lists accept an index up to len)."""
    if isinstance(node, dict):
        return True
    if isinstance(node, list):
        return key.isdigit() and int(key) <= len(node)
    return False


def _assign(node: Any, key: str, value: Any) -> None:
    # callers guarantee _can_hold(node, key)
    if isinstance(node, list):
        index = int(key)
        if index == len(node):
            node.append(value)
        else:
            node[index] = value
    else:
        node[key] = value


def to_pretty_json(obj: Any) -> str:
    """Stable, diff-friendly serialization (2-space indent, unicode kept)."""
    return json.dumps(obj, indent=2, ensure_ascii=False)
