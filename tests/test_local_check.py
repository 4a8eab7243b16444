"""Tests for staged-file checks."""

import asyncio

from wkstd import local_check
from wkstd.config_runtime import DEFAULTS
from wkstd.local_check import match_files, plan_checks, run_local_check


def test_match_files_crosses_directories():
    files = ["src/app.js", "src/deep/view.tsx", "README.md", "styles/main.css"]
    assert match_files(files, ["*.js", "*.tsx"]) == ["src/app.js", "src/deep/view.tsx"]
    assert match_files(files, ["src/*"]) == ["src/app.js", "src/deep/view.tsx"]
    assert match_files(files, []) == []


def test_plan_checks_skips_tools_without_files():
    cfg = dict(DEFAULTS, eslintArgs="--max-warnings 0", prettierArgs="")
    plans = plan_checks(["index.js", "notes.txt"], cfg)

    assert [p.tool for p in plans] == ["prettier", "eslint"]
    assert plans[0].args == ["--check"]
    assert plans[1].args == ["--max-warnings", "0"]
    assert plans[1].files == ["index.js"]


def test_nothing_staged(tmp_path, monkeypatch):
    async def no_files(root):
        return []

    monkeypatch.setattr(local_check, "staged_files", no_files)
    assert asyncio.run(run_local_check(tmp_path)) == []


def test_runs_tools_with_npx(tmp_path, monkeypatch):
    ran = []

    async def staged(root):
        return ["src/a.js", "docs/guide.md"]

    async def fake_run(cmd, cwd, timeout=300):
        ran.append(cmd)
        failed = cmd[2] == "eslint"
        return {
            "success": not failed,
            "returncode": 1 if failed else 0,
            "stdout": "src/a.js: no-unused-vars" if failed else "",
            "stderr": "",
            "elapsed": 0.0,
        }

    monkeypatch.setattr(local_check, "staged_files", staged)
    monkeypatch.setattr(local_check, "resolve_executable", lambda name: "npx")
    monkeypatch.setattr(local_check, "run_command_async", fake_run)

    results = asyncio.run(run_local_check(tmp_path))

    assert ran == [
        ["npx", "--no-install", "prettier", "--check", "src/a.js", "docs/guide.md"],
        ["npx", "--no-install", "eslint", "src/a.js"],
    ]
    assert [(r.tool, r.success) for r in results] == [("prettier", True), ("eslint", False)]
    assert "no-unused-vars" in results[1].output


def test_missing_npx(tmp_path, monkeypatch):
    async def staged(root):
        return ["a.js"]

    monkeypatch.setattr(local_check, "staged_files", staged)
    monkeypatch.setattr(local_check, "resolve_executable", lambda name: None)
    results = asyncio.run(run_local_check(tmp_path))
    assert all(not r.success for r in results)
    assert results[0].output == "npx not found on PATH"
