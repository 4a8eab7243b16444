"""Tests for the task pipeline and post-install hooks."""

import asyncio
import json

import pytest

from wkstd.pipeline.runner import execute, run_post_hooks, run_tasks
from wkstd.pipeline.structures import DependencyEntry, InstallResult
from wkstd.utils.errors import FatalPreconditionError


class RecordingInstaller:
    """Installer double that records what it was asked to install."""

    def __init__(self, success=True):
        self.success = success
        self.calls = []

    async def __call__(self, deps, cwd, manager_name):
        self.calls.append((list(deps), cwd, manager_name))
        return InstallResult(success=self.success, stderr="" if self.success else "ERESOLVE")


def _options(make_config):
    return lambda manifest, cwd: make_config()


class TestRunTasks:
    def test_runs_in_order_sync_and_async(self, make_ctx):
        ctx = make_ctx()
        calls = []

        def first(c):
            calls.append("first")
            c.manifest.set_script("lint", "eslint .")

        async def second(c):
            # later tasks see earlier manifest mutations
            calls.append(("second", c.manifest.get(["scripts", "lint"])))

        asyncio.run(run_tasks([first, second], ctx))
        assert calls == ["first", ("second", "eslint .")]

    def test_failure_stops_pipeline(self, make_ctx):
        ctx = make_ctx()
        calls = []

        def a(c):
            raise RuntimeError("boom")

        def b(c):
            calls.append("b")

        with pytest.raises(RuntimeError, match="boom"):
            asyncio.run(run_tasks([a, b], ctx))
        assert calls == []


class TestPostHooks:
    def test_failing_hook_does_not_block_next(self):
        calls = []

        async def broken():
            calls.append("broken")
            raise RuntimeError("hook failed")

        async def healthy():
            calls.append("healthy")

        failures = asyncio.run(run_post_hooks([broken, healthy]))
        assert calls == ["broken", "healthy"]
        assert failures == 1

    def test_no_hooks(self):
        assert asyncio.run(run_post_hooks([])) == 0

    def test_sync_hook(self):
        calls = []

        def plain():
            calls.append("plain")

        assert asyncio.run(run_post_hooks([plain])) == 0
        assert calls == ["plain"]


class TestContext:
    def test_accumulators_are_read_only_views(self, make_ctx):
        ctx = make_ctx()
        ctx.add_dep(DependencyEntry("eslint"))

        async def hook():
            return None

        ctx.on_finish(hook)
        assert ctx.dependencies == (DependencyEntry("eslint"),)
        assert ctx.hooks == (hook,)
        assert isinstance(ctx.dependencies, tuple)

    def test_dependency_spec(self):
        assert DependencyEntry("husky", "^8.0.0").spec == "husky@^8.0.0"
        assert DependencyEntry("husky").spec == "husky"


class TestExecute:
    def test_missing_manifest_is_fatal(self, tmp_path, make_config):
        installer = RecordingInstaller()
        prompted = []

        def options(manifest, cwd):
            prompted.append(cwd)
            return make_config()

        with pytest.raises(FatalPreconditionError):
            asyncio.run(execute(tmp_path, [], options, installer))
        assert prompted == []
        assert installer.calls == []

    def test_task_failure_skips_write_install_and_hooks(self, project, make_config):
        before = (project / "package.json").read_text(encoding="utf-8")
        installer = RecordingInstaller()
        ran = []

        def a(ctx):
            ctx.manifest.set_script("lint", "eslint .")
            ctx.add_dep(DependencyEntry("eslint"))

            async def hook():
                ran.append("hook")

            ctx.on_finish(hook)
            raise RuntimeError("task a failed")

        def b(ctx):
            ran.append("b")

        with pytest.raises(RuntimeError):
            asyncio.run(execute(project, [a, b], _options(make_config), installer))

        assert ran == []
        assert installer.calls == []
        assert (project / "package.json").read_text(encoding="utf-8") == before

    def test_full_run(self, project, make_config):
        installer = RecordingInstaller()
        order = []

        def task(ctx):
            order.append("task")
            ctx.manifest.set_script("local-check", "wkstd local-check")
            ctx.add_dep(DependencyEntry("husky"))
            ctx.add_dep(DependencyEntry("lodash", dev=False))

            async def hook():
                # manifest already on disk when hooks run
                data = json.loads((ctx.cwd / "package.json").read_text(encoding="utf-8"))
                order.append(("hook", data["scripts"]["local-check"], len(installer.calls)))

            ctx.on_finish(hook)

        report = asyncio.run(execute(project, [task], _options(make_config), installer, "pnpm"))

        assert order == ["task", ("hook", "wkstd local-check", 1)]
        deps, cwd, manager = installer.calls[0]
        assert [d.name for d in deps] == ["husky", "lodash"]
        assert cwd == project
        assert manager == "pnpm"
        assert report.written is True
        assert report.installed == ("husky", "lodash")
        assert report.install_ok is True
        assert report.success is True

    def test_no_dependencies_skips_installer(self, project, make_config):
        installer = RecordingInstaller()
        report = asyncio.run(execute(project, [], _options(make_config), installer))
        assert installer.calls == []
        assert report.written is False
        assert report.install_ok is None
        assert report.success is True

    def test_install_failure_still_runs_hooks(self, project, make_config):
        installer = RecordingInstaller(success=False)
        ran = []

        def task(ctx):
            ctx.manifest.set_script("prepare", "husky install")
            ctx.add_dep(DependencyEntry("husky"))

            async def hook():
                ran.append("hook")

            ctx.on_finish(hook)

        report = asyncio.run(execute(project, [task], _options(make_config), installer))

        assert ran == ["hook"]
        assert report.install_ok is False
        assert report.success is False
        data = json.loads((project / "package.json").read_text(encoding="utf-8"))
        assert data["scripts"]["prepare"] == "husky install"

    def test_hook_failure_keeps_run_successful(self, project, make_config):
        installer = RecordingInstaller()
        ran = []

        def task(ctx):
            async def first():
                raise RuntimeError("first hook")

            async def second():
                ran.append("second")

            ctx.on_finish(first)
            ctx.on_finish(second)

        report = asyncio.run(execute(project, [task], _options(make_config), installer))
        assert ran == ["second"]
        assert report.hook_failures == 1
        assert report.success is True

    def test_raising_installer_still_runs_hooks(self, project, make_config):
        ran = []

        async def crashing(deps, cwd, manager_name):
            raise RuntimeError("installer crashed")

        def task(ctx):
            ctx.add_dep(DependencyEntry("husky"))

            async def hook():
                ran.append("hook")

            ctx.on_finish(hook)

        report = asyncio.run(execute(project, [task], _options(make_config), crashing))

        assert ran == ["hook"]
        assert report.install_ok is False
        assert report.success is False

    def test_manager_detected_from_manifest(self, project, make_config, write_manifest):
        write_manifest(project / "package.json", {"name": "app", "packageManager": "pnpm@8.15.0"})
        (project / "yarn.lock").write_text("", encoding="utf-8")
        installer = RecordingInstaller()

        def task(ctx):
            ctx.add_dep(DependencyEntry("husky"))

        asyncio.run(execute(project, [task], _options(make_config), installer))
        assert installer.calls[0][2] == "pnpm"
