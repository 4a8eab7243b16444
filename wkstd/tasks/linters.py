"""Linter and formatter dependencies for the selected project archetype.

Only packages are queued here; rule configuration is left to the project."""

from wkstd.pipeline.structures import Context, DependencyEntry, ProjectType

ARCHETYPE_PLUGINS = {
    ProjectType.REACT: ["eslint-plugin-react", "eslint-plugin-react-hooks"],
    ProjectType.VUE: ["eslint-plugin-vue"],
    ProjectType.TARO: ["eslint-config-taro"],
    ProjectType.STANDARD: [],
}

TYPESCRIPT_PACKAGES = ["@typescript-eslint/parser", "@typescript-eslint/eslint-plugin"]


def required_packages(ctx: Context) -> list[str]:
    packages = ["eslint"]
    if ctx.config.typescript:
        packages += TYPESCRIPT_PACKAGES
    packages += ARCHETYPE_PLUGINS[ctx.config.type]
    return packages


def eslint(ctx: Context) -> None:
    for name in required_packages(ctx):
        if not ctx.manifest.has_install(name):
            ctx.add_dep(DependencyEntry(name, dev=True))


def prettier(ctx: Context) -> None:
    if not ctx.manifest.has_install("prettier"):
        ctx.add_dep(DependencyEntry("prettier", dev=True))
