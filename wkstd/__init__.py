"""wkstd - lint/format tooling bootstrapper for JavaScript projects."""

__version__ = "0.1.0"
