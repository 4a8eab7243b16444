"""Command modules for the wkstd CLI."""
