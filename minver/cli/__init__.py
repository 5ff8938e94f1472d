"""minver command-line interface."""

from minver.cli.app import app, main

__all__ = ["app", "main"]
