"""CLI package for reclaimspace.

This package contains the Typer application and all commands.
"""

from reclaimspace.cli.main import app

__all__ = ["app"]
