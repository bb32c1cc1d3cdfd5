"""CLI commands for reclaimspace.

This package contains all command implementations.
"""

from reclaimspace.cli.commands import clean, scan

__all__ = ["clean", "scan"]
