"""Utility modules for reclaimspace.

This module exports commonly used utility functions.
"""

from reclaimspace.utils.formatting import (
    console,
    err_console,
    format_date,
    format_size,
    format_target_row,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "format_date",
    "format_size",
    "format_target_row",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
