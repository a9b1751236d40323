"""
Shared utility functions.

This package contains utility code used across the loader,
the repository and the CLI.
"""

from .logging import JsonlFormatter, log_debug, log_event, log_warning, setup_logging

__all__ = [
    "setup_logging",
    "log_debug",
    "log_event",
    "log_warning",
    "JsonlFormatter",
]
