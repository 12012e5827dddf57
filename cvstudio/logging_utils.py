"""
Logging helpers for cvstudio.

Defines the package logger and simple utilities for configuring
console and optional file logging.
"""

from __future__ import annotations

import logging
from typing import List, Optional

# Package-level logger; modules under cvstudio share it
LOG = logging.getLogger(__name__.rpartition(".")[0] or __name__)

# Verbosity levels
VERBOSITY_QUIET = 0    # Warnings and errors only (default)
VERBOSITY_NORMAL = 1   # Progress messages with level prefix
VERBOSITY_VERBOSE = 2  # Detailed debug output


def setup_logging(debug: bool, log_file: Optional[str] = None, verbosity: int = VERBOSITY_QUIET) -> None:
    """
    Setup logging with verbosity control.

    Args:
        debug: Debug flag (overrides verbosity to VERBOSITY_VERBOSE)
        log_file: Optional log file path
        verbosity: Verbosity level (0=quiet, 1=normal, 2=verbose)
    """
    if debug:
        verbosity = VERBOSITY_VERBOSE

    if verbosity >= VERBOSITY_VERBOSE:
        level = logging.DEBUG
    elif verbosity >= VERBOSITY_NORMAL:
        level = logging.INFO
    else:
        level = logging.WARNING

    fmt = "%(levelname)s: %(message)s" if verbosity >= VERBOSITY_NORMAL else "%(message)s"

    # Handlers may already be installed (e.g. by pytest); only adjust them
    if logging.root.handlers:
        for handler in logging.root.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
                handler.setFormatter(logging.Formatter(fmt))
        logging.root.setLevel(level)
    else:
        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(fmt))
        handlers.append(console)
        logging.basicConfig(level=level, handlers=handlers, force=True)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # always full detail in file
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logging.root.addHandler(file_handler)

    # Suppress noisy third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


def fmt_issues(errors: List[str], warnings: List[str]) -> str:
    """
    Compact error/warning string for one-line log messages.
    """
    parts: List[str] = []
    if errors:
        parts.append("errors: " + ", ".join(errors))
    if warnings:
        parts.append("warnings: " + ", ".join(warnings))
    return " | ".join(parts) if parts else "-"
