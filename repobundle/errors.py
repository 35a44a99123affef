# repobundle/errors.py

"""Exceptions raised by repobundle."""

from __future__ import annotations


class RepoBundleError(Exception):
    """Base exception for repobundle errors."""


class SelectionError(RepoBundleError):
    """Raised when the set of files to bundle cannot be determined."""


class OutputError(RepoBundleError):
    """Raised when the bundle cannot be written to its destination."""
