"""Run-level errors raised before any scanning starts."""

from __future__ import annotations


class CircularScanError(ValueError):
    """Base class for fatal, whole-run errors."""


class ProjectRootError(CircularScanError):
    """The project root is missing or is not a directory."""


class ConfigError(CircularScanError):
    """A config file could not be read or has the wrong shape."""
