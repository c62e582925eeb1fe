"""circular-scan: find circular imports in Python projects."""

__version__ = "0.1.0"
