"""File discovery — flat list of source files under a project root."""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path
from typing import Iterable

DEFAULT_SKIP_DIRS: tuple[str, ...] = (
    ".git", ".hg", ".svn", "__pycache__", ".mypy_cache", ".pytest_cache",
    ".ruff_cache", ".tox", ".nox", ".venv", "venv", "env", ".eggs",
    "*.egg-info", "node_modules",
)


def discover_files(
    root: Path,
    exclude_dirs: Iterable[str] = (),
    exclude_files: Iterable[str] = (),
    suffix: str = ".py",
) -> list[Path]:
    """Walk *root* and return absolute paths of every *suffix* file.

    Directory names matching DEFAULT_SKIP_DIRS or *exclude_dirs* are
    pruned. *exclude_files* patterns match the file name or its
    root-relative POSIX path.
    """
    root = Path(root).resolve()
    dir_patterns = [*DEFAULT_SKIP_DIRS, *exclude_dirs]
    file_patterns = list(exclude_files)

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if not _matches(d, dir_patterns)]
        for name in filenames:
            if not name.endswith(suffix):
                continue
            path = Path(dirpath) / name
            rel = path.relative_to(root).as_posix()
            if _matches(name, file_patterns) or _matches(rel, file_patterns):
                continue
            files.append(path)
    return files


def _matches(name: str, patterns: list[str]) -> bool:
    return any(fnmatch.fnmatch(name, pattern) for pattern in patterns)
