"""Module resolver — file path to dotted module identity, and in-project lookups."""

from __future__ import annotations

from pathlib import Path

_MODULE_SEP = "."


class ModuleResolver:
    """Resolve module identities relative to a project root.

    ``pkg/mod.py`` maps to ``pkg.mod`` and ``pkg/__init__.py`` maps to
    ``pkg``. A module ``pkg.py`` next to a package ``pkg/`` therefore
    shares its identity with ``pkg/__init__.py``; both are kept and the
    later one wins wherever identities are used as keys.
    """

    def __init__(
        self,
        project_root: Path,
        suffix: str = ".py",
        init_stem: str = "__init__",
    ):
        self.project_root = Path(project_root).resolve()
        self.suffix = suffix
        self.init_stem = init_stem

    def identity_of(self, file_path: Path) -> str | None:
        """Return the dotted module identity of *file_path*, or None."""
        path = Path(file_path)
        if not path.is_absolute():
            path = self.project_root / path
        try:
            rel = path.relative_to(self.project_root)
        except ValueError:
            try:
                rel = path.resolve().relative_to(self.project_root)
            except (OSError, ValueError):
                return None

        parts = list(rel.parts)
        if not parts:
            return None
        if parts[-1].endswith(self.suffix):
            parts[-1] = parts[-1][: -len(self.suffix)]
        if parts[-1] == self.init_stem:
            parts.pop()
        if not parts or not all(parts):
            return None
        return _MODULE_SEP.join(parts)

    def exists_in_project(self, target: str) -> bool:
        """True if *target* names a module or package file under the root."""
        parts = target.split(_MODULE_SEP)
        if not all(p.isidentifier() for p in parts):
            return False

        base = self.project_root.joinpath(*parts)
        try:
            return (
                base.with_name(base.name + self.suffix).is_file()
                or (base / f"{self.init_stem}{self.suffix}").is_file()
            )
        except OSError:
            return False

    def filter_targets(self, targets: set[str]) -> set[str]:
        return {t for t in targets if self.exists_in_project(t)}


def identity_of(file_path: Path, project_root: Path) -> str | None:
    return ModuleResolver(project_root).identity_of(file_path)


def exists_in_project(target: str, project_root: Path) -> bool:
    return ModuleResolver(project_root).exists_in_project(target)
