"""Data models for the circular-scan pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from circular_scan.analysis.graph_models import CycleSearch, DependencyGraph


class RunOutcome(enum.Enum):
    """Run-level result. Each value maps to a stable exit status."""
    NO_CYCLES = "no_cycles"
    CYCLES_FOUND = "cycles_found"
    NO_INPUT_FILES = "no_input_files"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    RunOutcome.NO_CYCLES: 0,
    RunOutcome.CYCLES_FOUND: 1,
    RunOutcome.NO_INPUT_FILES: 3,
}


@dataclass
class FileRecord:
    """Result from the scanner stage, one per discovered file."""
    file: Path
    module: str | None
    imports: set[str] = field(default_factory=set)
    error: str | None = None  # set when the file degraded to no imports


@dataclass
class AnalysisConfig:
    """Configuration for an analysis run."""
    project_root: Path = field(default_factory=lambda: Path("."))
    workers: int = 8
    only_project: bool = True
    max_depth: int | None = 1000
    exclude_dirs: list[str] = field(default_factory=list)
    exclude_files: list[str] = field(default_factory=list)
    deterministic: bool = True
    verbosity: int = 0

    def to_dict(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["project_root"] = str(self.project_root)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisConfig:
        """Create config from a dictionary, ignoring unknown keys."""
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        if "project_root" in filtered:
            filtered["project_root"] = Path(filtered["project_root"])
        for key in ("exclude_dirs", "exclude_files"):
            if key in filtered:
                filtered[key] = list(filtered[key] or [])
        return cls(**filtered)


@dataclass
class AnalysisResult:
    """Everything a run produced, handed to the exporters."""
    config: AnalysisConfig
    outcome: RunOutcome
    files: list[Path] = field(default_factory=list)
    records: list[FileRecord] = field(default_factory=list)
    graph: DependencyGraph = field(default_factory=DependencyGraph)
    search: CycleSearch = field(default_factory=CycleSearch)

    @property
    def cycles(self) -> list[list[str]]:
        return self.search.cycles

    @property
    def failed_files(self) -> list[FileRecord]:
        return [r for r in self.records if r.error is not None]

    def to_dict(self) -> dict[str, Any]:
        return {
            "project_root": str(self.config.project_root),
            "outcome": self.outcome.value,
            "exit_code": self.outcome.exit_code,
            "files_scanned": len(self.files),
            "modules": len(self.graph.edges),
            "edges": self.graph.edge_count,
            "cycle_count": len(self.cycles),
            "cycles": [list(c) for c in self.cycles],
            "depth_exceeded": self.search.depth_exceeded,
            "truncated": list(self.search.truncated),
            "failed_files": [
                {"file": str(r.file), "error": r.error} for r in self.failed_files
            ],
            "locations": {m: str(p) for m, p in self.graph.locations.items()},
        }
