"""Data models for the dependency graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


@dataclass
class DependencyGraph:
    edges: dict[str, list[str]] = field(default_factory=dict)  # module -> targets, in order
    locations: dict[str, Path] = field(default_factory=dict)  # module -> defining file

    @property
    def nodes(self) -> list[str]:
        return list(self.edges)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.edges.values())

    def iter_edges(self) -> Iterator[tuple[str, str]]:
        for module, targets in self.edges.items():
            for target in targets:
                yield module, target


@dataclass
class CycleSearch:
    cycles: list[list[str]] = field(default_factory=list)
    truncated: list[str] = field(default_factory=list)  # nodes left unexpanded at max_depth
    max_depth: int | None = None

    @property
    def depth_exceeded(self) -> bool:
        return bool(self.truncated)
