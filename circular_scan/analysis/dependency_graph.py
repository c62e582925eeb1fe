"""Dependency graph builder — folds per-file records into adjacency and location maps."""

from __future__ import annotations

from typing import Iterable

from circular_scan.analysis.graph_models import DependencyGraph
from circular_scan.models import FileRecord


class DependencyGraphBuilder:
    """Build a module-level import graph from scanner output."""

    def build(self, records: Iterable[FileRecord]) -> DependencyGraph:
        graph = DependencyGraph()

        for record in records:
            if record.module is None:
                continue

            # Merge, don't replace: two files with one identity share a node
            targets = graph.edges.setdefault(record.module, [])
            targets.extend(sorted(record.imports))
            graph.locations[record.module] = record.file

        return graph


def build_graph(records: Iterable[FileRecord]) -> DependencyGraph:
    return DependencyGraphBuilder().build(records)
