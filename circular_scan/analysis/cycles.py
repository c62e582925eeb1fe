"""Cycle finder — depth-first search over the import graph."""

from __future__ import annotations

import logging
from typing import Iterator, Mapping, Sequence

from circular_scan.analysis.graph_models import CycleSearch, DependencyGraph

logger = logging.getLogger(__name__)

_DONE = object()


def find_cycles(
    graph: DependencyGraph | Mapping[str, Sequence[str]],
    *,
    max_depth: int | None = None,
) -> CycleSearch:
    """Report cycles reachable from every not-yet-explored node.

    Roots are taken in the graph's own iteration order. A single visited
    set is shared across roots, so every strongly connected component with
    a cycle is witnessed at least once, but not every simple cycle in a
    component is listed.

    Each cycle is closed: ``[a, b, a]``. Targets that are not graph nodes
    are leaves. With *max_depth*, a node that would make the active path
    longer than the limit is not expanded and is listed in ``truncated``,
    unless it has no outgoing edges and so has nothing to expand.
    """
    edges = graph.edges if isinstance(graph, DependencyGraph) else graph
    result = CycleSearch(max_depth=max_depth)

    explored: set[str] = set()
    on_path: set[str] = set()
    path: list[str] = []
    stack: list[tuple[str, Iterator[str]]] = []

    def visit(node: str) -> None:
        if node in on_path:
            result.cycles.append(path[path.index(node):] + [node])
            return
        if node in explored:
            return
        if max_depth is not None and len(path) >= max_depth:
            if not edges.get(node):
                explored.add(node)
                return
            result.truncated.append(node)
            return
        on_path.add(node)
        path.append(node)
        stack.append((node, iter(edges.get(node, ()))))

    for root in list(edges):
        if root in explored:
            continue
        visit(root)
        while stack:
            node, targets = stack[-1]
            target = next(targets, _DONE)
            if target is _DONE:
                stack.pop()
                path.pop()
                on_path.discard(node)
                explored.add(node)
                continue
            visit(target)

    if result.truncated:
        logger.warning(
            "Traversal depth limit of %d reached at %d node(s); results may be incomplete",
            max_depth, len(result.truncated),
        )
    return result
