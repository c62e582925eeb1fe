"""Graphviz DOT export, with optional rendering through the ``dot`` binary."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Iterable, Sequence

from circular_scan.analysis.graph_models import DependencyGraph

logger = logging.getLogger(__name__)

RENDER_FORMATS = {"png", "svg", "pdf", "jpg", "jpeg", "gif"}


def _quote(name: str) -> str:
    return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'


def cycle_edges(cycles: Iterable[Sequence[str]]) -> set[tuple[str, str]]:
    edges: set[tuple[str, str]] = set()
    for cycle in cycles:
        edges.update(zip(cycle, cycle[1:]))
    return edges


def to_dot(
    graph: DependencyGraph,
    *,
    highlight: Iterable[Sequence[str]] | None = None,
    name: str = "imports",
) -> str:
    """Return a digraph with one edge statement per graph edge, in graph order.

    Edges on any cycle in *highlight* are drawn red.
    """
    red = cycle_edges(highlight or [])
    lines = [f"digraph {_quote(name)} {{", "  rankdir=LR;", "  node [shape=box];"]

    for module, target in graph.iter_edges():
        attrs = " [color=red, penwidth=2]" if (module, target) in red else ""
        lines.append(f"  {_quote(module)} -> {_quote(target)}{attrs};")

    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(
    graph: DependencyGraph,
    path: Path,
    *,
    highlight: Iterable[Sequence[str]] | None = None,
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_dot(graph, highlight=highlight), encoding="utf-8")
    return path


def render_dot(dot_path: Path, output_path: Path, fmt: str | None = None) -> Path | None:
    """Render *dot_path* with Graphviz. Returns None if rendering was skipped.

    A missing ``dot`` binary or a failed render leaves the DOT file in place.
    """
    fmt = fmt or Path(output_path).suffix.lstrip(".").lower() or "png"
    dot_bin = shutil.which("dot")
    if dot_bin is None:
        logger.warning("Graphviz 'dot' not found; graph description left at %s", dot_path)
        return None

    try:
        subprocess.run(
            [dot_bin, f"-T{fmt}", str(dot_path), "-o", str(output_path)],
            check=True,
            capture_output=True,
            text=True,
        )
    except subprocess.CalledProcessError as e:
        logger.warning("dot failed (exit %d): %s", e.returncode, (e.stderr or "").strip())
        return None
    except OSError as e:
        logger.warning("Could not run dot: %s", e)
        return None

    logger.info("Rendered graph to %s", output_path)
    return Path(output_path)
