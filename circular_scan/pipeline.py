"""Analysis pipeline: discover -> scan -> build graph -> find cycles."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from circular_scan.analysis.cycles import find_cycles
from circular_scan.analysis.dependency_graph import DependencyGraphBuilder
from circular_scan.discovery import discover_files
from circular_scan.errors import ProjectRootError
from circular_scan.models import AnalysisConfig, AnalysisResult, RunOutcome
from circular_scan.resolver import ModuleResolver
from circular_scan.scanner import scan_files

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def check_project_root(root: Path) -> Path:
    """Resolve *root* or raise ProjectRootError before any work starts."""
    resolved = Path(root).expanduser().resolve()
    if not resolved.exists():
        raise ProjectRootError(f"Project root not found: {resolved}")
    if not resolved.is_dir():
        raise ProjectRootError(f"Project root is not a directory: {resolved}")
    return resolved


def run_analysis(
    config: AnalysisConfig,
    progress: ProgressCallback | None = None,
) -> AnalysisResult:
    """Run the full analysis for one project root."""
    root = check_project_root(config.project_root)

    # Stage 1: Discover
    if progress:
        progress("Discovering", 0, 1)
    files = discover_files(
        root,
        exclude_dirs=config.exclude_dirs,
        exclude_files=config.exclude_files,
    )
    if progress:
        progress("Discovering", 1, 1)

    if not files:
        logger.warning("No Python files found under %s", root)
        return AnalysisResult(config=config, outcome=RunOutcome.NO_INPUT_FILES)

    logger.info("Found %d Python file(s) under %s", len(files), root)

    # Stage 2: Scan
    resolver = ModuleResolver(root)
    records = scan_files(
        files,
        resolver,
        only_project=config.only_project,
        workers=config.workers,
        progress=progress,
    )
    failed = sum(1 for r in records if r.error is not None)
    if failed:
        logger.warning("%d file(s) could not be read and contribute no imports", failed)

    # Stage 3: Build graph
    if config.deterministic:
        records.sort(key=lambda r: str(r.file))
    graph = DependencyGraphBuilder().build(records)
    logger.info("Built graph with %d module(s) and %d edge(s)", len(graph.edges), graph.edge_count)

    # Stage 4: Find cycles
    search = find_cycles(graph, max_depth=config.max_depth)
    outcome = RunOutcome.CYCLES_FOUND if search.cycles else RunOutcome.NO_CYCLES

    return AnalysisResult(
        config=config,
        outcome=outcome,
        files=files,
        records=records,
        graph=graph,
        search=search,
    )
