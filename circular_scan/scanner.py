"""Parallel scanner — one FileRecord per file, fanned out over a thread pool."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Sequence

from circular_scan.extractor import decode_source, extract_imports
from circular_scan.models import FileRecord
from circular_scan.resolver import ModuleResolver

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def effective_workers(requested: int, file_count: int) -> int:
    """Clamp the worker count to [1, file_count]."""
    return max(1, min(requested, file_count))


def scan_file(
    file_path: Path,
    resolver: ModuleResolver,
    only_project: bool = True,
) -> FileRecord:
    """Read, extract and resolve a single file.

    Read and decode problems degrade to an empty-imports record.
    """
    module = resolver.identity_of(file_path)
    try:
        raw = Path(file_path).read_bytes()
        source = decode_source(raw)
    except (OSError, ValueError) as e:
        logger.warning("Skipping imports of %s: %s", file_path, e)
        return FileRecord(file=file_path, module=module, error=str(e))

    imports = extract_imports(source, origin=str(file_path))
    if only_project:
        imports = resolver.filter_targets(imports)
    return FileRecord(file=file_path, module=module, imports=imports)


def scan_files(
    files: Sequence[Path],
    resolver: ModuleResolver,
    *,
    only_project: bool = True,
    workers: int = 8,
    progress: ProgressCallback | None = None,
) -> list[FileRecord]:
    """Scan *files* concurrently. Output order is completion order."""
    if not files:
        return []

    pool_size = effective_workers(workers, len(files))
    logger.debug("Scanning %d file(s) with %d worker(s)", len(files), pool_size)

    records: list[FileRecord] = []
    with ThreadPoolExecutor(max_workers=pool_size) as pool:
        futures = {
            pool.submit(scan_file, path, resolver, only_project): path
            for path in files
        }
        for future in as_completed(futures):
            records.append(future.result())
            if progress:
                progress("Scanning", len(records), len(files))

    return records
