"""Plain-text cycle report."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

NO_CYCLES_MESSAGE = "No circular dependencies found."
LOCATION_NOT_FOUND = "<location not found>"


def format_report(
    cycles: Sequence[Sequence[str]],
    locations: Mapping[str, Path],
    *,
    truncated: Sequence[str] = (),
) -> str:
    """Render cycles in discovery order, each with its file locations."""
    lines: list[str] = []

    if not cycles:
        lines.append(NO_CYCLES_MESSAGE)
    for n, cycle in enumerate(cycles, 1):
        if n > 1:
            lines.append("")
        lines.append(f"Cycle {n}: {' -> '.join(cycle)}")
        lines.append("File locations:")
        for module in dict.fromkeys(cycle):
            location = locations.get(module)
            lines.append(f"  {module}: {location if location is not None else LOCATION_NOT_FOUND}")

    if truncated:
        unexpanded = list(dict.fromkeys(truncated))
        lines.append("")
        lines.append(
            f"Warning: traversal depth limit reached; {len(unexpanded)} node(s) were not expanded:"
        )
        lines.extend(f"  {module}" for module in unexpanded)

    return "\n".join(lines) + "\n"


def write_report(text: str, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
