"""Generate a JSON summary of an analysis run."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from circular_scan.models import AnalysisResult


def write_json(result: AnalysisResult, path: Path) -> Path:
    data = {
        "version": "1.0",
        "generated": datetime.now().isoformat(),
        **result.to_dict(),
    }
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path
