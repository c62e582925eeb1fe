"""In-memory run store for the web API — no database required."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime

from circular_scan.models import AnalysisResult


@dataclass
class RunSession:
    result: AnalysisResult
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


MAX_RUNS = 50


class AppState:
    """Singleton in-memory state shared by all API routes.

    Keeps at most *max_runs* runs; the oldest is dropped first.
    """

    def __init__(self, max_runs: int = MAX_RUNS):
        self.runs: dict[str, RunSession] = {}
        self.max_runs = max_runs
        self._lock = threading.Lock()

    def add_run(self, session: RunSession) -> None:
        with self._lock:
            self.runs[session.id] = session
            while len(self.runs) > self.max_runs:
                self.runs.pop(next(iter(self.runs)))

    def get_run(self, run_id: str) -> RunSession | None:
        return self.runs.get(run_id)

    def delete_run(self, run_id: str) -> bool:
        with self._lock:
            return self.runs.pop(run_id, None) is not None


state = AppState()
