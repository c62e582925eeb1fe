"""FastAPI routes for running analyses and fetching their reports."""

from __future__ import annotations

import asyncio
from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from circular_scan.errors import CircularScanError
from circular_scan.exporter import format_report, to_dot
from circular_scan.models import AnalysisConfig
from circular_scan.pipeline import run_analysis
from circular_scan.web.state import RunSession, state

router = APIRouter(prefix="/api")


# --- Request models ---

class AnalyzeRequest(BaseModel):
    path: str
    only_project: bool = True
    workers: int = 8
    max_depth: int | None = Field(default=1000, ge=1)
    exclude_dirs: list[str] = Field(default_factory=list)
    exclude_files: list[str] = Field(default_factory=list)


# --- Path safety ---

def _validate_path(p: str) -> Path:
    """Ensure path exists and is a directory."""
    resolved = Path(p).expanduser().resolve()
    if not resolved.exists():
        raise HTTPException(404, f"Path not found: {resolved}")
    if not resolved.is_dir():
        raise HTTPException(400, f"Path is not a directory: {resolved}")
    return resolved


def _get_run(run_id: str) -> RunSession:
    session = state.get_run(run_id)
    if not session:
        raise HTTPException(404, "Run not found")
    return session


def _summary(session: RunSession) -> dict:
    return {"run_id": session.id, "timestamp": session.timestamp, **session.result.to_dict()}


# --- Endpoints ---

@router.post("/analyze")
async def analyze(req: AnalyzeRequest):
    root = _validate_path(req.path)
    config = AnalysisConfig(
        project_root=root,
        workers=req.workers,
        only_project=req.only_project,
        max_depth=req.max_depth,
        exclude_dirs=req.exclude_dirs,
        exclude_files=req.exclude_files,
    )

    try:
        result = await asyncio.to_thread(run_analysis, config)
    except CircularScanError as e:
        raise HTTPException(400, str(e))

    session = RunSession(result=result)
    state.add_run(session)
    return _summary(session)


@router.get("/runs/{run_id}")
async def get_run(run_id: str):
    return _summary(_get_run(run_id))


@router.get("/runs/{run_id}/report", response_class=PlainTextResponse)
async def get_report(run_id: str):
    result = _get_run(run_id).result
    return format_report(result.cycles, result.graph.locations, truncated=result.search.truncated)


@router.get("/runs/{run_id}/graph.dot", response_class=PlainTextResponse)
async def get_graph(run_id: str):
    result = _get_run(run_id).result
    return to_dot(result.graph, highlight=result.cycles)


@router.delete("/runs/{run_id}")
async def delete_run(run_id: str):
    if not state.delete_run(run_id):
        raise HTTPException(404, "Run not found")
    return {"deleted": run_id}
