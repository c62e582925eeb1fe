"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from circular_scan import __version__
from circular_scan.web.api import router


def create_app() -> FastAPI:
    app = FastAPI(title="circular-scan", version=__version__)
    app.include_router(router)
    return app
