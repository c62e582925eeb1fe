"""Web API for circular-scan."""

from circular_scan.web.app import create_app

__all__ = ["create_app"]
