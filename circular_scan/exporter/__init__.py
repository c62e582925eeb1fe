"""Exporter layer."""

from circular_scan.exporter.dot_exporter import render_dot, to_dot, write_dot
from circular_scan.exporter.json_exporter import write_json
from circular_scan.exporter.report import format_report, write_report

__all__ = [
    "format_report",
    "render_dot",
    "to_dot",
    "write_dot",
    "write_json",
    "write_report",
]
