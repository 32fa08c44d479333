"""Readable stack trace reports with source context."""

from __future__ import annotations

from stackshow.config import ReportConfig
from stackshow.frames import Frame, Traced, TracedException, stack_trace_of
from stackshow.report import (
    print_report,
    print_source,
    print_source_color,
    sprint,
    sprint_source,
    sprint_source_color,
)

__version__ = "0.1.0"

__all__ = [
    "Frame",
    "ReportConfig",
    "Traced",
    "TracedException",
    "print_report",
    "print_source",
    "print_source_color",
    "sprint",
    "sprint_source",
    "sprint_source_color",
    "stack_trace_of",
]
