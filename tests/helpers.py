"""Shared test helpers for the stackshow test suite."""

from __future__ import annotations

from stackshow.frames import Frame, TracedException


def traced(message: str, *frames: Frame) -> TracedException:
    """A traced error with the given frames, outermost first."""
    return TracedException(message, frames)


def numbered(path, count: int) -> list[Frame]:
    """``count`` frames all pointing at line 5 of ``path``, named f1, f2, ..."""
    return [Frame(path=str(path), line=5, func=f"f{n}") for n in range(1, count + 1)]
