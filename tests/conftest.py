"""Shared pytest fixtures for the stackshow test suite."""

from __future__ import annotations

import pytest

from stackshow.cache import SourceLineCache
from stackshow.logs import configure_logging, reset_logging


@pytest.fixture(autouse=True)
def quiet_logs():
    """Keep log output out of captured streams."""
    configure_logging("CRITICAL")
    yield
    reset_logging()


@pytest.fixture
def cache():
    return SourceLineCache()


@pytest.fixture
def ten_lines(tmp_path):
    """A source file with lines "line 1" .. "line 10" and a trailing newline."""
    path = tmp_path / "a.go"
    path.write_text("".join(f"line {n}\n" for n in range(1, 11)))
    return path
