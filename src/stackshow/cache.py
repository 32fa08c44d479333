"""Process-wide cache of source files split into lines."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog

from stackshow.errors import FileNotFound

# stdlib-backed, so an unconfigured host only sees warnings, on stderr
logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)

Reader = Callable[[str], str]


def read_source(path: str) -> str:
    """Read a whole source file as text."""
    return Path(path).read_text(encoding="utf-8", errors="replace")


class _ReadWriteLock:
    """Many readers at once, or one writer alone."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def reading(self) -> Iterator[None]:
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def writing(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class SourceLineCache:
    """Maps a file path to its lines, reading each file at most once per success.

    Entries are never invalidated: source files are assumed not to change
    while the process runs. Failed reads are not cached.
    """

    def __init__(self, reader: Reader = read_source) -> None:
        self._reader = reader
        self._lines: dict[str, tuple[str, ...]] = {}
        self._lock = _ReadWriteLock()

    def get_lines(self, path: str) -> tuple[str, ...]:
        """Return the lines of ``path``. Raises FileNotFound."""
        with self._lock.reading():
            lines = self._lines.get(path)
        if lines is not None:
            return lines

        logger.debug("source_cache_miss", path=path)
        try:
            content = self._reader(path)
        except OSError as e:
            logger.warning("source_unreadable", path=path, error=str(e))
            raise FileNotFound(path) from e

        # Racing misses on one path both land here; the last insert wins.
        lines = tuple(content.split("\n"))
        with self._lock.writing():
            self._lines[path] = lines
        logger.debug("source_cache_populated", path=path, lines=len(lines))
        return lines

    def clear(self) -> None:
        with self._lock.writing():
            self._lines.clear()

    def __contains__(self, path: object) -> bool:
        with self._lock.reading():
            return path in self._lines

    def __len__(self) -> int:
        with self._lock.reading():
            return len(self._lines)


default_cache = SourceLineCache()
