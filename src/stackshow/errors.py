"""Errors raised while resolving source lines and loading config."""

from __future__ import annotations


class SourceError(Exception):
    """A frame's source block could not be shown."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class FileNotFound(SourceError):
    """The source file could not be read."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"stackshow: file {path} not found")


class TooFewLines(SourceError):
    """The frame points past the end of its source file."""

    def __init__(self, path: str, got: int, want: int) -> None:
        self.got = got
        self.want = want
        super().__init__(path, f"stackshow: too few lines, got {got}, want {want}")


class ConfigError(Exception):
    """Invalid stackshow.toml content."""
