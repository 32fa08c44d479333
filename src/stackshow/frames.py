"""Stack frames and the traced-error capability consumed by reports."""

from __future__ import annotations

import traceback
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Frame:
    """One entry of a captured call stack."""

    path: str
    line: int
    func: str

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"frame line must be 1-based, got {self.line}")

    def __str__(self) -> str:
        return f"{self.func} ({self.path}:{self.line})"


@runtime_checkable
class Traced(Protocol):
    """An error that carries the stack it was raised from."""

    def message(self) -> str: ...

    def stack_trace(self) -> Sequence[Frame]: ...


def stack_trace_of(err: object) -> Sequence[Frame] | None:
    """Return the frames of a traced error, or None for a plain error."""
    if isinstance(err, Traced):
        return err.stack_trace()
    return None


class TracedException(Exception):
    """An exception paired with the frames it was raised through.

    Frames are ordered outermost-first, the same order Python prints
    tracebacks in.
    """

    def __init__(self, msg: str, frames: Sequence[Frame], cause: BaseException | None = None) -> None:
        super().__init__(msg)
        self._frames = tuple(frames)
        self.cause = cause

    def message(self) -> str:
        return str(self)

    def stack_trace(self) -> Sequence[Frame]:
        return self._frames

    @classmethod
    def from_exception(cls, exc: BaseException) -> TracedException:
        """Read the frames already recorded on ``exc.__traceback__``.

        Entries without a line number are left out.
        """
        summary = traceback.extract_tb(exc.__traceback__)
        frames = [
            Frame(path=entry.filename, line=entry.lineno, func=entry.name)
            for entry in summary
            if entry.lineno
        ]
        msg = str(exc)
        name = type(exc).__name__
        return cls(f"{name}: {msg}" if msg else name, frames, cause=exc)
