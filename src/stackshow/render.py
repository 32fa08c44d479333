"""Composes stack trace reports with interleaved source windows."""

from __future__ import annotations

from collections.abc import Sequence

from stackshow.cache import SourceLineCache, default_cache
from stackshow.colors import black, bold, red, yellow
from stackshow.config import DEFAULT_CONFIG, ReportConfig
from stackshow.errors import SourceError, TooFewLines
from stackshow.frames import Frame, stack_trace_of
from stackshow.window import compute_window


def frame_lines(frame: Frame, cache: SourceLineCache) -> tuple[str, ...]:
    """Lines of the frame's file. Raises FileNotFound or TooFewLines."""
    lines = cache.get_lines(frame.path)
    if len(lines) < frame.line:
        raise TooFewLines(frame.path, len(lines), frame.line)
    return lines


def source_rows(
    frame: Frame,
    before: int,
    after: int,
    colorized: bool,
    cache: SourceLineCache | None = None,
) -> list[str]:
    """Render the source window around ``frame``, ending in a blank row.

    An unreadable or too short file yields a single warning row instead.
    """
    try:
        lines = frame_lines(frame, default_cache if cache is None else cache)
    except SourceError as e:
        message = str(e)
        if colorized:
            message = yellow(message)
        return [message, ""]

    rows: list[str] = []
    current = frame.line - 1
    for i in range(current - before, current + after + 1):
        if i < 0 or i >= len(lines):
            continue
        # TODO: pad line numbers to the widest one in the window.
        if i == current:
            row = f"{i + 1}\t{lines[i]}"
            if colorized:
                row = red(row)
        elif colorized:
            row = f"{black(str(i + 1))}\t{lines[i]}"
        else:
            row = f"{i + 1}\t{lines[i]}"
        rows.append(row)
    rows.append("")
    return rows


def compose(
    err: object,
    nums: Sequence[int],
    colorized: bool,
    config: ReportConfig | None = None,
    cache: SourceLineCache | None = None,
) -> str:
    """Build the full report for ``err``.

    ``None`` gives an empty string and an error without a stack trace gives
    its plain message.
    """
    if err is None:
        return ""
    frames = stack_trace_of(err)
    if frames is None:
        return str(err)

    config = config or DEFAULT_CONFIG
    window = compute_window(nums, config)

    rows = [err.message()]  # type: ignore[attr-defined]
    if window.with_source:
        rows.append("")

    appended = 0
    for i, frame in enumerate(frames, start=1):
        if i <= config.ignore_first_frames:
            continue

        header = str(frame)
        if colorized:
            header = bold(header)
        rows.append(header)
        if window.with_source:
            rows.extend(source_rows(frame, window.before, window.after, colorized, cache))

        appended += 1
        if config.max_frames > 0 and appended >= config.max_frames:
            break
        if config.ignore_last_frames > 0 and i + config.ignore_last_frames >= len(frames):
            break

    return "\n".join(rows)
