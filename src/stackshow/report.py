"""Public entry points: return a report as a string or print it."""

from __future__ import annotations

import click

from stackshow.cache import SourceLineCache
from stackshow.config import ReportConfig
from stackshow.render import compose


def sprint(
    err: object,
    *,
    config: ReportConfig | None = None,
    cache: SourceLineCache | None = None,
) -> str:
    """Error message followed by frame headers, without source."""
    return compose(err, [0], False, config, cache)


def sprint_source(
    err: object,
    *nums: int,
    config: ReportConfig | None = None,
    cache: SourceLineCache | None = None,
) -> str:
    """Error message with each frame's source window.

    With no numbers the configured before/after defaults apply. A single
    number is the total count of lines per frame. Two numbers give exactly
    how many lines to show before and after the traced line.
    """
    return compose(err, nums, False, config, cache)


def sprint_source_color(
    err: object,
    *nums: int,
    config: ReportConfig | None = None,
    cache: SourceLineCache | None = None,
) -> str:
    """Same as sprint_source, with ANSI colors."""
    return compose(err, nums, True, config, cache)


def print_report(
    err: object,
    *,
    config: ReportConfig | None = None,
    cache: SourceLineCache | None = None,
) -> None:
    click.echo(sprint(err, config=config, cache=cache))


def print_source(
    err: object,
    *nums: int,
    config: ReportConfig | None = None,
    cache: SourceLineCache | None = None,
) -> None:
    click.echo(sprint_source(err, *nums, config=config, cache=cache))


def print_source_color(
    err: object,
    *nums: int,
    config: ReportConfig | None = None,
    cache: SourceLineCache | None = None,
) -> None:
    # escapes are kept even when stdout is not a tty
    click.echo(sprint_source_color(err, *nums, config=config, cache=cache), color=True)
