"""Turns user-supplied line counts into a source window."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from stackshow.config import DEFAULT_CONFIG, ReportConfig


@dataclass(frozen=True)
class RenderWindow:
    before: int
    after: int
    with_source: bool


def compute_window(nums: Sequence[int], config: ReportConfig | None = None) -> RenderWindow:
    """Map window arguments to how many lines to show around a traced line.

    No numbers: the configured defaults.
    One number: the total count of lines, split around the traced line with
    the odd line going before it. Zero or less hides source entirely.
    Two numbers: exact before and after counts; extra numbers are ignored.
    """
    config = config or DEFAULT_CONFIG
    before = config.lines_before
    after = config.lines_after
    with_source = True

    if len(nums) > 1:
        before, after = nums[0], nums[1]
    elif len(nums) == 1:
        total = nums[0]
        if total > 0:
            after = (total - 1) // 2
            before = total - after - 1
        else:
            before = after = 0
            with_source = False

    return RenderWindow(max(before, 0), max(after, 0), with_source)
