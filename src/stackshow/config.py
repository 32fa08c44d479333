"""Report settings and stackshow.toml loading."""

from __future__ import annotations

import dataclasses
import tomllib
from dataclasses import dataclass
from pathlib import Path

from stackshow.errors import ConfigError

CONFIG_NAME = "stackshow.toml"


@dataclass(frozen=True)
class ReportConfig:
    """Tunables read by every report call.

    ``max_frames`` of 0 means no limit.
    """

    lines_before: int = 3
    lines_after: int = 2
    ignore_first_frames: int = 0
    max_frames: int = 0
    ignore_last_frames: int = 0

    def replace(self, **changes: int) -> ReportConfig:
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = ReportConfig()

_FIELDS = {f.name for f in dataclasses.fields(ReportConfig)}


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find stackshow.toml. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / CONFIG_NAME
        if candidate.exists():
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError(f"No {CONFIG_NAME} found in any parent directory")
        path = parent


def load_config(path: Path) -> ReportConfig:
    """Parse the [report] table of a stackshow.toml file."""
    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{path}: {e}") from e

    report = data.get("report", {})
    if not isinstance(report, dict):
        raise ConfigError(f"{path}: [report] must be a table")

    unknown = sorted(set(report) - _FIELDS)
    if unknown:
        raise ConfigError(f"{path}: unknown report setting(s): {', '.join(unknown)}")

    for key, value in report.items():
        # bool is an int subclass but never a valid count
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"{path}: report.{key} must be an integer, got {value!r}")

    return ReportConfig(**report)
