"""stackshow CLI."""

from __future__ import annotations

import runpy
import sys
from pathlib import Path

import click

from stackshow import __version__
from stackshow.cache import default_cache
from stackshow.config import DEFAULT_CONFIG, ReportConfig, find_config, load_config
from stackshow.errors import ConfigError, SourceError
from stackshow.frames import Frame, TracedException
from stackshow.logs import configure_logging
from stackshow.render import compose, frame_lines, source_rows
from stackshow.window import compute_window


def _resolve_config(config_path: str | None, search_from: Path) -> ReportConfig:
    """Load an explicit config, else the nearest stackshow.toml, else defaults."""
    if config_path is not None:
        return load_config(Path(config_path))
    try:
        return load_config(find_config(search_from))
    except FileNotFoundError:
        return DEFAULT_CONFIG


def _script_frames(traced: TracedException, script: str) -> TracedException:
    """Drop the CLI and runpy frames that precede the script's own."""
    target = Path(script).resolve()
    frames = traced.stack_trace()
    for idx, frame in enumerate(frames):
        if Path(frame.path).resolve() == target:
            return TracedException(traced.message(), frames[idx:], cause=traced.cause)
    return traced


lines_option = click.option(
    "--lines",
    "-n",
    type=int,
    multiple=True,
    help="Source lines per frame: one total, or before and after.",
)
color_option = click.option("--color/--no-color", default=False, help="Colorize output with ANSI codes.")


@click.group()
@click.version_option(__version__, prog_name="stackshow")
@click.option("--verbose", "-v", is_flag=True, help="Log cache activity to stderr.")
def main(verbose: bool) -> None:
    """Stack trace reports with source context."""
    configure_logging("DEBUG" if verbose else "WARNING")


@main.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
@click.argument("script", type=click.Path(exists=True, dir_okay=False))
@click.argument("script_args", nargs=-1, type=click.UNPROCESSED)
@lines_option
@color_option
@click.option("--no-source", is_flag=True, help="Only show frame headers.")
@click.option("--max-frames", type=int, default=None, help="Show at most this many frames.")
@click.option("--ignore-first", type=int, default=None, help="Skip this many outermost frames.")
@click.option("--ignore-last", type=int, default=None, help="Skip this many innermost frames.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to stackshow.toml.")
def run(
    script: str,
    script_args: tuple[str, ...],
    lines: tuple[int, ...],
    color: bool,
    no_source: bool,
    max_frames: int | None,
    ignore_first: int | None,
    ignore_last: int | None,
    config_path: str | None,
) -> None:
    """Run a Python script and report any uncaught exception."""
    try:
        config = _resolve_config(config_path, Path(script).parent)
    except ConfigError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)

    overrides = {
        "max_frames": max_frames,
        "ignore_first_frames": ignore_first,
        "ignore_last_frames": ignore_last,
    }
    config = config.replace(**{k: v for k, v in overrides.items() if v is not None})

    saved_argv = sys.argv
    saved_path = sys.path[:]
    sys.argv = [script, *script_args]
    # same sys.path[0] as `python script.py`
    sys.path.insert(0, str(Path(script).resolve().parent))
    try:
        runpy.run_path(script, run_name="__main__")
    except SystemExit:
        raise
    except Exception as e:
        traced = _script_frames(TracedException.from_exception(e), script)
        nums = [0] if no_source else list(lines)
        click.echo(compose(traced, nums, color, config), err=True, color=color)
        raise SystemExit(1)
    finally:
        sys.argv = saved_argv
        sys.path[:] = saved_path


@main.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.argument("line", type=click.IntRange(min=1))
@lines_option
@color_option
def show(file: str, line: int, lines: tuple[int, ...], color: bool) -> None:
    """Show the source window around LINE of FILE."""
    frame = Frame(path=file, line=line, func="<show>")
    try:
        frame_lines(frame, default_cache)
    except SourceError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)

    window = compute_window(lines)
    rows = source_rows(frame, window.before, window.after, color)
    click.echo("\n".join(rows), color=color)
