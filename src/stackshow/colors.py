"""ANSI color decorators for report rows."""

from __future__ import annotations

# ANSI color codes
_RED = "\033[31m"
_YELLOW = "\033[33m"
_BLACK = "\033[90m"  # bright black, renders as gray
_BOLD = "\033[1m"
_RESET = "\033[0m"


def _wrap(code: str, text: str) -> str:
    return f"{code}{text}{_RESET}"


def red(text: str) -> str:
    """Emphasis for the traced line."""
    return _wrap(_RED, text)


def yellow(text: str) -> str:
    """Inline warnings (missing file, stale source)."""
    return _wrap(_YELLOW, text)


def black(text: str) -> str:
    """Muted line numbers around the traced line."""
    return _wrap(_BLACK, text)


def bold(text: str) -> str:
    return _wrap(_BOLD, text)
