"""Shared CLI output helpers — ANSI colors and status formatting.

Messages come pre-composed from the catalog (emoji included), so these
helpers only colorize and append dynamic details such as file paths.
"""

from __future__ import annotations

import sys

# ---------------------------------------------------------------------------
# ANSI helpers (gracefully degrade when stdout is not a TTY)
# ---------------------------------------------------------------------------
SUPPORTS_COLOR = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

GREEN = "\033[92m" if SUPPORTS_COLOR else ""
YELLOW = "\033[93m" if SUPPORTS_COLOR else ""
RED = "\033[91m" if SUPPORTS_COLOR else ""
CYAN = "\033[96m" if SUPPORTS_COLOR else ""
BOLD = "\033[1m" if SUPPORTS_COLOR else ""
RESET = "\033[0m" if SUPPORTS_COLOR else ""


def _compose(msg: str, details: tuple[object, ...]) -> str:
    return " ".join([msg, *(str(d) for d in details)])


def say(msg: str = "", *details: object) -> None:
    """Print a plain status line, details separated by a space."""
    print(_compose(msg, details))


def ok(msg: str, *details: object) -> None:
    """Print a success line in green."""
    print(f"{GREEN}{_compose(msg, details)}{RESET}")


def warn(msg: str, *details: object) -> None:
    """Print a warning line in yellow."""
    print(f"{YELLOW}{_compose(msg, details)}{RESET}")


def info(msg: str, *details: object) -> None:
    """Print an informational line in cyan."""
    print(f"{CYAN}{_compose(msg, details)}{RESET}")


def err(msg: str, *details: object) -> None:
    """Print an error line in red on stderr."""
    print(f"{RED}{_compose(msg, details)}{RESET}", file=sys.stderr)


def header(title: str) -> None:
    """Print a bold title line."""
    print(f"{BOLD}{title}{RESET}")
