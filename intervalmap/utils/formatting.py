from __future__ import annotations
import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING

if sys.platform == "win32":
    import colorama  # pylint:disable=import-error

if TYPE_CHECKING:
    from ..interval_map import IntervalMap


ansi_color_enabled: bool = False


def setup_terminal():
    """
    Check if we are running in a TTY. If so, make sure the terminal supports ANSI escape sequences. If not, disable
    colorized output. Sets global `ansi_color_enabled` to True if colorized output should be enabled by default.
    """
    isatty = (
        hasattr(sys.stdout, "isatty") and sys.stdout.isatty() and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    )
    if sys.platform == "win32" and isatty:
        if not isinstance(sys.stdout, colorama.ansitowin32.StreamWrapper):
            colorama.init()

    global ansi_color_enabled  # pylint:disable=global-statement
    ansi_color_enabled = isatty


def ansi_color(s: str, color: str | None) -> str:
    """
    Colorize string `s` by wrapping in ANSI escape sequence for given `color`.

    Whether the terminal understands escape sequences is up to the caller; see `ansi_color_enabled`.
    """
    if color is None:
        return s

    codes = {
        "blue": "34m",
        "cyan": "36m",
        "green": "32m",
        "magenta": "35m",
        "red": "31m",
        "bright_red": "91m",
        "yellow": "33m",
    }
    return "\u001b[" + codes[color] + s + "\u001b[0m"


#
# Diagnostic dumps of interval maps
#


def map_snippet(imap: IntervalMap) -> str:
    """
    Render the breakpoints of `imap` in key order, e.g. "[2, B][5, A]". The base value is not part of the snippet.
    """
    return "".join(f"[{key}, {value}]" for key, value in imap.items())


def data_slice(imap: IntervalMap, keys: Iterable) -> str:
    """
    Render one "key -> value" line per key in `keys`.

    :param imap:    The interval map to query.
    :param keys:    The keys to render, in the order they should appear (e.g. range(0, 10)).
    """
    return "".join(f"{key} -> {imap[key]}\n" for key in keys)


def value_slice(imap: IntervalMap, keys: Iterable) -> str:
    """
    Concatenate the values of all keys in `keys`. With single-character values this reads like a picture of the map,
    e.g. "AABBBAAAA".
    """
    return "".join(str(imap[key]) for key in keys)
