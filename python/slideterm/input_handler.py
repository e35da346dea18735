"""Single-keypress reader for the terminal front end.

Arrow keys and WASD move the cell cursor; Space or Enter activates the
tile under it.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "activate",
    "\r": "activate",
    "\n": "activate",
    "r": "restart",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string ("" if unmapped)."""
    return KEY_MAP.get(ch.lower() if ch.isalpha() else ch, "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block for one keypress and return its action string.

    Possible return values:
        "up", "down", "left", "right"  cursor movement
        "activate"                     Space / Enter
        "restart"                      r
        "quit"                         q / Ctrl-C / Escape
        ""                             anything else
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        if _getch() == "[":
            return ARROW_MAP.get(_getch(), "")
        return "quit"

    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but return ``None`` after *timeout* seconds idle.

    Uses ``os.read`` so ``select`` sees the remaining bytes of an arrow
    key's escape sequence.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    def _read_ready(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = _read_ready(timeout)
        if ch is None:
            return None

        if ch == "\x1b":
            if _read_ready(0.1) != "[":
                return "quit"
            return ARROW_MAP.get(_read_ready(0.1) or "", "")

        return resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
