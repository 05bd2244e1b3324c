"""Single-keypress reader for the terminal frontends.

Reads arrow keys, WASD and command letters without waiting for Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from backend.models.board import Direction


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

    ch = msvcrt.getch()
    # Arrow keys arrive as a 0xe0 / 0x00 prefix followed by a scan code.
    if ch in (b"\xe0", b"\x00"):
        return _WINDOWS_ARROWS.get(msvcrt.getch(), "")
    return ch.decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "u": "undo",
    "z": "undo",
    "n": "hint",
    "v": "solve",
    "h": "scores",
    "\r": "enter",
    "\n": "enter",
}

# ESC [ A/B/C/D
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

# Sentinel characters handed back by _getch_windows for arrow keys.
_WINDOWS_ARROWS: dict[bytes, str] = {
    b"H": "\x1b[A",
    b"P": "\x1b[B",
    b"M": "\x1b[C",
    b"K": "\x1b[D",
}

DIRECTIONS: dict[str, Direction] = {d.value: d for d in Direction}


def _resolve(ch: str) -> str:
    if ch in _KEY_MAP:
        return _KEY_MAP[ch]
    lowered = ch.lower()
    if lowered in _KEY_MAP and lowered.isalpha():
        return _KEY_MAP[lowered]
    return ch if ch.isprintable() else ""


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — movement (arrows / WASD)
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "undo"                         — u / z
        "hint"                         — n
        "solve"                        — v
        "scores"                       — h
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    if len(ch) == 3 and ch.startswith("\x1b["):
        return _ARROW_MAP.get(ch[2], "")

    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape

    return _resolve(ch)


def to_direction(key: str) -> Direction | None:
    """Map an action string from ``get_key`` to a move, if it is one."""
    return DIRECTIONS.get(key)
