"""OSC-8 hyperlink rendering for the COREKIT CLI help text."""

import os
import sys
from typing import TextIO

OSC8_TERMINALS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)  # pragma: no mutate


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort check for OSC-8 hyperlink support on `stream`.

    Non-TTY streams (pipes, files, test runners) never get hyperlinks.
    Otherwise the terminal is recognized from `TERM_PROGRAM`, `WT_SESSION`
    (Windows Terminal), `VTE_VERSION` (GNOME Terminal, Tilix) or `TERM`.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINALS:
        return True
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(("alacritty", "konsole"))


def hyperlink(url: str) -> str:
    """Return `url` as a clickable OSC-8 link, or as plain text if unsupported."""
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
