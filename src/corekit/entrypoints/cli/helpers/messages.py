"""Status lines for the COREKIT CLI.

The query commands print their result on stdout and at most one status line
on stderr: a warning (unknown coupon), a success (validated user) or an error
(rejected input). Each line starts with an emoji marker, or an ASCII one when
stderr cannot encode it.
"""

from typing import NamedTuple

import click


class Status(NamedTuple):
    """How a status line is marked and colored."""

    emoji: str
    ascii: str
    color: str


WARNING = Status("⚠️", "[!]", "yellow")  # pragma: no mutate
SUCCESS = Status("✅", "[OK]", "green")  # pragma: no mutate
ERROR = Status("❌", "[X]", "red")  # pragma: no mutate


def marker(status: Status) -> str:
    """Return the emoji for `status` if stderr can encode it, else its ASCII marker.

    stderr is looked up on every call, so a swapped stream (e.g. under
    CliRunner) is always the one checked.
    """
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        status.emoji.encode(encoding)
    except UnicodeEncodeError:
        return status.ascii
    return status.emoji


def _emit(status: Status, msg: str) -> None:
    click.secho(f"{marker(status)}  {msg}", fg=status.color, bold=True, err=True)


def warn(msg: str) -> None:
    """Print a yellow warning line, e.g. ``⚠️  Unknown coupon code 'X'``."""
    _emit(WARNING, msg)


def success(msg: str) -> None:
    """Print a green success line, e.g. ``✅  Validation successful``."""
    _emit(SUCCESS, msg)


def error(msg: str) -> None:
    """Print a red error line, e.g. ``❌  Invalid username, Invalid age``."""
    _emit(ERROR, msg)
