"""COREKIT CLI entry point.

The top-level ``corekit`` group (via Click-Extra) owns the logging options;
the query commands themselves live in `.queries`.

Examples
    $ corekit discount 100 SAVE10
    $ corekit -v can-drive 16 US
    $ corekit -vv --log-file corekit.log validate-user dp 10
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import click_extra as clickx

from corekit import __version__
from corekit.logging import setup_logging, verbosity_level

from .helpers import hyperlink, parse_log_level
from .queries import QUERY_COMMANDS

DOCS_URL = "https://github.com/corekit/corekit#readme"
ISSUES_URL = "https://github.com/corekit/corekit/issues"

HELP = """COREKIT command-line interface.

    Query the coupon catalog, price discounts, and check usernames, user input
    and driving eligibility from the shell. Results are written to stdout;
    status and error lines go to stderr.
    """

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Docs  : " + hyperlink(DOCS_URL),
        "  Issues: " + hyperlink(ISSUES_URL),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[clickx.ColorOption(show_envvar=True), clickx.ExtraVersionOption()],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Log one level more than WARNING per repetition (-v INFO, -vv DEBUG).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Log one level less than WARNING per repetition.",
)
@click.option(
    "--debug/--no-debug",
    help="Log everything, with logger names and source paths.",
    default=False,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Also write every DEBUG record of the run to this file.",
    envvar="COREKIT_LOG_FILE",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level for specific loggers (NAME=LEVEL), e.g. "
        "-L corekit.domain=INFO. Repeatable, or a comma/space list in "
        "COREKIT_LOGGER_LEVEL."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def corekit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_file: Path | None,
    logger_levels: dict[str, int],
) -> None:
    """COREKIT command-line interface."""
    setup_logging(
        verbosity_level(verbose_count, quiet_count),
        color=ctx.color is not False,
        debug=debug,
        log_file=log_file,
        logger_levels=logger_levels,
    )
    ctx.call_on_close(logging.shutdown)


for _command in QUERY_COMMANDS:
    corekit.add_command(_command)
