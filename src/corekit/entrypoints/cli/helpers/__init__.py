"""CLI helpers for COREKIT.

Terminal utilities used by the command-line interface: OSC-8 hyperlinks when
supported, message emitters that write to stderr with emoji→ASCII fallbacks,
and the NAME=LEVEL logger-level option parser.
"""

from .hyperlinks import hyperlink
from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "hyperlink", "parse_log_level", "success", "warn"]
