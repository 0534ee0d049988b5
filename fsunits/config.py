"""
Display mode configuration for the filesystem tools.

The mode is taken from the -n/-h/-H command-line flags, then from the MFSHRFORMAT environment
variable, then from a default. It is resolved once at startup and handed to NumberPrinter.

MFSHRFORMAT is read by its first character: a mode number "0".."4", or "h"/"H" for binary/decimal
prefixes, followed by "+" ("h+", "H+") to also show the exact value. Anything after that is ignored.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import logging
import os
from collections.abc import Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .units import DisplayMode

logger = logging.getLogger(__name__)

ENV_VAR = "MFSHRFORMAT"

# @formatter:off
ENV_ALIASES = {
    "h":  DisplayMode.BINARY_SHORT,
    "h+": DisplayMode.BINARY_LONG,
    "H":  DisplayMode.DECIMAL_SHORT,
    "H+": DisplayMode.DECIMAL_LONG,
}
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def display_mode_from_env(environ: Mapping[str, str] | None = None) -> DisplayMode | None:
    """
    Read the display mode from MFSHRFORMAT.

    Args:
        environ: Environment mapping, os.environ if None.

    Returns:
        The configured mode, or None if the variable is unset, empty or not recognised.

    Examples:
        >>> display_mode_from_env({"MFSHRFORMAT": "3"})
        <DisplayMode.BINARY_LONG: 3>
        >>> display_mode_from_env({"MFSHRFORMAT": "H+"})
        <DisplayMode.DECIMAL_LONG: 4>
        >>> display_mode_from_env({"MFSHRFORMAT": "h-"})
        <DisplayMode.BINARY_SHORT: 1>
        >>> display_mode_from_env({}) is None
        True
    """
    environ = os.environ if environ is None else environ
    value = environ.get(ENV_VAR, "").strip()
    if not value:
        return None

    # Only the first character selects the mode, a "+" after h/H adds the exact value
    first, long_form = value[0], value[1:2] == "+"
    if "0" <= first <= "4":
        return DisplayMode(int(first))
    if first in ENV_ALIASES:
        return ENV_ALIASES[first + "+"] if long_form else ENV_ALIASES[first]

    logger.warning("ignoring %s=%r, expected one of 0-4, h, h+, H, H+", ENV_VAR, value)
    return None


def add_number_format_options(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """
    Add the mutually exclusive -n, -h and -H flags storing a DisplayMode into display_mode.

    The parser must be created with add_help=False, since -h selects binary prefixes.
    """
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-n", dest="display_mode", action="store_const", const=DisplayMode.RAW,
        help="show numbers in plain format",
    )
    group.add_argument(
        "-h", dest="display_mode", action="store_const", const=DisplayMode.BINARY_SHORT,
        help='"human-readable" numbers using base 2 prefixes (IEC 60027)',
    )
    group.add_argument(
        "-H", dest="display_mode", action="store_const", const=DisplayMode.DECIMAL_SHORT,
        help='"human-readable" numbers using base 10 prefixes (SI)',
    )
    parser.set_defaults(display_mode=None)
    return parser


def resolve_display_mode(
        flag_mode: DisplayMode | int | None = None,
        environ: Mapping[str, str] | None = None,
        default: DisplayMode = DisplayMode.RAW,
) -> DisplayMode:
    """
    Pick the display mode: command-line flag first, then MFSHRFORMAT, then the default.

    Examples:
        >>> resolve_display_mode(DisplayMode.DECIMAL_SHORT, {"MFSHRFORMAT": "1"})
        <DisplayMode.DECIMAL_SHORT: 2>
        >>> resolve_display_mode(None, {"MFSHRFORMAT": "1"})
        <DisplayMode.BINARY_SHORT: 1>
        >>> resolve_display_mode(None, {})
        <DisplayMode.RAW: 0>
    """
    if flag_mode is not None:
        mode, source = DisplayMode(flag_mode), "flag"
    else:
        env_mode = display_mode_from_env(environ)
        if env_mode is not None:
            mode, source = env_mode, ENV_VAR
        else:
            mode, source = DisplayMode(default), "default"

    logger.debug("display mode %s from %s", mode.name, source)
    return mode
