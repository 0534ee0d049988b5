#
# FSUnits Units of Measurement Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import IntEnum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import BiDirectionalMap
from .formatters import fmt_type, fmt_value

# @formatter:off

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1

SI_BASE = 1000
IEC_BASE = 1024

si_prefixes = BiDirectionalMap({
    0: "", 1: "k", 2: "M", 3: "G", 4: "T", 5: "P", 6: "E",
})

iec_prefixes = BiDirectionalMap({
    0: "", 1: "Ki", 2: "Mi", 3: "Gi", 4: "Ti", 5: "Pi", 6: "Ei",
})

# Width of the scaled text in Short and Long modes, unit prefix included
SI_FIELD_WIDTH = 4
IEC_FIELD_WIDTH = 5
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class DisplayMode(IntEnum):
    """
    Modes for quantity display, values match the MFSHRFORMAT setting.

    Attributes:
        RAW (int)           : Exact integer, fixed width                    - 1536
        BINARY_SHORT (int)  : Binary prefix only                            - 1.5Ki
        DECIMAL_SHORT (int) : Decimal prefix only                           - 1.5k
        BINARY_LONG (int)   : Binary prefix and exact integer in parens     - 1.5Ki (1536)
        DECIMAL_LONG (int)  : Decimal prefix and exact integer in parens    - 1.5k (1536)
    """
    RAW = 0
    BINARY_SHORT = 1
    DECIMAL_SHORT = 2
    BINARY_LONG = 3
    DECIMAL_LONG = 4
# @formatter:on

    @property
    def is_raw(self) -> bool:
        return self is DisplayMode.RAW

    @property
    def is_binary(self) -> bool:
        """True for modes scaling with powers of 1024."""
        return self in (DisplayMode.BINARY_SHORT, DisplayMode.BINARY_LONG)

    @property
    def is_long(self) -> bool:
        """True for modes that append the exact integer in parentheses."""
        return self in (DisplayMode.BINARY_LONG, DisplayMode.DECIMAL_LONG)


@unique
class FieldWidth(IntEnum):
    """Width of the exact-integer field: 32-bit counters fit NARROW, 64-bit counters need WIDE."""
    NARROW = 10
    WIDE = 20

    @property
    def max_value(self) -> int:
        return UINT32_MAX if self is FieldWidth.NARROW else UINT64_MAX


# Methods --------------------------------------------------------------------------------------------------------------

def check_quantity(number: int, width: FieldWidth | None = None) -> int:
    """
    Validate a raw counter and return it unchanged.

    Args:
        number: Counter value, must be an int in [0, 2**64 - 1].
        width: If given, the value must also fit the exact-integer field of this width.

    Raises:
        TypeError: If number is not an int (bool is rejected too).
        ValueError: If number is negative or does not fit the 64-bit or the requested field range.
    """
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError(f"quantity must be an int, but found {fmt_type(number)}")
    if not 0 <= number <= UINT64_MAX:
        raise ValueError(f"quantity must be in range [0, {UINT64_MAX}], got {fmt_value(number)}")
    if width is not None and number > FieldWidth(width).max_value:
        raise ValueError(
            f"quantity {number} does not fit the {FieldWidth(width).name} field, "
            f"use FieldWidth.WIDE for values above {UINT32_MAX}"
        )
    return number


def scale_number(number: int, base: int, prefixes: BiDirectionalMap[int, str]) -> str:
    """
    Scale a counter to the largest prefix it reaches and render it compactly.

    The exponent is the largest index i with number // base**i >= 1. The quotient is shown with
    one decimal digit when its integer part is a single digit and as a whole number otherwise.
    Digits are truncated, so the text never shows the next threshold before it is reached.
    A trailing ".0" is dropped.

    Examples:
        >>> scale_number(999, 1000, si_prefixes)
        '999'
        >>> scale_number(1500, 1000, si_prefixes)
        '1.5k'
        >>> scale_number(1999, 1000, si_prefixes)
        '1.9k'
        >>> scale_number(2**20, 1024, iec_prefixes)
        '1Mi'
    """
    check_quantity(number)

    exponent = 0
    divisor = 1
    while exponent + 1 < len(prefixes) and number // (divisor * base) >= 1:
        exponent += 1
        divisor *= base

    if exponent == 0:
        return str(number)

    whole = number // divisor
    if whole >= 10:
        digits = str(whole)
    else:
        tenths = (number * 10 // divisor) % 10
        digits = str(whole) if tenths == 0 else f"{whole}.{tenths}"

    return f"{digits}{prefixes[exponent]}"


def convert_to_si(number: int) -> str:
    """Render a counter with decimal prefixes (k, M, G, T, P, E)."""
    return scale_number(number, SI_BASE, si_prefixes)


def convert_to_iec(number: int) -> str:
    """Render a counter with binary prefixes (Ki, Mi, Gi, Ti, Pi, Ei)."""
    return scale_number(number, IEC_BASE, iec_prefixes)


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Ensure both prefix tables cover the same exponent indices.
if set(si_prefixes.keys()) != set(iec_prefixes.keys()):
    raise AssertionError(
        "Configuration Error: The exponent keys for si_prefixes and iec_prefixes must be identical."
    )
