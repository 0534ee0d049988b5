"""
Parse user-supplied quantities such as "10", ".5", "1.5k", "2Gi" or "1KiB" into exact integers.

Accepted syntax: DIGITS[.DIGITS] or .DIGITS, then an optional unit prefix and, for byte sizes,
an optional "B" marker.

- Decimal prefixes are single letters: k, M, G, T, P, E (powers of 1000).
- Binary prefixes are an uppercase letter followed by "i": Ki, Mi, Gi, Ti, Pi, Ei (powers of 1024).

A bare uppercase "K" is not a prefix, lowercase "k" is the only decimal kilo; scripts rely on this.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from enum import Enum, unique
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value
from .units import IEC_BASE, SI_BASE, UINT64_MAX, iec_prefixes, si_prefixes

BYTE_MARKER = "B"
BINARY_MARKER = "i"


# Exceptions -----------------------------------------------------------------------------------------------------------

class MalformedNumberError(ValueError):
    """The text is not a number with an accepted unit suffix."""

    def __init__(self, text: str, reason: str = "not a valid quantity"):
        self.text = text
        super().__init__(f"{reason}: {fmt_value(text)}")


class NumberTooLargeError(ValueError):
    """The parsed quantity is above the caller-supplied ceiling."""

    def __init__(self, text: str, value: int, max_value: int):
        self.text = text
        self.value = value
        self.max_value = max_value
        super().__init__(f"value {value} of {fmt_value(text)} exceeds maximum {max_value}")


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ParseStatus(Enum):
    OK = "ok"
    MALFORMED = "malformed"
    TOO_LARGE = "too_large"


@dataclass(frozen=True)
class ParsedValue:
    """
    Outcome of get_number(): either a value or the reason parsing failed.

    Attributes:
        status: ParseStatus.OK, MALFORMED or TOO_LARGE.
        value: Parsed integer, set only for OK.
    """

    status: ParseStatus
    value: int | None = None

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK


# Methods --------------------------------------------------------------------------------------------------------------

def get_number(text: str, max_value: int = UINT64_MAX, bytes_flag: bool = False) -> ParsedValue:
    """
    Parse a quantity without raising on bad input.

    Returns:
        ParsedValue: OK with the value, MALFORMED for unrecognised syntax or TOO_LARGE when the
        rounded value is above max_value.

    Raises:
        TypeError: If text is not a str.

    Examples:
        >>> get_number("1.5k")
        ParsedValue(status=<ParseStatus.OK: 'ok'>, value=1500)
        >>> get_number("1K").status
        <ParseStatus.MALFORMED: 'malformed'>
    """
    try:
        return ParsedValue(ParseStatus.OK, parse_number(text, max_value, bytes_flag))
    except NumberTooLargeError:
        return ParsedValue(ParseStatus.TOO_LARGE)
    except MalformedNumberError:
        return ParsedValue(ParseStatus.MALFORMED)


def parse_number(text: str, max_value: int | float = UINT64_MAX, bytes_flag: bool = False) -> int:
    """
    Parse a quantity with optional fraction and unit suffix into an integer.

    The value is (integer part + fraction) * unit multiplier, rounded half up. Arithmetic is exact,
    so "18446744073709551615" parses to itself.

    Args:
        text: Text to parse, no surrounding whitespace is allowed.
        max_value: Largest accepted result.
        bytes_flag: Accept the trailing "B" byte marker.

    Returns:
        int: The parsed quantity.

    Raises:
        TypeError: If text is not a str.
        MalformedNumberError: If the text is not a number with an accepted suffix.
        NumberTooLargeError: If the result is above max_value.

    Examples:
        >>> parse_number(".5")
        1
        >>> parse_number("1.5k")
        1500
        >>> parse_number("1KiB", bytes_flag=True)
        1024
        >>> parse_number("1KiB")
        Traceback (most recent call last):
        ...
        fsunits.numeric.MalformedNumberError: unknown unit suffix: '1KiB'
    """
    if not isinstance(text, str):
        raise TypeError(f"quantity text must be a str, but found {fmt_type(text)}")

    int_part, frac_part, unit = _split_number(text)
    multiplier = _unit_multiplier(text, unit, bytes_flag)

    amount = Fraction(int(int_part or "0"))
    if frac_part:
        amount += Fraction(int(frac_part), 10 ** len(frac_part))

    value = math.floor(amount * multiplier + Fraction(1, 2))
    if value > max_value:
        raise NumberTooLargeError(text, value, max_value)
    return value


# Private Methods ------------------------------------------------------------------------------------------------------

def _split_number(text: str) -> tuple[str, str | None, str]:
    """Split text into integer digits, fraction digits (None without a dot) and the unit suffix."""
    pos = _skip_digits(text, 0)
    int_part = text[:pos]
    frac_part = None

    if pos < len(text) and text[pos] == ".":
        end = _skip_digits(text, pos + 1)
        frac_part = text[pos + 1:end]
        if not frac_part:
            raise MalformedNumberError(text, "expected digits after decimal point")
        pos = end
    elif not int_part:
        raise MalformedNumberError(text, "expected a number")

    return int_part, frac_part, text[pos:]


def _skip_digits(text: str, pos: int) -> int:
    # ASCII digits only, str.isdigit() accepts other scripts too
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    return pos


def _unit_multiplier(text: str, unit: str, bytes_flag: bool) -> int:
    """Multiplier of an optional prefix plus optional byte marker, looked up in the display prefix tables."""
    if bytes_flag and unit.endswith(BYTE_MARKER):
        unit = unit[:-1]

    if unit == "":
        return 1
    # Single letters are decimal only, so "K" is rejected and "k" is kilo
    if len(unit) == 1 and si_prefixes.has_value(unit):
        return SI_BASE ** si_prefixes.get_key(unit)
    if len(unit) == 2 and unit[1] == BINARY_MARKER and iec_prefixes.has_value(unit):
        return IEC_BASE ** iec_prefixes.get_key(unit)

    raise MalformedNumberError(text, "unknown unit suffix")
