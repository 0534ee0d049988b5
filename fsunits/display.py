"""
Aligned display of filesystem counters: byte sizes, seconds, inode and copy counts.

NumberPrinter renders a counter for one DisplayMode, chosen once at startup and passed in at
construction. Columns stay aligned: every (mode, field width) pair has a fixed width and a row
without a value prints a dash padded to exactly that width.

Example:
    >>> printer = NumberPrinter(DisplayMode.BINARY_LONG)
    >>> printer.format(1536, width=FieldWidth.NARROW, bytes_flag=True)
    '1.5KiB (      1536)'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import sys
from dataclasses import dataclass
from typing import IO

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type
from .units import (
    DisplayMode,
    FieldWidth,
    IEC_FIELD_WIDTH,
    SI_FIELD_WIDTH,
    check_quantity,
    convert_to_iec,
    convert_to_si,
)

# @formatter:off
PLACEHOLDER = "-"

# Total field width per display mode and field width, shared by values and placeholders
FIELD_WIDTHS: dict[tuple[DisplayMode, FieldWidth], int] = {
    (DisplayMode.RAW,           FieldWidth.NARROW): 10,
    (DisplayMode.RAW,           FieldWidth.WIDE):   20,
    (DisplayMode.BINARY_SHORT,  FieldWidth.NARROW): 6,
    (DisplayMode.BINARY_SHORT,  FieldWidth.WIDE):   6,
    (DisplayMode.DECIMAL_SHORT, FieldWidth.NARROW): 5,
    (DisplayMode.DECIMAL_SHORT, FieldWidth.WIDE):   5,
    (DisplayMode.BINARY_LONG,   FieldWidth.NARROW): 19,
    (DisplayMode.BINARY_LONG,   FieldWidth.WIDE):   29,
    (DisplayMode.DECIMAL_LONG,  FieldWidth.NARROW): 18,
    (DisplayMode.DECIMAL_LONG,  FieldWidth.WIDE):   28,
}
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberPrinter:
    """
    Formats counters for a fixed display mode and writes them to a text stream.

    Attributes:
        mode: Display mode used by every call.
        stream: Output stream; None means sys.stdout as seen at call time.
    """

    mode: DisplayMode = DisplayMode.RAW
    stream: IO[str] | None = None

    def __post_init__(self):
        if not isinstance(self.mode, int) or isinstance(self.mode, bool):
            raise TypeError(f"mode must be a DisplayMode, but found {fmt_type(self.mode)}")
        # Accept plain ints 0..4 as they come from the environment
        object.__setattr__(self, "mode", DisplayMode(self.mode))

    def format(
            self,
            number: int | None,
            *,
            prefix: str | None = None,
            suffix: str | None = None,
            width: FieldWidth = FieldWidth.WIDE,
            bytes_flag: bool = False,
            has_value: bool = True,
    ) -> str:
        """
        Render a counter with optional literal prefix and suffix.

        Args:
            number: Counter value in [0, 2**64 - 1]; ignored when has_value is False.
            prefix: Text emitted verbatim before the field.
            suffix: Text emitted verbatim after the field.
            width: Exact-integer field width, NARROW for 32-bit and WIDE for 64-bit counters.
            bytes_flag: Counter is a byte size, append the "B" unit marker in scaled modes.
            has_value: False renders the dash placeholder instead of a number.

        Returns:
            str: The rendered field, no trailing newline.

        Raises:
            TypeError: If number is not an int while has_value is True.
            ValueError: If number is out of range, or exceeds a NARROW field in RAW or Long modes.
        """
        width = FieldWidth(width)
        if has_value:
            field = self._value_field(number, width, bytes_flag)
        else:
            field = PLACEHOLDER.rjust(placeholder_width(self.mode, width))
        return f"{prefix or ''}{field}{suffix or ''}"

    def print(
            self,
            number: int | None,
            *,
            prefix: str | None = None,
            suffix: str | None = None,
            width: FieldWidth = FieldWidth.WIDE,
            bytes_flag: bool = False,
            has_value: bool = True,
    ) -> None:
        """Write format(...) to the stream, no newline is added."""
        text = self.format(
            number,
            prefix=prefix,
            suffix=suffix,
            width=width,
            bytes_flag=bytes_flag,
            has_value=has_value,
        )
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(text)

    def _value_field(self, number: int, width: FieldWidth, bytes_flag: bool) -> str:
        if self.mode.is_raw:
            check_quantity(number, width)
            return str(number).rjust(width)

        check_quantity(number, width if self.mode.is_long else None)
        if self.mode.is_binary:
            scaled = convert_to_iec(number).rjust(IEC_FIELD_WIDTH)
        else:
            scaled = convert_to_si(number).rjust(SI_FIELD_WIDTH)
        field = f"{scaled}B" if bytes_flag else f" {scaled}"

        if self.mode.is_long:
            field = f"{field} ({str(number).rjust(width)})"
        return field


# Methods --------------------------------------------------------------------------------------------------------------

def placeholder_width(mode: DisplayMode, width: FieldWidth) -> int:
    """Width of the dash placeholder, equal to the width a real value occupies."""
    return FIELD_WIDTHS[DisplayMode(mode), FieldWidth(width)]


def print_number(
        prefix: str | None,
        suffix: str | None,
        number: int | None,
        width: FieldWidth = FieldWidth.WIDE,
        bytes_flag: bool = False,
        has_value: bool = True,
        *,
        mode: DisplayMode = DisplayMode.RAW,
        stream: IO[str] | None = None,
) -> None:
    """
    Write one counter to stream (default sys.stdout) in the given display mode.

    Positional order follows the classic tools helper: prefix, suffix, number, width, bytes flag,
    has-value flag. Prefer a NumberPrinter when printing many rows with the same mode.
    """
    NumberPrinter(mode, stream).print(
        number,
        prefix=prefix,
        suffix=suffix,
        width=width,
        bytes_flag=bytes_flag,
        has_value=has_value,
    )
