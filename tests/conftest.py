#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import io
from typing import Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from fsunits.config import ENV_VAR
from fsunits.display import NumberPrinter
from fsunits.units import DisplayMode

# Fixtures -------------------------------------------------------------------------------------------------------------


@pytest.fixture
def make_printer() -> Callable[[DisplayMode], NumberPrinter]:
    """Fixture to create a NumberPrinter writing to an in-memory stream, see printer.stream.getvalue()."""

    def _create_printer(mode: DisplayMode = DisplayMode.RAW) -> NumberPrinter:
        return NumberPrinter(mode, io.StringIO())

    return _create_printer


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove the number format variable so tests do not depend on the caller's shell."""
    monkeypatch.delenv(ENV_VAR, raising=False)
    return monkeypatch
