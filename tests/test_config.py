#
# FSUnits - Config Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import logging

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from fsunits.config import ENV_VAR, add_number_format_options, display_mode_from_env, resolve_display_mode
from fsunits.units import DisplayMode


# Tests ----------------------------------------------------------------------------------------------------------------

class TestDisplayModeFromEnv:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("0", DisplayMode.RAW, id="0"),
            pytest.param("1", DisplayMode.BINARY_SHORT, id="1"),
            pytest.param("2", DisplayMode.DECIMAL_SHORT, id="2"),
            pytest.param("3", DisplayMode.BINARY_LONG, id="3"),
            pytest.param("4", DisplayMode.DECIMAL_LONG, id="4"),
            pytest.param("h", DisplayMode.BINARY_SHORT, id="h"),
            pytest.param("h+", DisplayMode.BINARY_LONG, id="h+"),
            pytest.param("H", DisplayMode.DECIMAL_SHORT, id="H"),
            pytest.param("H+", DisplayMode.DECIMAL_LONG, id="H+"),
            pytest.param(" 3 ", DisplayMode.BINARY_LONG, id="whitespace"),
        ],
    )
    def test_recognised(self, value, expected):
        assert display_mode_from_env({ENV_VAR: value}) is expected

    @pytest.mark.parametrize("environ", [{}, {ENV_VAR: ""}, {ENV_VAR: "  "}])
    def test_unset_or_empty(self, environ):
        assert display_mode_from_env(environ) is None

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("3x", DisplayMode.BINARY_LONG, id="digit-then-junk"),
            pytest.param("12", DisplayMode.BINARY_SHORT, id="two-digits"),
            pytest.param("h-", DisplayMode.BINARY_SHORT, id="h-minus"),
            pytest.param("hh", DisplayMode.BINARY_SHORT, id="hh"),
            pytest.param("H+x", DisplayMode.DECIMAL_LONG, id="H-plus-junk"),
            pytest.param("Hx+", DisplayMode.DECIMAL_SHORT, id="plus-not-second"),
        ],
    )
    def test_first_character_decides(self, value, expected, caplog):
        with caplog.at_level(logging.WARNING, logger="fsunits.config"):
            assert display_mode_from_env({ENV_VAR: value}) is expected
        assert caplog.text == ""

    @pytest.mark.parametrize("value", ["5", "9z", "-1", "x", "+h", "k+"])
    def test_unrecognised_logs_warning(self, value, caplog):
        with caplog.at_level(logging.WARNING, logger="fsunits.config"):
            assert display_mode_from_env({ENV_VAR: value}) is None
        assert ENV_VAR in caplog.text
        assert repr(value) in caplog.text

    def test_reads_os_environ(self, clean_env):
        clean_env.setenv(ENV_VAR, "H+")
        assert display_mode_from_env() is DisplayMode.DECIMAL_LONG


class TestAddNumberFormatOptions:

    @staticmethod
    def _parser() -> argparse.ArgumentParser:
        return add_number_format_options(argparse.ArgumentParser(add_help=False))

    @pytest.mark.parametrize(
        "argv, expected",
        [
            pytest.param([], None, id="none"),
            pytest.param(["-n"], DisplayMode.RAW, id="n"),
            pytest.param(["-h"], DisplayMode.BINARY_SHORT, id="h"),
            pytest.param(["-H"], DisplayMode.DECIMAL_SHORT, id="H"),
        ],
    )
    def test_flags(self, argv, expected):
        assert self._parser().parse_args(argv).display_mode is expected

    def test_mutually_exclusive(self, capsys):
        with pytest.raises(SystemExit):
            self._parser().parse_args(["-h", "-H"])
        assert "not allowed" in capsys.readouterr().err


class TestResolveDisplayMode:

    def test_flag_wins(self):
        assert resolve_display_mode(DisplayMode.RAW, {ENV_VAR: "4"}) is DisplayMode.RAW

    def test_int_flag(self):
        assert resolve_display_mode(2, {}) is DisplayMode.DECIMAL_SHORT

    def test_env_when_no_flag(self):
        assert resolve_display_mode(None, {ENV_VAR: "h+"}) is DisplayMode.BINARY_LONG

    def test_default(self):
        assert resolve_display_mode(None, {}) is DisplayMode.RAW
        assert resolve_display_mode(None, {}, default=DisplayMode.DECIMAL_SHORT) is DisplayMode.DECIMAL_SHORT

    def test_bad_env_falls_back_to_default(self, caplog):
        with caplog.at_level(logging.WARNING, logger="fsunits.config"):
            assert resolve_display_mode(None, {ENV_VAR: "9"}, default=DisplayMode.BINARY_SHORT) is DisplayMode.BINARY_SHORT

    def test_logs_source(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fsunits.config"):
            resolve_display_mode(None, {ENV_VAR: "1"})
        assert "BINARY_SHORT from MFSHRFORMAT" in caplog.text
