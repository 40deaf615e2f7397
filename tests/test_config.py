# test_config.py

import pytest
from io import StringIO

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from printline.config import PrinterSettings, parse_flag
from printline.printer import CliOutputPrinter
from printline.display import Verbosity


class TestPrinterSettings:
    """Loading settings from the environment and applying them."""

    def test_defaults_from_empty_environment(self):
        settings = PrinterSettings.from_env({})
        assert settings == PrinterSettings()
        assert settings.path is None
        assert settings.decorated is None
        assert settings.verbose is False

    def test_from_environment(self):
        settings = PrinterSettings.from_env({
            'PRINTLINE_OUTPUT_PATH': 'build/out.log',
            'PRINTLINE_COLORS': 'no',
            'PRINTLINE_VERBOSE': 'true',
        })
        assert settings.path == 'build/out.log'
        assert settings.decorated is False
        assert settings.verbose is True

    def test_invalid_flag(self):
        with pytest.raises(ValueError, match='PRINTLINE_COLORS'):
            PrinterSettings.from_env({'PRINTLINE_COLORS': 'sometimes'})

    @pytest.mark.parametrize("raw, expected", [
        (None, None), ("", None), ("  ", None),
        ("1", True), ("On", True), ("0", False), ("FALSE", False),
    ])
    def test_parse_flag(self, raw, expected):
        assert parse_flag('X', raw) is expected

    def test_configure_printer(self):
        stream = StringIO()
        printer = CliOutputPrinter(stream_resolver=lambda path: stream)
        settings = PrinterSettings(
            path='report.txt',
            styles={'title': ['red']},
            decorated=False,
            verbose=True,
        )
        assert settings.configure(printer) is printer
        assert printer.get_path() == 'report.txt'
        assert printer.get_styles() == {'title': ['red']}
        assert printer.is_decorated() is False
        assert printer.is_verbose() is True

        printer.writeln("<title>v</title>", verbosity=Verbosity.VERBOSE)
        assert stream.getvalue() == "v\n"
