# __init__.py

from .logger import Logger
from .exceptions import BadOutputPath, InvalidStyleOption, PrinterError
from .display import OutputFormatter, OutputMode, OutputStyle, StreamOutput, Verbosity
from .printer import CliOutputPrinter, OutputPrinter
from .config import PrinterSettings

__all__ = [
    "CliOutputPrinter", "OutputPrinter", "PrinterSettings", "Logger",
    "OutputFormatter", "OutputStyle", "OutputMode", "StreamOutput", "Verbosity",
    "PrinterError", "BadOutputPath", "InvalidStyleOption",
]
