# exceptions.py

from typing import Optional


class PrinterError(Exception):
    """Base class for all printline errors."""


class BadOutputPath(PrinterError):
    """
    Raised when the configured output path cannot be used as a file target.

    The offending path is kept on the exception so callers can report it.
    """
    def __init__(self, message: str, path: Optional[str]):
        super().__init__(message)
        self.path = path


class InvalidStyleOption(PrinterError, ValueError):
    """Raised when a style descriptor names an unknown option."""
    def __init__(self, option: str, known):
        super().__init__(
            f'Invalid option specified: "{option}". '
            f'Expected one of ({", ".join(sorted(known))}).'
        )
        self.option = option
