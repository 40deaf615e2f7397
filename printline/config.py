# config.py

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .display.style import StyleDescriptor

ENV_OUTPUT_PATH = 'PRINTLINE_OUTPUT_PATH'
ENV_COLORS = 'PRINTLINE_COLORS'
ENV_VERBOSE = 'PRINTLINE_VERBOSE'

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


def parse_flag(name: str, raw: Optional[str]) -> Optional[bool]:
    """Parse a boolean environment value; unset or empty gives None."""
    if raw is None or not raw.strip():
        return None
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"Invalid value for {name}: expected a boolean, got {raw!r}")


@dataclass(frozen=True)
class PrinterSettings:
    """Printer configuration that can be loaded once and applied to printers."""
    path: Optional[str] = None
    styles: Dict[str, StyleDescriptor] = field(default_factory=dict)
    decorated: Optional[bool] = None
    verbose: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'PrinterSettings':
        environ = os.environ if environ is None else environ
        return cls(
            path=environ.get(ENV_OUTPUT_PATH) or None,
            decorated=parse_flag(ENV_COLORS, environ.get(ENV_COLORS)),
            verbose=bool(parse_flag(ENV_VERBOSE, environ.get(ENV_VERBOSE))),
        )

    def configure(self, printer):
        """Apply these settings to a printer and return it."""
        printer.set_path(self.path)
        printer.set_styles(self.styles)
        printer.set_decorated(self.decorated)
        printer.set_verbose(self.verbose)
        return printer
