# display/__init__.py

from .style import OutputFormatter, OutputStyle
from .output import OutputMode, StreamOutput, Verbosity

__all__ = ['OutputFormatter', 'OutputStyle', 'OutputMode', 'StreamOutput', 'Verbosity']
