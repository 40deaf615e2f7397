# display/style/__init__.py

from .definitions import DEFAULT_STYLES, OPTIONS, OutputStyle, StyleDescriptor
from .formatter import OutputFormatter

__all__ = ['DEFAULT_STYLES', 'OPTIONS', 'OutputStyle', 'StyleDescriptor', 'OutputFormatter']
