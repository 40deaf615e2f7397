# display/output.py

import os
from enum import Enum, IntEnum
from typing import Iterable, Optional, TextIO, Union

from rich.console import Console

from .style import OutputFormatter

Messages = Union[str, Iterable[str]]


class Verbosity(IntEnum):
    """Output verbosity levels; a message is written when its level <= the output's."""
    QUIET = 16
    NORMAL = 32
    VERBOSE = 64
    VERY_VERBOSE = 128
    DEBUG = 256


class OutputMode(Enum):
    NORMAL = 'normal'  # format style tags
    RAW = 'raw'        # write untouched
    PLAIN = 'plain'    # strip style tags, never decorate


class StreamOutput:
    """
    Writes formatted messages to a text stream.

    Args:
        stream: Writable text stream (sys.stdout, an open file, StringIO...)
        verbosity: Level messages are compared against
        decorated: Force decoration on/off; None detects it from the stream
        formatter: Formatter used for NORMAL messages
    """
    def __init__(
        self,
        stream: TextIO,
        verbosity: Verbosity = Verbosity.NORMAL,
        decorated: Optional[bool] = None,
        formatter: Optional[OutputFormatter] = None
    ):
        self.stream = stream
        self._verbosity = verbosity
        self._formatter = formatter or OutputFormatter()
        if decorated is None:
            decorated = self.has_color_support()
        self._formatter.set_decorated(decorated)

    def has_color_support(self) -> bool:
        """Whether the stream is a color-capable terminal, as rich sees it."""
        if os.environ.get('NO_COLOR', ''):
            return False
        return Console(file=self.stream).is_terminal

    def get_formatter(self) -> OutputFormatter:
        return self._formatter

    def set_formatter(self, formatter: OutputFormatter) -> None:
        self._formatter = formatter

    def set_decorated(self, decorated: bool) -> None:
        self._formatter.set_decorated(decorated)

    def is_decorated(self) -> bool:
        return self._formatter.is_decorated()

    def set_verbosity(self, verbosity: Verbosity) -> None:
        self._verbosity = verbosity

    def get_verbosity(self) -> Verbosity:
        return self._verbosity

    def is_quiet(self) -> bool:
        return self._verbosity == Verbosity.QUIET

    def is_verbose(self) -> bool:
        return self._verbosity >= Verbosity.VERBOSE

    def is_very_verbose(self) -> bool:
        return self._verbosity >= Verbosity.VERY_VERBOSE

    def is_debug(self) -> bool:
        return self._verbosity >= Verbosity.DEBUG

    def write(
        self,
        messages: Messages,
        newline: bool = False,
        verbosity: Verbosity = Verbosity.NORMAL,
        mode: OutputMode = OutputMode.NORMAL
    ) -> None:
        """Write one message or several, in order."""
        if verbosity > self._verbosity:
            return
        if isinstance(messages, str):
            messages = [messages]

        for message in messages:
            if mode is OutputMode.NORMAL:
                message = self._formatter.format(message)
            elif mode is OutputMode.PLAIN:
                message = self._formatter.strip_tags(message)
            self._do_write(message, newline)

    def writeln(
        self,
        messages: Messages = '',
        verbosity: Verbosity = Verbosity.NORMAL,
        mode: OutputMode = OutputMode.NORMAL
    ) -> None:
        self.write(messages, newline=True, verbosity=verbosity, mode=mode)

    def _do_write(self, message: str, newline: bool) -> None:
        self.stream.write(message + ('\n' if newline else ''))
        self.stream.flush()
