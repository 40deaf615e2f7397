# printer.py

import os
import sys
from typing import Callable, Dict, Mapping, Optional, Protocol, TextIO

from .logger import Logger
from .exceptions import BadOutputPath
from .display.output import Messages, StreamOutput, Verbosity
from .display.style import OutputFormatter, OutputStyle, StyleDescriptor

StyleTable = Mapping[str, StyleDescriptor]
StreamResolver = Callable[[Optional[str]], TextIO]
FormatterFactory = Callable[[], OutputFormatter]


class OutputPrinter(Protocol):
    """Contract shared by all output printers."""
    def set_path(self, path: Optional[str]) -> None: ...
    def get_path(self) -> Optional[str]: ...
    def set_styles(self, styles: StyleTable) -> None: ...
    def get_styles(self) -> Dict[str, StyleDescriptor]: ...
    def set_decorated(self, decorated: Optional[bool]) -> None: ...
    def is_decorated(self) -> Optional[bool]: ...
    def set_verbose(self, verbose: bool = True) -> None: ...
    def is_verbose(self) -> bool: ...
    def write(self, messages: Messages) -> None: ...
    def writeln(self, messages: Messages = '') -> None: ...
    def flush(self) -> None: ...


class CliOutputPrinter:
    """
    Console printer that writes formatted output to stdout or a file.

    Configuration can change at any time; the underlying StreamOutput is
    built on the first write and rebuilt after every change.

    Args:
        stream_resolver: Returns the stream for a configured path (None means
            stdout). Defaults to opening the path, rejecting directories.
        formatter_factory: Creates the formatter user styles are added to.
        logger: Logger for debug output.
    """
    def __init__(
        self,
        stream_resolver: Optional[StreamResolver] = None,
        formatter_factory: FormatterFactory = OutputFormatter,
        logger: Optional[Logger] = None
    ):
        self._path: Optional[str] = None
        self._styles: Dict[str, StyleDescriptor] = {}
        self._decorated: Optional[bool] = None
        self._verbose = False
        self._output: Optional[StreamOutput] = None

        self._stream_resolver = stream_resolver or self._open_output_stream
        self._formatter_factory = formatter_factory
        self.logger = logger or Logger(__name__)

    def set_path(self, path: Optional[str]) -> None:
        self._path = path
        self.flush()

    def get_path(self) -> Optional[str]:
        return self._path

    def set_styles(self, styles: StyleTable) -> None:
        self._styles = dict(styles)
        self.flush()

    def get_styles(self) -> Dict[str, StyleDescriptor]:
        return self._styles

    def set_decorated(self, decorated: Optional[bool]) -> None:
        """Force decoration on or off; None lets the output detect it."""
        self._decorated = decorated
        self.flush()

    def is_decorated(self) -> Optional[bool]:
        return self._decorated

    def set_verbose(self, verbose: bool = True) -> None:
        self._verbose = verbose
        self.flush()

    def is_verbose(self) -> bool:
        return self._verbose

    def write(self, messages: Messages, verbosity: Verbosity = Verbosity.NORMAL) -> None:
        """Write message(s) without a trailing line break."""
        self._get_writing_console().write(messages, newline=False, verbosity=verbosity)

    def writeln(self, messages: Messages = '', verbosity: Verbosity = Verbosity.NORMAL) -> None:
        """Write message(s), each followed by a line break."""
        self._get_writing_console().write(messages, newline=True, verbosity=verbosity)

    def flush(self) -> None:
        """Drop the current output so the next write builds a fresh one."""
        if self._output is not None:
            self.logger.debug("Discarding output console")
        self._output = None

    def _create_output_formatter(self) -> OutputFormatter:
        formatter = self._formatter_factory()
        for name, descriptor in self._styles.items():
            formatter.set_style(name, OutputStyle.from_descriptor(descriptor))
        return formatter

    def _configure_output_console(self, console: StreamOutput) -> None:
        console.set_verbosity(Verbosity.VERBOSE if self._verbose else Verbosity.NORMAL)
        if self._decorated is not None:
            console.set_decorated(self._decorated)

    def _open_output_stream(self, path: Optional[str]) -> TextIO:
        if path is None:
            return sys.stdout
        if not os.path.isdir(path):
            return open(path, 'w', encoding='utf-8', newline='')
        raise BadOutputPath(
            f"Filename expected as `output_path` parameter of {type(self).__name__}, "
            f"but got `{path}`.",
            path
        )

    def _create_output_console(self) -> StreamOutput:
        stream = self._stream_resolver(self._path)
        console = StreamOutput(
            stream,
            Verbosity.NORMAL,
            self._decorated,
            self._create_output_formatter()
        )
        self._configure_output_console(console)
        self.logger.debug(
            f"Created output console for {self._path or 'stdout'} "
            f"(decorated={console.is_decorated()}, verbose={self._verbose})"
        )
        return console

    def _get_writing_console(self) -> StreamOutput:
        if self._output is None:
            self._output = self._create_output_console()
        return self._output
