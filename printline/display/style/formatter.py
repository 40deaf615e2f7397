# display/style/formatter.py

import re
from typing import Dict, Iterator, List, Optional, Tuple

from rich.color import ColorParseError, ColorSystem
from rich.style import Style
from rich.text import Text

from .definitions import DEFAULT_STYLES, OutputStyle

# <name>, </name> and </>; a backslash before "<" escapes the tag
TAG_PATTERN = re.compile(r'(?<!\\)<(/?)([a-z][^<>]*)?>', re.IGNORECASE)
ESCAPED_OPEN = re.compile(r'\\<')
UNESCAPED_OPEN = re.compile(r'(?<!\\)<')


class OutputFormatter:
    """
    Turns tagged messages into terminal output.

    Messages use tags such as ``<info>done</info>`` or inline specs like
    ``<fg=red;bg=white;options=bold>``. When decorated, styled spans are
    rendered to ANSI with rich; otherwise the tags are stripped. Text between
    tags is written as given, control characters and tabs included.
    """
    def __init__(self, decorated: bool = False, styles: Optional[Dict[str, OutputStyle]] = None):
        self._decorated = bool(decorated)
        self._styles: Dict[str, OutputStyle] = {}
        for name, style in {**DEFAULT_STYLES, **(styles or {})}.items():
            self.set_style(name, style)

    @staticmethod
    def escape(text: str) -> str:
        """Escape tag openers so text is written literally."""
        return UNESCAPED_OPEN.sub(r'\\<', text)

    def set_decorated(self, decorated: bool) -> None:
        self._decorated = bool(decorated)

    def is_decorated(self) -> bool:
        return self._decorated

    def set_style(self, name: str, style: OutputStyle) -> None:
        self._styles[name.lower()] = style

    def has_style(self, name: str) -> bool:
        return name.lower() in self._styles

    def get_style(self, name: str) -> OutputStyle:
        try:
            return self._styles[name.lower()]
        except KeyError:
            raise KeyError(f'Undefined style: "{name}".') from None

    def format(self, message: str) -> str:
        """Format a message for output, rendering ANSI only when decorated."""
        if not self._decorated:
            return self.strip_tags(message)
        return ''.join(
            style.render(chunk, color_system=ColorSystem.TRUECOLOR) if style else chunk
            for chunk, style in self._segments(message)
        )

    def strip_tags(self, message: str) -> str:
        """Remove style tags, leaving the text exactly as written."""
        return ''.join(chunk for chunk, _ in self._segments(message))

    def format_text(self, message: str) -> Text:
        """Parse style tags into a rich Text, for inspecting spans."""
        text = Text()
        for chunk, style in self._segments(message):
            text.append(chunk, style=style)
        return text

    def _segments(self, message: str) -> Iterator[Tuple[str, Optional[Style]]]:
        """Split a message into unescaped text chunks and the style each one carries."""
        stack: List[Tuple[str, Style]] = []
        offset = 0

        for match in TAG_PATTERN.finditer(message):
            closing = match.group(1) == '/'
            raw = match.group(2) or ''
            name = raw.lower()

            if closing:
                if name and name not in (open_name for open_name, _ in stack):
                    continue
            else:
                style = self._resolve_style(raw) if raw else None
                if style is None:
                    continue

            yield from self._chunk(message[offset:match.start()], stack)
            offset = match.end()

            if not closing:
                stack.append((name, style))
            elif not name:
                if stack:
                    stack.pop()
            else:
                # Close the innermost matching tag and anything opened after it
                while stack:
                    open_name, _ = stack.pop()
                    if open_name == name:
                        break

        yield from self._chunk(message[offset:], stack)

    def _chunk(self, chunk: str, stack: List[Tuple[str, Style]]) -> Iterator[Tuple[str, Optional[Style]]]:
        if not chunk:
            return
        style = Style.combine(style for _, style in stack) if stack else None
        yield ESCAPED_OPEN.sub('<', chunk), style

    def _resolve_style(self, tag: str) -> Optional[Style]:
        if tag.lower() in self._styles:
            return self._styles[tag.lower()].to_rich()
        inline = self._parse_inline(tag)
        return inline.to_rich() if inline else None

    def _parse_inline(self, spec: str) -> Optional[OutputStyle]:
        """Parse ``fg=...;bg=...;options=...;href=...``; None if not a style spec."""
        values: Dict[str, str] = {}
        for part in spec.split(';'):
            key, sep, value = part.partition('=')
            key = key.strip()
            if not sep or key not in ('fg', 'bg', 'options', 'href'):
                return None
            values[key] = value.strip()

        options = [o for o in values.get('options', '').split(',') if o.strip()]
        try:
            style = OutputStyle(
                foreground=values.get('fg') or None,
                background=values.get('bg') or None,
                options=OutputStyle.normalize_options(options),
                href=values.get('href') or None,
            )
            # Validate colors now so a bad inline spec stays literal text
            style.to_rich()
        except (ValueError, ColorParseError):
            return None
        return style

