# display/style/definitions.py

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Optional, Sequence, Union

from rich.style import Style

from ...exceptions import InvalidStyleOption

# Option names accepted in style descriptors, mapped to rich Style attributes
OPTIONS = {
    'bold': 'bold',
    'dim': 'dim',
    'italic': 'italic',
    'underscore': 'underline',
    'underline': 'underline',
    'blink': 'blink',
    'reverse': 'reverse',
    'conceal': 'conceal',
}

StyleDescriptor = Sequence[Union[str, Iterable[str], None]]


@dataclass(frozen=True)
class OutputStyle:
    """
    A named output style: foreground, background and a set of options.

    Colors are anything rich can parse ("red", "#ff8800", "color(208)").
    """
    foreground: Optional[str] = None
    background: Optional[str] = None
    options: FrozenSet[str] = field(default_factory=frozenset)
    href: Optional[str] = None

    def __post_init__(self):
        for option in self.options:
            if option not in OPTIONS:
                raise InvalidStyleOption(option, OPTIONS)

    @classmethod
    def from_descriptor(cls, descriptor: StyleDescriptor) -> 'OutputStyle':
        """
        Build a style from a 1-3 item descriptor.

        Index 0 is the foreground, index 1 the background and index 2 the
        options (a single name or a collection of names). Missing or None
        items are left unset.
        """
        items = list(descriptor)
        foreground = items[0] if len(items) > 0 else None
        background = items[1] if len(items) > 1 else None
        options = items[2] if len(items) > 2 else None
        return cls(
            foreground=foreground,
            background=background,
            options=cls.normalize_options(options),
        )

    @staticmethod
    def normalize_options(options) -> FrozenSet[str]:
        if options is None:
            return frozenset()
        if isinstance(options, str):
            options = [options]
        return frozenset(option.strip().lower() for option in options)

    def to_rich(self) -> Style:
        """Convert to a rich Style."""
        flags = {OPTIONS[option]: True for option in self.options}
        return Style(
            color=self.foreground,
            bgcolor=self.background,
            link=self.href,
            **flags
        )


DEFAULT_STYLES: Dict[str, OutputStyle] = {
    'error': OutputStyle('white', 'red'),
    'info': OutputStyle('green'),
    'comment': OutputStyle('yellow'),
    'question': OutputStyle('black', 'cyan'),
}
