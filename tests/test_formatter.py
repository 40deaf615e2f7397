# test_formatter.py

import pytest
from rich.style import Style

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from printline.display.style import OutputFormatter, OutputStyle, DEFAULT_STYLES
from printline.exceptions import InvalidStyleOption


class TestOutputStyle:
    """Descriptor mapping and rich conversion."""

    def test_full_descriptor(self):
        style = OutputStyle.from_descriptor(['white', 'blue', ['bold', 'underscore']])
        assert style.foreground == 'white'
        assert style.background == 'blue'
        assert style.options == frozenset({'bold', 'underscore'})

    def test_partial_descriptors(self):
        assert OutputStyle.from_descriptor(['red']) == OutputStyle('red')
        assert OutputStyle.from_descriptor([None, 'red']) == OutputStyle(background='red')
        assert OutputStyle.from_descriptor([None, None, 'blink']).options == frozenset({'blink'})

    def test_to_rich(self):
        rich_style = OutputStyle('red', 'white', frozenset({'bold', 'underscore'})).to_rich()
        assert rich_style == Style(color='red', bgcolor='white', bold=True, underline=True)

    def test_unknown_option(self):
        with pytest.raises(InvalidStyleOption) as exc_info:
            OutputStyle.from_descriptor(['red', None, ['sparkle']])
        assert exc_info.value.option == 'sparkle'

    def test_default_styles(self):
        assert set(DEFAULT_STYLES) == {'error', 'info', 'comment', 'question'}


class TestOutputFormatter:
    """Tag parsing and decoration."""

    def setup_method(self):
        self.formatter = OutputFormatter()

    def test_undecorated_by_default(self):
        assert self.formatter.is_decorated() is False

    def test_strips_known_tags(self):
        assert self.formatter.format("<info>done</info> and <error>failed</error>") == "done and failed"

    def test_unknown_tags_are_literal(self):
        assert self.formatter.format("<unknown>x</unknown>") == "<unknown>x</unknown>"

    def test_empty_and_stray_tags_are_literal(self):
        assert self.formatter.format("a <> b") == "a <> b"
        assert self.formatter.format("a </info> b") == "a </info> b"

    def test_generic_close_tag(self):
        assert self.formatter.format("<info>a</>b") == "ab"

    def test_escaped_tags(self):
        message = OutputFormatter.escape("<info>literal</info>")
        assert message == "\\<info>literal\\</info>"
        assert self.formatter.format(message) == "<info>literal</info>"

    def test_style_names_case_insensitive(self):
        self.formatter.set_style('Title', OutputStyle('red'))
        assert self.formatter.has_style('TITLE')
        assert self.formatter.get_style('title') == OutputStyle('red')
        assert self.formatter.format("<TITLE>x</title>") == "x"

    def test_get_unknown_style(self):
        with pytest.raises(KeyError):
            self.formatter.get_style('nope')

    def test_inline_style_spans(self):
        text = self.formatter.format_text("a<fg=red;options=bold>b</>c")
        assert text.plain == "abc"
        assert len(text.spans) == 1
        span = text.spans[0]
        assert (span.start, span.end) == (1, 2)
        assert span.style == Style(color='red', bold=True)

    def test_invalid_inline_style_is_literal(self):
        assert self.formatter.format("<fg=notacolor>x</>") == "<fg=notacolor>x"
        assert self.formatter.format("<fg=red;size=3>x") == "<fg=red;size=3>x"

    def test_nested_styles_combine(self):
        text = self.formatter.format_text("<info><options=bold>x</></info>")
        assert text.spans[0].style == Style(color='green', bold=True)

    def test_closing_outer_tag_closes_inner(self):
        text = self.formatter.format_text("<info><comment>a</info>b")
        assert text.plain == "ab"
        assert len(text.spans) == 1

    def test_decorated_output(self):
        self.formatter.set_decorated(True)
        output = self.formatter.format("<info>ok</info>")
        assert "\x1b[32m" in output
        assert "ok" in output
        assert "<info>" not in output

    def test_decorated_plain_text_untouched(self):
        self.formatter.set_decorated(True)
        assert self.formatter.format("just text") == "just text"

    def test_no_wrapping_of_long_lines(self):
        self.formatter.set_decorated(True)
        message = "word " * 60
        assert "\n" not in self.formatter.format(f"<info>{message}</info>")

    @pytest.mark.parametrize("decorated", [False, True])
    def test_control_characters_pass_through(self, decorated):
        self.formatter.set_decorated(decorated)
        for message in ("50%\r100%", "a\r\nb", "a\tb", "\b\v\f"):
            assert self.formatter.format(message) == message

    def test_strip_tags_keeps_text(self):
        assert self.formatter.strip_tags("<info>a\tb</info>\r\n") == "a\tb\r\n"

    def test_decorated_chunk_rendering(self):
        self.formatter.set_decorated(True)
        assert self.formatter.format("x<info>a\tb</info>y") == "x\x1b[32ma\tb\x1b[0my"
