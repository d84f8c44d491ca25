"""Tests for message styling."""

import pytest

from sherror.adapters.formatters.ansi import Colors, colorize


class TestColorize:
    """Tests for colorize()."""

    @pytest.mark.parametrize("tag, color", [
        ("red", Colors.RED),
        ("blue", Colors.BLUE),
        ("🔴", Colors.RED),
        ("🔵", Colors.BLUE),
    ])
    def test_single_span(self, tag, color):
        assert colorize(f"<{tag}>hi</{tag}>") == f"{color}hi{Colors.RESET}"

    def test_nested_span_restores_outer_color(self):
        text = "<🔴>You must include a <🔵>--foo</🔵> option</🔴>"

        assert colorize(text) == (
            f"{Colors.RED}You must include a "
            f"{Colors.BLUE}--foo{Colors.RED}"
            f" option{Colors.RESET}"
        )

    def test_surrounding_text_is_kept(self):
        assert colorize("a <red>b</red> c") == f"a {Colors.RED}b{Colors.RESET} c"

    def test_multiple_spans(self):
        assert colorize("<red>a</red><blue>b</blue>") == (
            f"{Colors.RED}a{Colors.RESET}{Colors.BLUE}b{Colors.RESET}"
        )

    @pytest.mark.parametrize("text", [
        "plain text",
        "<green>not a colour we know</green>",
        "<red>never closed",
        "closed only</blue>",
        "<b>bold</b>",
    ])
    def test_unknown_or_unpaired_tags_pass_through(self, text):
        assert colorize(text) == text

    def test_span_across_lines(self):
        assert colorize("<red>a\nb</red>") == f"{Colors.RED}a\nb{Colors.RESET}"

    def test_is_deterministic(self):
        text = "<red>x <blue>y</blue></red>"

        assert colorize(text) == colorize(text)
