"""
ANSI Formatter - Map lightweight markup in app messages to terminal colours.

Supported tags::

    <red>...</red>    or  <🔴>...</🔴>
    <blue>...</blue>  or  <🔵>...</🔵>

A span nested inside another restores the outer colour when it closes.
Unknown or unpaired tags are left untouched.
"""

import re


class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"


TAG_COLORS = {
    "red": Colors.RED,
    "\U0001F534": Colors.RED,   # 🔴
    "blue": Colors.BLUE,
    "\U0001F535": Colors.BLUE,  # 🔵
}

_TAG_PATTERN = re.compile(
    r"<(?P<tag>" + "|".join(re.escape(tag) for tag in TAG_COLORS) + r")>"
    r"(?P<inner>.*?)"
    r"</(?P=tag)>",
    re.DOTALL,
)


def _render(text: str, restore: str) -> str:
    def replace(match: re.Match) -> str:
        color = TAG_COLORS[match.group("tag")]
        return color + _render(match.group("inner"), color) + restore

    return _TAG_PATTERN.sub(replace, text)


def colorize(text: str) -> str:
    """Replace colour tags with ANSI escape sequences."""
    return _render(text, Colors.RESET)
