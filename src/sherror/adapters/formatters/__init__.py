"""
Formatters - Terminal styling for application messages.
"""

from .ansi import Colors, colorize

__all__ = ["Colors", "colorize"]
