"""
Output - Console output formatting.

Provides the default error printer and run summaries with colors.
"""

import logging
import sys
from typing import Optional, TextIO

from ..adapters.formatters.ansi import Colors
from ..application.accessor import ErrorView
from ..application.sync import ClearResult, SyncResult


class Symbols:
    """Unicode symbols for output."""

    CHECK = "✓"
    CROSS = "✗"
    ARROW = "→"
    DOT = "•"
    INFO = "ℹ"


class Console:
    """Console output helper with colors and formatting."""

    def __init__(
        self,
        color: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.stream = stream or sys.stdout
        self.color = color and self.stream.isatty()

    def _c(self, text: str, *codes: str) -> str:
        """Apply color codes to text."""
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET

    def print(self, text: str = "") -> None:
        """Print text."""
        print(text, file=self.stream)

    def section(self, text: str) -> None:
        """Print a section header."""
        self.print()
        self.print(self._c(f"{Symbols.ARROW} {text}", Colors.BOLD, Colors.BLUE))

    def success(self, text: str) -> None:
        """Print success message."""
        self.print(self._c(f"  {Symbols.CHECK} {text}", Colors.GREEN))

    def error(self, text: str) -> None:
        """Print error message."""
        self.print(self._c(f"  {Symbols.CROSS} {text}", Colors.RED))

    def info(self, text: str) -> None:
        """Print info message."""
        self.print(self._c(f"  {Symbols.INFO} {text}", Colors.CYAN))

    def detail(self, text: str) -> None:
        """Print detail text (dimmed)."""
        self.print(self._c(f"    {text}", Colors.DIM))

    def table(self, headers: list[str], rows: list[list[str]]) -> None:
        """Print a simple table."""
        # The last column is never padded; it may hold ANSI-styled text.
        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row[:-1]):
                if i < len(widths):
                    widths[i] = max(widths[i], len(str(cell)))

        header_line = "  " + "  ".join(
            self._c(h.ljust(widths[i]), Colors.BOLD)
            for i, h in enumerate(headers)
        )
        self.print(header_line)
        self.print("  " + "  ".join("-" * w for w in widths))

        for row in rows:
            row_line = "  " + "  ".join(
                str(cell).ljust(widths[i]) if i < len(row) - 1 else str(cell)
                for i, cell in enumerate(row)
            )
            self.print(row_line)

    # -------------------------------------------------------------------------
    # Sherror output
    # -------------------------------------------------------------------------

    def error_table(self, error: ErrorView, link: str, codepath: Optional[str] = None) -> None:
        """Print an error as a two-column table."""
        rows = [
            ["Code", str(error.code)],
            ["Message", error.app_message],
            ["Discussion", link],
        ]
        if codepath:
            rows.append(["Codepath", codepath])

        self.table(["Error", "Details"], rows)

    def sync_result(self, result: SyncResult) -> None:
        """Print sync result summary."""
        self.section(f"Sync Summary ({result.repository}, category \"{result.category}\")")
        self.print()

        self.table(["Outcome", "Count"], [
            ["Created", str(len(result.created))],
            ["Updated", str(len(result.updated))],
            ["Unchanged", str(len(result.unchanged))],
        ])

        self.print()
        if result.wrote_back:
            self.info("New discussion links were written to the config")
        self.success("Sync completed successfully!")

    def clear_result(self, result: ClearResult) -> None:
        """Print clear result summary."""
        self.section(f"Clear Summary ({result.repository})")
        if not result.category_found:
            self.info(f'Category "{result.category}" does not exist; nothing to delete')
            return

        for number in result.deleted:
            self.detail(f"{Symbols.DOT} deleted #{number}")
        self.success(
            f"Deleted {len(result.deleted)} discussions, "
            f"cleared {result.links_cleared} links"
        )


def default_printer(error: ErrorView, link: str, codepath: Optional[str] = None) -> None:
    """Printer used when the config does not provide one."""
    Console(stream=sys.stderr).error_table(error, link, codepath)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
