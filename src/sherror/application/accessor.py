"""
Error Accessor - Look up an error by code for use in running application code.

``lookup()`` returns an ``ErrorHandle`` wrapping an immutable ``ErrorView``;
the handle prints the error and exits the process with its code.
"""

import inspect
import sys
from dataclasses import dataclass
from typing import Callable, NoReturn, Optional, Union

from ..adapters.formatters.ansi import colorize
from ..core.domain.entities import SherrorConfig
from ..core.exceptions import NotFoundError


NOT_AVAILABLE = "not available"


@dataclass(frozen=True)
class ErrorView:
    """Read-only snapshot of an error definition with a styled message."""

    code: int
    app_message: str
    post_title: str
    post_body: str
    discussion_link: Optional[str] = None

    @property
    def link(self) -> str:
        """The discussion link, or the "not available" sentinel."""
        return self.discussion_link or NOT_AVAILABLE


# printer(error, link_or_sentinel, codepath)
Printer = Callable[[ErrorView, str, Optional[str]], None]


class Codepath:
    """
    Marks where in application code an error was raised.

    Construct it at the raise site: the caller's file, line and function
    are captured at construction time.
    """

    def __init__(self, depth: int = 1):
        frame = inspect.currentframe()
        try:
            for _ in range(depth):
                frame = frame.f_back
            self.filename = frame.f_code.co_filename
            self.lineno = frame.f_lineno
            self.function = frame.f_code.co_name
        finally:
            del frame

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno} ({self.function})"

    def __repr__(self) -> str:
        return f"Codepath({self})"


class ErrorHandle:
    """Printing and exit behaviour for a looked-up error."""

    def __init__(self, error: ErrorView, printer: Printer):
        self.error = error
        self._printer = printer

    @property
    def code(self) -> int:
        return self.error.code

    def print(self, codepath: Optional[Union[Codepath, str]] = None) -> None:
        """Print the error through the configured printer."""
        self._printer(
            self.error,
            self.error.link,
            str(codepath) if codepath is not None else None,
        )

    def exit(self) -> NoReturn:
        """Terminate the process with the error code as exit status."""
        sys.exit(self.error.code)

    def __repr__(self) -> str:
        return f"ErrorHandle(code={self.error.code})"


def lookup(config: SherrorConfig, code: int, printer: Printer) -> ErrorHandle:
    """
    Find an error by code and wrap it in a handle.

    Raises:
        NotFoundError: If no definition has ``code``
    """
    error = config.find(code)
    if error is None:
        raise NotFoundError(f"Error code {code} not found in config")

    view = ErrorView(
        code=error.code,
        app_message=colorize(error.app_message),
        post_title=error.post_title,
        post_body=error.post_body,
        discussion_link=error.discussion_link,
    )
    return ErrorHandle(view, printer)
