"""Console output with theme support.

Wraps a Rich console with the small set of styles the CLI uses.
"""

import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success", "green")
    ERROR = ("[x]", "error", "red")


THEME = Theme({
    'info': 'cyan',
    'warning': 'yellow',
    'error': 'red',
    'success': 'green',
    'highlight': 'bright_cyan',
    'path': 'white',
    'number': 'bright_blue',
    'label': 'bold bright_cyan',
    'dim': 'bright_black',
})


class ConsoleManager:
    """Themed console used by the CLI."""

    def __init__(self, file: Optional[Any] = None, force_plain: bool = False):
        """Initialize console.

        Args:
            file: Output file (defaults to sys.stdout)
            force_plain: Disable colors and markup styling
        """
        self.file = file or sys.stdout
        no_color = force_plain or bool(os.environ.get('NO_COLOR'))
        self.console = Console(
            theme=THEME,
            file=self.file,
            no_color=no_color,
            highlight=False,
            soft_wrap=True,
        )

    def print(self, *args, **kwargs):
        """Print with Rich markup."""
        self.console.print(*args, **kwargs)

    def print_text(self, text: str):
        """Print text verbatim, without markup interpretation."""
        self.console.print(text, markup=False, emoji=False)

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, _, color = status.value
        status_text = Text()
        status_text.append(f"{icon} ", style=color)
        status_text.append(message)
        self.console.print(status_text)

    def print_error(self, message: str):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message)

    def print_success(self, message: str):
        """Print a success message."""
        self.print_status(StatusType.SUCCESS, message)

    def print_exception(self):
        """Print the current exception traceback."""
        self.console.print_exception()
