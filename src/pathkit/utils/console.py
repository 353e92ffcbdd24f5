"""Console output for the pathkit command line.

This module provides themed Rich output, status lines and the component
table printed by `pathkit inspect`.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    ERROR = ("[x]", "error", "red")
    WARNING = ("[!]", "warning", "yellow")
    INFO = ("[!]", "info", "cyan")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    header: str
    path: str
    number: str
    dim: str
    heading: str = "bright_yellow"


# Retro terminal themes
THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        header='bold bright_cyan',
        path='white',
        number='bright_blue',
        dim='bright_black',
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        highlight='bold green',
        header='bold green',
        path='bright_green',
        number='green',
        dim='green',
        heading='bright_cyan',
    ),
    'sunset': ThemeColors(
        info='orange3',
        warning='yellow',
        error='red3',
        success='green',
        highlight='bold orange1',
        header='bold orange1',
        path='wheat1',
        number='orange1',
        dim='grey50',
        heading='dark_orange3',
    ),
}


class ConsoleManager:
    """Themed console output."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None):
        """Initialize console.

        Args:
            theme: Theme name from THEMES; unknown names fall back to manhattan
            file: Output file (defaults to sys.stdout)
        """
        self.theme_name = theme if theme in THEMES else 'manhattan'
        self.theme_colors = THEMES[self.theme_name]
        self.file = file or sys.stdout
        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            highlight=False,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        colors = self.theme_colors
        return Theme({
            'info': colors.info,
            'warning': colors.warning,
            'error': colors.error,
            'success': colors.success,
            'highlight': colors.highlight,
            'header': colors.header,
            'path': colors.path,
            'number': colors.number,
            'dim': colors.dim,
            'heading': colors.heading,
        })

    def print(self, *args, **kwargs):
        self.console.print(*args, **kwargs)

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, _, color = status.value
        status_text = Text()
        status_text.append(f"{icon} ", style=color)
        status_text.append(message)
        self.console.print(status_text)

    def print_error(self, message: str):
        self.print_status(StatusType.ERROR, message)

    def print_components(self, title: str, rows: Iterable[Tuple[str, str]]):
        """Print a two-column table of path components."""
        table = Table(title=escape(title), title_style="header", header_style="heading")
        table.add_column("Component", style="info")
        table.add_column("Value", style="path")
        for name, value in rows:
            table.add_row(name, escape(repr(value)))
        self.console.print(table)
