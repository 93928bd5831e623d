"""
Console Interface
=================

Themed :class:`rich.console.Console` wrapper used by the tool's output
layer: banner, section rules, status lines and tables. User-supplied
text is escaped before it is printed with markup.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_TOOL_THEME = Theme(
    {
        "tool.banner": "bold bright_cyan",
        "tool.section": "bold bright_magenta",
        "tool.success": "bold green",
        "tool.error": "bold red",
        "tool.dim": "dim white",
        "tool.highlight": "bold bright_white",
    }
)

_TAGLINE = "Substitution Puzzle Generator"


class ToolConsole:
    """Themed console.

    Args:
        quiet: Suppress all output.
        stderr: Write to standard error, keeping standard output for results.

    Usage::

        con = ToolConsole()
        con.section("Round Statistics")
        ToolConsole(stderr=True).error("Key generation failed")
    """

    def __init__(self, *, quiet: bool = False, stderr: bool = False) -> None:
        self._console = Console(theme=_TOOL_THEME, quiet=quiet, stderr=stderr, highlight=False)

    @property
    def rich(self) -> Console:
        """The wrapped Rich console."""
        return self._console

    def banner(self, title: str = "CRYPTOGRAM", version: str = "1.0.0") -> None:
        body = (
            f"[tool.banner]{title}[/tool.banner]\n"
            f"[tool.highlight]{_TAGLINE}[/tool.highlight]\n"
            f"[tool.dim]Version: {version}[/tool.dim]"
        )
        self._console.print(
            Panel(Align.center(Text.from_markup(body)), border_style="bright_cyan", padding=(0, 2))
        )

    def section(self, title: str) -> None:
        """Rule with a centred title, followed by a blank line."""
        self._console.rule(f"  {title}  ", style="tool.section", characters="─")
        self._console.print()

    def success(self, message: str) -> None:
        self._console.print(f"[tool.success][✔] SUCCESS:[/tool.success] {escape(message)}")

    def error(self, message: str) -> None:
        self._console.print(f"[tool.error][✘] ERROR:[/tool.error] {escape(message)}")

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        styles: Sequence[str] = (),
    ) -> None:
        """Render *rows* under *columns*; cells are stringified and escaped.

        *styles* gives optional per-column Rich styles.
        """
        tbl = Table(title=title, border_style="bright_cyan", header_style="bold bright_magenta")
        for idx, name in enumerate(columns):
            tbl.add_column(name, style=styles[idx] if idx < len(styles) else "")
        for row in rows:
            tbl.add_row(*(escape(str(cell)) for cell in row))
        self._console.print(tbl)
