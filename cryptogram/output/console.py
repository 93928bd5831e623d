"""
Cryptogram Console Output
=========================

Rich-based console formatters for cryptograms and round statistics.
Uses the shared console infrastructure for consistent styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import ToolConsole
from cryptogram.core.models import Cryptogram, Derangement, RoundStatisticsResult


class CryptogramConsoleOutput:
    """Console output formatters for cryptogram results.

    Usage::

        output = CryptogramConsoleOutput(ToolConsole())
        output.display_cryptogram(puzzle)
        output.display_key(puzzle.derangement)
        output.display_statistics(stats_result)
    """

    def __init__(self, console: Optional[ToolConsole] = None) -> None:
        self.console = console or ToolConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Cryptogram Display
    # ------------------------------------------------------------------ #

    def display_cryptogram(self, puzzle: Cryptogram) -> None:
        """Show the solution, the puzzle text and the shuffle count."""
        self.console.section("Cryptogram")

        body = Text()
        body.append("Decoded: ", style="bold")
        body.append(f"{puzzle.decoded}\n")
        body.append("Encoded: ", style="bold")
        body.append(f"{puzzle.encoded}\n", style="bold bright_cyan")
        body.append("Shuffles: ", style="bold")
        body.append(str(puzzle.attempts))

        self._rich.print(Panel(body, border_style="bright_cyan", padding=(0, 2)))
        self.display_key(puzzle.derangement)

    def display_key(self, key: Derangement) -> None:
        """Render the substitution key as a two-row table."""
        tbl = Table(
            title="Substitution Key",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_header=False,
            padding=(0, 0),
        )
        tbl.add_column("", style="bold")
        for _ in key.replacements:
            tbl.add_column("", justify="center")

        tbl.add_row("plain", *key.mapping.keys())
        tbl.add_row(
            "cipher",
            *(f"[bright_cyan]{escape(c)}[/bright_cyan]" for c in key.replacements),
        )
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Statistics Display
    # ------------------------------------------------------------------ #

    def display_statistics(self, result: RoundStatisticsResult) -> None:
        """Show the empirical attempt distribution against e."""
        self.console.section("Round Statistics")
        self.console.table(
            title="Shuffles per Derangement",
            columns=["Metric", "Value"],
            rows=[
                ("Trials", f"{result.trials:,}"),
                ("Mean attempts", f"{result.mean:.4f}"),
                ("Expected (n!/!n)", f"{result.expected:.4f}"),
                ("Deviation", f"{result.deviation:+.4f}"),
                ("Std. deviation", f"{result.std_dev:.4f}"),
                ("Min / Max", f"{result.minimum} / {result.maximum}"),
            ],
            styles=["bold", "bright_cyan"],
        )
