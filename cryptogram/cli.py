"""
Cryptogram CLI
==============

Click-based command-line interface for the cryptogram generator.

Usage::

    cryptogram "Attack at dawn"          # phrase as argument
    cryptogram                           # prompts for the phrase
    cryptogram --show-key "Hello"        # also show the key
    cryptogram --json "Hello"            # JSON report on stdout
    cryptogram-stats --trials 10000      # average shuffles per key

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from shared.config import ToolConfig
from shared.console import ToolConsole

from cryptogram import __version__
from cryptogram.analyzers.rounds import InvalidArgument
from cryptogram.collectors.phrase import ArgumentSource, InputSource, PromptSource
from cryptogram.core.engine import CryptogramEngine
from cryptogram.generators.derangement import DerangementError
from cryptogram.output.console import CryptogramConsoleOutput
from cryptogram.output.report import CryptogramReportGenerator


def _load_config(path: Optional[str], seed: Optional[int]) -> ToolConfig:
    config = ToolConfig.load(path)
    if seed is not None:
        config.cryptogram.seed = seed
    return config


# ===================================================================== #
#  Encode
# ===================================================================== #

@click.command()
@click.argument("phrase", required=False)
@click.option(
    "--show-key", "-k",
    is_flag=True,
    default=False,
    help="Also display the decoded text, substitution key and shuffle count.",
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    default=False,
    help="Print the cryptogram as a JSON report instead of plain text.",
)
@click.option(
    "--seed", "-s",
    type=int,
    default=None,
    help="Seed the random source for a reproducible key.",
)
@click.version_option(__version__, prog_name="cryptogram")
@click.pass_context
def cli(
    ctx: click.Context,
    phrase: Optional[str],
    show_key: bool,
    as_json: bool,
    seed: Optional[int],
) -> None:
    """Turn PHRASE into a cryptogram.

    Every letter is lowercased and replaced with an uppercase letter
    from a random key in which no letter stands for itself. Without
    PHRASE the phrase is read from an interactive prompt.
    """
    config = _load_config(None, seed)
    engine = CryptogramEngine(config)

    source: InputSource = (
        ArgumentSource(phrase) if phrase is not None else PromptSource(logger=engine.logger)
    )

    try:
        puzzle = engine.encode_from(source)
    except DerangementError as exc:
        engine.logger.exception("Key generation failed")
        ToolConsole(stderr=True).error(str(exc))
        ctx.exit(1)

    if as_json:
        click.echo(CryptogramReportGenerator().to_json(puzzle))
        return

    click.echo(f"{config.cryptogram.output_label}: {puzzle.encoded}")
    if show_key:
        CryptogramConsoleOutput(ToolConsole()).display_cryptogram(puzzle)


# ===================================================================== #
#  Round statistics
# ===================================================================== #

@click.command()
@click.option(
    "--trials", "-t",
    type=int,
    default=None,
    help="Number of derangements to generate (default from config, 10000).",
)
@click.option(
    "--seed", "-s",
    type=int,
    default=None,
    help="Seed the random source for reproducible statistics.",
)
@click.option(
    "--config", "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a configuration file (TOML).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write the result as a JSON report to this path.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner; print only the mean.",
)
def stats(
    trials: Optional[int],
    seed: Optional[int],
    config_path: Optional[str],
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """Measure the average number of shuffles needed per derangement.

    A uniform shuffle of 26 letters has no fixed point with probability
    about 1/e, so the mean should come out close to e = 2.718.
    """
    config = _load_config(config_path, seed)
    engine = CryptogramEngine(config)

    try:
        result = engine.round_statistics(trials)
    except InvalidArgument as exc:
        raise click.BadParameter(str(exc), param_hint="'--trials'") from exc
    except DerangementError as exc:
        engine.logger.exception("Key generation failed")
        raise click.ClickException(str(exc)) from exc

    if quiet:
        click.echo(f"{result.mean:.4f}")
    else:
        console = ToolConsole()
        console.banner(version=__version__)
        CryptogramConsoleOutput(console).display_statistics(result)

    if output_file:
        path = CryptogramReportGenerator().generate_json(result, Path(output_file))
        if not quiet:
            ToolConsole().success(f"JSON report saved to: {path}")


# ===================================================================== #
#  Entry Points
# ===================================================================== #

def main() -> None:
    """Entry point for the ``cryptogram`` command."""
    cli()


def stats_main() -> None:
    """Entry point for the ``cryptogram-stats`` command."""
    stats()


if __name__ == "__main__":
    main()
