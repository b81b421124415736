"""ocariner CLI entry point."""

import logging
import sys

import click

from ocariner import __version__
from ocariner.config import (
    MAX_DIFFICULTY,
    MAX_MEASURES,
    MAX_TEMPO,
    MAX_TIME,
    MAX_WAIT,
    MIN_TEMPO,
    OcarinerConfig,
)
from ocariner.errors import OcarinerError
from ocariner.table import OcTable

EXIT_INTERRUPTED = 130


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr so they never mix with the drawn table."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="ocariner")
@click.option("--verbose", "-v", is_flag=True, help="Log debug details to stderr.")
def main(verbose: bool) -> None:
    """ocariner — noise-generated notes on a terminal music staff."""
    _configure_logging(verbose)


# ── play subcommand ────────────────────────────────────────────────────────────

@main.command()
@click.option(
    "--tempo",
    "-t",
    type=click.FloatRange(MIN_TEMPO, MAX_TEMPO),
    default=0.8,
    show_default=True,
    metavar="SECS",
    help=f"Seconds each note is held ({MIN_TEMPO}–{MAX_TEMPO}).",
)
@click.option(
    "--difficulty",
    "-d",
    type=click.IntRange(1, MAX_DIFFICULTY),
    default=1,
    show_default=True,
    help="Difficulty level (reserved).",
)
@click.option(
    "--wait",
    "-w",
    type=click.IntRange(0, MAX_WAIT),
    default=0,
    show_default=True,
    help="Wait before playback (reserved).",
)
@click.option("--ascii", "ascii_mode", is_flag=True, help="Draw with plain ASCII characters.")
@click.option(
    "--series",
    "-s",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of tables to generate and play in a row.",
)
@click.option(
    "--measures",
    "-m",
    type=click.IntRange(1, MAX_MEASURES),
    default=1,
    show_default=True,
    help="Measures per table (reserved).",
)
@click.option(
    "--time",
    "time_per_measure",
    type=click.IntRange(1, MAX_TIME),
    default=4,
    show_default=True,
    help="Beats per measure (reserved).",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible notes.")
def play(
    tempo: float,
    difficulty: int,
    wait: int,
    ascii_mode: bool,
    series: int,
    measures: int,
    time_per_measure: int,
    seed: int | None,
) -> None:
    """
    Draw a staff table of generated notes and animate a cue under each one.

    \b
    Examples:
      ocariner play
      ocariner play --tempo 0.5 --series 3
      ocariner play --ascii --seed 42
    """
    config = OcarinerConfig(
        tempo=tempo,
        difficulty=difficulty,
        wait=wait,
        ascii=ascii_mode,
        series=series,
        measures=measures,
        time=time_per_measure,
        seed=seed,
    )
    table = OcTable(config)

    try:
        table.run()
    except OcarinerError as exc:
        click.echo(f"  ERROR: Could not display the table — {exc}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        table.stop()
        click.echo()
        sys.exit(EXIT_INTERRUPTED)

    click.echo()


# ── render subcommand ──────────────────────────────────────────────────────────

@main.command()
@click.option("--ascii", "ascii_mode", is_flag=True, help="Draw with plain ASCII characters.")
@click.option("--seed", type=int, default=None, help="Seed for reproducible notes.")
def render(ascii_mode: bool, seed: int | None) -> None:
    """
    Draw one staff table of generated notes without playback.

    \b
    Examples:
      ocariner render
      ocariner render --ascii --seed 7
    """
    table = OcTable(OcarinerConfig(ascii=ascii_mode, seed=seed))

    try:
        table.render(table.generator.generate())
    except OcarinerError as exc:
        click.echo(f"  ERROR: Could not display the table — {exc}", err=True)
        sys.exit(1)
