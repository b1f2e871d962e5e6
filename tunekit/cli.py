"""tunekit CLI entry point."""

import logging
import sys

import click

from tunekit import __version__
from tunekit.table_exporter import SUPPORTED_FORMATS, TableExporter
from tunekit.tones import Tone
from tunekit.tuner import Tuner
from tunekit.tuning_models import (
    Configuration,
    EqualTemperament,
    OctaveRange,
    PureKind,
    PureTemperament,
    Temperament,
)

DEFAULT_PITCH = 440.0
DEFAULT_OCTAVE_START = 1
DEFAULT_OCTAVE_END = 6

TEMPERAMENT_CHOICES = ["equal", "pure-major", "pure-minor"]


def _build_temperament(name: str, root_tone: Tone) -> Temperament:
    """Map a ``--temperament`` choice to a Temperament value."""
    if name == "equal":
        return EqualTemperament()
    kind = PureKind.MAJOR if name == "pure-major" else PureKind.MINOR
    return PureTemperament(kind=kind, root_tone=root_tone)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="tunekit")
@click.option("--verbose", "-v", is_flag=True, help="Log tuning steps to stderr.")
def main(verbose: bool) -> None:
    """tunekit: frequency tables for equal and pure temperaments."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


# ── table subcommand ───────────────────────────────────────────────────────────

@main.command()
@click.option(
    "--pitch",
    type=float,
    default=DEFAULT_PITCH,
    show_default=True,
    metavar="HZ",
    help="Reference pitch in Hz (A of the reference register).",
)
@click.option(
    "--temperament",
    type=click.Choice(TEMPERAMENT_CHOICES, case_sensitive=False),
    default="equal",
    show_default=True,
    help="Tuning temperament.",
)
@click.option(
    "--root",
    "root_tone",
    default="C",
    metavar="TONE",
    show_default=True,
    help="Root tone for pure temperaments (ignored for equal).",
)
@click.option(
    "--transposition",
    "transposition_tone",
    default="C",
    metavar="TONE",
    show_default=True,
    help="Transposition tone anchoring the equal-temperament table.",
)
@click.option(
    "--octaves",
    type=(int, int),
    default=(DEFAULT_OCTAVE_START, DEFAULT_OCTAVE_END),
    show_default=True,
    metavar="START END",
    help="Half-open octave range [START, END).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(SUPPORTED_FORMATS), case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination file. Prints to stdout when omitted.",
)
def table(
    pitch: float,
    temperament: str,
    root_tone: str,
    transposition_tone: str,
    octaves: tuple[int, int],
    output_format: str,
    output: str | None,
) -> None:
    """
    Print or save the frequency of every tone over an octave range.

    \b
    Examples:
      tunekit table --pitch 442
      tunekit table --pitch 442 --temperament pure-major --root A
      tunekit table --transposition Bb --octaves 2 5 --format json -o bb.json
    """
    try:
        configuration = Configuration(
            pitch=pitch,
            temperament=_build_temperament(temperament.lower(), Tone.parse(root_tone)),
            transposition_tone=Tone.parse(transposition_tone),
            octave_range=OctaveRange(start=octaves[0], end=octaves[1]),
        )
    except ValueError as exc:
        click.echo(f"ERROR: {exc}", err=True)
        sys.exit(1)

    notes = Tuner().tune(configuration)
    exporter = TableExporter(output_format=output_format)

    if output is None:
        click.echo(exporter.render(notes, configuration), nl=False)
        return

    try:
        exporter.export(notes, configuration, output)
    except OSError as exc:
        click.echo(f"ERROR: Could not write table — {exc}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {len(notes)} notes → '{output}'")
