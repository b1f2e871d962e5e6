"""Tuner: expands temperament base tables into per-octave note frequencies."""

import logging
from typing import Iterable

import numpy as np

from tunekit.temperament_strategy import BaseTable, TemperamentStrategy, strategy_for
from tunekit.tuning_models import Configuration, Note

logger = logging.getLogger(__name__)


def expand_octaves(base_table: BaseTable, octaves: Iterable[int]) -> list[Note]:
    """
    Scale a one-octave base table across *octaves*.

    Octave 1 reproduces the base frequencies; each octave above doubles them
    and each octave below halves them. Scaling shifts the binary exponent, so
    adjacent octaves differ by exactly a factor of two. No range checking is
    done here.

    Args:
        base_table: Mapping of tone to octave-1 frequency.
        octaves:    Octave indices to generate.

    Returns:
        One Note per (tone, octave) pair, grouped by octave.
    """
    tones = list(base_table)
    frequencies = np.fromiter(base_table.values(), dtype=np.float64, count=len(tones))

    notes: list[Note] = []
    for octave in octaves:
        scaled = np.ldexp(frequencies, octave - 1)
        notes.extend(
            Note(tone=tone, octave=octave, frequency=float(frequency))
            for tone, frequency in zip(tones, scaled)
        )
    return notes


class Tuner:
    """
    Computes the frequency of every tone over a configuration's octave range.

    Algorithm overview
    ------------------
    1. **Strategy selection** – The temperament picks a TemperamentStrategy.
       Temperaments without one raise ``NotImplementedError`` rather than
       producing an empty table.

    2. **Base table** – The strategy builds 12 octave-1 frequencies:
         - equal: reference pitch folded into one octave and re-anchored at
           the transposition tone.
         - pure:  the equal table shifted by fixed cent offsets counted from
           the root tone.

    3. **Octave expansion** – Every base frequency is scaled by 2^(octave-1)
       for each octave in the configured range.
    """

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _strategy(self, configuration: Configuration) -> TemperamentStrategy:
        strategy = strategy_for(configuration.temperament)
        logger.debug(
            "Using %s for temperament '%s'",
            type(strategy).__name__,
            configuration.temperament.name,
        )
        return strategy

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def base_table(self, configuration: Configuration) -> BaseTable:
        """Return the octave-1 base table for *configuration*."""
        table = self._strategy(configuration).base_table(configuration)
        logger.debug(
            "Base table at %.2f Hz (transposition %s): %s",
            configuration.pitch,
            configuration.transposition_tone.label,
            ", ".join(f"{tone.label}={frequency:.4f}" for tone, frequency in table.items()),
        )
        return table

    def tune(self, configuration: Configuration) -> list[Note]:
        """
        Generate every note for *configuration*.

        Args:
            configuration: Validated tuning request.

        Returns:
            ``12 × len(configuration.octave_range)`` notes.

        Raises:
            NotImplementedError: If the temperament has no builder.
        """
        notes = expand_octaves(self.base_table(configuration), configuration.octave_range)
        logger.debug(
            "Generated %d notes over octaves [%d, %d)",
            len(notes),
            configuration.octave_range.start,
            configuration.octave_range.end,
        )
        return notes


def tune(configuration: Configuration) -> list[Note]:
    """Shortcut for ``Tuner().tune(configuration)``."""
    return Tuner().tune(configuration)
