"""TemperamentStrategy: builds the one-octave base table for each temperament."""

from abc import ABC, abstractmethod

import numpy as np

from tunekit.tones import CANONICAL_ORDER, TONES_PER_OCTAVE, Tone, arrange_tones, canonical_index
from tunekit.tuning_models import (
    Configuration,
    EqualTemperament,
    PureKind,
    PureTemperament,
    Temperament,
)

BaseTable = dict[Tone, float]


def _frozen(values: list[float]) -> np.ndarray:
    array = np.array(values, dtype=np.float64)
    array.setflags(write=False)
    return array


# ── Equal temperament constants ─────────────────────────────────────────────

#: Semitone distance from the reference pitch for C, D♭, ..., B (canonical order).
SEMITONE_ORDERS: np.ndarray = _frozen([3, 4, 5, 6, 7, 8, 9, 10, 11, 0, 1, 2])

#: Register divisors folding every tone into the octave-1 band (C..A♭ / 16, A..B / 8).
REGISTER_DIVISORS: np.ndarray = _frozen([16, 16, 16, 16, 16, 16, 16, 16, 16, 8, 8, 8])

#: Canonical index of G♭. Transposing above it moves the whole table down an octave.
TRANSPOSITION_BOUNDARY = 6


# ── Pure intonation cent tables ─────────────────────────────────────────────
# Frequency ratio against the reference pitch: r = 2^(n/12 + m/1200)
# n: semitone distance, m: deviation from equal temperament in cents.
# Entries are indexed from the root tone upward.

PURE_MAJOR_CENTS: np.ndarray = _frozen(
    [0.0, -29.3, 3.9, 15.6, -13.7, -2.0, -31.3, 2.0, -27.4, -15.6, 17.6, -11.7]
)

PURE_MINOR_CENTS: np.ndarray = _frozen(
    [0.0, 33.2, 3.9, 15.6, -13.7, -2.0, 31.3, 2.0, 13.7, -15.6, 17.6, -11.7]
)

CENTS_PER_OCTAVE = 1200.0


def cent_offsets_for(kind: PureKind) -> np.ndarray:
    """Return the 12-entry cent table for a pure intonation flavour."""
    if kind is PureKind.MAJOR:
        return PURE_MAJOR_CENTS
    if kind is PureKind.MINOR:
        return PURE_MINOR_CENTS
    raise NotImplementedError(f"No cent table for pure intonation kind {kind!r}.")


def equal_base(pitch: float, transposition_tone: Tone) -> BaseTable:
    """
    Build the equal-temperament base table (octave 1) for a transposition tone.

    The twelve frequencies are first computed as if the transposition tone
    were C. Tones before the transposition tone in C-first order are moved
    up an octave, the sequence is rotated to start at the transposition
    tone, and the result is read back onto C, D♭, ..., B. When the
    transposition tone lies above G♭ the whole table is halved so it stays
    in the same band.

    Args:
        pitch:              Reference pitch in Hz.
        transposition_tone: Tone anchoring the table.

    Returns:
        Mapping of all 12 tones to their base frequency.
    """
    untransposed = pitch * np.exp2(SEMITONE_ORDERS / TONES_PER_OCTAVE) / REGISTER_DIVISORS

    index = canonical_index(transposition_tone)
    positions = np.arange(TONES_PER_OCTAVE)
    raised = np.where(positions < index, untransposed * 2.0, untransposed)
    rotated = raised[(positions + index) % TONES_PER_OCTAVE]

    if index > TRANSPOSITION_BOUNDARY:
        rotated = rotated / 2.0

    return {tone: float(frequency) for tone, frequency in zip(CANONICAL_ORDER, rotated)}


def pure_base(equal_table: BaseTable, root_tone: Tone, cent_offsets: np.ndarray) -> BaseTable:
    """
    Derive a pure-intonation base table from an equal-temperament one.

    The i-th tone counted upward from *root_tone* is shifted by
    ``cent_offsets[i]`` cents.

    Args:
        equal_table:  Output of :func:`equal_base`.
        root_tone:    Tone receiving offset 0.
        cent_offsets: 12 cent deviations, root first.

    Returns:
        Mapping of all 12 tones to their pure base frequency.

    Raises:
        ValueError: If *cent_offsets* does not hold exactly 12 entries.
    """
    offsets = np.asarray(cent_offsets, dtype=np.float64)
    if offsets.shape != (TONES_PER_OCTAVE,):
        raise ValueError(f"Expected {TONES_PER_OCTAVE} cent offsets, got shape {offsets.shape}.")

    tones = arrange_tones(root_tone)
    ratios = np.exp2(offsets / CENTS_PER_OCTAVE)
    shifted = {tone: float(equal_table[tone] * ratio) for tone, ratio in zip(tones, ratios)}
    return {tone: shifted[tone] for tone in CANONICAL_ORDER}


# ── Abstract base ────────────────────────────────────────────────────────────

class TemperamentStrategy(ABC):
    """
    Abstract Strategy producing the octave-1 base table for a configuration.

    Concrete subclasses implement ``base_table()``; the tuner scales the
    result across the requested octaves.
    """

    @abstractmethod
    def base_table(self, configuration: Configuration) -> BaseTable:
        """
        Compute the 12-entry base table for *configuration*.

        Args:
            configuration: Validated tuning request.

        Returns:
            Mapping of every tone to its octave-1 frequency.
        """


# ── Concrete strategies ──────────────────────────────────────────────────────

class EqualTemperamentStrategy(TemperamentStrategy):
    """Equal temperament anchored at the configuration's transposition tone."""

    def base_table(self, configuration: Configuration) -> BaseTable:
        return equal_base(configuration.pitch, configuration.transposition_tone)


class PureTemperamentStrategy(TemperamentStrategy):
    """
    Pure intonation layered over the equal-temperament table.

    The equal table still uses the transposition tone; the root tone only
    decides which tone receives the zero cent offset.
    """

    def __init__(self, temperament: PureTemperament) -> None:
        self.temperament = temperament
        self.cent_offsets = cent_offsets_for(temperament.kind)

    def base_table(self, configuration: Configuration) -> BaseTable:
        equal_table = equal_base(configuration.pitch, configuration.transposition_tone)
        return pure_base(equal_table, self.temperament.root_tone, self.cent_offsets)


def strategy_for(temperament: Temperament) -> TemperamentStrategy:
    """
    Return the strategy implementing *temperament*.

    Raises:
        NotImplementedError: For temperaments without a builder (e.g. Pythagorean).
    """
    if isinstance(temperament, EqualTemperament):
        return EqualTemperamentStrategy()
    if isinstance(temperament, PureTemperament):
        return PureTemperamentStrategy(temperament)
    name = temperament.name if isinstance(temperament, Temperament) else type(temperament).__name__
    raise NotImplementedError(f"Temperament '{name}' is not supported.")
