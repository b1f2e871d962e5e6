"""Value types describing a tuning request and its resulting notes."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from tunekit.tones import Tone


class TuningConfigurationError(ValueError):
    """Raised when a tuning request carries invalid numeric or temperament input."""


class PureKind(Enum):
    """Flavour of pure (just) intonation."""

    MAJOR = "major"
    MINOR = "minor"


class Temperament:
    """Base class for the closed family of temperaments understood by the tuner."""

    @property
    def name(self) -> str:
        """Short identifier used in rendered output, e.g. 'pure-major'."""
        return type(self).__name__


@dataclass(frozen=True)
class EqualTemperament(Temperament):
    """Twelve-tone equal temperament: every semitone is 2^(1/12)."""

    @property
    def name(self) -> str:
        return "equal"


@dataclass(frozen=True)
class PureTemperament(Temperament):
    """
    Pure intonation expressed as fixed cent offsets relative to a root tone.

    Attributes:
        kind:      Major or minor offset table.
        root_tone: Tone receiving the zero cent offset.
    """

    kind: PureKind
    root_tone: Tone

    def __post_init__(self) -> None:
        if not isinstance(self.kind, PureKind):
            raise TuningConfigurationError(f"Pure temperament kind must be a PureKind, got {self.kind!r}.")
        if not isinstance(self.root_tone, Tone):
            raise TuningConfigurationError(f"Root tone must be a Tone, got {self.root_tone!r}.")

    @property
    def name(self) -> str:
        return f"pure-{self.kind.value}"


@dataclass(frozen=True)
class OctaveRange:
    """
    Half-open range of octave indices ``[start, end)``.

    Both bounds must be non-negative and ``start <= end``.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        for bound in (self.start, self.end):
            if isinstance(bound, bool) or not isinstance(bound, numbers.Integral):
                raise TuningConfigurationError(f"Octave bounds must be integers, got {bound!r}.")
        if self.start < 0 or self.end < 0:
            raise TuningConfigurationError(
                f"Octave bounds must be non-negative, got [{self.start}, {self.end})."
            )
        if self.start > self.end:
            raise TuningConfigurationError(
                f"Octave range start ({self.start}) must not exceed end ({self.end})."
            )

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end))

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Configuration:
    """
    Everything needed to compute a frequency table.

    Attributes:
        pitch:              Reference pitch in Hz (finite, > 0).
        temperament:        EqualTemperament or PureTemperament.
        transposition_tone: Tone anchoring the equal-temperament base table.
        octave_range:       Octaves to generate.
    """

    pitch: float
    temperament: Temperament
    transposition_tone: Tone
    octave_range: OctaveRange

    def __post_init__(self) -> None:
        if isinstance(self.pitch, bool) or not isinstance(self.pitch, numbers.Real):
            raise TuningConfigurationError(f"Pitch must be a number, got {self.pitch!r}.")
        if not math.isfinite(self.pitch) or self.pitch <= 0:
            raise TuningConfigurationError(f"Pitch must be a positive finite frequency, got {self.pitch}.")
        if not isinstance(self.temperament, Temperament):
            raise TuningConfigurationError(f"Temperament must be a Temperament, got {self.temperament!r}.")
        if not isinstance(self.transposition_tone, Tone):
            raise TuningConfigurationError(
                f"Transposition tone must be a Tone, got {self.transposition_tone!r}."
            )
        if not isinstance(self.octave_range, OctaveRange):
            raise TuningConfigurationError(f"Octave range must be an OctaveRange, got {self.octave_range!r}.")


@dataclass(frozen=True, eq=False)
class Note:
    """
    One generated frequency.

    Two notes are equal when tone, octave and the integer part of the
    frequency match. ``a < b`` holds when ``a.octave <= b.octave`` and
    ``a.tone`` precedes ``b.tone``; this is not a total order across octaves.
    """

    tone: Tone
    octave: int
    frequency: float

    @property
    def name(self) -> str:
        """Tone label with octave suffix, e.g. 'B♭3'."""
        return f"{self.tone.label}{self.octave}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return (
            self.tone == other.tone
            and self.octave == other.octave
            and int(self.frequency) == int(other.frequency)
        )

    def __hash__(self) -> int:
        return hash((self.tone, self.octave, int(self.frequency)))

    def __lt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.octave <= other.octave and self.tone.order < other.tone.order
