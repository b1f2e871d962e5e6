"""Tone: the twelve chromatic pitch classes and their cyclic ordering."""

from enum import Enum
from functools import total_ordering
from typing import Final

# Chromatic pitch classes per octave
TONES_PER_OCTAVE = 12


@total_ordering
class Tone(Enum):
    """
    A chromatic pitch class.

    Member values are the fixed cyclic ``order`` starting at A (A=0, B♭=1,
    ..., A♭=11). Comparison between tones uses this order.
    """

    A = 0
    Bb = 1
    B = 2
    C = 3
    Db = 4
    D = 5
    Eb = 6
    E = 7
    F = 8
    Gb = 9
    G = 10
    Ab = 11

    @property
    def order(self) -> int:
        """Position of the tone in the A-first cyclic order (0-11)."""
        return int(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Tone):
            return NotImplemented
        return self.order < other.order

    @property
    def label(self) -> str:
        """Human-readable tone label, e.g. 'B♭'."""
        return _LABELS[self]

    @classmethod
    def parse(cls, text: str) -> "Tone":
        """
        Resolve a tone from its label, an ASCII flat spelling or a member name.

        Accepted forms: ``"B♭"``, ``"Bb"``, ``"bb"``, ``"C"``, ``"c"``.

        Raises:
            ValueError: If *text* does not name one of the twelve tones.
        """
        cleaned = text.strip()
        if cleaned:
            cleaned = cleaned[0].upper() + cleaned[1:].replace("♭", "b").lower()
        try:
            return cls[cleaned]
        except KeyError:
            labels = ", ".join(tone.label for tone in CANONICAL_ORDER)
            raise ValueError(f"Unknown tone '{text}'. Use one of: {labels}.") from None


_LABELS: Final[dict[Tone, str]] = {
    Tone.A: "A",
    Tone.Bb: "B♭",
    Tone.B: "B",
    Tone.C: "C",
    Tone.Db: "D♭",
    Tone.D: "D",
    Tone.Eb: "E♭",
    Tone.E: "E",
    Tone.F: "F",
    Tone.Gb: "G♭",
    Tone.G: "G",
    Tone.Ab: "A♭",
}

#: Chromatic order starting at C; base tables are laid out in this order.
CANONICAL_ORDER: Final[tuple[Tone, ...]] = (
    Tone.C, Tone.Db, Tone.D, Tone.Eb, Tone.E, Tone.F,
    Tone.Gb, Tone.G, Tone.Ab, Tone.A, Tone.Bb, Tone.B,
)


def canonical_index(tone: Tone) -> int:
    """Return the position of *tone* in the C-first canonical order (C=0, ..., B=11)."""
    return CANONICAL_ORDER.index(tone)


def arrange_tones(root_tone: Tone) -> list[Tone]:
    """
    Return all twelve tones in cyclic order, starting at *root_tone*.

    Example: ``arrange_tones(Tone.A)`` → A, B♭, B, C, ..., A♭.

    Args:
        root_tone: The tone placed at position 0.

    Returns:
        A list of 12 distinct tones.
    """
    start = canonical_index(root_tone)
    return [CANONICAL_ORDER[(start + i) % TONES_PER_OCTAVE] for i in range(TONES_PER_OCTAVE)]
