"""Unit tests for octave expansion and the Tuner entry point."""

import pytest

from tunekit import tune
from tunekit.tones import Tone
from tunekit.tuner import Tuner, expand_octaves
from tunekit.tuning_models import (
    Configuration,
    EqualTemperament,
    Note,
    OctaveRange,
    PureKind,
    PureTemperament,
    Temperament,
)


def _configuration(
    temperament: Temperament,
    transposition_tone: Tone = Tone.C,
    octaves: tuple[int, int] = (1, 2),
) -> Configuration:
    return Configuration(
        pitch=442.0,
        temperament=temperament,
        transposition_tone=transposition_tone,
        octave_range=OctaveRange(*octaves),
    )


def _by_tone(notes: list[Note], octave: int) -> dict[Tone, float]:
    return {note.tone: note.frequency for note in notes if note.octave == octave}


def test_expand_octaves_first_octave_reproduces_base() -> None:
    base = {Tone.A: 55.25, Tone.C: 32.85}
    notes = expand_octaves(base, [1])
    assert _by_tone(notes, 1) == base


def test_expand_octaves_doubles_exactly() -> None:
    base = {Tone.A: 55.25, Tone.Db: 34.80532}
    notes = expand_octaves(base, range(0, 5))
    for octave in range(0, 4):
        lower = _by_tone(notes, octave)
        upper = _by_tone(notes, octave + 1)
        for tone in base:
            assert upper[tone] == 2 * lower[tone]


def test_expand_octaves_scales_below_octave_one() -> None:
    notes = expand_octaves({Tone.A: 55.0}, [0, -1])
    assert _by_tone(notes, 0)[Tone.A] == 27.5
    assert _by_tone(notes, -1)[Tone.A] == 13.75


def test_expand_octaves_empty_range() -> None:
    assert expand_octaves({Tone.A: 55.0}, []) == []


def test_tune_equal_one_octave_reference_values() -> None:
    notes = tune(_configuration(EqualTemperament()))
    assert len(notes) == 12

    expected = [
        Note(Tone.C, 1, 32.851845),
        Note(Tone.Db, 1, 34.80532),
        Note(Tone.D, 1, 36.87495),
        Note(Tone.Eb, 1, 39.06765),
        Note(Tone.E, 1, 41.390736),
        Note(Tone.F, 1, 43.851955),
        Note(Tone.Gb, 1, 46.459526),
        Note(Tone.G, 1, 49.222153),
        Note(Tone.Ab, 1, 52.149055),
        Note(Tone.A, 1, 55.25),
        Note(Tone.Bb, 1, 58.53534),
        Note(Tone.B, 1, 62.016026),
    ]
    for note in notes:
        assert note in expected
    by_tone = _by_tone(notes, 1)
    for note in expected:
        assert by_tone[note.tone] == pytest.approx(note.frequency, abs=1e-3)


@pytest.mark.parametrize(
    "temperament",
    [EqualTemperament(), PureTemperament(PureKind.MAJOR, Tone.E), PureTemperament(PureKind.MINOR, Tone.Ab)],
)
@pytest.mark.parametrize("octaves", [(0, 0), (1, 2), (0, 8), (3, 5)])
def test_tune_cardinality_and_uniqueness(temperament: Temperament, octaves: tuple[int, int]) -> None:
    notes = tune(_configuration(temperament, octaves=octaves))
    assert len(notes) == 12 * (octaves[1] - octaves[0])
    assert len({(note.tone, note.octave) for note in notes}) == len(notes)


def test_tune_octave_doubling_over_range() -> None:
    notes = tune(_configuration(PureTemperament(PureKind.MAJOR, Tone.C), octaves=(1, 7)))
    for octave in range(1, 6):
        lower = _by_tone(notes, octave)
        upper = _by_tone(notes, octave + 1)
        for tone in Tone:
            assert upper[tone] == 2 * lower[tone]


def test_tune_transposition_above_boundary_halves() -> None:
    at_c = _by_tone(tune(_configuration(EqualTemperament(), Tone.C)), 1)
    at_g = _by_tone(tune(_configuration(EqualTemperament(), Tone.G)), 1)
    assert at_c[Tone.C] == pytest.approx(32.8518, abs=1e-3)
    assert at_g[Tone.C] == pytest.approx(24.6111, abs=1e-3)
    assert at_g[Tone.C] == pytest.approx(at_c[Tone.G] / 2)


def test_tune_pure_major_root_c() -> None:
    notes = tune(_configuration(PureTemperament(PureKind.MAJOR, Tone.C)))
    assert len(notes) == 12
    by_tone = _by_tone(notes, 1)
    assert by_tone[Tone.C] == pytest.approx(32.8518, abs=1e-3)
    assert by_tone[Tone.Db] == pytest.approx(34.2212, abs=1e-3)
    assert by_tone[Tone.D] == pytest.approx(36.9581, abs=1e-3)
    assert by_tone[Tone.B] == pytest.approx(61.5983, abs=1e-3)


def test_tune_pure_minor_root_c() -> None:
    by_tone = _by_tone(tune(_configuration(PureTemperament(PureKind.MINOR, Tone.C))), 1)
    assert by_tone[Tone.C] == pytest.approx(32.851845, abs=1e-3)
    assert by_tone[Tone.Db] == pytest.approx(35.479225, abs=1e-3)
    assert by_tone[Tone.B] == pytest.approx(61.598324, abs=1e-3)


def test_tune_pure_depends_on_root_tone() -> None:
    at_c = _by_tone(tune(_configuration(PureTemperament(PureKind.MAJOR, Tone.C))), 1)
    at_a = _by_tone(tune(_configuration(PureTemperament(PureKind.MAJOR, Tone.A))), 1)
    assert at_c[Tone.C] == pytest.approx(32.8518, abs=1e-3)
    assert at_a[Tone.C] == pytest.approx(33.1492, abs=1e-3)


def test_tune_is_deterministic() -> None:
    configuration = _configuration(PureTemperament(PureKind.MINOR, Tone.F), Tone.Bb, (0, 6))
    first = [(n.tone, n.octave, n.frequency) for n in tune(configuration)]
    second = [(n.tone, n.octave, n.frequency) for n in tune(configuration)]
    assert first == second


def test_tune_unsupported_temperament_raises() -> None:
    class UserDefinedTemperament(Temperament):
        pass

    with pytest.raises(NotImplementedError):
        Tuner().tune(_configuration(UserDefinedTemperament()))


def test_tuner_base_table_has_twelve_entries() -> None:
    table = Tuner().base_table(_configuration(EqualTemperament(), Tone.E))
    assert sorted(table) == sorted(Tone)
