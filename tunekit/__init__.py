"""tunekit: tone frequency tables for equal and pure temperaments."""

from tunekit.tones import Tone, arrange_tones
from tunekit.tuner import Tuner, expand_octaves, tune
from tunekit.tuning_models import (
    Configuration,
    EqualTemperament,
    Note,
    OctaveRange,
    PureKind,
    PureTemperament,
    Temperament,
    TuningConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "EqualTemperament",
    "Note",
    "OctaveRange",
    "PureKind",
    "PureTemperament",
    "Temperament",
    "Tone",
    "Tuner",
    "TuningConfigurationError",
    "arrange_tones",
    "expand_octaves",
    "tune",
]
