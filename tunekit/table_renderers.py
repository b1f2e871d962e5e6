"""Renderer implementations for frequency table output formats."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from tunekit.tuning_models import Configuration, Note, PureTemperament


def _sorted_notes(notes: list[Note]) -> list[Note]:
    """Group notes by octave, then by tone order within the octave."""
    return sorted(notes, key=lambda note: (note.octave, note.tone.order))


def describe_configuration(configuration: Configuration) -> dict[str, Any]:
    """Flatten a configuration into JSON-friendly primitives."""
    described: dict[str, Any] = {
        "pitch": configuration.pitch,
        "temperament": configuration.temperament.name,
        "transposition_tone": configuration.transposition_tone.label,
        "octave_range": [configuration.octave_range.start, configuration.octave_range.end],
    }
    if isinstance(configuration.temperament, PureTemperament):
        described["root_tone"] = configuration.temperament.root_tone.label
    return described


class TableRenderer(ABC):
    """Abstract frequency table renderer."""

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Default filename extension for this renderer."""

    @abstractmethod
    def render(self, *, notes: list[Note], configuration: Configuration | None = None) -> str:
        """Render notes into a file content string."""


class TextTableRenderer(TableRenderer):
    """Plain-text table, one note per line, with an optional configuration header."""

    @property
    def default_extension(self) -> str:
        return ".txt"

    def render(self, *, notes: list[Note], configuration: Configuration | None = None) -> str:
        lines: list[str] = []
        if configuration is not None:
            described = describe_configuration(configuration)
            header = (
                f"# pitch: {described['pitch']} Hz, temperament: {described['temperament']}, "
                f"transposition: {described['transposition_tone']}"
            )
            if "root_tone" in described:
                header += f", root: {described['root_tone']}"
            lines.append(header)

        previous_octave: int | None = None
        for note in _sorted_notes(notes):
            if previous_octave is not None and note.octave != previous_octave:
                lines.append("")
            previous_octave = note.octave
            lines.append(f"{note.name:<5} {note.frequency:12.4f} Hz")

        return "\n".join(lines) + "\n"


class JsonTableRenderer(TableRenderer):
    """JSON document holding the configuration and the note list."""

    @property
    def default_extension(self) -> str:
        return ".json"

    def render(self, *, notes: list[Note], configuration: Configuration | None = None) -> str:
        payload: dict[str, Any] = {
            "notes": [
                {"tone": note.tone.label, "octave": note.octave, "frequency": note.frequency}
                for note in _sorted_notes(notes)
            ]
        }
        if configuration is not None:
            payload = {"configuration": describe_configuration(configuration), **payload}
        return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
