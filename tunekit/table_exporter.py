"""TableExporter: writes a note table to disk in a chosen format."""

from __future__ import annotations

import logging
from typing import Final

from tunekit.table_renderers import JsonTableRenderer, TableRenderer, TextTableRenderer
from tunekit.tuning_models import Configuration, Note

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS: Final[set[str]] = {"text", "json"}


class TableExporter:
    """
    Render a note table via a pluggable renderer and write it out.

    Supported formats:
    - ``text``: aligned plain-text table grouped by octave.
    - ``json``: configuration plus a ``notes`` array.
    """

    def __init__(self, output_format: str = "text") -> None:
        normalized = output_format.strip().lower()
        if normalized not in SUPPORTED_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_FORMATS))
            raise ValueError(f"Unsupported output format '{output_format}'. Use one of: {supported}.")
        self.output_format = normalized
        self.renderer = self._build_renderer(normalized)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _build_renderer(self, output_format: str) -> TableRenderer:
        if output_format == "json":
            return JsonTableRenderer()
        return TextTableRenderer()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, notes: list[Note], configuration: Configuration | None = None) -> str:
        """Return the rendered table as a string."""
        return self.renderer.render(notes=notes, configuration=configuration)

    def export(
        self,
        notes: list[Note],
        configuration: Configuration | None,
        output_path: str,
    ) -> None:
        """
        Render *notes* and write them to *output_path* as UTF-8.

        Raises:
            OSError: If the output file cannot be opened for writing.
        """
        content = self.render(notes, configuration)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info("Wrote %d notes to %s (%s)", len(notes), output_path, self.output_format)
