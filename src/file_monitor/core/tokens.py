"""Placeholder tokens for path expressions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    name: str
    marker: str  # literal text written in path expressions

    def occurs_in(self, text: str) -> bool:
        """Check if the marker appears anywhere in text (case-sensitive)."""
        return self.marker in text

    def is_sole_content(self, text: str) -> bool:
        """Check if the trimmed text is exactly this marker (case-insensitive)."""
        return text.strip().casefold() == self.marker.casefold()


AUTO = Token("auto", "[Auto]")
CURRENT = Token("current", "[RutaActual]")
SEPARATOR = Token("separator", "[DS]")
FILE_NAME = Token("file_name", "[FileName]")
