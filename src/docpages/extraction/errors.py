"""Domain errors raised by extraction routing and extractors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ExtractionError(Exception):
    """Extraction failed for a specific upload."""

    filename: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (filename={self.filename})"


class UnsupportedFormatError(ExtractionError):
    """No extractor is registered for the file extension."""
