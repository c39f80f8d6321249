"""Shared extractor contract for per-format page extraction."""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable

from docpages.extraction.models import DocumentPage


@runtime_checkable
class DocumentExtractor(Protocol):
    """Protocol that every format extractor must implement."""

    extensions: frozenset[str]

    async def extract(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        """Extract an uploaded document into ordered pages."""


def read_stream(stream: BinaryIO, *, rewind: bool = False) -> bytes:
    """Read the remaining payload without closing the caller's stream."""

    if rewind:
        stream.seek(0)
    return stream.read()
