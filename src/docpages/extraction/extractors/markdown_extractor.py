"""Markdown extractor using the leading heading as title."""

from __future__ import annotations

import asyncio
import logging
from typing import BinaryIO

from docpages.extraction.extractors.base import read_stream
from docpages.extraction.models import DocumentPage
from docpages.extraction.normalization import decode_text, file_stem
from docpages.extraction.pagination import DEFAULT_MAX_CHARS_PER_PAGE, split_into_pages

logger = logging.getLogger(__name__)


def _heading_title(content: str) -> str | None:
    lines = content.splitlines()
    if not lines:
        return None
    first_line = lines[0].strip()
    if not first_line.startswith("#"):
        return None
    # A bare marker line carries no title text.
    return first_line.lstrip("#").strip() or None


class MarkdownExtractor:
    """Split Markdown sources into pages, keeping the markup as-is."""

    extensions = frozenset({".md", ".markdown"})

    def __init__(self, max_chars_per_page: int = DEFAULT_MAX_CHARS_PER_PAGE) -> None:
        self._max_chars_per_page = max_chars_per_page

    async def extract(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        logger.info("Extracting text from Markdown file: %s", filename)

        return await asyncio.to_thread(self._extract_pages, stream, filename)

    def _extract_pages(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        content = decode_text(read_stream(stream))
        title = _heading_title(content) or file_stem(filename)
        return split_into_pages(content, title, self._max_chars_per_page)
