"""Plain-text extractor with charset fallback."""

from __future__ import annotations

import asyncio
import logging
from typing import BinaryIO

from docpages.extraction.extractors.base import read_stream
from docpages.extraction.models import DocumentPage
from docpages.extraction.normalization import decode_text, file_stem
from docpages.extraction.pagination import DEFAULT_MAX_CHARS_PER_PAGE, split_into_pages

logger = logging.getLogger(__name__)


class TextExtractor:
    """Split plain text files into pages titled after the file."""

    extensions = frozenset({".txt"})

    def __init__(self, max_chars_per_page: int = DEFAULT_MAX_CHARS_PER_PAGE) -> None:
        self._max_chars_per_page = max_chars_per_page

    async def extract(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        logger.info("Extracting text from TXT file: %s", filename)

        return await asyncio.to_thread(self._extract_pages, stream, filename)

    def _extract_pages(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        content = decode_text(read_stream(stream))
        return split_into_pages(content, file_stem(filename), self._max_chars_per_page)
