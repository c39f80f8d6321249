"""JSON extractor that pretty-prints before paging."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import BinaryIO

from docpages.extraction.extractors.base import read_stream
from docpages.extraction.models import DocumentPage
from docpages.extraction.normalization import decode_text, file_stem
from docpages.extraction.pagination import DEFAULT_MAX_CHARS_PER_PAGE, split_into_pages

logger = logging.getLogger(__name__)


class JSONExtractor:
    """Pretty-print JSON payloads; malformed payloads are paged verbatim."""

    extensions = frozenset({".json"})

    def __init__(self, max_chars_per_page: int = DEFAULT_MAX_CHARS_PER_PAGE) -> None:
        self._max_chars_per_page = max_chars_per_page

    async def extract(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        logger.info("Extracting text from JSON file: %s", filename)

        return await asyncio.to_thread(self._extract_pages, stream, filename)

    def _extract_pages(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        raw_text = decode_text(read_stream(stream))
        title = file_stem(filename)

        # Nesting deeper than the interpreter's recursion limit fails like a syntax error.
        try:
            formatted = json.dumps(json.loads(raw_text), ensure_ascii=False, indent=2)
        except (json.JSONDecodeError, RecursionError) as exc:
            logger.warning("Failed to parse JSON file: %s (%s). Using raw content.", filename, exc)
            return split_into_pages(raw_text, title, self._max_chars_per_page)

        return split_into_pages(formatted, title, self._max_chars_per_page)
