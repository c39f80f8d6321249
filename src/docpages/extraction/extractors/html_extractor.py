"""HTML extractor stripping markup, scripts and styles."""

from __future__ import annotations

import asyncio
import logging
from typing import BinaryIO

from bs4 import BeautifulSoup

from docpages.extraction.extractors.base import read_stream
from docpages.extraction.models import DocumentPage
from docpages.extraction.normalization import decode_text, file_stem, normalize_whitespace
from docpages.extraction.pagination import DEFAULT_MAX_CHARS_PER_PAGE, split_into_pages

logger = logging.getLogger(__name__)


def _document_title(soup: BeautifulSoup) -> str | None:
    for node in (soup.find("title"), soup.find("h1")):
        if node is None:
            continue
        return normalize_whitespace(node.get_text(" ", strip=True)) or None
    return None


class HTMLExtractor:
    """Reduce HTML pages to whitespace-normalized visible text."""

    extensions = frozenset({".html", ".htm"})

    def __init__(self, max_chars_per_page: int = DEFAULT_MAX_CHARS_PER_PAGE) -> None:
        self._max_chars_per_page = max_chars_per_page

    async def extract(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        logger.info("Extracting text from HTML file: %s", filename)

        return await asyncio.to_thread(self._extract_pages, stream, filename)

    def _extract_pages(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        soup = BeautifulSoup(decode_text(read_stream(stream)), "lxml")
        title = _document_title(soup) or file_stem(filename)

        for node in soup.find_all(["script", "style"]):
            node.decompose()

        text = normalize_whitespace(soup.get_text(" "))
        return split_into_pages(text, title, self._max_chars_per_page)
