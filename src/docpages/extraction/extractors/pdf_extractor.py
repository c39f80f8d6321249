"""PDF extractor emitting one page per native PDF page."""

from __future__ import annotations

import asyncio
import logging
from typing import BinaryIO

import pymupdf

from docpages.extraction.errors import ExtractionError
from docpages.extraction.extractors.base import read_stream
from docpages.extraction.models import DocumentPage
from docpages.extraction.normalization import file_stem

logger = logging.getLogger(__name__)

# Index of the word string inside a ``page.get_text("words")`` tuple.
_WORD_TEXT = 4


def _metadata_title(doc: pymupdf.Document) -> str | None:
    title = (doc.metadata or {}).get("title")
    if title and title.strip():
        return title
    return None


class PDFExtractor:
    """Join the words of each PDF page with single spaces."""

    extensions = frozenset({".pdf"})

    async def extract(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        logger.info("Extracting text from PDF file: %s", filename)

        pages = await asyncio.to_thread(self._extract_pages, stream, filename)

        logger.info("Extracted %d pages from PDF: %s", len(pages), filename)
        return pages

    def _extract_pages(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        with pymupdf.open(stream=read_stream(stream, rewind=True), filetype="pdf") as doc:
            if doc.needs_pass:
                raise ExtractionError(filename, "PDF is password-protected")

            title = _metadata_title(doc) or file_stem(filename)
            pages: list[DocumentPage] = []

            for page_number, page in enumerate(doc, start=1):
                words = page.get_text("words")
                pages.append(
                    DocumentPage(
                        page_number=page_number,
                        content=" ".join(word[_WORD_TEXT] for word in words),
                        title=title if page_number == 1 else None,
                    )
                )

        return pages
