"""DOCX extractor accumulating body paragraphs into bounded pages."""

from __future__ import annotations

import asyncio
from io import BytesIO
import logging
from typing import BinaryIO

from docx import Document as DocxDocument
from docx.oxml.ns import qn

from docpages.extraction.extractors.base import read_stream
from docpages.extraction.models import DocumentPage
from docpages.extraction.normalization import file_stem
from docpages.extraction.pagination import DEFAULT_MAX_CHARS_PER_PAGE

logger = logging.getLogger(__name__)

_PARAGRAPH_TAG = qn("w:p")
_TEXT_TAG = qn("w:t")


def _body_paragraphs(payload: bytes) -> list[str] | None:
    """Text of the top-level body paragraphs; table cells are not visited."""

    try:
        document = DocxDocument(BytesIO(payload))
    except KeyError:
        # Raised by python-docx when the package has no main document part.
        return None

    body = document.element.body
    if body is None:
        return None

    return [
        "".join(node.text or "" for node in paragraph.iter(_TEXT_TAG))
        for paragraph in body.iterchildren(_PARAGRAPH_TAG)
    ]


class DOCXExtractor:
    """Accumulate non-blank paragraphs of a Word document into pages."""

    extensions = frozenset({".docx"})

    def __init__(self, max_chars_per_page: int = DEFAULT_MAX_CHARS_PER_PAGE) -> None:
        self._max_chars_per_page = max_chars_per_page

    async def extract(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        logger.info("Extracting text from DOCX file: %s", filename)

        pages = await asyncio.to_thread(self._extract_pages, stream, filename)

        logger.info("Extracted %d pages from DOCX file: %s", len(pages), filename)
        return pages

    def _extract_pages(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        paragraphs = _body_paragraphs(read_stream(stream, rewind=True))
        if paragraphs is None:
            logger.warning("Could not read body from DOCX file: %s", filename)
            return []

        title = file_stem(filename)
        pages: list[DocumentPage] = []
        buffer: list[str] = []
        buffer_length = 0

        def flush() -> None:
            page_number = len(pages) + 1
            pages.append(
                DocumentPage(
                    page_number=page_number,
                    content="".join(buffer),
                    title=title if page_number == 1 else None,
                )
            )

        for text in paragraphs:
            if not text.strip():
                continue

            if buffer and buffer_length + len(text) > self._max_chars_per_page:
                flush()
                buffer = []
                buffer_length = 0

            line = f"{text}\n"
            buffer.append(line)
            buffer_length += len(line)

        if buffer:
            flush()

        return pages
