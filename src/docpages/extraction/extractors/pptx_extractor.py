"""PPTX extractor emitting one page per slide."""

from __future__ import annotations

import asyncio
from io import BytesIO
import logging
from typing import BinaryIO

from pptx import Presentation
from pptx.oxml.ns import qn
from pptx.slide import Slide

from docpages.extraction.extractors.base import read_stream
from docpages.extraction.models import DocumentPage
from docpages.extraction.normalization import file_stem

logger = logging.getLogger(__name__)

_PARAGRAPH_TAG = qn("a:p")
_TEXT_TAG = qn("a:t")


def _slide_text(slide: Slide) -> str:
    """One line per drawing paragraph with text, in document order."""

    lines: list[str] = []
    for paragraph in slide.element.iter(_PARAGRAPH_TAG):
        text = "".join(node.text or "" for node in paragraph.iter(_TEXT_TAG))
        if text:
            lines.append(f"{text}\n")
    return "".join(lines)


class PPTXExtractor:
    """Read slide text runs in presentation order."""

    extensions = frozenset({".pptx"})

    async def extract(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        logger.info("Extracting text from PPTX file: %s", filename)

        pages = await asyncio.to_thread(self._extract_pages, stream, filename)

        logger.info("Extracted %d pages (slides) from PPTX file: %s", len(pages), filename)
        return pages

    def _extract_pages(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        try:
            presentation = Presentation(BytesIO(read_stream(stream, rewind=True)))
        except KeyError:
            logger.warning("Could not read presentation from PPTX file: %s", filename)
            return []

        title = file_stem(filename)
        pages: list[DocumentPage] = []

        for page_number, slide in enumerate(presentation.slides, start=1):
            pages.append(
                DocumentPage(
                    page_number=page_number,
                    content=_slide_text(slide),
                    title=title if page_number == 1 else f"{title} - Slide {page_number}",
                )
            )

        return pages
