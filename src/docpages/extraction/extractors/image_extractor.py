"""Image extractor placeholder until OCR is wired in."""

from __future__ import annotations

import logging
from typing import BinaryIO

from docpages.extraction.models import DocumentPage
from docpages.extraction.normalization import file_stem

logger = logging.getLogger(__name__)


def placeholder_text(filename: str) -> str:
    return f"[Image file: {filename}. OCR text extraction is not yet available.]"


class ImageExtractor:
    """Return a single placeholder page for image uploads."""

    extensions = frozenset({".png"})

    async def extract(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        logger.info("Extracting text from PNG file: %s", filename)
        logger.warning("PNG OCR not implemented. Returning placeholder for: %s", filename)

        return [DocumentPage(page_number=1, content=placeholder_text(filename), title=file_stem(filename))]
