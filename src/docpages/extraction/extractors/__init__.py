"""Format extractor implementations and contracts."""

import logging

from docpages.extraction.pagination import DEFAULT_MAX_CHARS_PER_PAGE

from .base import DocumentExtractor
from .image_extractor import ImageExtractor
from .json_extractor import JSONExtractor
from .markdown_extractor import MarkdownExtractor
from .text_extractor import TextExtractor

logger = logging.getLogger(__name__)

try:
    from .html_extractor import HTMLExtractor
except ImportError:
    HTMLExtractor = None
    logger.warning("HTML support unavailable: install 'beautifulsoup4' and 'lxml'")

try:
    from .pdf_extractor import PDFExtractor
except ImportError:
    PDFExtractor = None
    logger.warning("PDF support unavailable: install 'pymupdf'")

try:
    from .docx_extractor import DOCXExtractor
    from .pptx_extractor import PPTXExtractor
    from .xlsx_extractor import XLSXExtractor
except ImportError:
    DOCXExtractor = PPTXExtractor = XLSXExtractor = None
    logger.warning("Office document support unavailable: install 'python-docx', 'python-pptx' and 'openpyxl'")


def build_default_extractors(max_chars_per_page: int = DEFAULT_MAX_CHARS_PER_PAGE) -> list[DocumentExtractor]:
    """Return the default extractors in registration order."""
    extractors: list[DocumentExtractor] = [
        TextExtractor(max_chars_per_page),
        MarkdownExtractor(max_chars_per_page),
    ]
    if HTMLExtractor is not None:
        extractors.append(HTMLExtractor(max_chars_per_page))
    extractors.append(JSONExtractor(max_chars_per_page))
    if PDFExtractor is not None:
        extractors.append(PDFExtractor())
    if DOCXExtractor is not None:
        extractors.append(DOCXExtractor(max_chars_per_page))
    if XLSXExtractor is not None:
        extractors.append(XLSXExtractor())
    if PPTXExtractor is not None:
        extractors.append(PPTXExtractor())
    extractors.append(ImageExtractor())
    return extractors


__all__ = [
    "DocumentExtractor",
    "DOCXExtractor",
    "HTMLExtractor",
    "ImageExtractor",
    "JSONExtractor",
    "MarkdownExtractor",
    "PDFExtractor",
    "PPTXExtractor",
    "TextExtractor",
    "XLSXExtractor",
    "build_default_extractors",
]
