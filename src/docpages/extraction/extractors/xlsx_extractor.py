"""XLSX extractor emitting one page per worksheet."""

from __future__ import annotations

import asyncio
from io import BytesIO
import logging
from typing import BinaryIO

from openpyxl import load_workbook
from openpyxl.worksheet._read_only import ReadOnlyWorksheet

from docpages.extraction.extractors.base import read_stream
from docpages.extraction.models import DocumentPage
from docpages.extraction.normalization import file_stem

logger = logging.getLogger(__name__)

_CELL_SEPARATOR = " | "


def _sheet_content(sheet: ReadOnlyWorksheet) -> str:
    lines = [f"Sheet: {sheet.title}\n"]
    for row in sheet.iter_rows(values_only=True):
        values = [str(value) for value in row if value is not None and str(value).strip()]
        if values:
            lines.append(f"{_CELL_SEPARATOR.join(values)}\n")
    return "".join(lines)


class XLSXExtractor:
    """Render each worksheet as pipe-separated rows."""

    extensions = frozenset({".xlsx"})

    async def extract(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        logger.info("Extracting text from XLSX file: %s", filename)

        pages = await asyncio.to_thread(self._extract_pages, stream, filename)

        logger.info("Extracted %d pages (sheets) from XLSX file: %s", len(pages), filename)
        return pages

    def _extract_pages(self, stream: BinaryIO, filename: str) -> list[DocumentPage]:
        # Cached formula results are read instead of the formulas themselves.
        try:
            workbook = load_workbook(BytesIO(read_stream(stream, rewind=True)), read_only=True, data_only=True)
        except (KeyError, OSError):
            logger.warning("Could not read workbook from XLSX file: %s", filename)
            return []

        title = file_stem(filename)
        pages: list[DocumentPage] = []

        try:
            for page_number, sheet in enumerate(workbook.worksheets, start=1):
                pages.append(
                    DocumentPage(
                        page_number=page_number,
                        content=_sheet_content(sheet),
                        title=title if page_number == 1 else f"{title} - {sheet.title}",
                    )
                )
        finally:
            workbook.close()

        return pages
