"""Routing entrypoint that turns uploads into ordered pages."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import BinaryIO, Iterable

from docpages.config import ExtractionSettings
from docpages.extraction.errors import ExtractionError, UnsupportedFormatError
from docpages.extraction.extractors import build_default_extractors
from docpages.extraction.models import DocumentPage
from docpages.extraction.normalization import file_extension
from docpages.extraction.registry import ExtractorRegistry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExtractionResult:
    """Pages extracted from one upload, ready for indexing."""

    filename: str
    category: str
    pages: list[DocumentPage]

    def indexable_pages(self) -> list[DocumentPage]:
        """Pages with non-blank content; blank pages carry nothing to embed."""

        return [page for page in self.pages if page.content.strip()]


class DocumentExtractionService:
    """Resolve the right extractor for an upload and return its pages."""

    def __init__(
        self,
        registry: ExtractorRegistry | None = None,
        *,
        settings: ExtractionSettings | None = None,
    ) -> None:
        self._settings = settings or ExtractionSettings()
        self._registry = registry or ExtractorRegistry(build_default_extractors(self._settings.max_chars_per_page))

    @property
    def registry(self) -> ExtractorRegistry:
        return self._registry

    async def extract(self, stream: BinaryIO, filename: str) -> ExtractionResult:
        """Extract pages from ``stream``; the stream stays open for the caller."""

        extractor = self._registry.get_extractor(filename)
        if extractor is None:
            raise UnsupportedFormatError(filename, "No extractor registered for file extension")

        if stream.seekable():
            stream.seek(0)

        try:
            pages = await extractor.extract(stream, filename)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(filename, f"Extractor failed: {exc}") from exc

        if not pages:
            logger.warning("No content extracted from file: %s", filename)
        else:
            logger.info("Extracted %d pages from file: %s", len(pages), filename)

        return ExtractionResult(
            filename=filename,
            category=file_extension(filename).lstrip("."),
            pages=pages,
        )

    async def extract_path(self, path: str | Path) -> ExtractionResult:
        """Open a file from disk and extract it under its own name."""

        source = Path(path)
        try:
            handle = source.open("rb")
        except OSError as exc:
            raise ExtractionError(source.name, f"Failed to read source file: {exc}") from exc

        with handle:
            return await self.extract(handle, source.name)

    async def extract_many(
        self,
        paths: Iterable[str | Path],
    ) -> list[tuple[Path, ExtractionResult | ExtractionError]]:
        """Extract several files concurrently, keeping input order.

        At most ``settings.max_concurrency`` files are open at once. Domain
        failures are returned in place of the result; anything else propagates.
        """

        sources = [Path(path) for path in paths]
        semaphore = asyncio.Semaphore(self._settings.max_concurrency)

        async def _one(source: Path) -> ExtractionResult | ExtractionError:
            async with semaphore:
                try:
                    return await self.extract_path(source)
                except ExtractionError as exc:
                    return exc

        outcomes = await asyncio.gather(*(_one(source) for source in sources))
        return list(zip(sources, outcomes))
