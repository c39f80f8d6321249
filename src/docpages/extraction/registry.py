"""Extension-based routing from uploaded filenames to extractors."""

from __future__ import annotations

import logging
from typing import Iterable

from docpages.extraction.extractors.base import DocumentExtractor
from docpages.extraction.normalization import file_extension

logger = logging.getLogger(__name__)


def _normalize_extension(extension: str) -> str:
    cleaned = extension.strip().lower()
    if cleaned and not cleaned.startswith("."):
        cleaned = f".{cleaned}"
    return cleaned


class ExtractorRegistry:
    """Immutable extension-to-extractor map built once from an explicit list.

    When two extractors claim the same extension the first one registered keeps
    it and the collision is logged.
    """

    def __init__(self, extractors: Iterable[DocumentExtractor]) -> None:
        mapping: dict[str, DocumentExtractor] = {}

        for extractor in extractors:
            for extension in extractor.extensions:
                key = _normalize_extension(extension)
                if not key:
                    continue
                if key in mapping:
                    logger.warning("Duplicate extractor registration for extension: %s", key)
                    continue
                mapping[key] = extractor

        self._extractors = mapping
        logger.info("ExtractorRegistry initialized with %d extensions", len(mapping))

    @property
    def extensions(self) -> list[str]:
        """Registered extensions, sorted."""

        return sorted(self._extractors)

    def get_extractor(self, filename: str) -> DocumentExtractor | None:
        """Return the extractor for ``filename`` or None when unsupported."""

        extension = file_extension(filename)
        if not extension:
            logger.warning("No extension found for filename: %s", filename)
            return None

        extractor = self._extractors.get(extension)
        if extractor is None:
            logger.warning("No extractor found for extension: %s, filename: %s", extension, filename)
        return extractor

    def is_supported(self, filename: str) -> bool:
        extension = file_extension(filename)
        return bool(extension) and extension in self._extractors
