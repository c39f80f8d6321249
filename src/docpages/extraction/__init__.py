"""Document extraction package interfaces."""

from .errors import ExtractionError, UnsupportedFormatError
from .models import DocumentPage
from .pagination import DEFAULT_MAX_CHARS_PER_PAGE, split_into_pages
from .registry import ExtractorRegistry
from .service import DocumentExtractionService, ExtractionResult

__all__ = [
    "DEFAULT_MAX_CHARS_PER_PAGE",
    "DocumentExtractionService",
    "DocumentPage",
    "ExtractionError",
    "ExtractionResult",
    "ExtractorRegistry",
    "UnsupportedFormatError",
    "split_into_pages",
]
