"""Page splitter for formats without native page boundaries."""

from __future__ import annotations

import re

from docpages.config import DEFAULT_MAX_CHARS_PER_PAGE
from docpages.extraction.models import DocumentPage

_PARAGRAPH_SPLIT_RE = re.compile(r"\n\n|\r\n\r\n")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]")


class _PageAccumulator:
    """Greedy line buffer that flushes into numbered pages."""

    def __init__(self, title: str | None, max_chars: int) -> None:
        self._title = title
        self._max_chars = max_chars
        self._lines: list[str] = []
        self._length = 0
        self.pages: list[DocumentPage] = []

    def make_room(self, length: int) -> None:
        """Flush the buffer when ``length`` more chars would overflow it."""

        if self._lines and self._length + length > self._max_chars:
            self.flush()

    def append(self, text: str) -> None:
        self._lines.append(text)
        self._length += len(text)

    def flush(self) -> None:
        if not self._lines:
            return
        content = "".join(f"{line}\n" for line in self._lines)
        self.pages.append(DocumentPage(page_number=len(self.pages) + 1, content=content, title=self._title))
        self._lines = []
        self._length = 0


def _split_sentences(paragraph: str) -> list[str]:
    if not _SENTENCE_SPLIT_RE.search(paragraph):
        return [paragraph]

    sentences: list[str] = []
    for fragment in _SENTENCE_SPLIT_RE.split(paragraph):
        stripped = fragment.strip()
        if stripped:
            sentences.append(f"{stripped}.")
    return sentences


def split_into_pages(
    content: str,
    title: str | None = None,
    max_chars_per_page: int = DEFAULT_MAX_CHARS_PER_PAGE,
) -> list[DocumentPage]:
    """Split text into bounded pages using paragraph, then sentence boundaries.

    The budget is a soft cap: a single paragraph or sentence longer than
    ``max_chars_per_page`` becomes an oversized page instead of being truncated.
    Every returned page carries ``title``.
    """

    if max_chars_per_page <= 0:
        raise ValueError("max_chars_per_page must be positive")

    if not content or not content.strip():
        return [DocumentPage(page_number=1, content="", title=title)]

    if len(content) <= max_chars_per_page:
        return [DocumentPage(page_number=1, content=content, title=title)]

    accumulator = _PageAccumulator(title, max_chars_per_page)

    for paragraph in _PARAGRAPH_SPLIT_RE.split(content):
        if not paragraph:
            continue

        accumulator.make_room(len(paragraph))

        if len(paragraph) > max_chars_per_page:
            for sentence in _split_sentences(paragraph):
                accumulator.make_room(len(sentence))
                accumulator.append(sentence)
        else:
            accumulator.append(paragraph)

    accumulator.flush()
    return accumulator.pages
