"""Canonical page record shared by all format extractors."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class DocumentPage:
    """One unit of extracted text: a native page, slide, sheet or synthetic chunk."""

    page_number: int
    content: str = ""
    title: str | None = None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
