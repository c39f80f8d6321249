"""Runtime configuration for document extraction."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping


DEFAULT_MAX_CHARS_PER_PAGE = 5000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_CONCURRENCY = 4

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _parse_positive_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class ExtractionSettings:
    """Validated extraction settings."""

    max_chars_per_page: int = DEFAULT_MAX_CHARS_PER_PAGE
    log_level: str = DEFAULT_LOG_LEVEL
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExtractionSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        max_chars_raw = source.get("DOCPAGES_MAX_CHARS_PER_PAGE", str(DEFAULT_MAX_CHARS_PER_PAGE)).strip()
        log_level_raw = source.get("DOCPAGES_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        concurrency_raw = source.get("DOCPAGES_MAX_CONCURRENCY", str(DEFAULT_MAX_CONCURRENCY)).strip()

        if not max_chars_raw:
            raise ValueError("DOCPAGES_MAX_CHARS_PER_PAGE cannot be empty")
        if not log_level_raw:
            raise ValueError("DOCPAGES_LOG_LEVEL cannot be empty")
        if not concurrency_raw:
            raise ValueError("DOCPAGES_MAX_CONCURRENCY cannot be empty")
        if log_level_raw not in _LOG_LEVELS:
            raise ValueError(f"DOCPAGES_LOG_LEVEL must be one of: {', '.join(sorted(_LOG_LEVELS))}")

        return cls(
            max_chars_per_page=_parse_positive_int(name="DOCPAGES_MAX_CHARS_PER_PAGE", raw_value=max_chars_raw),
            log_level=log_level_raw,
            max_concurrency=_parse_positive_int(name="DOCPAGES_MAX_CONCURRENCY", raw_value=concurrency_raw),
        )
