"""CLI command for extracting uploads into pages and reporting them as JSON."""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import replace
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from docpages.config import ExtractionSettings
from docpages.extraction.errors import ExtractionError
from docpages.extraction.extractors import build_default_extractors
from docpages.extraction.registry import ExtractorRegistry
from docpages.extraction.service import DocumentExtractionService, ExtractionResult


load_dotenv()

LOGGER = logging.getLogger(__name__)


def _collect_inputs(target: Path, registry: ExtractorRegistry) -> list[Path]:
    if target.is_file():
        return [target]
    if target.is_dir():
        return sorted(path for path in target.rglob("*") if path.is_file() and registry.is_supported(path.name))
    return []


def _result_payload(source: Path, result: ExtractionResult, *, include_content: bool) -> dict[str, object]:
    pages: list[dict[str, object]] = []
    for page in result.pages:
        entry: dict[str, object] = {
            "page_number": page.page_number,
            "title": page.title,
            "char_count": len(page.content),
        }
        if include_content:
            entry["content"] = page.content
        pages.append(entry)

    return {
        "source_path": str(source),
        "category": result.category,
        "page_count": len(result.pages),
        "pages": pages,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extract documents into pages and emit a JSON report")
    parser.add_argument("--path", required=True, help="Source file or directory")
    parser.add_argument(
        "--max-chars",
        type=int,
        default=None,
        help="Soft page size for formats without native pages (overrides DOCPAGES_MAX_CHARS_PER_PAGE)",
    )
    parser.add_argument("--include-content", action="store_true", help="Include page text in the report")
    args = parser.parse_args(argv)

    settings = ExtractionSettings.from_env()
    if args.max_chars is not None:
        if args.max_chars < 1:
            parser.error("--max-chars must be >= 1")
        settings = replace(settings, max_chars_per_page=args.max_chars)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.logging_level,
    )

    source_path = Path(args.path)
    registry = ExtractorRegistry(build_default_extractors(settings.max_chars_per_page))
    service = DocumentExtractionService(registry, settings=settings)
    files = _collect_inputs(source_path, registry)
    if not files:
        LOGGER.warning("No supported files found under %s", source_path)

    outcomes = asyncio.run(service.extract_many(files))

    results: list[dict[str, object]] = []
    errors: list[dict[str, str]] = []

    for file_path, outcome in outcomes:
        if isinstance(outcome, ExtractionError):
            errors.append({"source_path": str(file_path), "error": str(outcome)})
            continue
        results.append(_result_payload(file_path, outcome, include_content=args.include_content))

    payload = {
        "path": str(source_path),
        "processed": len(results),
        "results": results,
        "errors": errors,
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0 if not errors else 1


if __name__ == "__main__":
    raise SystemExit(main())
