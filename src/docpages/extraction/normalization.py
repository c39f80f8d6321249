"""Text and filename helpers shared by extractors and routing."""

from __future__ import annotations

import re

from charset_normalizer import from_bytes

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim boundaries."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def _split_name(filename: str) -> tuple[str, str]:
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if 0 < dot < len(name) - 1:
        return name[:dot], name[dot:]
    if dot > 0:
        return name[:dot], ""
    return name, ""


def file_extension(filename: str) -> str:
    """Return the lower-cased extension including the leading dot, or ``""``."""

    return _split_name(filename)[1].lower()


def file_stem(filename: str) -> str:
    """Return the file name without directory and extension."""

    return _split_name(filename)[0]


def decode_text(raw: bytes) -> str:
    """Decode uploaded text, preferring UTF-8 and falling back to detection."""

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    best = from_bytes(raw).best()
    if best is not None and best.encoding:
        return str(best)
    return raw.decode("utf-8", errors="replace")
