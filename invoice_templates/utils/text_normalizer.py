"""Text canonicalization for pattern matching against OCR output."""

import re

_PUNCTUATION = re.compile(r"[^\w\s]+")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Canonicalize OCR text for case- and punctuation-insensitive matching.

    Lower-cases the text, replaces punctuation runs with a single space and
    collapses whitespace, e.g. ``"ORDER #123,  Total:"`` -> ``"order 123 total"``.
    """
    if not text:
        return ""

    text = text.lower()
    text = _PUNCTUATION.sub(" ", text)
    text = _WHITESPACE.sub(" ", text)

    return text.strip()
