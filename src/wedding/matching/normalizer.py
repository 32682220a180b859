"""Text normalization for guest name matching."""

import re
import unicodedata

# Unicode "Combining Diacritical Marks" block
_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")


def normalize(text: str) -> str:
    """
    Convert text to its canonical comparison form.

    Lower-cases, decomposes accented characters and drops the combining
    marks ("João" -> "joao"), then trims surrounding whitespace. Internal
    whitespace is left as is; use tokenize() to split into words.

    Args:
        text: Raw text

    Returns:
        Normalized text
    """
    result = unicodedata.normalize("NFD", text.lower())
    result = _COMBINING_MARKS.sub("", result)
    return result.strip()


def tokenize(normalized: str) -> list[str]:
    """Split normalized text on runs of whitespace, dropping empty tokens."""
    return normalized.split()
