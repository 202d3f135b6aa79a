"""Slug derivation."""

import re
import unicodedata

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Convert free text to a URL-safe ASCII slug.

    "Café com Leite!" -> "cafe-com-leite"

    - Decomposes accented characters (NFKD) and drops the combining marks
    - Lowercases
    - Collapses every run of characters outside [a-z0-9] into one hyphen
    - Strips leading/trailing hyphens

    Never raises; input with no usable characters yields an empty string.
    Applying it twice gives the same result as applying it once.

    Args:
        text: Text to slugify

    Returns:
        Slug string (possibly empty)
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return _NON_ALPHANUMERIC.sub("-", stripped.lower()).strip("-")


def truncate_slug(slug: str, max_length: int) -> str:
    """Cut a slug to max_length without leaving a trailing hyphen."""
    return slug[:max_length].rstrip("-")
