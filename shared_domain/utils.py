"""Utility functions for domain code."""

import re
import unicodedata

# Any run of characters that cannot appear in a slug
_NON_ALPHANUMERIC_PATTERN = re.compile(r"[^a-z0-9]+")


def to_slug(value: str | None) -> str:
    """
    Convert a string to a URL-friendly slug.

    Accents are removed, the text is lower-cased and every run of
    non-alphanumeric characters becomes a single hyphen.

    Examples:
        to_slug("Café au Lait")  # "cafe-au-lait"
        to_slug("Hello World!")  # "hello-world"
        to_slug("  Trimmed  ")   # "trimmed"

    Args:
        value: Text to convert

    Returns:
        The slug, or an empty string for None/blank input
    """
    if value is None or not value.strip():
        return ""

    decomposed = unicodedata.normalize("NFKD", value)
    without_marks = "".join(c for c in decomposed if not unicodedata.combining(c))
    slug = _NON_ALPHANUMERIC_PATTERN.sub("-", without_marks.lower())
    return slug.strip("-")
