"""
Text normalization for accent- and case-insensitive comparisons.
"""

import unicodedata
from typing import Optional


def normalize(text: Optional[str]) -> str:
    """
    Canonicalize free text for comparison.

    Decomposes to NFD, strips combining marks, case-folds and trims.
    Total over any string; ``None`` and ``""`` both yield ``""``.

    Example:
        >>> normalize("  Liderança ")
        'lideranca'
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold().strip()


def contains(container: Optional[str], contained: Optional[str]) -> bool:
    """True when normalized ``container`` includes normalized ``contained``."""
    haystack = normalize(container)
    needle = normalize(contained)
    if not haystack or not needle:
        return False
    return needle in haystack


def shares_substring(first: Optional[str], second: Optional[str]) -> bool:
    """True when either normalized text includes the other."""
    return contains(first, second) or contains(second, first)
