"""Input normalization for the complexity engine."""

from typing import Optional


def normalize(text: Optional[str]) -> str:
    """Lowercase the text and strip surrounding whitespace."""
    if not text:
        return ""
    return text.lower().strip()
