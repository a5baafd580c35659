"""Heuristic engine for code complexity classification."""

from .models import ComplexityResult, FeatureSet, Outcome
from .analyzer import classify, classify_outcome

__all__ = [
    "ComplexityResult",
    "FeatureSet",
    "Outcome",
    "classify",
    "classify_outcome",
]
