"""
Core Code Complexity Analyzer.

Heuristic pipeline: normalize, extract features, select an outcome through
the rule cascade, then package the outcome's template as the result.
"""

import logging

from .classifier import select_outcome
from .features import extract_features
from .models import ComplexityResult, Outcome
from .normalizer import normalize
from .templates import DerivationTemplate, get_template

logger = logging.getLogger(__name__)


def assemble_result(template: DerivationTemplate) -> ComplexityResult:
    """Copy a template into a fresh result."""
    return ComplexityResult.model_validate(template.model_dump())


def classify_outcome(code: str) -> Outcome:
    """
    Select the complexity outcome for raw source text.

    Args:
        code: Source code string (any language, may be empty)

    Returns:
        The Outcome chosen by the rule cascade
    """
    normalized = normalize(code)
    features = extract_features(normalized)
    logger.debug("Extracted features: %s", features.model_dump())
    return select_outcome(normalized, features)


def classify(code: str) -> ComplexityResult:
    """
    Analyze code complexity.

    Never raises on text input; unrecognized code falls back to the
    constant-time analysis.

    Args:
        code: Source code string to analyze

    Returns:
        ComplexityResult with bounds, equations and derivation
    """
    return assemble_result(get_template(classify_outcome(code)))
