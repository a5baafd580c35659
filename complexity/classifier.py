"""
Rule cascade mapping a feature set to a single complexity outcome.

Rules are evaluated top to bottom and the first match wins. The order is
the contract: recursion beats sorting, sorting beats search, search beats
plain loops.
"""

import logging
from typing import Callable, NamedTuple

from .models import FeatureSet, Outcome

logger = logging.getLogger(__name__)


class Rule(NamedTuple):
    name: str
    predicate: Callable[[str, FeatureSet], bool]
    outcome: Outcome


RULES: tuple[Rule, ...] = (
    Rule("empty", lambda code, f: not code, Outcome.CONSTANT),
    Rule(
        "divide-and-conquer recursion",
        lambda code, f: f.recursion.detected and f.recursion.isDivideConquer,
        Outcome.DIVIDE_CONQUER_RECURSIVE,
    ),
    Rule("recursion", lambda code, f: f.recursion.detected, Outcome.EXPONENTIAL_RECURSIVE),
    Rule("sorting", lambda code, f: f.sorting.detected, Outcome.SORTING),
    Rule(
        "binary search",
        lambda code, f: f.search.detected and f.search.binary,
        Outcome.BINARY_SEARCH,
    ),
    Rule("search", lambda code, f: f.search.detected, Outcome.LINEAR_SEARCH),
    Rule("nested loops", lambda code, f: f.loops.nestedLevel >= 2, Outcome.NESTED_LOOPS),
    Rule("single loop", lambda code, f: f.loops.total >= 1, Outcome.SINGLE_LOOP),
)

FALLBACK = Outcome.CONSTANT


def select_outcome(code: str, features: FeatureSet) -> Outcome:
    """
    Pick the outcome of the first matching rule.

    Args:
        code: Normalized code the features were extracted from
        features: Signals from ``extract_features``

    Returns:
        The selected Outcome, ``Outcome.CONSTANT`` when nothing matches
    """
    for rule in RULES:
        if rule.predicate(code, features):
            logger.debug("Matched rule '%s' -> %s", rule.name, rule.outcome.value)
            return rule.outcome

    logger.debug("No rule matched, falling back to %s", FALLBACK.value)
    return FALLBACK
