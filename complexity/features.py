"""
Feature extraction over normalized source text.

Every detector is a plain substring or regex scan. Nothing here parses the
code, so the signals are approximate by nature:

- recursion is a global count of ``name(`` occurrences, not a call graph
- loop nesting is capped at 2 as soon as two loop keywords appear
"""

import re

from .models import (
    FeatureSet,
    LoopSignal,
    RecursionSignal,
    SearchSignal,
    SortingSignal,
)


# Identifier characters are ASCII only; \s stays Unicode aware
FUNCTION_DEF_PATTERN = re.compile(r"def\s+([A-Za-z0-9_]+)")
FOR_LOOP_PATTERN = re.compile(r"for\s+")
WHILE_LOOP_PATTERN = re.compile(r"while\s+")

DIVIDE_CONQUER_MARKERS = ("//", "/2", "mid")
SORTING_KEYWORDS = ("sort", "merge", "quick")
SEARCH_KEYWORDS = ("search", "find")

MAX_NESTED_LEVEL = 2


def function_names(code: str) -> list[str]:
    """Names introduced by a ``def`` keyword, in order of appearance."""
    return FUNCTION_DEF_PATTERN.findall(code)


def detect_recursion(code: str) -> RecursionSignal:
    """
    Flag recursion when a defined name is followed by ``(`` more than once.

    The declaration itself counts as one occurrence, so any second
    ``name(`` anywhere in the text is taken as a self call.
    """
    detected = any(code.count(name + "(") > 1 for name in function_names(code))
    return RecursionSignal(
        detected=detected,
        isDivideConquer=any(marker in code for marker in DIVIDE_CONQUER_MARKERS),
    )


def analyze_loops(code: str) -> LoopSignal:
    total = len(FOR_LOOP_PATTERN.findall(code)) + len(WHILE_LOOP_PATTERN.findall(code))
    nested_level = MAX_NESTED_LEVEL if total > 1 else 1
    return LoopSignal(total=total, nestedLevel=nested_level)


def detect_sorting(code: str) -> SortingSignal:
    return SortingSignal(detected=any(word in code for word in SORTING_KEYWORDS))


def detect_search(code: str) -> SearchSignal:
    detected = any(word in code for word in SEARCH_KEYWORDS)
    return SearchSignal(
        detected=detected,
        binary=detected and "mid" in code and "<" in code,
    )


def extract_features(code: str) -> FeatureSet:
    """
    Derive the full feature set from normalized code.

    Args:
        code: Text already passed through ``normalize``

    Returns:
        FeatureSet with all detectors evaluated independently
    """
    return FeatureSet(
        recursion=detect_recursion(code),
        loops=analyze_loops(code),
        sorting=detect_sorting(code),
        search=detect_search(code),
    )
