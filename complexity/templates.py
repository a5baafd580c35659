"""
Derivation templates for each complexity outcome.

Static content only: two inputs that land on the same outcome get the same
bounds, equations and narrative. Math is written in LaTeX for the renderer,
bounds in plain ASCII text (O, Theta, Omega).
"""

from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import DerivationStep, Equation, Outcome, SpaceComplexity, TimeComplexity


class DerivationTemplate(BaseModel):
    """Immutable, pre-authored analysis for one outcome."""

    model_config = ConfigDict(frozen=True)

    timeComplexity: TimeComplexity
    spaceComplexity: SpaceComplexity
    equations: tuple[Equation, ...] = Field(..., min_length=1)
    derivation: tuple[DerivationStep, ...] = Field(..., min_length=1)
    confidence: float = Field(..., ge=0.0, le=1.0)
    assumptions: tuple[str, ...] = ()
    method: tuple[str, ...] = Field(..., min_length=1)


def _step(step: str, explanation: str, latex: Optional[str] = None) -> DerivationStep:
    return DerivationStep(step=step, explanation=explanation, latex=latex)


CONSTANT = DerivationTemplate(
    timeComplexity=TimeComplexity(bigO="O(1)", bigTheta="Theta(1)"),
    spaceComplexity=SpaceComplexity(auxiliary="O(1)"),
    equations=(Equation(label="Constant", latex="T(n) = c"),),
    derivation=(_step("Fixed Operations", "No loops or recursion", "1"),),
    confidence=0.8,
    assumptions=("Basic operations only",),
    method=("Direct Analysis",),
)

SINGLE_LOOP = DerivationTemplate(
    timeComplexity=TimeComplexity(bigO="O(n)", bigTheta="Theta(n)"),
    spaceComplexity=SpaceComplexity(auxiliary="O(1)"),
    equations=(Equation(label="Single Loop", latex=r"\sum_{i=0}^{n-1} O(1) = O(n)"),),
    derivation=(_step("Linear Scan", "One pass through data", "n"),),
    confidence=0.9,
    assumptions=("Loop runs n times",),
    method=("Linear Analysis",),
)

NESTED_LOOPS = DerivationTemplate(
    timeComplexity=TimeComplexity(bigO="O(n^2)", bigTheta="Theta(n^2)"),
    spaceComplexity=SpaceComplexity(auxiliary="O(1)"),
    equations=(Equation(label="Nested Loops", latex=r"n \times n = n^2"),),
    derivation=(
        _step("Outer Loop", "n iterations", "n"),
        _step("Inner Loop", "n iterations each", r"n \times n = n^2"),
    ),
    confidence=0.85,
    assumptions=("Both loops run n times",),
    method=("Loop Analysis",),
)

LINEAR_SEARCH = DerivationTemplate(
    timeComplexity=TimeComplexity(bigO="O(n)", bigOmega="Omega(1)"),
    spaceComplexity=SpaceComplexity(auxiliary="O(1)"),
    equations=(Equation(label="Linear Search", latex="T(n) = O(n)"),),
    derivation=(
        _step("Sequential", "Check each element", "n"),
        _step("Early Exit", "Target found at the first position", "1"),
    ),
    confidence=0.9,
    assumptions=("Unsorted data",),
    method=("Linear Search",),
)

BINARY_SEARCH = DerivationTemplate(
    timeComplexity=TimeComplexity(bigO="O(log n)", bigOmega="Omega(1)"),
    spaceComplexity=SpaceComplexity(auxiliary="O(1)"),
    equations=(Equation(label="Binary Search", latex=r"T(n) = T(\frac{n}{2}) + O(1)"),),
    derivation=(
        _step("Halving", "Search space halved", r"\log n"),
        _step("Unroll", "k halvings leave one element when n / 2^k = 1", r"k = \log_2 n"),
    ),
    confidence=0.95,
    assumptions=("Sorted input",),
    method=("Binary Search",),
)

SORTING = DerivationTemplate(
    timeComplexity=TimeComplexity(bigO="O(n log n)", bigTheta="Theta(n log n)"),
    spaceComplexity=SpaceComplexity(auxiliary="O(n)"),
    equations=(Equation(label="Sorting", latex=r"T(n) = \Theta(n \log n)"),),
    derivation=(_step("Comparison Sort", "Optimal comparison-based sorting", r"n \log n"),),
    confidence=0.85,
    assumptions=("Comparison-based sorting",),
    method=("Sorting Analysis",),
)

DIVIDE_CONQUER_RECURSIVE = DerivationTemplate(
    timeComplexity=TimeComplexity(bigO="O(n log n)", bigTheta="Theta(n log n)"),
    spaceComplexity=SpaceComplexity(auxiliary="O(n)", stack="O(log n)"),
    equations=(Equation(label="Recurrence", latex=r"T(n) = 2T(\frac{n}{2}) + O(n)"),),
    derivation=(
        _step("Divide", "Problem split in half", r"2T(\frac{n}{2})"),
        _step("Combine", "Linear merge step", "+ O(n)"),
        _step(
            "Master Theorem",
            "a = b = 2 and f(n) = Theta(n^(log_b a)), which is case 2",
            r"T(n) = \Theta(n \log n)",
        ),
    ),
    confidence=0.9,
    assumptions=("Balanced recursion", "Linear combine"),
    method=("Master Theorem",),
)

EXPONENTIAL_RECURSIVE = DerivationTemplate(
    timeComplexity=TimeComplexity(bigO="O(2^n)"),
    spaceComplexity=SpaceComplexity(auxiliary="O(n)", stack="O(n)"),
    equations=(Equation(label="Exponential", latex="T(n) = 2^n"),),
    derivation=(_step("Recursion", "Exponential branching", "2^n"),),
    confidence=0.8,
    assumptions=("No memoization",),
    method=("Recursion Tree",),
)


TEMPLATES: Mapping[Outcome, DerivationTemplate] = MappingProxyType({
    Outcome.EMPTY: CONSTANT,
    Outcome.CONSTANT: CONSTANT,
    Outcome.SINGLE_LOOP: SINGLE_LOOP,
    Outcome.NESTED_LOOPS: NESTED_LOOPS,
    Outcome.LINEAR_SEARCH: LINEAR_SEARCH,
    Outcome.BINARY_SEARCH: BINARY_SEARCH,
    Outcome.SORTING: SORTING,
    Outcome.DIVIDE_CONQUER_RECURSIVE: DIVIDE_CONQUER_RECURSIVE,
    Outcome.EXPONENTIAL_RECURSIVE: EXPONENTIAL_RECURSIVE,
})


def get_template(outcome: Outcome) -> DerivationTemplate:
    """Template for an outcome."""
    return TEMPLATES[outcome]
