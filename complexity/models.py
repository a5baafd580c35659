"""
Data models for code complexity analysis.

Pydantic models for the classification result and the intermediate
feature set extracted from source text.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Outcome(str, Enum):
    """Complexity class selected by the rule cascade."""

    EMPTY = "Empty"
    DIVIDE_CONQUER_RECURSIVE = "DivideConquerRecursive"
    EXPONENTIAL_RECURSIVE = "ExponentialRecursive"
    SORTING = "Sorting"
    BINARY_SEARCH = "BinarySearch"
    LINEAR_SEARCH = "LinearSearch"
    NESTED_LOOPS = "NestedLoops"
    SINGLE_LOOP = "SingleLoop"
    CONSTANT = "Constant"


# ---------------------------------------------------------------------------
# Feature set (internal)
# ---------------------------------------------------------------------------


class RecursionSignal(BaseModel):
    model_config = ConfigDict(frozen=True)

    detected: bool = False
    isDivideConquer: bool = False


class LoopSignal(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = Field(default=0, ge=0)
    nestedLevel: int = Field(default=1, ge=1)


class SortingSignal(BaseModel):
    model_config = ConfigDict(frozen=True)

    detected: bool = False


class SearchSignal(BaseModel):
    model_config = ConfigDict(frozen=True)

    detected: bool = False
    binary: bool = False


class FeatureSet(BaseModel):
    """Structural signals found in normalized source text."""

    model_config = ConfigDict(frozen=True)

    recursion: RecursionSignal = Field(default_factory=RecursionSignal)
    loops: LoopSignal = Field(default_factory=LoopSignal)
    sorting: SortingSignal = Field(default_factory=SortingSignal)
    search: SearchSignal = Field(default_factory=SearchSignal)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


class TimeComplexity(BaseModel):
    """Asymptotic time bounds."""
    model_config = ConfigDict(frozen=True)

    bigO: str = Field(..., min_length=1, description="Upper bound in Big-O notation")
    bigTheta: Optional[str] = Field(default=None, description="Tight bound, when known")
    bigOmega: Optional[str] = Field(default=None, description="Lower bound, when known")


class SpaceComplexity(BaseModel):
    """Auxiliary and call-stack space."""
    model_config = ConfigDict(frozen=True)

    auxiliary: str = Field(..., min_length=1, description="Auxiliary space in Big-O notation")
    stack: Optional[str] = Field(default=None, description="Recursion stack space")


class Equation(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Equation caption")
    latex: str = Field(..., description="Equation in LaTeX markup")


class DerivationStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: str = Field(..., description="Short step title")
    explanation: str = Field(..., description="Human readable explanation")
    latex: Optional[str] = Field(default=None, description="Formula for this step")


class ComplexityResult(BaseModel):
    """
    Complexity analysis result.

    This is the structure returned to callers and serialized by the API.
    """

    timeComplexity: TimeComplexity
    spaceComplexity: SpaceComplexity
    equations: list[Equation] = Field(..., min_length=1)
    derivation: list[DerivationStep] = Field(..., min_length=1)
    confidence: float = Field(..., ge=0.0, le=1.0, description="Heuristic certainty")
    assumptions: list[str] = Field(default_factory=list)
    method: list[str] = Field(..., min_length=1)
