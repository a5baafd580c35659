import pytest

from complexity.classifier import RULES, select_outcome
from complexity.models import (
    FeatureSet,
    LoopSignal,
    Outcome,
    RecursionSignal,
    SearchSignal,
    SortingSignal,
)


def features(
    recursion=False,
    divide=False,
    sorting=False,
    search=False,
    binary=False,
    loops=0,
) -> FeatureSet:
    return FeatureSet(
        recursion=RecursionSignal(detected=recursion, isDivideConquer=divide),
        loops=LoopSignal(total=loops, nestedLevel=2 if loops > 1 else 1),
        sorting=SortingSignal(detected=sorting),
        search=SearchSignal(detected=search, binary=binary),
    )


def test_rule_order():
    assert [rule.name for rule in RULES] == [
        "empty",
        "divide-and-conquer recursion",
        "recursion",
        "sorting",
        "binary search",
        "search",
        "nested loops",
        "single loop",
    ]


def test_empty_text_wins_over_every_signal():
    everything = features(recursion=True, divide=True, sorting=True, search=True, binary=True, loops=3)
    assert select_outcome("", everything) == Outcome.CONSTANT


@pytest.mark.parametrize(
    "feature_set,expected",
    [
        (features(recursion=True, divide=True, sorting=True, search=True, loops=2), Outcome.DIVIDE_CONQUER_RECURSIVE),
        (features(recursion=True, sorting=True, search=True, binary=True), Outcome.EXPONENTIAL_RECURSIVE),
        (features(sorting=True, search=True, binary=True, loops=2), Outcome.SORTING),
        (features(search=True, binary=True, loops=2), Outcome.BINARY_SEARCH),
        (features(search=True, loops=2), Outcome.LINEAR_SEARCH),
        (features(loops=5), Outcome.NESTED_LOOPS),
        (features(loops=1), Outcome.SINGLE_LOOP),
        (features(), Outcome.CONSTANT),
    ],
)
def test_first_matching_rule_wins(feature_set, expected):
    assert select_outcome("x", feature_set) == expected


def test_binary_flag_alone_is_not_a_search():
    assert select_outcome("x", features(binary=True)) == Outcome.CONSTANT
