"""Majority voting on weather conditions reported by several providers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Optional

UNKNOWN_CONDITION = "Unknown"
CONSENSUS_RATIO = 2.0 / 3.0


def majority_vote_condition(conditions: Iterable[Optional[str]]) -> tuple[str, float]:
    """Return the most common condition and the share of votes it received.

    Missing conditions are ignored; with none left the result is ("Unknown", 0.0).
    """
    valid = [c for c in conditions if c is not None]
    if not valid:
        return UNKNOWN_CONDITION, 0.0
    winner, count = Counter(valid).most_common(1)[0]
    return winner, count / len(valid)


def vote_condition(conditions: Iterable[Optional[str]]) -> str:
    """Return only the winning condition."""
    return majority_vote_condition(conditions)[0]


def majority_vote_with_consensus(conditions: Iterable[Optional[str]]) -> tuple[str, bool]:
    """Return the winning condition and whether at least two thirds agree on it.

    Raises ValueError when there is no condition to vote on.
    """
    valid = [c for c in conditions if c is not None]
    if not valid:
        raise ValueError("No conditions to vote on")
    condition, agreement = majority_vote_condition(valid)
    return condition, agreement >= CONSENSUS_RATIO