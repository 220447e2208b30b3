"""
Acceptance measures over batches of input strings.

Every function propagates IncompleteTableError and InvalidCharacterError
from Automaton.accepts unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from pydfa.core.automaton import Automaton


def acceptance_vector(automaton: Automaton, strings: Sequence[str]) -> np.ndarray:
    return np.fromiter(
        (automaton.accepts(text) for text in strings),
        dtype=bool,
        count=len(strings),
    )


def acceptance_rate(automaton: Automaton, strings: Sequence[str]) -> float:
    if not strings:
        raise ValueError("strings must not be empty")
    return float(acceptance_vector(automaton, strings).mean())


def agreement(first: Automaton, second: Automaton, strings: Sequence[str]) -> float:
    """Fraction of `strings` on which both automata give the same verdict."""
    if not strings:
        raise ValueError("strings must not be empty")
    if set(first.alphabet) != set(second.alphabet):
        raise ValueError("automata must share the same alphabet")

    same = acceptance_vector(first, strings) == acceptance_vector(second, strings)
    return float(same.mean())


def acceptance_confusion_matrix(
    predicted: Sequence[bool],
    expected: Sequence[bool],
) -> np.ndarray:
    """
    2x2 count matrix, rows are the expected verdict, columns the predicted one.

    Index 0 is reject, index 1 is accept.
    """
    if len(predicted) != len(expected):
        raise ValueError("predicted and expected must have same length")
    if not len(predicted):
        raise ValueError("predicted must not be empty")

    matrix = np.zeros((2, 2), dtype=np.int64)
    for pred, true in zip(predicted, expected):
        matrix[int(bool(true)), int(bool(pred))] += 1

    return matrix
