from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.random import Generator

from pydfa.core.types import DFASpec


def _validate_prob(name: str, value: float) -> None:
    if not (0.0 <= value <= 1.0):
        raise ValueError(f"{name} must be in [0, 1]")


def random_dfa_spec(
    n_states: int,
    alphabet: Iterable[str],
    rng: Generator,
    p_final: float = 0.5,
) -> DFASpec:
    """Complete DFA with uniformly drawn successors and final states."""
    if n_states <= 0:
        raise ValueError("n_states must be > 0")
    _validate_prob("p_final", p_final)

    symbols = tuple(alphabet)
    if not symbols:
        raise ValueError("alphabet must not be empty")

    successors = rng.integers(0, n_states, size=(n_states, len(symbols)))
    transitions = {
        (state, symbol): int(successors[state, idx])
        for state in range(n_states)
        for idx, symbol in enumerate(symbols)
    }
    final_mask = rng.random(n_states) < p_final
    initial_state = int(rng.integers(0, n_states))

    return DFASpec(
        n_states=n_states,
        alphabet=symbols,
        transitions=transitions,
        initial_state=initial_state,
        final_states=frozenset(int(state) for state in np.flatnonzero(final_mask)),
    )


def random_strings(
    alphabet: Iterable[str],
    n: int,
    max_length: int,
    rng: Generator,
) -> list[str]:
    """`n` strings with lengths drawn uniformly from [0, max_length]."""
    if n < 0:
        raise ValueError("n must be >= 0")
    if max_length < 0:
        raise ValueError("max_length must be >= 0")

    symbols = np.array(tuple(alphabet))
    if symbols.size == 0:
        raise ValueError("alphabet must not be empty")

    lengths = rng.integers(0, max_length + 1, size=n)
    return ["".join(rng.choice(symbols, size=int(length))) for length in lengths]
