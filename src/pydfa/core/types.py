"""
Declarative description of a DFA.

Pure data container with validation. Behaviour lives in Automaton.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DFASpec:
    """Complete description of a DFA (Q, Σ, q0, F, δ) with integer states."""

    n_states: int
    alphabet: tuple[str, ...]
    transitions: dict[tuple[int, str], int]
    initial_state: int
    final_states: frozenset[int]

    def __post_init__(self) -> None:
        if self.n_states <= 0:
            raise ValueError("n_states must be > 0")
        if not self.alphabet:
            raise ValueError("alphabet must not be empty")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError("alphabet symbols must be unique")

        if not 0 <= self.initial_state < self.n_states:
            raise ValueError("initial_state must be in [0, n_states)")
        for state in self.final_states:
            if not 0 <= state < self.n_states:
                raise ValueError(f"final state {state} must be in [0, n_states)")

        expected_count = self.n_states * len(self.alphabet)
        if len(self.transitions) != expected_count:
            raise ValueError("transitions must define exactly one edge per state-symbol pair")

        alphabet_set = set(self.alphabet)
        for (state, symbol), next_state in self.transitions.items():
            if not 0 <= state < self.n_states:
                raise ValueError(f"transition references unknown state: {state}")
            if symbol not in alphabet_set:
                raise ValueError(f"transition references unknown symbol: {symbol}")
            if not 0 <= next_state < self.n_states:
                raise ValueError(f"transition has unknown next_state: {next_state}")

    @property
    def states(self) -> range:
        return range(self.n_states)
