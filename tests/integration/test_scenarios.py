"""
End-to-end scenarios: build automata cell by cell and evaluate strings.
"""

from __future__ import annotations

import itertools

import pytest

from pydfa import (
    Automaton,
    IncompleteTableError,
    InvalidCharacterError,
    build_automaton,
)
from pydfa.core.rng import make_rng, spawn_rngs
from pydfa.generate import random_dfa_spec, random_strings
from pydfa.measures import acceptance_vector


def _build(alphabet: str, n_states: int, initial: int, finals: set[int], table: dict) -> Automaton:
    automaton = Automaton.create(alphabet, n_states, initial, finals)
    for (state, symbol), target in table.items():
        assert automaton.incomplete_cells > 0
        automaton.add_transition(state, symbol, target)
    return automaton


def test_binary_ends_in_one() -> None:
    dfa = _build(
        "01", 2, 0, {1},
        {(0, "0"): 0, (0, "1"): 1, (1, "0"): 0, (1, "1"): 1},
    )
    assert dfa.incomplete_cells == 0
    assert dfa.accepts("101") is True
    assert dfa.accepts("100") is False
    assert dfa.accepts("") is False


def test_even_number_of_a() -> None:
    dfa = _build(
        "ab", 2, 0, {0},
        {(0, "a"): 1, (0, "b"): 0, (1, "a"): 0, (1, "b"): 1},
    )
    assert dfa.accepts("aabb") is True
    assert dfa.accepts("ab") is False
    assert dfa.accepts("") is True


def test_all_final_automaton() -> None:
    alphabet = "xyz"
    dfa = _build(alphabet, 1, 0, {0}, {(0, symbol): 0 for symbol in alphabet})

    for length in range(4):
        for symbols in itertools.product(alphabet, repeat=length):
            assert dfa.accepts("".join(symbols)) is True

    for text in ["w", "xw", "xyzq"]:
        with pytest.raises(InvalidCharacterError):
            dfa.accepts(text)


def test_building_to_ready_transition() -> None:
    dfa = Automaton.create("ab", 3, 0, {2})
    cells = [(state, symbol) for state in range(3) for symbol in "ab"]
    for count, (state, symbol) in enumerate(cells, start=1):
        with pytest.raises(IncompleteTableError):
            dfa.accepts("a")
        dfa.add_transition(state, symbol, (state + 1) % 3)
        assert dfa.incomplete_cells == len(cells) - count

    assert dfa.is_complete
    assert dfa.accepts("aa") is True
    assert dfa.accepts("ab") is True
    assert dfa.accepts("aaa") is False


def test_random_automata_deterministic_and_consistent() -> None:
    spec_rng, string_rng = spawn_rngs(make_rng(2024), 2)
    strings = random_strings("abc", 100, 12, string_rng)

    for _ in range(10):
        spec = random_dfa_spec(6, "abc", spec_rng)
        dfa = build_automaton(spec, freeze=True)

        first = acceptance_vector(dfa, strings)
        second = acceptance_vector(dfa, strings)
        assert (first == second).all()

        assert dfa.accepts("") is (spec.initial_state in spec.final_states)

        for text in strings[:20]:
            state = spec.initial_state
            for symbol in text:
                state = spec.transitions[(state, symbol)]
            assert dfa.run(text) == state
            assert dfa.trace(text)[-1] == state
