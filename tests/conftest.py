"""
Pytest configuration and fixtures for pydfa tests.

Provides deterministic RNG and ready-made automata for unit and integration tests.
"""

import pytest


@pytest.fixture
def deterministic_rng():
    """
    Create a deterministic RNG seeded with 12345.

    Used throughout test suite to ensure reproducible results.
    """
    from pydfa.core.rng import make_rng
    return make_rng(12345)


@pytest.fixture
def ends_in_one():
    """Binary strings ending in '1', fully built."""
    from pydfa.core.automaton import build_automaton
    from pydfa.languages import make_ends_in_one_dfa

    automaton = build_automaton(make_ends_in_one_dfa())
    yield automaton
    automaton.close()


@pytest.fixture
def empty_binary():
    """
    Two-state binary automaton with no transitions defined.

    Initial state 0, final states {1}.
    """
    from pydfa.core.automaton import Automaton

    automaton = Automaton.create("01", n_states=2, initial_state=0, final_states={1})
    yield automaton
    automaton.close()
