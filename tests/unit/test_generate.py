"""
Tests for random automata and sampled input strings.
"""

import pytest

from pydfa.core.automaton import build_automaton
from pydfa.core.rng import make_rng
from pydfa.generate import random_dfa_spec, random_strings


class TestRandomDfaSpec:
    def test_complete_and_valid(self, deterministic_rng):
        spec = random_dfa_spec(5, "abc", deterministic_rng)
        assert spec.n_states == 5
        assert spec.alphabet == ("a", "b", "c")
        assert len(spec.transitions) == 15
        assert build_automaton(spec).is_complete

    def test_deterministic(self):
        assert random_dfa_spec(4, "01", make_rng(3)) == random_dfa_spec(4, "01", make_rng(3))

    def test_p_final_extremes(self, deterministic_rng):
        assert random_dfa_spec(6, "01", deterministic_rng, p_final=0.0).final_states == frozenset()
        assert random_dfa_spec(6, "01", deterministic_rng, p_final=1.0).final_states == frozenset(range(6))

    def test_invalid_p_final(self, deterministic_rng):
        with pytest.raises(ValueError, match="p_final"):
            random_dfa_spec(2, "01", deterministic_rng, p_final=1.5)

    def test_invalid_n_states(self, deterministic_rng):
        with pytest.raises(ValueError, match="n_states"):
            random_dfa_spec(0, "01", deterministic_rng)

    def test_empty_alphabet(self, deterministic_rng):
        with pytest.raises(ValueError, match="alphabet"):
            random_dfa_spec(2, "", deterministic_rng)


class TestRandomStrings:
    def test_count_and_lengths(self, deterministic_rng):
        strings = random_strings("ab", 50, 8, deterministic_rng)
        assert len(strings) == 50
        assert all(0 <= len(s) <= 8 for s in strings)
        assert set("".join(strings)) <= {"a", "b"}

    def test_zero_max_length(self, deterministic_rng):
        assert random_strings("ab", 3, 0, deterministic_rng) == ["", "", ""]

    def test_deterministic(self):
        assert random_strings("xyz", 10, 5, make_rng(1)) == random_strings("xyz", 10, 5, make_rng(1))

    @pytest.mark.parametrize("n,max_length", [(-1, 3), (3, -1)])
    def test_invalid_sizes(self, deterministic_rng, n, max_length):
        with pytest.raises(ValueError):
            random_strings("ab", n, max_length, deterministic_rng)

    def test_empty_alphabet(self, deterministic_rng):
        with pytest.raises(ValueError, match="alphabet"):
            random_strings("", 3, 3, deterministic_rng)
