from __future__ import annotations

from collections.abc import Iterable

from pydfa.core.types import DFASpec


def make_ends_in_one_dfa() -> DFASpec:
    """Binary strings whose last symbol is '1'."""
    return DFASpec(
        n_states=2,
        alphabet=("0", "1"),
        transitions={
            (0, "0"): 0,
            (0, "1"): 1,
            (1, "0"): 0,
            (1, "1"): 1,
        },
        initial_state=0,
        final_states=frozenset({1}),
    )


def make_even_a_dfa() -> DFASpec:
    """Strings over {a, b} with an even number of 'a'."""
    return DFASpec(
        n_states=2,
        alphabet=("a", "b"),
        transitions={
            (0, "a"): 1,
            (0, "b"): 0,
            (1, "a"): 0,
            (1, "b"): 1,
        },
        initial_state=0,
        final_states=frozenset({0}),
    )


def make_div3_dfa() -> DFASpec:
    """Binary numerals divisible by three (the empty string reads as 0)."""
    return DFASpec(
        n_states=3,
        alphabet=("0", "1"),
        transitions={
            (0, "0"): 0,
            (0, "1"): 1,
            (1, "0"): 2,
            (1, "1"): 0,
            (2, "0"): 1,
            (2, "1"): 2,
        },
        initial_state=0,
        final_states=frozenset({0}),
    )


def make_universal_dfa(alphabet: Iterable[str]) -> DFASpec:
    """Single final state with a self-loop on every symbol: accepts Σ*."""
    symbols = tuple(alphabet)
    return DFASpec(
        n_states=1,
        alphabet=symbols,
        transitions={(0, symbol): 0 for symbol in symbols},
        initial_state=0,
        final_states=frozenset({0}),
    )


LANGUAGES = {
    "ends-in-one": make_ends_in_one_dfa,
    "even-a": make_even_a_dfa,
    "div3": make_div3_dfa,
}
