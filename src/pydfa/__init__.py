"""
pydfa - deterministic finite automata with an incrementally built transition table.

Example usage:
    >>> from pydfa import Automaton
    >>> dfa = Automaton.create("01", n_states=2, initial_state=0, final_states={1})
    >>> for state in dfa.states:
    ...     dfa.add_transition(state, "0", 0)
    ...     dfa.add_transition(state, "1", 1)
    >>> dfa.accepts("101")
    True
"""

from pydfa.core.automaton import Automaton, build_automaton
from pydfa.core.errors import (
    AutomatonClosedError,
    AutomatonError,
    FrozenAutomatonError,
    IncompleteTableError,
    InvalidCharacterError,
    InvalidStateError,
    UnknownSymbolError,
)
from pydfa.core.types import DFASpec

__version__ = "0.1.0"

__all__ = [
    "Automaton",
    "build_automaton",
    "DFASpec",
    "AutomatonError",
    "IncompleteTableError",
    "InvalidCharacterError",
    "InvalidStateError",
    "UnknownSymbolError",
    "FrozenAutomatonError",
    "AutomatonClosedError",
    "__version__",
]
