"""
Deterministic finite automaton with an incrementally filled transition table.

An Automaton is created with its size fixed (alphabet, number of states,
initial state, final states) and an empty table. Transitions are added one
cell at a time; strings can only be evaluated once every cell is defined.

Lifecycle:
- building: incomplete_cells > 0, only add_transition is meaningful
- ready: incomplete_cells == 0, accepts/run/trace may be called
- frozen (optional): ready and immutable
- closed: every operation raises AutomatonClosedError
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from pydfa.core.errors import (
    AutomatonClosedError,
    FrozenAutomatonError,
    IncompleteTableError,
    InvalidCharacterError,
    InvalidStateError,
    UnknownSymbolError,
)
from pydfa.core.types import DFASpec

logger = logging.getLogger(__name__)

UNSET = -1


def _validate_alphabet(alphabet: Iterable[str]) -> tuple[str, ...]:
    symbols = tuple(alphabet)
    if not symbols:
        raise ValueError("alphabet must not be empty")
    for symbol in symbols:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f"alphabet symbols must be single characters, got {symbol!r}")
    if len(set(symbols)) != len(symbols):
        raise ValueError("alphabet symbols must be unique")
    return symbols


class Automaton:
    def __init__(
        self,
        alphabet: Iterable[str],
        n_states: int,
        initial_state: int,
        final_states: Iterable[int],
    ):
        if isinstance(n_states, bool) or not isinstance(n_states, (int, np.integer)):
            raise ValueError(f"n_states must be an integer, got {n_states!r}")
        if n_states <= 0:
            raise ValueError("n_states must be > 0")

        self._alphabet: tuple[str, ...] = _validate_alphabet(alphabet)
        self._symbol_index: dict[str, int] = {
            symbol: idx for idx, symbol in enumerate(self._alphabet)
        }
        self._n_states = int(n_states)

        self._check_state(initial_state, role="initial_state")
        raw_finals = list(final_states)
        for state in raw_finals:
            self._check_state(state, role="final state")
        finals = frozenset(int(state) for state in raw_finals)

        self._initial_state = int(initial_state)
        self._final_states: frozenset[int] = finals

        shape = (self._n_states, len(self._alphabet))
        self._table: np.ndarray = np.full(shape, UNSET, dtype=np.int64)
        self._defined: np.ndarray = np.zeros(shape, dtype=bool)
        self._incomplete_cells = self._n_states * len(self._alphabet)

        self._frozen = False
        self._closed = False

        logger.debug(
            "created automaton: %d state(s), alphabet=%r, initial=%d, finals=%s",
            self._n_states,
            "".join(self._alphabet),
            self._initial_state,
            sorted(self._final_states),
        )

    @classmethod
    def create(
        cls,
        alphabet: Iterable[str],
        n_states: int,
        initial_state: int,
        final_states: Iterable[int],
    ) -> "Automaton":
        """Create an automaton with an empty transition table."""
        return cls(alphabet, n_states, initial_state, final_states)

    @classmethod
    def from_spec(cls, spec: DFASpec) -> "Automaton":
        """Create an automaton and fill its table from a DFASpec."""
        automaton = cls(spec.alphabet, spec.n_states, spec.initial_state, spec.final_states)
        for (state, symbol), next_state in spec.transitions.items():
            automaton.add_transition(state, symbol, next_state)
        return automaton

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def alphabet(self) -> tuple[str, ...]:
        self._check_open()
        return self._alphabet

    @property
    def n_states(self) -> int:
        self._check_open()
        return self._n_states

    @property
    def states(self) -> range:
        self._check_open()
        return range(self._n_states)

    @property
    def initial_state(self) -> int:
        self._check_open()
        return self._initial_state

    @property
    def final_states(self) -> frozenset[int]:
        self._check_open()
        return self._final_states

    @property
    def incomplete_cells(self) -> int:
        self._check_open()
        return self._incomplete_cells

    @property
    def is_complete(self) -> bool:
        return self.incomplete_cells == 0

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def transition_table(self) -> np.ndarray:
        """Read-only view of the table; unset cells hold -1."""
        self._check_open()
        view = self._table.view()
        view.flags.writeable = False
        return view

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def index_of(self, symbol: str) -> int | None:
        """Column index of `symbol` in the alphabet, or None if absent."""
        self._check_open()
        return self._lookup(symbol)

    def add_transition(self, from_state: int, symbol: str, to_state: int) -> bool:
        """
        Define δ(from_state, symbol) = to_state.

        Redefining a cell overwrites it without touching the incomplete-cell
        counter.

        Returns:
            True if the cell was previously undefined, False if overwritten.

        Raises:
            UnknownSymbolError: symbol is not in the alphabet.
            InvalidStateError: from_state or to_state is out of range.
            FrozenAutomatonError: the automaton has been frozen.
        """
        self._check_open()
        if self._frozen:
            raise FrozenAutomatonError("cannot add transitions to a frozen automaton")

        index = self._lookup(symbol)
        if index is None:
            raise UnknownSymbolError(symbol)
        self._check_state(from_state, role="from_state")
        self._check_state(to_state, role="to_state")

        self._table[from_state, index] = to_state
        if self._defined[from_state, index]:
            logger.debug("redefined transition (%d, %r) -> %d", from_state, symbol, to_state)
            return False

        self._defined[from_state, index] = True
        self._incomplete_cells -= 1
        if self._incomplete_cells == 0:
            logger.debug("transition table complete")
        return True

    def transition(self, state: int, symbol: str) -> int | None:
        """Successor of `state` on `symbol`, or None if the cell is unset."""
        self._check_open()
        index = self._lookup(symbol)
        if index is None:
            raise UnknownSymbolError(symbol)
        self._check_state(state)
        if not self._defined[state, index]:
            return None
        return int(self._table[state, index])

    def missing_transitions(self) -> list[tuple[int, str]]:
        """Undefined (state, symbol) cells in row-major order."""
        self._check_open()
        rows, cols = np.nonzero(~self._defined)
        return [(int(row), self._alphabet[col]) for row, col in zip(rows, cols)]

    def freeze(self) -> None:
        """Make a complete automaton immutable."""
        self._check_open()
        if self._incomplete_cells:
            raise IncompleteTableError(self._incomplete_cells)
        self._frozen = True

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def trace(self, text: Iterable[str]) -> list[int]:
        """
        States visited while reading `text`, starting with the initial state.

        Raises:
            IncompleteTableError: some transition is still undefined.
            InvalidCharacterError: text contains a symbol outside the alphabet.
        """
        self._check_ready()
        state = self._initial_state
        visited = [state]
        for position, symbol in enumerate(text):
            state = self._step(state, symbol, position)
            visited.append(state)
        return visited

    def run(self, text: Iterable[str]) -> int:
        """State reached after reading `text`."""
        self._check_ready()
        state = self._initial_state
        for position, symbol in enumerate(text):
            state = self._step(state, symbol, position)
        return state

    def accepts(self, text: Iterable[str]) -> bool:
        """True iff reading `text` from the initial state ends in a final state."""
        return self.run(text) in self._final_states

    def __contains__(self, text: str) -> bool:
        return self.accepts(text)

    def _lookup(self, symbol: str) -> int | None:
        try:
            return self._symbol_index.get(symbol)
        except TypeError:
            # unhashable symbols are never in the alphabet
            return None

    def _step(self, state: int, symbol: str, position: int) -> int:
        index = self._lookup(symbol)
        if index is None:
            raise InvalidCharacterError(symbol, position)
        return int(self._table[state, index])

    # ------------------------------------------------------------------
    # Conversion and teardown
    # ------------------------------------------------------------------

    def to_spec(self) -> DFASpec:
        self._check_ready()
        transitions = {
            (state, symbol): int(self._table[state, idx])
            for state in range(self._n_states)
            for idx, symbol in enumerate(self._alphabet)
        }
        return DFASpec(
            n_states=self._n_states,
            alphabet=self._alphabet,
            transitions=transitions,
            initial_state=self._initial_state,
            final_states=self._final_states,
        )

    def close(self) -> None:
        """Release the table, alphabet and final states. Idempotent."""
        if self._closed:
            return
        self._table = None
        self._defined = None
        self._alphabet = ()
        self._symbol_index = {}
        self._final_states = frozenset()
        self._closed = True
        logger.debug("closed automaton")

    def __enter__(self) -> "Automaton":
        self._check_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._closed:
            return "Automaton(closed)"
        return (
            f"Automaton(alphabet={''.join(self._alphabet)!r}, n_states={self._n_states}, "
            f"initial_state={self._initial_state}, final_states={sorted(self._final_states)}, "
            f"incomplete_cells={self._incomplete_cells})"
        )

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def _check_open(self) -> None:
        if self._closed:
            raise AutomatonClosedError("automaton has been closed")

    def _check_ready(self) -> None:
        self._check_open()
        if self._incomplete_cells:
            raise IncompleteTableError(self._incomplete_cells)

    def _check_state(self, state: int, role: str = "state") -> None:
        if isinstance(state, bool) or not isinstance(state, (int, np.integer)):
            raise InvalidStateError(state, self._n_states, role=role)
        if not 0 <= state < self._n_states:
            raise InvalidStateError(state, self._n_states, role=role)


def build_automaton(spec: DFASpec, freeze: bool = False) -> Automaton:
    automaton = Automaton.from_spec(spec)
    if freeze:
        automaton.freeze()
    return automaton
