"""Exceptions raised by pydfa."""

from __future__ import annotations


class AutomatonError(ValueError):
    """Base exception for all automaton errors."""

    pass


class IncompleteTableError(AutomatonError):
    """Raised when a string is evaluated before every transition is defined."""

    def __init__(self, incomplete_cells: int) -> None:
        self.incomplete_cells = incomplete_cells
        super().__init__(
            f"transition table is incomplete: {incomplete_cells} cell(s) undefined"
        )


class InvalidCharacterError(AutomatonError):
    """Raised when an input string contains a symbol outside the alphabet."""

    def __init__(self, symbol: str, position: int = -1) -> None:
        self.symbol = symbol
        self.position = position
        super().__init__(f"invalid character in input: {symbol!r}")

    def __str__(self) -> str:
        if self.position >= 0:
            return f"{super().__str__()} at position {self.position}"
        return super().__str__()


class InvalidStateError(AutomatonError):
    """Raised when a state index lies outside [0, n_states)."""

    def __init__(self, state: int, n_states: int, role: str = "state") -> None:
        self.state = state
        self.n_states = n_states
        super().__init__(f"{role} {state} must be in [0, {n_states})")


class UnknownSymbolError(AutomatonError):
    """Raised when a transition references a symbol outside the alphabet."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"transition references unknown symbol: {symbol!r}")


class FrozenAutomatonError(AutomatonError):
    """Raised when a frozen automaton is modified."""

    pass


class AutomatonClosedError(AutomatonError):
    """Raised when a closed automaton is used."""

    pass
