"""
Error taxonomy.

GuessError and its subclasses are bad player input: the caller re-prompts and
nothing in the session changes. ContractViolation means the core was used
wrongly (guessing on a finished game, scoring codes of different lengths) and
should not be caught by input handlers.
"""

from typing import Iterable


class GuessError(ValueError):
    """A guess that cannot be played. The message is safe to show the player."""


class LengthMismatch(GuessError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid length! Please enter exactly {expected} colors (got {actual}).")


class UnknownSymbol(GuessError):
    def __init__(self, symbol: str, alphabet: Iterable[str] = ()):
        self.symbol = symbol
        self.alphabet = "".join(alphabet)
        msg = f"Invalid color '{symbol}'."
        if self.alphabet:
            msg += f" Use only: {self.alphabet}"
        super().__init__(msg)


class ContractViolation(RuntimeError):
    """The core was called in a way its contract forbids."""
