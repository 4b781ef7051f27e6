"""
Turn raw player input into a Code, or explain why it can't be played.

Input is either text ("rgyb", one character per peg) or a list of one-letter
tokens (["r", "G", "y", "B"]). Matching is case-insensitive and the canonical
letters from the alphabet are returned. Nothing else is changed: no
deduplication, no reordering.
"""

from typing import Dict, List, Sequence, Union

from .errors import LengthMismatch, UnknownSymbol
from .types import Code, Symbol

RawGuess = Union[str, Sequence[str]]


def _tokens(raw: RawGuess) -> List[str]:
    if isinstance(raw, str):
        # the prompt hands us the whole line; surrounding whitespace is not a peg
        return list(raw.strip())
    return [str(token).strip() for token in raw]


def validate_guess(raw: RawGuess, length: int, alphabet: Sequence[Symbol]) -> Code:
    """
    Length is checked before colors, so "RGBXX" on a 4-peg game reports the
    length problem.

    Raises LengthMismatch or UnknownSymbol (both GuessError / ValueError).
    """
    tokens = _tokens(raw)
    if len(tokens) != length:
        raise LengthMismatch(expected=length, actual=len(tokens))

    canonical: Dict[str, Symbol] = {symbol.upper(): symbol for symbol in alphabet}
    code: Code = []
    for token in tokens:
        symbol = canonical.get(token.upper())
        if symbol is None:
            raise UnknownSymbol(token, alphabet)
        code.append(symbol)
    return code


def render_code(code: Sequence[Symbol]) -> str:
    """Inverse of validate_guess for text input: ["R", "G"] -> "RG"."""
    return "".join(code)
