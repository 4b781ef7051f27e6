"""
Pure game logic (no I/O, no storage, no randomness).
We compute two feedback numbers for each guess:
- exact: how many positions hold the same color in secret and guess
- color: how many of the remaining guess pegs can be paired with a remaining
  secret peg of the same color, each secret peg used at most once

Exact matches are never counted again as color matches.
Also here: the advisory hint table and end-of-game rating, both pure lookups.
"""

from collections import Counter
from typing import Dict, NamedTuple, Sequence

from .errors import ContractViolation
from .types import HintTier, Symbol, WinRating


class Feedback(NamedTuple):
    exact: int
    color: int


def score_guess(secret: Sequence[Symbol], guess: Sequence[Symbol]) -> Feedback:
    """
    Example:
      secret = [R, G, B, Y]
      guess  = [R, B, Y, M]
      exact = 1  (R in the first slot)
      color = 2  (B and Y are in the secret, just elsewhere)
      Returns Feedback(exact=1, color=2)
    """

    # 0. Same non-zero length is the caller's job (the validator guarantees it)
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ContractViolation("Secret and guess must be the same non-zero length.")

    # 1. Exact pass; everything that misses goes to the leftovers
    exact = 0
    leftover_secret: Counter = Counter()
    leftover_guess = []
    for secret_peg, guess_peg in zip(secret, guess):
        if secret_peg == guess_peg:
            exact += 1
        else:
            leftover_secret[secret_peg] += 1
            leftover_guess.append(guess_peg)

    # 2. Color pass: each leftover secret peg can satisfy one guess peg
    color = 0
    for peg in leftover_guess:
        if leftover_secret[peg] > 0:
            leftover_secret[peg] -= 1
            color += 1

    return Feedback(exact=exact, color=color)


def is_win(secret: Sequence[Symbol], guess: Sequence[Symbol]) -> bool:
    """
    Win = every position matches.
    Works for any length, as long as lengths match.
    """
    if len(secret) == 0 or len(guess) != len(secret):
        return False
    return list(secret) == list(guess)


# Hint table. Ordered from "cold" to "hot"; it only looks at exact matches
# once any are present.
HINT_MESSAGES: Dict[HintTier, str] = {
    "no_match": "Hmm, try completely different colors!",
    "right_colors": "You have the right colors, just wrong positions!",
    "one_placed": "Getting warmer! One's in the right spot!",
    "two_placed": "Nice! Two are perfectly placed!",
    "three_placed": "So close! Just one more to go!",
    "keep_going": "Keep analyzing the patterns...",
}

_PLACED_TIERS: Dict[int, HintTier] = {1: "one_placed", 2: "two_placed", 3: "three_placed"}


def hint_for(feedback: Feedback) -> HintTier:
    exact, color = feedback
    if exact == 0:
        return "no_match" if color == 0 else "right_colors"
    return _PLACED_TIERS.get(exact, "keep_going")


def running_low(attempts_used: int, max_attempts: int) -> bool:
    """True for the last two guesses of a game still in progress."""
    return max_attempts - 2 <= attempts_used < max_attempts


WIN_MESSAGES: Dict[WinRating, str] = {
    "hole_in_one": "INCREDIBLE! A hole-in-one!",
    "master": "AMAZING! You're a master codebreaker!",
    "excellent": "EXCELLENT! Great logical thinking!",
    "well_done": "Well done!",
}


def rate_win(attempts_used: int) -> WinRating:
    if attempts_used <= 1:
        return "hole_in_one"
    if attempts_used <= 3:
        return "master"
    if attempts_used <= 6:
        return "excellent"
    return "well_done"
