"""
Secret code generator.
Each peg is an independent, uniform pick from the alphabet (repeats allowed).
Fairness matters here, not secrecy, so a plain random.Random is enough. Every
session gets its own source, which also lets tests pin the secret with a seed.
"""

import logging
import random
from typing import Optional, Sequence

from .types import Code, Symbol

log = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> random.Random:
    # seed=None -> seeded from OS entropy; any int -> reproducible games
    return random.Random(seed)


def generate_code(length: int, alphabet: Sequence[Symbol], rng: Optional[random.Random] = None) -> Code:
    """
    Example:
      generate_code(4, "RGBYMC", make_rng(7)) -> four letters from RGBYMC,
      the same four every time for seed 7.
    """
    # Bad configuration is a bug in the caller, not something to recover from
    if length < 1:
        raise ValueError("Code length must be at least 1.")
    if len(alphabet) == 0:
        raise ValueError("Alphabet must contain at least one symbol.")

    if rng is None:
        rng = make_rng()

    symbols = list(alphabet)
    code = []
    while len(code) < length:
        code.append(rng.choice(symbols))

    log.debug("Generated a %d-peg code from %d colors", length, len(symbols))
    return code
