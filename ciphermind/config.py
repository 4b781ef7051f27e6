"""
Single place to:
- Read game settings from env (a local .env is picked up too)
- Build the Rules a session is played with
- Configure logging for whatever front-end drives the game

Env vars:
CIPHERMIND_CODE_LENGTH    -> pegs in the code (default 4)
CIPHERMIND_ALPHABET       -> color letters (default RGBYMC)
CIPHERMIND_MAX_ATTEMPTS   -> guesses per game (default 10)
CIPHERMIND_SEED           -> fixed seed for the secret generator (default: OS entropy)
CIPHERMIND_LOG_LEVEL      -> logging level name (default INFO)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

# 1) Load env vars from .env if present
load_dotenv()

log = logging.getLogger(__name__)

# 2) Defaults (classic game: 4 pegs, 6 colors, 10 guesses)
CODE_LENGTH = 4
MAX_ATTEMPTS = 10
ALPHABET: Tuple[str, ...] = ("R", "G", "B", "Y", "M", "C")  # Red, Green, Blue, Yellow, Magenta, Cyan
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Rules:
    code_length: int = CODE_LENGTH
    alphabet: Tuple[str, ...] = ALPHABET
    max_attempts: int = MAX_ATTEMPTS

    def __post_init__(self):
        # A broken ruleset is a programming error, so fail right away
        if self.code_length < 1:
            raise ValueError("code_length must be at least 1.")
        if not self.alphabet:
            raise ValueError("alphabet must contain at least one symbol.")
        if any(len(symbol) != 1 for symbol in self.alphabet):
            raise ValueError("Every alphabet symbol must be a single character.")
        if len({symbol.upper() for symbol in self.alphabet}) != len(self.alphabet):
            raise ValueError("alphabet symbols must be distinct (ignoring case).")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        # Accept any iterable of symbols but store a tuple so Rules stays hashable
        object.__setattr__(self, "alphabet", tuple(self.alphabet))


DEFAULT_RULES = Rules()


@dataclass(frozen=True)
class Settings:
    code_length: int = CODE_LENGTH
    alphabet: str = "".join(ALPHABET)
    max_attempts: int = MAX_ATTEMPTS
    seed: Optional[int] = None
    log_level: str = "INFO"

    def rules(self) -> Rules:
        return Rules(
            code_length=self.code_length,
            alphabet=tuple(self.alphabet),
            max_attempts=self.max_attempts,
        )


def _int(name: str, default: Optional[int]) -> Optional[int]:
    """Read an int env var, falling back to the default when missing or malformed."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning("Ignoring %s=%r (not an integer); using %r", name, raw, default)
        return default


def load_settings() -> Settings:
    """Read the environment now (not at import) so tests can monkeypatch it."""
    alphabet = os.getenv("CIPHERMIND_ALPHABET", "").strip() or "".join(ALPHABET)
    return Settings(
        code_length=_int("CIPHERMIND_CODE_LENGTH", CODE_LENGTH),
        alphabet=alphabet,
        max_attempts=_int("CIPHERMIND_MAX_ATTEMPTS", MAX_ATTEMPTS),
        seed=_int("CIPHERMIND_SEED", None),
        log_level=os.getenv("CIPHERMIND_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging for a front-end. Safe to call more than once."""
    level_name = (level or load_settings().log_level).upper()
    numeric = logging.getLevelName(level_name)
    if not isinstance(numeric, int):
        log.warning("Unknown log level %r; using INFO", level_name)
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
