"""
One game, from secret generation to a terminal state.

States: in_progress -> won | lost | abandoned. Nothing leaves a terminal
state; a new game means a new Session.

Core-facing entry points (what a front-end calls):
new_session(length, alphabet, attempt_limit) -> Session
submit(session, raw_guess)                   -> TurnResult   (raises GuessError)
abandon(session)                             -> revealed secret
"""

import logging
import random
from dataclasses import dataclass, field
from time import time
from typing import List, Optional, Sequence, Tuple
from uuid import uuid4

from .config import DEFAULT_RULES, Rules, load_settings
from .engine import (
    Feedback, HINT_MESSAGES, WIN_MESSAGES, hint_for, is_win, rate_win, running_low, score_guess,
)
from .errors import ContractViolation
from .schemas import GuessEntryOut, SessionSnapshot, TurnResult
from .secret import generate_code, make_rng
from .types import Code, GameStatus, HintTier, Symbol
from .validation import RawGuess, validate_guess

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessEntry:
    guess: Tuple[Symbol, ...]
    feedback: Feedback
    hint: HintTier
    timestamp: float

    def out(self) -> GuessEntryOut:
        return GuessEntryOut(
            guess=list(self.guess),
            exact=self.feedback.exact,
            color=self.feedback.color,
            hint=self.hint,
            timestamp=self.timestamp,
        )


@dataclass
class Session:
    secret: Code
    rules: Rules = DEFAULT_RULES
    id: str = field(default_factory=lambda: str(uuid4()))
    attempts: int = 0
    status: GameStatus = "in_progress"
    history: List[GuessEntry] = field(default_factory=list)
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)

    def __post_init__(self):
        self.secret = list(self.secret)
        if len(self.secret) != self.rules.code_length:
            raise ValueError(
                f"Secret must have exactly {self.rules.code_length} pegs, got {len(self.secret)}."
            )
        for symbol in self.secret:
            if symbol not in self.rules.alphabet:
                raise ValueError(f"Secret uses '{symbol}', which is not in the alphabet.")

    @classmethod
    def start(cls, rules: Rules = DEFAULT_RULES, rng: Optional[random.Random] = None) -> "Session":
        """Fresh game with a random secret drawn from this session's own source."""
        secret = generate_code(rules.code_length, rules.alphabet, rng or make_rng())
        session = cls(secret=secret, rules=rules)
        log.info(
            "Session %s started (%d pegs, %d colors, %d attempts)",
            session.id, rules.code_length, len(rules.alphabet), rules.max_attempts,
        )
        return session

    # --- State helpers ---

    @property
    def is_over(self) -> bool:
        return self.status != "in_progress"

    @property
    def attempts_left(self) -> int:
        return max(0, self.rules.max_attempts - self.attempts)

    def _require_in_progress(self, action: str) -> None:
        if self.is_over:
            raise ContractViolation(
                f"Cannot {action} session {self.id}: game already {self.status}. Start a new session."
            )

    def revealed_secret(self) -> Optional[Code]:
        """The secret, but only once the game is over."""
        return list(self.secret) if self.is_over else None

    # --- Transitions ---

    def submit(self, raw_guess: RawGuess) -> TurnResult:
        self._require_in_progress("submit a guess to")

        # Bad input raises here, before anything is counted
        guess = validate_guess(raw_guess, self.rules.code_length, self.rules.alphabet)
        return self.play(guess)

    def play(self, guess: Sequence[Symbol]) -> TurnResult:
        """Score an already validated guess and advance the state machine."""
        self._require_in_progress("submit a guess to")
        for symbol in guess:
            if symbol not in self.rules.alphabet:
                raise ContractViolation(
                    f"Guess uses '{symbol}', which is not in the alphabet. Validate input with submit()."
                )

        feedback = score_guess(self.secret, guess)
        self.attempts += 1
        entry = GuessEntry(
            guess=tuple(guess),
            feedback=feedback,
            hint=hint_for(feedback),
            timestamp=time(),
        )
        self.history.append(entry)

        if is_win(self.secret, guess):
            self.status = "won"
        elif self.attempts >= self.rules.max_attempts:
            self.status = "lost"
        self.updated_at = time()

        log.debug("Session %s guess %d: %s", self.id, self.attempts, feedback)
        if self.is_over:
            log.info("Session %s %s after %d guess(es)", self.id, self.status, self.attempts)

        return self._turn_result(entry)

    def abandon(self) -> Code:
        """Player quits. Reveals the secret; counts as neither win nor loss."""
        self._require_in_progress("abandon")
        self.status = "abandoned"
        self.updated_at = time()
        log.info("Session %s abandoned after %d guess(es)", self.id, self.attempts)
        return list(self.secret)

    # --- Output ---

    def _turn_result(self, entry: GuessEntry) -> TurnResult:
        still_playing = not self.is_over
        rating = rate_win(self.attempts) if self.status == "won" else None
        return TurnResult(
            feedback=entry.out(),
            status=self.status,
            attempts_used=self.attempts,
            attempts_left=self.attempts_left,
            hint=entry.hint if still_playing else None,
            hint_message=HINT_MESSAGES[entry.hint] if still_playing else None,
            running_low=still_playing and running_low(self.attempts, self.rules.max_attempts),
            rating=rating,
            rating_message=WIN_MESSAGES[rating] if rating else None,
            secret=self.revealed_secret(),
            history=[h.out() for h in self.history],
            note=(f"Game {self.status}. No more guesses allowed." if self.is_over else None),
        )

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            session_id=self.id,
            status=self.status,
            attempts_used=self.attempts,
            attempts_left=self.attempts_left,
            code_length=self.rules.code_length,
            alphabet=list(self.rules.alphabet),
            history=[h.out() for h in self.history],
            secret=self.revealed_secret(),
        )


def new_session(
    length: Optional[int] = None,
    alphabet: Optional[Sequence[Symbol]] = None,
    attempt_limit: Optional[int] = None,
    seed: Optional[int] = None,
) -> Session:
    """Anything left as None comes from the CIPHERMIND_* settings."""
    settings = load_settings()
    defaults = settings.rules()
    rules = Rules(
        code_length=length if length is not None else defaults.code_length,
        alphabet=tuple(alphabet) if alphabet is not None else defaults.alphabet,
        max_attempts=attempt_limit if attempt_limit is not None else defaults.max_attempts,
    )
    return Session.start(rules, make_rng(seed if seed is not None else settings.seed))


def submit(session: Session, raw_guess: RawGuess) -> TurnResult:
    return session.submit(raw_guess)


def abandon(session: Session) -> Code:
    return session.abandon()
