"""
In-memory store
Holds independent sessions (one per player or per "play again") plus a
scoreboard. Nothing is persisted; dropping the store drops everything.
"""

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Dict, Optional

from .config import Rules, Settings, load_settings
from .schemas import StatsOut, TurnResult
from .secret import make_rng
from .session import Session
from .types import Code
from .validation import RawGuess

log = logging.getLogger(__name__)


# Scoreboard structure
@dataclass
class Stats:
    games_started: int = 0
    games_won: int = 0
    games_lost: int = 0
    games_abandoned: int = 0

    current_streak: int = 0
    best_streak: int = 0

    total_guesses_in_wins: int = 0
    fastest_win_attempts: Optional[int] = None

    @property
    def average_guesses_to_win(self) -> Optional[float]:
        if self.games_won == 0:
            return None
        return self.total_guesses_in_wins / self.games_won

    def out(self) -> StatsOut:
        return StatsOut(
            games_started=self.games_started,
            games_won=self.games_won,
            games_lost=self.games_lost,
            games_abandoned=self.games_abandoned,
            current_streak=self.current_streak,
            best_streak=self.best_streak,
            average_guesses_to_win=self.average_guesses_to_win,
            fastest_win_attempts=self.fastest_win_attempts,
        )


class SessionStore:
    def __init__(self, rules: Optional[Rules] = None, settings: Optional[Settings] = None) -> None:
        settings = settings or load_settings()
        self.rules = rules or settings.rules()
        self._sessions: Dict[str, Session] = {}
        self._lock = RLock()
        self._stats = Stats()
        # CIPHERMIND_SEED fixes the whole sequence of secrets, not one secret
        self._seeds = make_rng(settings.seed)

    def create(self, rules: Optional[Rules] = None, seed: Optional[int] = None) -> Session:
        with self._lock:
            if seed is None:
                seed = self._seeds.getrandbits(64)
            # every session gets its own random source; nothing is shared
            session = Session.start(rules or self.rules, make_rng(seed))
            self._sessions[session.id] = session
            self._stats.games_started += 1
        return session

    def get(self, session_id: str) -> Optional[Session]:
        with self._lock:
            return self._sessions.get(session_id)

    def guess(self, session_id: str, raw_guess: RawGuess) -> Optional[TurnResult]:
        """
        None if the session is unknown. GuessError propagates for bad input
        (nothing changes); ContractViolation if the game is already over.
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None

            result = session.submit(raw_guess)

            # Update scoreboard exactly once, on the guess that ended the game
            if result.status in ("won", "lost"):
                self._update_stats_on_end(session)
            return result

    def abandon(self, session_id: str) -> Optional[Code]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            secret = session.abandon()
            self._stats.games_abandoned += 1
            self._stats.current_streak = 0
            return secret

    def discard(self, session_id: str) -> bool:
        """Forget a session (e.g. the player chose "play again")."""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    # Helper updates scoreboard exactly once per game
    def _update_stats_on_end(self, session: Session) -> None:
        if session.status == "won":
            self._stats.games_won += 1

            # streaks
            self._stats.current_streak += 1
            if self._stats.current_streak > self._stats.best_streak:
                self._stats.best_streak = self._stats.current_streak

            # guesses used
            self._stats.total_guesses_in_wins += session.attempts
            if self._stats.fastest_win_attempts is None or session.attempts < self._stats.fastest_win_attempts:
                self._stats.fastest_win_attempts = session.attempts
        else:
            self._stats.games_lost += 1
            self._stats.current_streak = 0
        log.debug("Scoreboard after session %s: %s", session.id, self._stats)

    def get_stats(self) -> StatsOut:
        with self._lock:
            return self._stats.out()

    def reset_stats(self) -> None:
        with self._lock:
            self._stats = Stats()
