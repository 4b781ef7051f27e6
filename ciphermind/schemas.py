"""
Pydantic models for everything the core hands back to a front-end.
- A renderer (terminal, web page, test) reads these and never has to
  re-derive game logic.
- The secret only appears once a game is over.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from .types import GameStatus, HintTier, WinRating


# 1. Feedback for a single guess (one transcript row)
class GuessEntryOut(BaseModel):
    guess: List[str] = Field(..., description="The player's guess, canonical letters")
    exact: int = Field(..., ge=0, description="Right color, right position")
    color: int = Field(..., ge=0, description="Right color, wrong position")
    hint: HintTier = Field(..., description="Advisory hint tier for this feedback")
    timestamp: float = Field(..., description="When the guess was made")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": ["R", "B", "Y", "M"], "exact": 1, "color": 2,
                 "hint": "one_placed", "timestamp": 1760000000.0},
            ]
        }
    }


# 2. Result of submitting a guess
class TurnResult(BaseModel):
    feedback: GuessEntryOut = Field(..., description="Feedback for the guess just played")
    status: GameStatus = Field(..., description="Game state after this guess")
    attempts_used: int = Field(..., description="Guesses played so far")
    attempts_left: int = Field(..., description="How many guesses remain")
    hint: Optional[HintTier] = Field(None, description="Hint tier, only while the game continues")
    hint_message: Optional[str] = Field(None, description="Text for the hint tier")
    running_low: bool = Field(False, description="True for the last two guesses")
    rating: Optional[WinRating] = Field(None, description="How good the win was (won only)")
    rating_message: Optional[str] = Field(None, description="Text for the rating")
    secret: Optional[List[str]] = Field(None, description="The secret code (only revealed if game is over)")
    history: List[GuessEntryOut] = Field(default_factory=list, description="All guesses so far, oldest first")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Game lost. No more guesses.')")


# 3. Overall state of one session (for transcript / resume screens)
class SessionSnapshot(BaseModel):
    session_id: str = Field(..., description="Unique ID for the session")
    status: GameStatus = Field(..., description="Current state of the game")
    attempts_used: int = Field(..., description="Guesses played so far")
    attempts_left: int = Field(..., description="How many guesses remain")
    code_length: int = Field(..., description="Pegs in the code")
    alphabet: List[str] = Field(..., description="Colors that may be guessed")
    history: List[GuessEntryOut] = Field(..., description="All guesses made so far with feedback")
    secret: Optional[List[str]] = Field(None, description="Only filled in once the game is over")


# 4. Scoreboard across the sessions of one store
class StatsOut(BaseModel):
    games_started: int = Field(..., description="Total games started")
    games_won: int = Field(..., description="Total games won")
    games_lost: int = Field(..., description="Total games lost")
    games_abandoned: int = Field(..., description="Games the player quit")

    current_streak: int = Field(..., description="Current consecutive wins")
    best_streak: int = Field(..., description="Best consecutive wins")

    average_guesses_to_win: Optional[float] = Field(
        None, description="Average number of guesses used in wins"
    )
    fastest_win_attempts: Optional[int] = Field(
        None, description="Fewest guesses taken to win a game"
    )
