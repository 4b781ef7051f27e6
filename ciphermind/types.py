"""
Labels for clarity.
"""

from typing import List, Literal

Symbol = str  # one color letter, e.g. "R"
Code = List[Symbol]  # ordered, repeats allowed
GameStatus = Literal["in_progress", "won", "lost", "abandoned"]
HintTier = Literal[
    "no_match", "right_colors", "one_placed", "two_placed", "three_placed", "keep_going"
]
WinRating = Literal["hole_in_one", "master", "excellent", "well_done"]
