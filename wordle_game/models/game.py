"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple


ENTER = "ENTER"
CLEAR = "CLEAR"
LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
EMPTY_CELL = ""

Grid = Tuple[Tuple[str, ...], ...]


def freeze_grid(grid: Sequence[Sequence[str]]) -> Grid:
    return tuple(tuple(row) for row in grid)


class Color(Enum):
    """Feedback color of a grid cell or keyboard key."""
    EXACT = "EXACT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    NEUTRAL = "NEUTRAL"
    UNUSED = "UNUSED"


class GameStatus(Enum):
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


class GameEvent(Enum):
    """Terminal transitions announced by the engine."""
    WON = "game_won"
    LOST = "game_lost"


@dataclass(frozen=True)
class GameState:
    """
    Engine-side game record.

    Immutable: every transition builds a new record. The grid is stored as
    tuples, so a record handed out can never be edited behind the engine.
    """
    secret_word: str
    grid: Grid
    current_row: int = 0
    current_column: int = 0
    status: GameStatus = GameStatus.IN_PROGRESS

    def __post_init__(self):
        object.__setattr__(self, "grid", freeze_grid(self.grid))

    @property
    def max_attempts(self) -> int:
        return len(self.grid)

    @property
    def word_length(self) -> int:
        return len(self.secret_word)

    def to_dict(self) -> Dict:
        return {
            "secret_word": self.secret_word,
            "grid": [list(row) for row in self.grid],
            "current_row": self.current_row,
            "current_column": self.current_column,
            "status": self.status.value,
        }


@dataclass
class GameView:
    """Client-facing game state (answer only included when game is over)."""
    game_id: str
    grid: List[List[str]]
    current_row: int
    current_column: int
    status: str
    max_attempts: int
    word_length: int
    cell_colors: List[List[str]]
    key_colors: Dict[str, str] = field(default_factory=dict)
    answer: Optional[str] = None
