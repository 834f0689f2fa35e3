"""
Game Engine

Pure Wordle state machine: grid and cursor handling, color evaluation and
the win/loss lifecycle of a single game. No I/O happens here; presentation
layers drive the engine through submit_key() and render from its queries.
"""

import random
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Sequence

from ..models.game import (
    CLEAR, EMPTY_CELL, ENTER, LETTERS,
    Color, GameEvent, GameState, GameStatus
)

EventCallback = Callable[[GameState], None]

# Best outcome wins when a key has mixed results across attempts
_KEY_PRIORITY = {
    Color.UNUSED: 0,
    Color.ABSENT: 1,
    Color.PRESENT: 2,
    Color.EXACT: 3,
}


def copy_grid(grid: Sequence[Sequence[str]]) -> List[List[str]]:
    """Make a copy of a 2D grid."""
    return [list(row) for row in grid]


def empty_grid(rows: int, columns: int) -> List[List[str]]:
    return [[EMPTY_CELL] * columns for _ in range(rows)]


def normalize_key(key) -> Optional[str]:
    """
    Map a raw key token onto the closed keyboard alphabet.

    Returns:
        The uppercase letter, ENTER or CLEAR; None for anything else
    """
    if not isinstance(key, str):
        return None
    if key in (ENTER, CLEAR):
        return key
    if len(key) == 1 and key.upper() in LETTERS:
        return key.upper()
    return None


class GameEngine:
    """
    Single Wordle game.

    This class handles:
    - Secret word selection from a fixed word list
    - Key presses (letters, CLEAR, ENTER) against the grid and cursor
    - Per-cell and per-key color evaluation of submitted rows
    - WON / LOST detection and notification of subscribers
    """

    def __init__(self,
                 word_list: Sequence[str],
                 max_attempts: int = 6,
                 strict_letter_counts: bool = False,
                 rng: Optional[random.Random] = None):
        if not word_list:
            raise ValueError("Word list cannot be empty")
        if max_attempts < 1:
            raise ValueError("At least one attempt is required")

        self.word_list = [word.upper() for word in word_list]
        self.max_attempts = max_attempts
        self.strict_letter_counts = strict_letter_counts
        self._rng = rng or random.Random()
        self._subscribers: Dict[GameEvent, List[EventCallback]] = defaultdict(list)
        self._state = self._new_state()

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        """Current immutable record; replaced on every transition."""
        return self._state

    @property
    def secret_word(self) -> str:
        return self._state.secret_word

    @property
    def word_length(self) -> int:
        return self._state.word_length

    def status(self) -> GameStatus:
        return self._state.status

    def current_row(self) -> int:
        return self._state.current_row

    def current_column(self) -> int:
        return self._state.current_column

    def grid(self) -> List[List[str]]:
        """Snapshot of the grid, safe for the caller to modify."""
        return copy_grid(self._state.grid)

    def is_over(self) -> bool:
        return self._state.status != GameStatus.IN_PROGRESS

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def submit_key(self, key) -> None:
        """
        Apply one key press.

        Letters fill the next cell, CLEAR empties the previous one and ENTER
        submits a complete row. Everything else, and any key once the game
        is over, leaves the state untouched.
        """
        state = self._state
        if state.status != GameStatus.IN_PROGRESS:
            return

        token = normalize_key(key)
        if token is None:
            return

        if token == CLEAR:
            if state.current_column > 0:
                grid = copy_grid(state.grid)
                grid[state.current_row][state.current_column - 1] = EMPTY_CELL
                self._state = GameState(
                    secret_word=state.secret_word,
                    grid=grid,
                    current_row=state.current_row,
                    current_column=state.current_column - 1,
                    status=state.status,
                )
        elif token == ENTER:
            if state.current_column == state.word_length:
                self._submit_row(state)
        elif state.current_column < state.word_length:
            grid = copy_grid(state.grid)
            grid[state.current_row][state.current_column] = token
            self._state = GameState(
                secret_word=state.secret_word,
                grid=grid,
                current_row=state.current_row,
                current_column=state.current_column + 1,
                status=state.status,
            )

    def _submit_row(self, state: GameState) -> None:
        submitted = state.grid[state.current_row]
        next_row = state.current_row + 1

        status = GameStatus.IN_PROGRESS
        if "".join(submitted).upper() == state.secret_word:
            status = GameStatus.WON
        elif next_row == state.max_attempts:
            status = GameStatus.LOST

        self._state = GameState(
            secret_word=state.secret_word,
            grid=state.grid,
            current_row=next_row,
            current_column=0,
            status=status,
        )

        if status == GameStatus.WON:
            self._emit(GameEvent.WON)
        elif status == GameStatus.LOST:
            self._emit(GameEvent.LOST)

    def restart(self) -> None:
        """Start over with a freshly picked word and an empty grid."""
        self._state = self._new_state()

    def _new_state(self) -> GameState:
        secret_word = self._rng.choice(self.word_list)
        return GameState(
            secret_word=secret_word,
            grid=empty_grid(self.max_attempts, len(secret_word)),
        )

    # ------------------------------------------------------------------
    # Color evaluation
    # ------------------------------------------------------------------

    def cell_color(self, row: int, col: int) -> Color:
        """
        Color of one grid cell.

        Rows that have not been submitted yet are always NEUTRAL, whatever
        they contain.

        Raises:
            IndexError: If the position lies outside the grid
        """
        state = self._state
        if row < 0 or not 0 <= col < state.word_length:
            raise IndexError(f"Cell ({row}, {col}) is outside the grid")
        if row >= state.current_row:
            return Color.NEUTRAL

        if self.strict_letter_counts:
            return self._evaluate_row_strict(state.grid[row])[col]

        letter = state.grid[row][col]
        if letter == state.secret_word[col]:
            return Color.EXACT
        if letter in state.secret_word:
            return Color.PRESENT
        return Color.ABSENT

    def row_colors(self, row: int) -> List[Color]:
        return [self.cell_color(row, col) for col in range(self.word_length)]

    def _evaluate_row_strict(self, letters: Sequence[str]) -> List[Color]:
        """
        Frequency-aware evaluation: exact matches consume secret letters
        first, PRESENT is only given while unmatched occurrences remain.
        """
        secret_chars: List[Optional[str]] = list(self._state.secret_word)
        result: List[Optional[Color]] = [None] * len(letters)

        for i, letter in enumerate(letters):
            if letter == secret_chars[i]:
                result[i] = Color.EXACT
                secret_chars[i] = None

        for i, letter in enumerate(letters):
            if result[i] is not None:
                continue
            if letter in secret_chars:
                result[i] = Color.PRESENT
                secret_chars[secret_chars.index(letter)] = None
            else:
                result[i] = Color.ABSENT

        return result  # type: ignore[return-value]

    def key_color(self, key) -> Color:
        """Best color a key has earned over all submitted rows."""
        token = normalize_key(key)
        if token is None or token in (ENTER, CLEAR):
            return Color.UNUSED

        best = Color.UNUSED
        for row in range(self._state.current_row):
            for col, letter in enumerate(self._state.grid[row]):
                if letter != token:
                    continue
                color = self.cell_color(row, col)
                if _KEY_PRIORITY[color] > _KEY_PRIORITY[best]:
                    best = color
        return best

    def keyboard_colors(self) -> Dict[str, Color]:
        return {letter: self.key_color(letter) for letter in LETTERS}

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def subscribe(self, event: GameEvent, callback: EventCallback) -> None:
        """Register a callback fired once per WON / LOST transition."""
        self._subscribers[event].append(callback)

    def _emit(self, event: GameEvent) -> None:
        state = self._state
        for callback in list(self._subscribers[event]):
            callback(state)
