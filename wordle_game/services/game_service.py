"""
Game Service

Keeps one GameEngine per game session and turns engine state into
client-facing views.
"""

import random
import threading
import uuid
from typing import Callable, Dict, List, Optional, Sequence

from ..config.game_settings import MAX_ATTEMPTS, WORD_LIST, load_word_list
from ..models.game import GameEvent, GameState, GameStatus, GameView
from ..utils.game_logger import game_logger
from .game_engine import GameEngine

GameListener = Callable[[str, GameEvent, GameEngine], None]


class GameService:
    """
    Game session manager.

    This class handles:
    - Game session management with unique game IDs
    - Forwarding key presses and restarts to the session's engine
    - Building GameView objects without exposing answers of running games
    - Fanning WON / LOST engine events out to listeners
    """

    def __init__(self,
                 word_list: Optional[Sequence[str]] = None,
                 max_attempts: int = MAX_ATTEMPTS,
                 strict_letter_counts: bool = False,
                 rng: Optional[random.Random] = None):
        self.word_list = list(word_list) if word_list else WORD_LIST.copy()
        self.max_attempts = max_attempts
        self.strict_letter_counts = strict_letter_counts
        self.games: Dict[str, GameEngine] = {}
        self._rng = rng or random.Random()
        self._listeners: List[GameListener] = []
        self._lock = threading.RLock()

    @property
    def lock(self):
        """Held while a game is changed or read into a view."""
        return self._lock

    def subscribe(self, listener: GameListener) -> None:
        """Register a listener called as listener(game_id, event, engine)."""
        self._listeners.append(listener)

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        engine = GameEngine(
            self.word_list,
            max_attempts=self.max_attempts,
            strict_letter_counts=self.strict_letter_counts,
            rng=self._rng,
        )
        engine.subscribe(GameEvent.WON, lambda state: self._on_game_over(game_id, GameEvent.WON, state))
        engine.subscribe(GameEvent.LOST, lambda state: self._on_game_over(game_id, GameEvent.LOST, state))

        with self._lock:
            self.games[game_id] = engine

        game_logger.log_game_event(game_id, 'game_created', max_attempts=self.max_attempts)
        return game_id

    def has_game(self, game_id: str) -> bool:
        return game_id in self.games

    def get_engine(self, game_id: str) -> Optional[GameEngine]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameView]:
        """
        Returns the current game view for a session.

        The answer is only included once the game is over.
        """
        engine = self.games.get(game_id)
        if engine is None:
            return None
        with self._lock:
            return self.build_view(game_id, engine)

    @staticmethod
    def build_view(game_id: str, engine: GameEngine) -> GameView:
        """Call with the service lock held so all fields come from one state."""
        state = engine.state
        return GameView(
            game_id=game_id,
            grid=engine.grid(),
            current_row=state.current_row,
            current_column=state.current_column,
            status=state.status.value,
            max_attempts=state.max_attempts,
            word_length=state.word_length,
            cell_colors=[
                [color.value for color in engine.row_colors(row)]
                for row in range(state.max_attempts)
            ],
            key_colors={letter: color.value for letter, color in engine.keyboard_colors().items()},
            answer=state.secret_word if state.status != GameStatus.IN_PROGRESS else None,
        )

    def press_key(self, game_id: str, key) -> Optional[bool]:
        """
        Forwards one key press to the game's engine.

        Returns:
            True if the state changed, False for a no-op, None if game not found
        """
        engine = self.games.get(game_id)
        if engine is None:
            return None

        with self._lock:
            before = engine.state
            engine.submit_key(key)
            return engine.state is not before

    def restart_game(self, game_id: str) -> Optional[GameView]:
        """Restarts a session in place; the game ID stays the same."""
        engine = self.games.get(game_id)
        if engine is None:
            return None

        with self._lock:
            previous_status = engine.status()
            engine.restart()
            view = self.build_view(game_id, engine)

        game_logger.log_game_event(game_id, 'game_restarted', previous_status=previous_status.value)
        return view

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False

    def _on_game_over(self, game_id: str, event: GameEvent, state: GameState) -> None:
        game_logger.log_game_event(
            game_id, event.value,
            attempts=state.current_row,
            max_attempts=state.max_attempts,
            target_word=state.secret_word
        )

        engine = self.games.get(game_id)
        if engine is None:
            return
        for listener in list(self._listeners):
            try:
                listener(game_id, event, engine)
            except Exception as e:
                game_logger.logger.error(f"Game listener failed for {event.value} in game {game_id}: {e}")


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=None, rng: Optional[random.Random] = None) -> GameService:
    """Initialize the global game service instance from a Config class."""
    global _game_service

    word_list = None
    max_attempts = MAX_ATTEMPTS
    strict_letter_counts = False
    if config_class is not None:
        if getattr(config_class, 'WORD_LIST_PATH', None):
            word_list = load_word_list(config_class.WORD_LIST_PATH)
        max_attempts = getattr(config_class, 'MAX_ATTEMPTS', MAX_ATTEMPTS)
        strict_letter_counts = getattr(config_class, 'STRICT_LETTER_COUNTS', False)

    _game_service = GameService(
        word_list=word_list,
        max_attempts=max_attempts,
        strict_letter_counts=strict_letter_counts,
        rng=rng,
    )
    return _game_service
