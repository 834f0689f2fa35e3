"""
Services Package

Contains the game engine and the session service built on it.
"""

from .game_engine import GameEngine
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'GameEngine',
    'GameService', 'get_game_service', 'initialize_game_service'
]
