"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    CLEAR, EMPTY_CELL, ENTER, LETTERS,
    Color, GameEvent, GameState, GameStatus, GameView
)

__all__ = [
    'CLEAR', 'EMPTY_CELL', 'ENTER', 'LETTERS',
    'Color', 'GameEvent', 'GameState', 'GameStatus', 'GameView'
]
