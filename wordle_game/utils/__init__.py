"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game, websocket_game_required
from .helpers import get_user_identity
from .game_logger import game_logger
from .share import build_share_text, keyboard_layout

__all__ = [
    'require_game', 'websocket_game_required', 'get_user_identity',
    'game_logger', 'build_share_text', 'keyboard_layout'
]
