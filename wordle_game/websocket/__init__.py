"""
WebSocket Package

Socket.IO event handlers of the game server.
"""

from .handlers import register_websocket_handlers, broadcast_game_state_update

__all__ = ['register_websocket_handlers', 'broadcast_game_state_update']
