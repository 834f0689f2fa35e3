"""
WebSocket Event Handlers

Real-time key presses and game-over notifications for game clients.
Each game has a Socket.IO room named game_<game_id>.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.game import GameEvent
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.share import build_share_text


def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def on_game_over(game_id, event, engine):
        """Tell every client of the game that it just ended."""
        state = engine.state
        socketio.emit(event.value, {
            'game_id': game_id,
            'attempts': state.current_row,
            'max_attempts': state.max_attempts,
            'answer': state.secret_word,
            'share_text': build_share_text(engine)
        }, room=game_room(game_id))
        game_logger.logger.info(f"WebSocket: broadcast {event.value} for game {game_id}")

    game_service = get_game_service()
    if game_service:
        game_service.subscribe(on_game_over)
    else:
        game_logger.logger.warning("WebSocket handlers registered without a game service")

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None):
        """Join a game room and receive its current state."""
        game_id = data['game_id']
        game_logger.log_user_action(request, 'join_game', game_id)

        try:
            state = game_service.get_game_state(game_id)
            if state is None:
                # Deleted between the decorator's check and this read
                emit('error', {'error': 'Game not found'})
                return

            join_room(game_room(game_id))
            emit('game_state_update', {
                'success': True,
                'state': asdict(state)
            })
        except Exception as e:
            game_logger.log_error(request, e, 'join_game', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None):
        """Leave a game room."""
        game_id = data['game_id']
        leave_room(game_room(game_id))
        game_logger.log_user_action(request, 'leave_game', game_id)

    @socketio.on('key_press')
    @websocket_game_required
    def handle_key_press(data, game_service=None):
        """Forward a key press and broadcast the resulting state."""
        game_id = data['game_id']
        if 'key' not in data:
            emit('error', {'error': 'Key is required'})
            return

        key = data['key']
        game_logger.log_user_action(request, 'key_press', game_id, key=key, transport='websocket')

        try:
            changed = game_service.press_key(game_id, key)
        except Exception as e:
            game_logger.log_error(request, e, 'key_press', game_id)
            emit('error', {'error': str(e)})
            return

        broadcast_game_state_update(game_id, socketio, changed=changed)

    @socketio.on('restart_game')
    @websocket_game_required
    def handle_restart_game(data, game_service=None):
        """Restart the game for everybody watching it."""
        game_id = data['game_id']
        game_logger.log_user_action(request, 'restart', game_id, transport='websocket')

        try:
            game_service.restart_game(game_id)
        except Exception as e:
            game_logger.log_error(request, e, 'restart', game_id)
            emit('error', {'error': str(e)})
            return

        broadcast_game_state_update(game_id, socketio, changed=True)


def broadcast_game_state_update(game_id, socketio, changed=True):
    """Broadcast game state update to all clients in a game room."""
    try:
        game_service = get_game_service()
        if not game_service:
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            return

        socketio.emit('game_state_update', {
            'success': True,
            'changed': changed,
            'state': asdict(state)
        }, room=game_room(game_id))

    except Exception as e:
        game_logger.logger.error(f"Error broadcasting game state for {game_id}: {e}")
