"""
Request Decorators

Resolve the game service and the addressed game before a handler runs.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game(f):
    """
    Decorator for HTTP endpoints addressing /game/<game_id>.

    Passes the game service to the view as ``game_service`` and answers
    500 / 404 itself when the service or the game is missing.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        if not game_service.has_game(game_id):
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404

        return f(game_id, *args, game_service=game_service, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events carrying a ``game_id``."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = args[0] if args else None
        if not isinstance(data, dict) or not data.get('game_id'):
            emit('error', {'error': 'Game ID is required'})
            return

        if not game_service.has_game(data['game_id']):
            emit('error', {'error': 'Game not found'})
            return

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function
