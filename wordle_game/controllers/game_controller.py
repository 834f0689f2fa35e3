"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger
from ..utils.share import build_share_text, keyboard_layout

game_bp = Blueprint('game', __name__)


def _error(action, message, status_code, game_id=None, **kwargs):
    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, error_response, game_id, **kwargs)
    return jsonify(error_response), status_code


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _error('new_game', 'Game service unavailable', 500)

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        return _error('new_game', str(e), 500)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_row=state.current_row, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        return _error('get_state', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game
def press_key(game_id, game_service):
    """Forward one keyboard key (a letter, ENTER or CLEAR) to the game."""
    try:
        data = request.get_json(silent=True)
        if not data or 'key' not in data:
            return _error('key_press', 'Key is required', 400, game_id)

        key = data['key']
        game_logger.log_user_action(request, 'key_press', game_id, key=key)

        changed = game_service.press_key(game_id, key)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'changed': changed,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'key_press', True, response_data, game_id,
            key=key, changed=changed, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key_press', game_id)
        return _error('key_press', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game
def restart_game(game_id, game_service):
    """Start over with a new word, keeping the game ID."""
    try:
        game_logger.log_user_action(request, 'restart', game_id)

        state = game_service.restart_game(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'restart', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'restart', game_id)
        return _error('restart', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/keyboard', methods=['GET'])
@require_game
def get_keyboard(game_id, game_service):
    """On-screen keyboard rows with the color of every key."""
    try:
        game_logger.log_user_action(request, 'get_keyboard', game_id)

        with game_service.lock:
            keyboard = keyboard_layout(game_service.get_engine(game_id))

        response_data = {
            'success': True,
            'keyboard': keyboard
        }

        game_logger.log_server_response(request, 'get_keyboard', True, {'success': True}, game_id)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_keyboard', game_id)
        return _error('get_keyboard', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/share', methods=['GET'])
@require_game
def share_result(game_id, game_service):
    """Text encoding of a finished game, ready for the clipboard."""
    try:
        game_logger.log_user_action(request, 'share', game_id)

        engine = game_service.get_engine(game_id)
        with game_service.lock:
            game_over = engine.is_over()
            text = build_share_text(engine)
        if not game_over:
            return _error('share', 'Game is still in progress', 400, game_id)

        response_data = {
            'success': True,
            'text': text
        }

        game_logger.log_server_response(request, 'share', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'share', game_id)
        return _error('share', str(e), 500, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        return _error('delete_game', str(e), 500, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'active_games': len(game_service.games) if game_service else 0,
            'word_count': len(game_service.word_list) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
