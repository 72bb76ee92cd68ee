"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from ..services.evaluator import InvalidGuess
from ..services.game_service import GameNotFound, get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import state_to_dict

game_bp = Blueprint('game', __name__)

INSTRUCTIONS = (
    f"1. Guess a {WORD_LENGTH}-letter word.",
    "2. Exact means the letter is in the right spot.",
    "3. Present means the letter is in the word but in a different spot.",
    "4. Absent means the letter is not in the word.",
    f"5. You have {MAX_ATTEMPTS} attempts to guess the word.",
)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _not_found(action: str, game_id: str):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _bad_request(action: str, error: str, game_id=None, **kwargs):
    error_response = {
        'success': False,
        'error': error
    }
    game_logger.log_server_response(request, action, False, error_response, game_id, **kwargs)
    return jsonify(error_response), 400


def _json_object():
    """Request body as a dict; None when the body is JSON but not an object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _server_error(action: str, error: Exception, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = _json_object()
        if data is None:
            return _bad_request('new_game', 'Request body must be a JSON object')
        target = data.get('target')

        game_logger.log_user_action(request, 'new_game', explicit_target=target is not None)

        try:
            game_id = game_service.create_new_game(target)
        except ValueError as e:
            return _bad_request('new_game', str(e))

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'game_id': game_id,
            'state': state_to_dict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': state_to_dict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            attempts=state.attempts, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('get_state', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = _json_object()
        if not data or 'guess' not in data:
            return _bad_request('submit_guess', 'Guess is required', game_id)

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        try:
            state = game_service.make_guess(game_id, guess)
        except GameNotFound:
            return _not_found('submit_guess', game_id)
        except InvalidGuess as e:
            return _bad_request('submit_guess', str(e), game_id, attempted_guess=guess)

        response_data = {
            'success': True,
            'feedback': state.guess_results[-1],
            'state': state_to_dict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, attempt=state.attempts, status=state.status
        )

        if state.game_over:
            event = 'game_won' if state.won else 'game_lost'
            game_logger.log_game_event(
                game_id, event, request.remote_addr,
                attempts_used=state.attempts, target_word=state.answer,
                final_guess=guess
            )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
def reset_game(game_id):
    """Reset attempts while keeping the same target word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'reset_game', game_id)

        try:
            state = game_service.reset_game(game_id)
        except GameNotFound:
            return _not_found('reset_game', game_id)

        response_data = {
            'success': True,
            'state': state_to_dict(state)
        }
        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('reset_game', e, game_id)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
def restart_game(game_id):
    """Start over under the same game id with a new target word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = _json_object()
        if data is None:
            return _bad_request('restart_game', 'Request body must be a JSON object', game_id)
        target = data.get('target')

        game_logger.log_user_action(request, 'restart_game', game_id, explicit_target=target is not None)

        try:
            state = game_service.restart_game(game_id, target)
        except GameNotFound:
            return _not_found('restart_game', game_id)
        except ValueError as e:
            return _bad_request('restart_game', str(e), game_id)

        response_data = {
            'success': True,
            'state': state_to_dict(state)
        }
        game_logger.log_server_response(request, 'restart_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_restarted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('restart_game', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        if not game_service.delete_game(game_id):
            return _not_found('delete_game', game_id)

        response_data = {
            'success': True
        }
        game_logger.log_server_response(request, 'delete_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('delete_game', e, game_id)


@game_bp.route('/rules', methods=['GET'])
def rules():
    """Game rules shown by the instructions dialog."""
    return jsonify({
        'success': True,
        'word_length': WORD_LENGTH,
        'max_attempts': MAX_ATTEMPTS,
        'instructions': list(INSTRUCTIONS)
    })


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }
        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({
            'status': 'error',
            'error': str(e)
        }), 500
