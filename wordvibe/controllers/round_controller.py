"""
Round Controller

Handles all round-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify, current_app
from dataclasses import asdict
from ..models.errors import GuessRejected, WordVibeError
from ..services.round_service import ROUND_MODES
from ..utils.dates import today_utc
from ..utils.decorators import require_json, require_round_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_flag

round_bp = Blueprint('round', __name__)


@round_bp.route('/rounds', methods=['POST'])
@require_round_service
def new_round(round_service):
    """Create a new round."""
    try:
        data = request.get_json(silent=True) or {}
        mode = data.get('mode', 'daily')
        locale = data.get('locale', current_app.config.get('DEFAULT_LOCALE', 'en'))
        hard_mode = parse_flag(data.get('hard_mode', current_app.config.get('HARD_MODE_DEFAULT', False)), 'hard_mode')
        date = data.get('date') or today_utc()

        if mode not in ROUND_MODES:
            error_response = {
                'success': False,
                'error': 'Invalid mode. Must be "daily" or "random"'
            }
            game_logger.log_server_response(request, 'new_round', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_client_action(
            request, 'new_round', extra_data={'mode': mode, 'locale': locale, 'hard_mode': hard_mode}
        )

        round_id = round_service.create_round(mode, locale, hard_mode, date)
        state = round_service.get_round_state(round_id)

        response_data = {
            'success': True,
            'round_id': round_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_round', True, response_data, round_id,
            mode=mode, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except (WordVibeError, ValueError) as e:
        game_logger.log_error(request, e, 'new_round')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_round', False, error_response)
        return jsonify(error_response), 400


@round_bp.route('/rounds/<round_id>', methods=['GET'])
@require_round_service
def get_state(round_id, round_service):
    """Get current round state."""
    try:
        game_logger.log_client_action(request, 'get_state', round_id)

        state = round_service.get_round_state(round_id)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Round not found'
            }
            game_logger.log_server_response(request, 'get_state', False, error_response, round_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, round_id,
            current_row=state.current_row, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', round_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, round_id)
        return jsonify(error_response), 500


@round_bp.route('/rounds/<round_id>/guess', methods=['POST'])
@require_round_service
@require_json('guess')
def make_guess(round_id, round_service, data):
    """Submit a guess for validation and evaluation."""
    try:
        guess = data['guess']

        game_logger.log_client_action(
            request, 'submit_guess', round_id,
            guess=guess, guess_length=len(guess) if isinstance(guess, str) else None
        )

        if round_service.get_round_state(round_id) is None:
            error_response = {
                'success': False,
                'error': 'Round not found'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, round_id)
            return jsonify(error_response), 404

        try:
            state = round_service.make_guess(round_id, guess)
        except GuessRejected as e:
            error_response = {
                'success': False,
                'error': e.reason
            }
            if e.violation is not None:
                error_response['violation'] = e.violation.to_dict()
                game_logger.log_game_event(
                    round_id, 'hard_mode_violation', request.remote_addr,
                    attempted_guess=guess, violation=e.violation.to_dict()
                )
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, round_id,
                validation_error=e.reason, attempted_guess=guess
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'state': asdict(state),
            'statistics_event': round_service.statistics_event(round_id)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, round_id,
            guess=guess, row=state.current_row, game_over=state.game_over
        )

        if state.game_over:
            game_logger.log_game_event(
                round_id, 'round_won' if state.won else 'round_lost', request.remote_addr,
                rows_used=state.current_row, mode=state.mode, vibe=state.vibe['score']
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', round_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, round_id)
        return jsonify(error_response), 500


@round_bp.route('/rounds/<round_id>', methods=['DELETE'])
@require_round_service
def delete_round(round_id, round_service):
    """Delete a round session."""
    game_logger.log_client_action(request, 'delete_round', round_id)

    success = round_service.delete_round(round_id)
    response_data = {
        'success': success
    }

    game_logger.log_server_response(request, 'delete_round', success, response_data, round_id)

    if success:
        game_logger.log_game_event(round_id, 'round_deleted', request.remote_addr)
        return jsonify(response_data)
    return jsonify(response_data), 404


@round_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    from ..services.round_service import get_round_service

    round_service = get_round_service()

    game_logger.log_client_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'active_rounds': len(round_service.rounds) if round_service else 0,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
