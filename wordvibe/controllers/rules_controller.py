"""
Rules Controller

Stateless HTTP endpoints that expose the rules engine directly: evaluation,
hard mode checks, vibe scoring and daily word selection.
"""

from flask import Blueprint, request, jsonify
from ..models.errors import WordVibeError
from ..models.game import Guess
from ..services import hard_mode_service, match_service, puzzle_service, vibe_service
from ..utils.dates import day_number, today_utc
from ..utils.game_logger import game_logger
from ..utils.decorators import require_json
from ..utils.helpers import format_violation, time_until_next_word

rules_bp = Blueprint('rules', __name__)


def _parse_guesses(raw_guesses):
    if not isinstance(raw_guesses, list):
        raise ValueError("guesses must be a list")
    return [Guess.from_dict(item) for item in raw_guesses]


def _client_error(action, error):
    game_logger.log_error(request, error, action)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), 400


def _server_error(action, error):
    game_logger.log_error(request, error, action)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), 500


@rules_bp.route('/evaluate', methods=['POST'])
@require_json('guess', 'solution')
def evaluate(data):
    """Evaluate a guess against a solution."""
    try:
        game_logger.log_client_action(request, 'evaluate')

        matches = match_service.evaluate(data['guess'], data['solution'])
        response_data = {
            'success': True,
            'matches': [status.value for status in matches],
            'is_correct': match_service.is_winning_guess(data['guess'], data['solution'])
        }

        game_logger.log_server_response(request, 'evaluate', True, response_data)
        return jsonify(response_data)

    except WordVibeError as e:
        return _client_error('evaluate', e)
    except Exception as e:
        return _server_error('evaluate', e)


@rules_bp.route('/hard_mode/check', methods=['POST'])
@require_json('guess')
def hard_mode_check(data):
    """Check a guess against the constraints revealed by previous rows."""
    try:
        game_logger.log_client_action(request, 'hard_mode_check')

        previous = _parse_guesses(data.get('previous_guesses', []))
        current_index = data.get('current_index', len(previous))

        violation = hard_mode_service.check_hard_mode(data['guess'], previous, current_index)
        response_data = {
            'success': True,
            'violation': violation.to_dict() if violation else None,
            'message': format_violation(violation)
        }

        game_logger.log_server_response(request, 'hard_mode_check', True, response_data)
        return jsonify(response_data)

    except (WordVibeError, ValueError) as e:
        return _client_error('hard_mode_check', e)
    except Exception as e:
        return _server_error('hard_mode_check', e)


@rules_bp.route('/vibe', methods=['POST'])
@require_json('guesses')
def vibe(data):
    """Score the board, or a row partway through its reveal."""
    try:
        game_logger.log_client_action(request, 'vibe')

        guesses = _parse_guesses(data['guesses'])
        if data.get('active_row') is None:
            result = vibe_service.score(guesses, data.get('solution'))
        else:
            result = vibe_service.score_partial(
                guesses, data.get('solution'), int(data['active_row']), int(data.get('revealed', 5))
            )

        response_data = {
            'success': True,
            'vibe': result.to_dict()
        }

        game_logger.log_server_response(request, 'vibe', True, response_data)
        return jsonify(response_data)

    except (WordVibeError, ValueError, TypeError) as e:
        return _client_error('vibe', e)
    except Exception as e:
        return _server_error('vibe', e)


@rules_bp.route('/daily_word', methods=['GET'])
def daily_word():
    """Get the daily word of a UTC calendar day (today by default)."""
    try:
        date = request.args.get('date') or today_utc()
        locale = request.args.get('locale', 'en')

        game_logger.log_client_action(request, 'daily_word', date=date, locale=locale)

        response_data = {
            'success': True,
            'date': date,
            'locale': locale,
            'word': puzzle_service.daily_word(date, locale),
            'day_number': day_number(date),
            'next_word_in': time_until_next_word()
        }

        game_logger.log_server_response(request, 'daily_word', True, response_data)
        return jsonify(response_data)

    except WordVibeError as e:
        return _client_error('daily_word', e)
    except Exception as e:
        return _server_error('daily_word', e)
