"""
Statistics Controller

Applies statistics events to a record supplied by the client. The server
keeps no statistics of its own; storing the returned record is the client's
job.
"""

from flask import Blueprint, request, jsonify
from ..models.errors import WordVibeError
from ..models.statistics import GameStatistics
from ..services import statistics_service
from ..utils.decorators import require_json
from ..utils.game_logger import game_logger

statistics_bp = Blueprint('statistics', __name__)


@statistics_bp.route('/statistics/transition', methods=['POST'])
@require_json('event')
def apply_event(data):
    """Apply a win, loss or reset event to the supplied statistics."""
    try:
        event = statistics_service.event_from_dict(data['event'])
        stats = GameStatistics.from_dict(data.get('statistics'))

        game_logger.log_client_action(request, 'apply_statistics', event=type(event).__name__)

        updated = statistics_service.transition(stats, event)
        milestone = None
        if updated.current_streak > stats.current_streak:
            milestone = statistics_service.check_streak_milestone(updated.current_streak)

        response_data = {
            'success': True,
            'statistics': updated.to_dict(),
            'win_percentage': updated.win_percentage,
            'milestone': milestone
        }

        game_logger.log_server_response(request, 'apply_statistics', True, response_data)
        if milestone is not None:
            game_logger.log_game_event(None, 'streak_milestone', request.remote_addr, streak=milestone)

        return jsonify(response_data)

    except (WordVibeError, ValueError, TypeError) as e:
        game_logger.log_error(request, e, 'apply_statistics')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'apply_statistics', False, error_response)
        return jsonify(error_response), 400


@statistics_bp.route('/statistics/reset', methods=['POST'])
def reset_statistics():
    """Return the zero-value statistics record."""
    game_logger.log_client_action(request, 'reset_statistics')

    response_data = {
        'success': True,
        'statistics': statistics_service.reset().to_dict()
    }

    game_logger.log_server_response(request, 'reset_statistics', True, response_data)
    game_logger.log_game_event(None, 'statistics_reset', request.remote_addr)
    return jsonify(response_data)
