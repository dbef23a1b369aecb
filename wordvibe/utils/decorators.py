"""
Request Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import request, jsonify

from .game_logger import game_logger


def require_round_service(f):
    """
    Decorator to fail fast when the round service has not been initialized.
    The service is passed to the view as the ``round_service`` keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.round_service import get_round_service

        round_service = get_round_service()
        if not round_service:
            return jsonify({
                'success': False,
                'error': 'Round service unavailable'
            }), 500

        kwargs['round_service'] = round_service
        return f(*args, **kwargs)

    return decorated_function


def require_json(*fields):
    """
    Decorator to require a JSON body containing the given fields.
    The parsed body is passed to the view as the ``data`` keyword.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            data = request.get_json(silent=True)
            missing = [name for name in fields if not isinstance(data, dict) or name not in data]
            if data is None or missing:
                error_response = {
                    'success': False,
                    'error': f"Missing required field(s): {', '.join(missing)}" if missing else 'JSON body required'
                }
                game_logger.log_server_response(request, f.__name__, False, error_response)
                return jsonify(error_response), 400

            kwargs['data'] = data
            return f(*args, **kwargs)

        return decorated_function
    return decorator
