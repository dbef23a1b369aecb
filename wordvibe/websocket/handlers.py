"""
WebSocket Event Handlers

Streams partial vibe scores while a row is revealed tile by tile, so the
client meter can move in step with its flip animation.
"""

from flask import request
from flask_socketio import emit
from ..models.errors import WordVibeError
from ..models.game import Guess
from ..services.vibe_service import score_partial
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.debug(f"Socket connected: {request.sid}")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        game_logger.logger.debug(f"Socket disconnected: {request.sid}")

    @socketio.on('reveal_tile')
    def handle_reveal_tile(data):
        """
        Answer a tile reveal with the partial vibe score.

        Expects ``{guesses: [...], active_row: int, revealed: int}`` and emits
        ``vibe_update`` with the score, or ``error`` when the payload is bad.
        """
        if not isinstance(data, dict) or 'guesses' not in data or 'active_row' not in data:
            emit('error', {'error': 'guesses and active_row are required'})
            return

        try:
            guesses = [Guess.from_dict(item) for item in data['guesses']]
            active_row = int(data['active_row'])
            revealed = int(data.get('revealed', 0))
            vibe = score_partial(guesses, data.get('solution'), active_row, revealed)
        except (WordVibeError, ValueError, TypeError) as e:
            game_logger.logger.warning(f"Rejected reveal_tile payload: {e}")
            emit('error', {'error': str(e)})
            return

        emit('vibe_update', {
            'active_row': active_row,
            'revealed': revealed,
            'vibe': vibe.to_dict()
        })
