"""
Game Logger Module for the WordVibe server

This module provides logging for client requests, server responses and
round events. The ``wordvibe`` logger it configures is also the parent of
every module logger in the package, so rules engine messages end up in the
same files.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging system for the WordVibe server.

    Features:
    - Request tracking with IP identification
    - Server response logging
    - Round event logging (wins, losses, hard mode violations)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the package logger with file and console handlers."""
        logger = logging.getLogger('wordvibe')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console only shows warnings and errors
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _get_client_info(self, request) -> Dict[str, str]:
        """Rounds are anonymous; a client is only known by its address and agent."""
        headers = getattr(request, 'headers', None) or {}
        return {
            'ip': getattr(request, 'remote_addr', None) or 'unknown',
            'user_agent': headers.get('User-Agent') or 'unknown'
        }

    def _create_log_entry(self,
                         event_type: str,
                         action: str,
                         client_info: Dict[str, str],
                         details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'client': client_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_client_action(self,
                         request,
                         action: str,
                         round_id: Optional[str] = None,
                         **kwargs):
        """
        Log client actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_round', 'submit_guess', 'apply_statistics')
            round_id: Round identifier if applicable
            **kwargs: Additional details to log
        """
        client_info = self._get_client_info(request)

        details = {
            'round_id': round_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            'url': getattr(request, 'url', None),
            **kwargs
        }

        log_message = self._create_log_entry('CLIENT_ACTION', action, client_info, details)
        self.logger.info(log_message)

    def log_server_response(self,
                           request,
                           action: str,
                           success: bool,
                           response_data: Dict[str, Any],
                           round_id: Optional[str] = None,
                           **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            round_id: Round identifier if applicable
            **kwargs: Additional details to log
        """
        client_info = self._get_client_info(request)

        safe_response = self._sanitize_response_data(response_data)

        details = {
            'round_id': round_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': safe_response,
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, client_info, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self,
                      round_id: Optional[str],
                      event: str,
                      client_ip: Optional[str],
                      **kwargs):
        """
        Log round events (wins, losses, violations, resets).

        Args:
            round_id: Round identifier, None for events outside a round
            event: Type of event (e.g., 'round_won', 'round_lost', 'hard_mode_violation')
            client_ip: Client IP address
            **kwargs: Additional details
        """
        client_info = {'ip': client_ip or 'unknown'}

        details = {
            'round_id': round_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, client_info, details)
        self.logger.info(log_message)

    def log_error(self,
                 request,
                 error: Exception,
                 action: str,
                 round_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
            round_id: Round identifier if applicable
        """
        client_info = self._get_client_info(request)

        details = {
            'round_id': round_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, client_info, details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Strip the answer and bulky board data from response logs."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'current_row': state.get('current_row'),
                'max_rounds': state.get('max_rounds'),
                'game_over': state.get('game_over'),
                'won': state.get('won'),
                'vibe': state.get('vibe'),
                'answer_revealed': state.get('answer') is not None
            }
        if 'solution' in sanitized:
            sanitized['solution'] = '*****'

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'client_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'CLIENT_ACTION' in line:
                            stats['client_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
