"""
WordVibe Application Package

Rules engine of a daily word-guessing game (evaluation, hard mode, vibe
scoring, daily word selection, streak statistics) plus a thin Flask host
that exposes it over HTTP and Socket.IO.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of the Flask application and its SocketIO instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.rules_controller import rules_bp
    from .controllers.round_controller import round_bp
    from .controllers.statistics_controller import statistics_bp

    app.register_blueprint(rules_bp, url_prefix='/api')
    app.register_blueprint(round_bp, url_prefix='/api')
    app.register_blueprint(statistics_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
