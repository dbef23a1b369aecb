"""
WordVibe Server - Main Entry Point

This is the main entry point for the WordVibe server.
It initializes all services and starts the Flask-SocketIO application.
"""

from wordvibe import create_app
from wordvibe.config import Config, load_answer_list, load_valid_words, SUPPORTED_LOCALES
from wordvibe.services.round_service import initialize_round_service
from wordvibe.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # Load every word list up front so a broken file fails at startup
        for locale in SUPPORTED_LOCALES:
            answers = load_answer_list(locale)
            valid = load_valid_words(locale)
            print(f"✓ Word lists loaded for '{locale}': {len(answers)} answers, {len(valid)} valid guesses")

        round_service = initialize_round_service(Config.MAX_ROUNDS)
        if round_service:
            print("✓ Round service initialized successfully")
        else:
            print("✗ Failed to initialize round service")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("WordVibe Server Starting")

        print(f"\nStarting WordVibe Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Default locale: {Config.DEFAULT_LOCALE}, hard mode default: {Config.HARD_MODE_DEFAULT}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("WordVibe Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
