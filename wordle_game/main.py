"""
Wordle Game Server - Main Entry Point

Initializes the game service and starts the Flask-SocketIO application.
The config class is picked by the APP_ENV environment variable.
"""

from . import create_app
from .config import get_config_class, validate_word_list_integrity
from .services.game_service import initialize_game_service
from .utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")
        config_class = get_config_class()

        game_service = initialize_game_service(config_class)
        validate_word_list_integrity(game_service.word_list)
        print(f"✓ Game service initialized with {len(game_service.word_list)} words")
        if game_service.strict_letter_counts:
            print("✓ Strict letter counts enabled for PRESENT feedback")

        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info(f"Wordle Server Starting ({config_class.__name__})")

        print(f"\nStarting Wordle Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
