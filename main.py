"""
Jordle Game Server - Main Entry Point

Initializes the game service and starts the Flask application.
"""

from jordle import create_app
from jordle.config import get_config, validate_word_list_integrity
from jordle.services.game_service import initialize_game_service
from jordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        initialize_game_service()
        print("✓ Game service initialized successfully")

        app_config = get_config()
        app = create_app(app_config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Jordle Server Starting")

        print(f"\nStarting Jordle Game Server on {app_config.HOST}:{app_config.PORT}")
        print(f"Debug mode: {app_config.DEBUG}")
        print("=" * 50)

        app.run(host=app_config.HOST, port=app_config.PORT, debug=app_config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Jordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
