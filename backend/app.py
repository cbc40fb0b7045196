import atexit
import logging
import os

from blueprints.parsing import parsing_bp
from blueprints.system import system_bp
from blueprints.vacancies import vacancies_bp
from config import Config, telegram_configured
from flask import Flask
from flask_cors import CORS
from utils.services import build_telegram_client

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def init_telegram_client(app: Flask, telegram_client=None) -> None:
    """Create the shared Telegram client once and attach it to the app.

    The client is stored in app.extensions["telegram_client"] and passed
    explicitly to the services that need it. When no credentials are
    configured the extension is None and parsing endpoints answer 503.
    """
    if telegram_client is None and telegram_configured():
        telegram_client = build_telegram_client(
            Config.TELEGRAM_API_ID, Config.TELEGRAM_API_HASH, Config.TELEGRAM_SESSION
        )
        try:
            telegram_client.start()
        except Exception as e:
            # The client connects again on first use
            logger.error(f"Error initializing Telegram client: {e}", exc_info=True)
        atexit.register(telegram_client.close)
    elif telegram_client is None:
        logger.warning(
            "Telegram API credentials not provided. "
            "Add TELEGRAM_API_ID and TELEGRAM_API_HASH environment variables."
        )

    app.extensions["telegram_client"] = telegram_client


def create_app(telegram_client=None):
    """Application factory function.

    Args:
        telegram_client: Optional pre-built Telegram client (used by tests)
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    app.json.ensure_ascii = False

    # Initialize CORS
    CORS(app, origins=Config.CORS_ORIGINS)

    # Register Blueprints
    app.register_blueprint(vacancies_bp)
    app.register_blueprint(parsing_bp)
    app.register_blueprint(system_bp)

    init_telegram_client(app, telegram_client)

    return app


app = create_app()

if __name__ == "__main__":
    debug = os.getenv("ENVIRONMENT", "development") == "development"
    # The reloader would start a second Telegram session in the child process
    app.run(host="0.0.0.0", port=Config.PORT, debug=debug, use_reloader=False)
