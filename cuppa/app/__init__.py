"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from cuppa.app.api.routes import api_bp
from cuppa.config import Settings, get_settings


def configure_logging(settings: Settings) -> None:
    """Set up root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = Flask(__name__)
    app.config["CUPPA_SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logging.getLogger(__name__).info("%s ready", settings.app_name)
    return app
