"""Application factory and app-wide configuration."""

from __future__ import annotations

from typing import Optional

from flask import Flask
from flask_cors import CORS

from savings_tracker.app.api.routes import api_bp
from savings_tracker.config import Settings, load_settings
from savings_tracker.database import GoalStore
from savings_tracker.logging_setup import init_request_logging, setup_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    init_request_logging(app)

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    store = GoalStore(settings.db_path)
    store.init_db()
    app.extensions["goal_store"] = store

    app.register_blueprint(api_bp, url_prefix="/api")
    app.logger.info("savings tracker ready db=%s", settings.db_path)
    return app
