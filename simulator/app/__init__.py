"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from simulator.app.api.routes import api_bp
from simulator.config import SimulatorConfig


def create_app(config: Optional[SimulatorConfig] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or SimulatorConfig()

    app = Flask(__name__)
    app.config["SIMULATOR"] = config

    CORS(
        app,
        resources={r"/api/*": {"origins": config.cors_origin_list}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
