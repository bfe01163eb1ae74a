"""
project: Labyrinth
module: __init__.py
License: MIT

Flask application factory.

Wires the level API blueprint into a Flask app. Configuration is sourced from
environment variables (optionally loaded from a local .env file) with
defaults matching LevelConfig, and can be overridden per app instance.
"""

import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

from labyrinth.logging_utils import log
from labyrinth.maze.config import LevelConfig
from labyrinth.maze.errors import ConfigurationError

# Load .env if present so LABYRINTH_* settings can be supplied without
# exporting shell variables during development.
load_dotenv()


def _env_defaults() -> dict:
    level = LevelConfig.from_env()
    return {
        "LABYRINTH_HALF_SIZE": level.half_size,
        "LABYRINTH_X_SHIFT": level.x_shift,
        "LABYRINTH_Y_SHIFT": level.y_shift,
        "LABYRINTH_Z_SHIFT": level.z_shift,
        "LABYRINTH_PERCENT": level.percent,
        "LABYRINTH_COLUMNS": level.columns,
        "LABYRINTH_UNIT": level.unit,
        "LABYRINTH_SHAPE": level.shape,
        "LABYRINTH_SEED": level.seed,
        # Generation requests above this half-size are rejected by the API
        "LABYRINTH_MAX_HALF_SIZE": int(os.getenv("LABYRINTH_MAX_HALF_SIZE", "16")),
        "LABYRINTH_DISABLE_CACHE": os.getenv("LABYRINTH_DISABLE_CACHE", "0") == "1",
    }


def create_app(overrides: dict | None = None) -> Flask:
    """Return a configured Flask app with the level API registered."""
    app = Flask(__name__, instance_relative_config=True)
    app.config.update(_env_defaults())
    if overrides:
        app.config.update(overrides)

    from labyrinth.routes.level_api import bp_level

    app.register_blueprint(bp_level)

    @app.errorhandler(ConfigurationError)
    def configuration_error(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        log.error(event="internal_error", error_id=error_id, error=repr(e))
        return jsonify({"error": "internal error", "error_id": error_id}), 500

    return app
