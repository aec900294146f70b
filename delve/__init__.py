"""
project: Delve
module: __init__.py
License: MIT

Flask application factory for the dungeon raster service.

Configuration is sourced from environment variables (optionally loaded from
a local .env file). Generation defaults come from DELVE_* variables, see
``delve.dungeon.config.DungeonConfig.from_env``.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

# Load .env if present so DELVE_* defaults can be supplied without exporting
# shell variables during development.
load_dotenv()

__version__ = "0.1.0"


def create_app(**config_overrides):
    """Build the Flask app and register the dungeon blueprint."""
    app = Flask(__name__, instance_relative_config=True)
    app.config.update(
        # Upper bounds protect the worker from huge raster requests
        DELVE_MAX_WIDTH=int(os.getenv("DELVE_MAX_WIDTH", "301")),
        DELVE_MAX_HEIGHT=int(os.getenv("DELVE_MAX_HEIGHT", "301")),
        DELVE_MAX_ATTEMPTS=int(os.getenv("DELVE_MAX_ATTEMPTS", "2000")),
    )
    app.config.update(config_overrides)

    from delve.routes.dungeon_api import bp_dungeon

    app.register_blueprint(bp_dungeon)

    # Error handling: in non-debug mode, return a short JSON error and log details
    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal error", "error_id": error_id}), 500

    return app
