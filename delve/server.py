"""
project: Delve
module: server.py
License: MIT

HTTP server entry point for the dungeon raster service.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from delve import create_app


def start_server(host="0.0.0.0", port=5000, debug=False):
    """Configure logging, build the app and serve until interrupted."""
    app = create_app()
    _configure_logging(app.instance_path)
    try:
        print(f"[INFO] Starting dungeon server on {host}:{port}", file=sys.stderr)
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)", file=sys.stderr)
        sys.exit(0)


def _configure_logging(log_dir):
    """Configure logging to both console and a rotating file in ``log_dir``.

    The file path will be <log_dir>/delve.log. Retains a few backups to avoid growth.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        pass
    log_path = os.path.join(log_dir, "delve.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    # Rotating file handler
    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    # Console handler (stderr)
    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    # Avoid duplicate handlers if reconfigured
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path
