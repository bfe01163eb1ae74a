"""
project: Labyrinth
module: server.py
License: MIT

Server bootstrap: logging configuration and the development HTTP server
serving the level API.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from labyrinth import create_app


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Start the Flask server for the level API.

    When debug=True, Flask's debugger and reloader provide verbose tracebacks.
    Also configures application logging to a rotating file and console.
    """
    app = create_app()
    _configure_logging(app.instance_path)
    try:
        print(f"[INFO] Starting level API on {host}:{port}")
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def _configure_logging(log_dir: str):
    """Configure logging to both console and a rotating file in ``log_dir``.

    The file path will be <log_dir>/labyrinth.log. Retains a few backups to avoid growth.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, "labyrinth.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(fmt)

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(fmt)

    # Avoid duplicate handlers if reconfigured
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path
