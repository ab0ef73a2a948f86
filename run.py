"""
Entry point for running the Devotionals Flask application.

This module imports the application factory and starts the development
server when executed directly. In production a WSGI server like
gunicorn should serve ``wsgi:app`` instead.
"""

import logging
import os

from app import create_app

logging.basicConfig(
    level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# The port is fixed for the lifetime of the process
PORT = int(os.environ.get("PORT", 3000))

app = create_app()

if __name__ == "__main__":
    logger.info("Server is running on http://localhost:%s", PORT)
    app.run(host="0.0.0.0", port=PORT)
