"""
Application factory for the Devotionals service.

This module provides a function to create and configure the Flask
application. Extensions (SQLAlchemy, Migrate) are initialised here, the
schema is created on first start and the devotionals blueprint is
registered. The storage accessor is created once per application and
kept in ``app.extensions`` so route handlers never reach for a global.

Environment variables control the database location. Set
``DATABASE_PATH`` to place the SQLite file somewhere other than next to
the project files, or ``DATABASE_URL`` to use another database
entirely.
"""

from __future__ import annotations

import os

from flask import Flask
from flask_migrate import Migrate

# instantiate extensions without binding them to an app yet.  They will
# be bound in create_app().
from .db import db  # use shared db object from db.py
migrate = Migrate()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_DATABASE_PATH = os.path.join(BASE_DIR, "devotionals.db")


def create_app(test_config: dict | None = None, store=None) -> Flask:
    """Create and configure a Flask application.

    Parameters
    ----------
    test_config: dict | None, optional
        Optional configuration overrides used when running tests.
    store: optional
        Storage accessor to use instead of a new ``DevotionalStore``.

    Returns
    -------
    Flask
        A configured Flask application instance.
    """
    app = Flask(__name__)

    # Default configuration. Override using environment variables or
    # by passing a ``test_config`` mapping.
    app.config.update(
        DATABASE_PATH=os.environ.get("DATABASE_PATH", DEFAULT_DATABASE_PATH),
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
    )

    if test_config:
        app.config.update(test_config)

    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        app.config["SQLALCHEMY_DATABASE_URI"] = os.environ.get(
            "DATABASE_URL", f"sqlite:///{app.config['DATABASE_PATH']}"
        )

    # Initialise extensions with the app
    db.init_app(app)
    migrate.init_app(app, db)

    # Create the table before the first connection creates the file
    from .services import DevotionalStore, ensure_schema
    ensure_schema(app)

    from .routes.devotionals import STORE_EXTENSION, devotionals_bp
    app.extensions[STORE_EXTENSION] = store if store is not None else DevotionalStore()

    # Register custom error handlers
    from .errors import register_error_handlers
    register_error_handlers(app)

    # The same endpoints are also served under /api
    app.register_blueprint(devotionals_bp)
    app.register_blueprint(devotionals_bp, url_prefix="/api", name="api_devotionals")

    # Provide a simple liveness route
    @app.route("/hello_world")
    def hello_world():
        """Return a plain text greeting.

        Deployment platforms can use this to verify that the
        application has started.
        """
        return "Hello, World!", 200, {"Content-Type": "text/plain; charset=utf-8"}

    return app
