"""Database setup utilities.

This module exposes the ``db`` object shared by the models and the
storage layer. The application factory binds it to the Flask app, so
the engine (and its connection to the SQLite file) is created once per
process and reused for every request.
"""
from __future__ import annotations

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
