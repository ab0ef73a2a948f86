"""Storage access for devotionals.

``DevotionalStore`` owns every statement issued against the
``devotionals`` table: listing and fetching active records, inserting a
new record and soft deleting an existing one. Values are always bound
as parameters by SQLAlchemy, never interpolated into SQL text.

A missing record is a normal result (``None`` or ``False``). Only a
database fault is an error, and it is reported as
:class:`~app.errors.StorageError` with a message that is safe to return
to clients. The original exception is logged.

``ensure_schema`` is the startup step that creates the table when the
database file does not exist yet.
"""
from __future__ import annotations

import logging
import os
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from flask import Flask
from sqlalchemy import func
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from ..db import db
from ..errors import StorageError, ValidationError
from ..models import Devotional

logger = logging.getLogger(__name__)

LIST_FAILED = "Failed to retrieve devotionals."
GET_FAILED = "Failed to retrieve the devotional."
CREATE_FAILED = "Failed to create devotional."
DELETE_FAILED = "Failed to delete devotional."
MISSING_FIELDS = "Verse and content are required."

_schema_lock = threading.Lock()


def _database_file(app: Flask) -> Optional[str]:
    """Return the SQLite file behind the configured URI, if any."""
    url = make_url(app.config["SQLALCHEMY_DATABASE_URI"])
    if not url.drivername.startswith("sqlite") or url.database in (None, "", ":memory:"):
        return None
    if os.path.isabs(url.database):
        return url.database
    # Flask-SQLAlchemy resolves relative SQLite paths against the instance folder
    return os.path.join(app.instance_path, url.database)


def ensure_schema(app: Flask) -> bool:
    """Create the ``devotionals`` table if the database file is new.

    The file's existence is checked before anything opens a connection,
    since connecting creates it. An existing file is assumed to hold the
    schema already and is left untouched. Databases that are not backed
    by a file always go through the idempotent create step.

    Returns
    -------
    bool
        ``True`` when the create step ran.
    """
    db_file = _database_file(app)
    with _schema_lock:
        if db_file is not None and os.path.exists(db_file):
            return False
        with app.app_context():
            # create_all checks for the table first, so a second process
            # racing through first start does not fail.
            db.create_all()
    logger.info("Database and all tables created successfully!")
    return True


class DevotionalStore:
    """Execute the devotional statements against the shared session."""

    @contextmanager
    def _guard(self, message: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.exception("%s (%s)", message, exc.__class__.__name__)
            raise StorageError(message) from exc

    def list_active(self) -> List[Devotional]:
        """Return all active devotionals, most recently created first."""
        with self._guard(LIST_FAILED):
            return (
                Devotional.active()
                .order_by(Devotional.created_at.desc(), Devotional.id.desc())
                .all()
            )

    def get_active(self, devotional_id: int) -> Optional[Devotional]:
        """Return the active devotional with ``devotional_id`` or ``None``."""
        with self._guard(GET_FAILED):
            return Devotional.active().filter(Devotional.id == devotional_id).first()

    def create(self, verse: str, content: str) -> int:
        """Insert a devotional and return its generated id.

        ``created_at`` is left to the database default.
        """
        if not verse or not content:
            raise ValidationError(MISSING_FIELDS)
        with self._guard(CREATE_FAILED):
            devotional = Devotional(verse=verse, content=content)
            db.session.add(devotional)
            db.session.commit()
            logger.info("Created devotional %s", devotional.id)
            return devotional.id

    def soft_delete(self, devotional_id: int) -> bool:
        """Mark an active devotional as deleted.

        Returns ``True`` when exactly one row changed. A missing or
        already deleted devotional yields ``False`` and leaves its
        ``deleted_at`` untouched.
        """
        with self._guard(DELETE_FAILED):
            changed = (
                Devotional.active()
                .filter(Devotional.id == devotional_id)
                .update({Devotional.deleted_at: func.current_timestamp()}, synchronize_session=False)
            )
            db.session.commit()
        if changed == 1:
            logger.info("Soft deleted devotional %s", devotional_id)
        return changed == 1
