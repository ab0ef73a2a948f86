"""
Database models for the Devotionals service.

The service manages a single entity, the ``Devotional``: a Bible verse
paired with a short reflection. Records are never physically removed.
Deleting a devotional sets its ``deleted_at`` timestamp, after which it
is invisible to every read and delete operation. The two lifecycle
states are exposed as :class:`DevotionalStatus` so callers never have to
reason about the nullable timestamp directly.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import case, func
from sqlalchemy.ext.hybrid import hybrid_property

from .db import db


class DevotionalStatus(enum.Enum):
    """Enumeration of devotional lifecycle states."""
    ACTIVE = "active"
    DELETED = "deleted"


class Devotional(db.Model):
    __allow_unmapped__ = True
    """A verse with its reflective content.

    ``created_at`` is filled in by the database on insert. ``updated_at``
    is reserved and no operation writes it.
    """
    __tablename__ = "devotionals"

    id: int = db.Column(db.Integer, primary_key=True, autoincrement=True)
    verse: str = db.Column(db.Text, nullable=False)
    content: str = db.Column(db.Text, nullable=False)
    created_at: datetime = db.Column(
        db.DateTime, nullable=False, server_default=func.current_timestamp()
    )
    updated_at: Optional[datetime] = db.Column(db.DateTime, nullable=True)

    # Soft delete timestamp; when set, this record is considered deleted
    deleted_at: Optional[datetime] = db.Column(db.DateTime, nullable=True)

    __table_args__ = (
        # sqlite_autoincrement keeps ids from being reused
        {"sqlite_autoincrement": True},
    )

    @hybrid_property
    def status(self) -> DevotionalStatus:
        if self.deleted_at is None:
            return DevotionalStatus.ACTIVE
        return DevotionalStatus.DELETED

    @status.expression
    def status(cls):
        return case(
            (cls.deleted_at.is_(None), DevotionalStatus.ACTIVE.value),
            else_=DevotionalStatus.DELETED.value,
        )

    @classmethod
    def active(cls):
        """Return a query restricted to devotionals that are not deleted."""
        return cls.query.filter(cls.deleted_at.is_(None))

    def __repr__(self) -> str:
        return f"<Devotional {self.id} {self.verse!r} ({self.status.value})>"
