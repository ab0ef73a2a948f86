"""
Serialization schemas using Marshmallow for the Devotionals service.

``DevotionalSchema`` converts ``Devotional`` rows into the JSON shape
returned by the API. ``DevotionalInputSchema`` validates the body of a
create request; only the presence of a non-empty ``verse`` and
``content`` is checked.
"""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema, auto_field

from .models import Devotional


class DevotionalSchema(SQLAlchemyAutoSchema):
    """Schema for serialising ``Devotional`` objects."""

    id = auto_field(dump_only=True)
    created_at = auto_field(dump_only=True)
    updated_at = auto_field(dump_only=True)
    deleted_at = auto_field(dump_only=True)

    class Meta:
        model = Devotional


class DevotionalInputSchema(Schema):
    """Schema for the body of ``POST /devotionals``."""

    verse = fields.String(required=True, validate=validate.Length(min=1))
    content = fields.String(required=True, validate=validate.Length(min=1))

    class Meta:
        unknown = EXCLUDE
