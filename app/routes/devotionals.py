"""
Routes for managing devotionals.

Each handler performs exactly one store operation and turns the outcome
into a JSON response. The store is looked up on the current application
rather than imported, so tests can substitute their own.
"""

from __future__ import annotations

from flask import Blueprint, current_app, request
from marshmallow import ValidationError as SchemaValidationError

from ..errors import NotFoundError, ValidationError
from ..schemas import DevotionalInputSchema, DevotionalSchema
from ..services.devotional_store import MISSING_FIELDS


devotionals_bp = Blueprint("devotionals", __name__)

STORE_EXTENSION = "devotional_store"


def _store():
    return current_app.extensions[STORE_EXTENSION]


@devotionals_bp.route("/devotionals", methods=["GET"])
def list_devotionals() -> tuple[list[dict], int]:
    """List all active devotionals, newest first."""
    devotionals = _store().list_active()
    return DevotionalSchema(many=True).dump(devotionals), 200


@devotionals_bp.route("/devotionals/<int:devotional_id>", methods=["GET"])
def get_devotional(devotional_id: int) -> tuple[dict, int]:
    """Retrieve a single active devotional."""
    devotional = _store().get_active(devotional_id)
    if devotional is None:
        raise NotFoundError("Devotional not found.")
    return DevotionalSchema().dump(devotional), 200


@devotionals_bp.route("/devotionals", methods=["POST"])
def create_devotional() -> tuple[dict, int]:
    """Create a new devotional.

    Requires a non-empty ``verse`` and ``content``. A body that is
    missing or not JSON is treated as empty.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    try:
        fields = DevotionalInputSchema().load(data)
    except SchemaValidationError as exc:
        raise ValidationError(MISSING_FIELDS) from exc
    devotional_id = _store().create(fields["verse"], fields["content"])
    return {"message": "Devotional created successfully.", "id": devotional_id}, 201


@devotionals_bp.route("/devotionals/<int:devotional_id>", methods=["DELETE"])
def delete_devotional(devotional_id: int) -> tuple[str, int]:
    """Soft delete an active devotional."""
    if not _store().soft_delete(devotional_id):
        raise NotFoundError("Devotional not found or already deleted.")
    return "", 204
