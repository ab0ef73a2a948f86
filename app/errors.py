"""Centralised error handling and custom exceptions.

The storage layer and the route handlers raise the exceptions defined
here instead of building HTTP responses themselves. The handlers
registered by :func:`register_error_handlers` turn each of them into a
JSON body of the form ``{"error": "<message>"}`` with the matching
status code. Messages are always the public, operation-specific text;
the underlying fault is only ever written to the log.
"""
from __future__ import annotations

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error."


class ServiceError(Exception):
    """Base class for errors that carry a public message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self, status_code: int | None = None):
        return jsonify({"error": self.message}), status_code or self.status_code


class ValidationError(ServiceError):
    """Raised when caller-supplied input fails a precondition."""

    status_code = 400


class NotFoundError(ServiceError):
    """Raised when a requested devotional does not exist or is deleted."""

    status_code = 404


class StorageError(ServiceError):
    """Raised when the underlying database fails."""

    status_code = 500


def register_error_handlers(app) -> None:
    """Register custom error handlers on the given Flask app."""
    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        return err.to_response(400)

    @app.errorhandler(NotFoundError)
    def handle_not_found_error(err: NotFoundError):
        return err.to_response(404)

    @app.errorhandler(StorageError)
    def handle_storage_error(err: StorageError):
        return err.to_response(500)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        # Unknown routes, wrong methods and non-integer ids
        return jsonify({"error": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        logger.exception("Unhandled error while serving request")
        return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500
