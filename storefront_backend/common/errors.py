# common/errors.py

"""
SHARED SERVICE ERROR KINDS

Every app raises its own exception classes (see <app>/services/exceptions.py);
each one carries an ErrorKind so views branch on cause, not on message text.

Mapping to HTTP lives here so every endpoint answers the same way:
- VALIDATION -> 400
- NOT_FOUND  -> 404
- CONFLICT   -> 409
- INTEGRITY  -> 400 (signature / merchant mismatch on provider callbacks)
- UPSTREAM   -> 502 (payment / SMS provider failures)
"""

from __future__ import annotations

import enum

from rest_framework import status
from rest_framework.response import Response


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTEGRITY = "integrity"
    UPSTREAM = "upstream"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTEGRITY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UPSTREAM: status.HTTP_502_BAD_GATEWAY,
}


class ServiceError(Exception):
    """Base exception for all service-layer failures."""

    kind: ErrorKind = ErrorKind.VALIDATION
    default_message = "Request could not be processed"

    def __init__(self, message: str | None = None, *, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


def error_response(exc: ServiceError) -> Response:
    """
    JSON envelope used by every API view for classified failures:
        {"success": false, "error": "<message>", "details": {...}?}
    """
    body = {"success": False, "error": exc.message}
    if exc.details:
        body["details"] = exc.details
    return Response(body, status=STATUS_BY_KIND[exc.kind])


def server_error_response(message: str) -> Response:
    """Generic 500 for unclassified failures (details stay in the server log)."""
    return Response(
        {"success": False, "error": message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
