# common/views.py

"""
BASE API VIEW

One place that turns service-layer failures into the JSON envelope:
- ServiceError subclasses -> mapped status (common.errors.STATUS_BY_KIND)
- DRF / Django HTTP exceptions -> DRF default handling (400/401/403/404/405/429)
- anything else -> logged with traceback, generic 500 without internal detail
"""

from __future__ import annotations

import logging

from django.http import Http404
from rest_framework.exceptions import APIException
from rest_framework.views import APIView

from common.errors import ServiceError, error_response, server_error_response

logger = logging.getLogger(__name__)


def query_flag(request, name: str) -> bool:
    """?includeX=true style flags (anything else is false)."""
    return (request.query_params.get(name) or "").strip().lower() == "true"


class ServiceAPIView(APIView):
    generic_error_message = "Request failed"

    def handle_exception(self, exc):
        if isinstance(exc, ServiceError):
            logger.info(
                "Service error",
                extra={
                    "view": self.__class__.__name__,
                    "kind": exc.kind.value,
                    "error": exc.message,
                },
            )
            return error_response(exc)

        if isinstance(exc, (APIException, Http404)):
            return super().handle_exception(exc)

        logger.exception(
            "Unhandled API error", extra={"view": self.__class__.__name__}
        )
        return server_error_response(self.generic_error_message)
