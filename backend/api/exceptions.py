"""Map errors to the ``{"message": ...}`` envelope used by both services."""
from __future__ import annotations

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from cepweather.errors import InvalidFormat, NotFound, ResolutionError


logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal server error"

ERROR_STATUS = {
    InvalidFormat: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotFound: status.HTTP_404_NOT_FOUND,
}


def error_response(status_code: int, message: str) -> Response:
    return Response({"message": message}, status=status_code)


def exception_handler(exc, context):
    """REST framework hook; the only place error kinds become HTTP statuses."""
    if isinstance(exc, ResolutionError):
        for kind, status_code in ERROR_STATUS.items():
            if isinstance(exc, kind):
                logger.info("Resolution rejected: %s", exc)
                return error_response(status_code, kind.message)
        logger.error("Unexpected resolution failure: %s", exc, exc_info=exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    if isinstance(exc, exceptions.MethodNotAllowed):
        return error_response(exc.status_code, "method not allowed")
    if isinstance(exc, (exceptions.ParseError, exceptions.UnsupportedMediaType)):
        return error_response(status.HTTP_400_BAD_REQUEST, "invalid request body")

    response = drf_exception_handler(exc, context)
    if response is not None:
        detail = getattr(exc, "detail", None)
        response.data = {"message": str(detail) if detail else "error"}
        return response

    logger.error("Unhandled error in %s", context.get("view").__class__.__name__, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
