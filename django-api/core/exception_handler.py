"""DRF exception handler rendering every failure in one error envelope.

Shape: {"error": {"kind": ..., "code": ..., "message": ...}}
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.errors import DomainError, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
}

# DRF's own exceptions, for requests rejected before reaching a service.
KIND_BY_DRF_EXCEPTION = (
    (exceptions.NotAuthenticated, ErrorKind.UNAUTHORIZED),
    (exceptions.AuthenticationFailed, ErrorKind.UNAUTHORIZED),
    (exceptions.PermissionDenied, ErrorKind.FORBIDDEN),
    (exceptions.NotFound, ErrorKind.NOT_FOUND),
    (exceptions.ValidationError, ErrorKind.VALIDATION),
    (exceptions.ParseError, ErrorKind.VALIDATION),
)


def error_body(kind: ErrorKind, code: str, message: str, **extra) -> dict:
    return {"error": {"kind": kind.value, "code": code, "message": message, **extra}}


def domain_exception_handler(exc: Exception, context: dict) -> Response | None:
    """Map domain errors and DRF errors to the error envelope.

    Anything else is left to DRF, which re-raises and yields a 500 without
    leaking details.
    """
    if isinstance(exc, DomainError):
        logger.info("Request refused: %s", exc)
        return Response(
            error_body(exc.kind, exc.code.value, exc.message),
            status=STATUS_BY_KIND[exc.kind],
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    for exc_type, kind in KIND_BY_DRF_EXCEPTION:
        if isinstance(exc, exc_type):
            break
    else:
        return response

    if isinstance(exc, exceptions.ValidationError):
        response.data = error_body(
            kind, "INVALID_INPUT", "Invalid input", fields=exc.detail
        )
    else:
        response.data = error_body(kind, exc.default_code.upper(), str(exc.detail))
    response.status_code = STATUS_BY_KIND[kind]
    return response
