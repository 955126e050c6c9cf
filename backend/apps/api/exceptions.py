from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    MethodNotAllowed,
    NotAuthenticated,
    NotFound,
    ParseError,
    PermissionDenied,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

GENERIC_SERVER_MESSAGE = "Something went wrong"


class ApplicationError(Exception):
    """
    Domain-level application error meant to be raised from services or views.

    Subclasses may pin ``code``, ``status_code`` and ``default_message`` so a
    bare ``raise SomeError()`` produces the right envelope.
    """

    code = "SERVER_ERROR"
    status_code: Optional[int] = None
    default_message = GENERIC_SERVER_MESSAGE

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        self.headers = headers

    def to_response(self) -> Response:
        return error_response(
            self.code,
            self.message,
            self.details,
            http_status=self.status_code,
            headers=self.headers,
        )


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """
    Central exception handler for DRF views returning structured JSON errors.
    """

    bound_logger = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        status_code = exc.to_response().status_code
        if status_code >= 500:
            bound_logger.exception("Application error", code=exc.code)
            return error_response(exc.code, GENERIC_SERVER_MESSAGE, http_status=status_code)
        bound_logger.info(
            "Handled application error",
            code=exc.code,
            status=status_code,
            detail=exc.message,
        )
        return exc.to_response()

    response = drf_exception_handler(exc, context)
    if response is not None:
        return _from_drf_exception(exc, response, bound_logger)

    bound_logger.exception("Unhandled exception bubbled to global handler")
    return error_response(
        "SERVER_ERROR",
        GENERIC_SERVER_MESSAGE,
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view:
        view_name = getattr(view, "__class__", type(view)).__name__
        log = log.bind(view=view_name)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _from_drf_exception(exc: Exception, response: Response, bound_logger) -> Response:
    status_code = response.status_code
    code, message, details = _normalize_payload(exc, response.data, status_code)
    headers = dict(response.headers) if getattr(response, "headers", None) else None
    if status_code >= 500:
        bound_logger.error("Converted server error", code=code, status=status_code)
    else:
        bound_logger.info("Converted API exception", code=code, status=status_code)
    return error_response(code, message, details, http_status=status_code, headers=headers)


def _normalize_payload(
    exc: Exception, payload: Any, status_code: int
) -> Tuple[str, str, Optional[Any]]:
    if isinstance(exc, ValidationError):
        return ("VALIDATION_ERROR", _extract_message(payload, "Validation failed", status_code), payload)
    if isinstance(exc, ParseError):
        return ("VALIDATION_ERROR", _extract_message(payload, "Malformed request", status_code), None)
    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        return ("UNAUTHORIZED", _extract_message(payload, "Authentication required", status_code), None)
    if isinstance(exc, (PermissionDenied, DjangoPermissionDenied)):
        return (
            "FORBIDDEN",
            _extract_message(payload, "You do not have permission to perform this action", status_code),
            None,
        )
    if isinstance(exc, (NotFound, Http404)):
        return ("NOT_FOUND", _extract_message(payload, "Resource not found", status_code), None)
    if isinstance(exc, MethodNotAllowed):
        return ("METHOD_NOT_ALLOWED", _extract_message(payload, "Method not allowed", status_code), None)
    if status_code >= 500:
        return ("SERVER_ERROR", GENERIC_SERVER_MESSAGE, None)
    return ("REQUEST_FAILED", _extract_message(payload, "Request failed", status_code), None)


def _extract_message(payload: Any, fallback: str, status_code: int) -> str:
    if status_code >= 500:
        return GENERIC_SERVER_MESSAGE
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str):
            return detail
    if isinstance(payload, list) and payload and isinstance(payload[0], str):
        return payload[0]
    return fallback


__all__ = ["ApplicationError", "global_exception_handler"]
