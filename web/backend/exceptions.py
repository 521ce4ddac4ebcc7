#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class ProfileNotFoundException(ServiceException):
    """Raised when a roommate profile is not found or not owned by the caller."""
    pass


class PropertyNotFoundException(ServiceException):
    """Raised when a property is not found."""
    pass


class PropertyNotSharedException(ServiceException):
    """Raised when roommate features are used on a non-shared property."""
    pass


class RoomAtCapacityException(ServiceException):
    """Raised when every roommate slot of a property is taken."""
    pass


class DuplicateProfileException(ServiceException):
    """Raised when the user already has an active profile for the property."""
    pass


class InvalidProfileException(ServiceException):
    """Raised when a merged profile update fails validation."""
    pass


class AuthenticationRequiredException(ServiceException):
    """Raised when the caller identity is missing or malformed."""
    pass


_STATUS_CODES = {
    ProfileNotFoundException: 404,
    PropertyNotFoundException: 404,
    DuplicateProfileException: 409,
    PropertyNotSharedException: 400,
    RoomAtCapacityException: 400,
    InvalidProfileException: 400,
    AuthenticationRequiredException: 401,
}


def status_code_for(exc: ServiceException) -> int:
    for exc_type, status_code in _STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle HTTP exceptions (FastAPI and Starlette, e.g. unknown routes) with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        },
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors with the shared error format.

    The message names the first offending field, e.g.
    "body.lifestyle.sleep_schedule: Input should be 'early', 'normal' or 'late'".
    """
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"{location}: {first.get('msg', 'Invalid request')}" if location else "Invalid request"

    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": message,
            "type": "RequestValidationError"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
