"""Domain errors raised by the service layer and their HTTP translation."""
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class HotelError(Exception):
    """Base class for recoverable, user-facing failures."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, redirect: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.redirect = redirect


class NotFoundError(HotelError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(HotelError):
    status_code = status.HTTP_409_CONFLICT


class ValidationFailedError(HotelError):
    status_code = status.HTTP_400_BAD_REQUEST


class IncompleteNavigationError(HotelError):
    """The booking flow was entered without the selections made on earlier steps."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidTransitionError(HotelError):
    status_code = status.HTTP_409_CONFLICT


class AccessDeniedError(HotelError):
    def __init__(self, message: str, redirect: str, status_code: int) -> None:
        super().__init__(message, redirect=redirect)
        self.status_code = status_code


def hotel_error_handler(_: Request, exc: HotelError) -> JSONResponse:
    content = {"detail": exc.message}
    if exc.redirect:
        content["redirect"] = exc.redirect
    return JSONResponse(status_code=exc.status_code, content=content)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HotelError, hotel_error_handler)
