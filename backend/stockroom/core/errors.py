"""Error types surfaced by the API and the handlers that render them."""
from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class StockroomError(Exception):
    """Base exception; every subclass maps to one HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, str]:
        return {"detail": self.message}


class CredentialsError(StockroomError):
    """Login with an unknown username or a wrong password."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(StockroomError):
    """Bearer token is missing (401), or invalid or expired (400)."""

    status_code = status.HTTP_401_UNAUTHORIZED


class PermissionDeniedError(StockroomError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(StockroomError):
    status_code = status.HTTP_404_NOT_FOUND


class DatabaseError(StockroomError):
    """A statement failed; the original driver error is chained as the cause."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class HashError(StockroomError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def stockroom_exception_handler(request: Request, exc: StockroomError) -> JSONResponse:
    """Convert a StockroomError into its JSON response."""

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Last resort for database errors raised outside the service layer."""

    logger.exception("Unhandled database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )
