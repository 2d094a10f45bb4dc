"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from fastapi import Depends, Request, status
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.context import AppContext
from stockroom.core.errors import AuthError
from stockroom.db.session import get_session
from stockroom.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


async def get_db(context: AppContext = Depends(get_context)) -> AsyncIterator[AsyncSession]:
    async with get_session(context.session_factory) as session:
        yield session


async def get_current_claims(
    request: Request,
    context: AppContext = Depends(get_context),
) -> TokenClaims:
    """Validate the ``Authorization: Bearer <token>`` header and return its claims."""

    authorization = request.headers.get("Authorization")
    if not authorization:
        raise AuthError("Access denied. No token provided.", status_code=status.HTTP_401_UNAUTHORIZED)

    scheme, token = get_authorization_scheme_param(authorization)
    if scheme.lower() != "bearer" or not token:
        logger.warning("Rejected malformed Authorization header on %s", request.url.path)
        raise AuthError("Invalid token", status_code=status.HTTP_400_BAD_REQUEST)

    try:
        payload = context.signer.loads(token)
        claims = TokenClaims.model_validate(payload)
    except ValueError as exc:
        logger.warning("Rejected invalid or expired token on %s", request.url.path)
        raise AuthError("Invalid token", status_code=status.HTTP_400_BAD_REQUEST) from exc

    return claims
