"""User maintenance endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.context import AppContext
from stockroom.core.dependencies import get_context, get_current_claims, get_db
from stockroom.core.errors import PermissionDeniedError
from stockroom.schemas.auth import MessageResponse, TokenClaims
from stockroom.schemas.user import UserUpdate
from stockroom.services.users import update_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.put("/{user_id}", response_model=MessageResponse)
async def update_user_details(
    user_id: int,
    payload: UserUpdate,
    session: AsyncSession = Depends(get_db),
    context: AppContext = Depends(get_context),
    claims: TokenClaims = Depends(get_current_claims),
) -> MessageResponse:
    if context.settings.enforce_user_ownership and claims.id != user_id:
        logger.warning("User %s attempted to modify user %s", claims.id, user_id)
        raise PermissionDeniedError("Cannot modify another user")

    await update_user(session, user_id, payload)
    return MessageResponse(message="User updated successfully")
