"""Signup and login endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.context import AppContext
from stockroom.core.dependencies import get_context, get_db
from stockroom.schemas.auth import LoginRequest, LoginResponse, MessageResponse
from stockroom.schemas.user import UserCreate
from stockroom.services.users import authenticate_user, create_user

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signup(payload: UserCreate, session: AsyncSession = Depends(get_db)) -> MessageResponse:
    # No token is issued here; clients log in separately.
    await create_user(session, payload)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    session: AsyncSession = Depends(get_db),
    context: AppContext = Depends(get_context),
) -> LoginResponse:
    user = await authenticate_user(session, payload.username, payload.password)
    token = context.signer.dumps({"id": user.id, "username": user.username})
    return LoginResponse(token=token)
