"""User service functions for registration, authentication and updates."""
from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from stockroom.core.errors import CredentialsError, DatabaseError, HashError
from stockroom.core.security import PasswordHasher
from stockroom.models.user import User
from stockroom.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


async def _hash_password(password: str) -> str:
    # Argon2 is CPU bound; keep it off the event loop.
    try:
        return await run_in_threadpool(PasswordHasher.hash, password)
    except (TypeError, ValueError) as exc:
        raise HashError("Error hashing password") from exc


async def get_user_by_username(session: AsyncSession, username: str) -> User | None:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def create_user(session: AsyncSession, user_in: UserCreate) -> User:
    password_hash = await _hash_password(user_in.password)
    user = User(name=user_in.name, username=user_in.username, password_hash=password_hash)
    session.add(user)
    try:
        await session.flush()
        await session.commit()
    except SQLAlchemyError as exc:
        logger.exception("Failed to register user %s", user_in.username)
        raise DatabaseError("Error registering user") from exc
    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


async def authenticate_user(session: AsyncSession, username: str, password: str) -> User:
    """Return the user matching the credentials or raise CredentialsError."""

    try:
        user = await get_user_by_username(session, username)
    except SQLAlchemyError as exc:
        logger.exception("Failed to look up user %s", username)
        raise DatabaseError("Error checking user") from exc
    if not user:
        logger.warning("Login attempt for unknown user %s", username)
        raise CredentialsError("User not found")

    try:
        matches = await run_in_threadpool(PasswordHasher.verify, password, user.password_hash)
    except (TypeError, ValueError) as exc:
        raise HashError("Error comparing password") from exc
    if not matches:
        logger.warning("Invalid password for user %s", username)
        raise CredentialsError("Invalid credentials")
    return user


async def update_user(session: AsyncSession, user_id: int, user_in: UserUpdate) -> int:
    """Update name and username, and the password only when a new one is given.

    Returns the number of rows matched.
    """

    password_changed = bool(user_in.password)
    values = {User.name: user_in.name, User.username: user_in.username}
    if password_changed:
        values[User.password_hash] = await _hash_password(user_in.password)

    try:
        result = await session.execute(update(User).where(User.id == user_id).values(values))
        affected = result.rowcount
        await session.commit()
    except SQLAlchemyError as exc:
        logger.exception("Failed to update user %s", user_id)
        raise DatabaseError("Error updating user") from exc
    logger.info("Updated user %s (password changed: %s)", user_id, password_changed)
    return affected
