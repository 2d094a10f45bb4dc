"""Service layer for product persistence."""
from __future__ import annotations

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.errors import DatabaseError, NotFoundError
from stockroom.models.product import Product
from stockroom.schemas.product import ProductWrite

logger = logging.getLogger(__name__)


async def create_product(session: AsyncSession, data: ProductWrite) -> Product:
    product = Product(
        pname=data.pname,
        description=data.description,
        price=data.price,
        stock=data.stock,
    )
    session.add(product)
    try:
        await session.flush()
        await session.commit()
    except SQLAlchemyError as exc:
        logger.exception("Failed to add product %r", data.pname)
        raise DatabaseError("Error adding product") from exc
    logger.info("Added product %s (pid=%s)", product.pname, product.pid)
    return product


async def list_products(session: AsyncSession) -> list[Product]:
    try:
        result = await session.execute(select(Product).order_by(Product.pid))
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch products")
        raise DatabaseError("Error fetching products") from exc
    return list(result.scalars().all())


async def get_product(session: AsyncSession, pid: int) -> Product:
    try:
        result = await session.execute(select(Product).where(Product.pid == pid))
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch product %s", pid)
        raise DatabaseError("Error fetching product") from exc
    product = result.scalar_one_or_none()
    if product is None:
        raise NotFoundError("Product not found")
    return product


async def update_product(session: AsyncSession, pid: int, data: ProductWrite) -> int:
    """Overwrite the editable columns of a product; returns the rows matched."""

    statement = (
        update(Product)
        .where(Product.pid == pid)
        .values(pname=data.pname, description=data.description, price=data.price, stock=data.stock)
    )
    try:
        result = await session.execute(statement)
        affected = result.rowcount
        await session.commit()
    except SQLAlchemyError as exc:
        logger.exception("Failed to update product %s", pid)
        raise DatabaseError("Error updating product") from exc
    logger.info("Updated product %s (%d row(s))", pid, affected)
    return affected


async def delete_product(session: AsyncSession, pid: int) -> int:
    try:
        result = await session.execute(delete(Product).where(Product.pid == pid))
        affected = result.rowcount
        await session.commit()
    except SQLAlchemyError as exc:
        logger.exception("Failed to delete product %s", pid)
        raise DatabaseError("Error deleting product") from exc
    logger.info("Deleted product %s (%d row(s))", pid, affected)
    return affected
