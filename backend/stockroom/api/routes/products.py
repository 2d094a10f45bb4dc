"""Product CRUD endpoints; every route requires a bearer token."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.dependencies import get_current_claims, get_db
from stockroom.schemas.auth import MessageResponse
from stockroom.schemas.product import ProductCreated, ProductRead, ProductWrite
from stockroom.services import products as product_service

router = APIRouter(
    prefix="/products",
    tags=["products"],
    dependencies=[Depends(get_current_claims)],
)


@router.post("", response_model=ProductCreated, status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductWrite, session: AsyncSession = Depends(get_db)) -> ProductCreated:
    product = await product_service.create_product(session, payload)
    return ProductCreated(pid=product.pid)


@router.get("", response_model=list[ProductRead])
async def list_products(session: AsyncSession = Depends(get_db)) -> list[ProductRead]:
    products = await product_service.list_products(session)
    return [ProductRead.model_validate(product) for product in products]


@router.get("/{pid}", response_model=ProductRead)
async def get_product(pid: int, session: AsyncSession = Depends(get_db)) -> ProductRead:
    product = await product_service.get_product(session, pid)
    return ProductRead.model_validate(product)


@router.put("/{pid}", response_model=MessageResponse)
async def update_product(
    pid: int,
    payload: ProductWrite,
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await product_service.update_product(session, pid, payload)
    return MessageResponse(message="Product updated successfully")


@router.delete("/{pid}", response_model=MessageResponse)
async def delete_product(pid: int, session: AsyncSession = Depends(get_db)) -> MessageResponse:
    await product_service.delete_product(session, pid)
    return MessageResponse(message="Product deleted successfully")
