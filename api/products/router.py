"""
Product API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Request

from core import db

from . import schemas, service

router = APIRouter()


async def product_payload(request: Request) -> schemas.ProductPayload:
    return service.decode_payload(await request.body())


@router.get("/product", response_model=list[schemas.Product])
async def list_products(pool: asyncpg.Pool = Depends(db.get_pool)) -> list[schemas.Product]:
    return await service.list_products(pool)


@router.get("/product/{product_id}", response_model=schemas.Product)
async def get_product(
    product_id: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.Product:
    return await service.get_product(pool, service.parse_product_id(product_id))


@router.post("/product", response_model=schemas.Product)
async def create_product(
    payload: schemas.ProductPayload = Depends(product_payload),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.Product:
    return await service.create_product(pool, payload)


@router.put("/product/{product_id}", response_model=schemas.ProductPayload)
async def update_product(
    product_id: str,
    payload: schemas.ProductPayload = Depends(product_payload),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.ProductPayload:
    """
    Overwrite name and quantity; responds with the submitted body, not the stored row.
    """
    return await service.update_product(pool, service.parse_product_id(product_id), payload)


@router.delete("/product/{product_id}")
async def delete_product(
    product_id: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> str:
    return await service.delete_product(pool, service.parse_product_id(product_id))
