"""
Product operations.

Each operation is one SQL statement. Update and delete do not check that
the row exists: a miss is logged, not reported to the caller.
"""

from __future__ import annotations

import json
import logging
import re

import asyncpg
from fastapi import HTTPException, status
from pydantic import ValidationError

from . import repository, schemas

DELETED_MESSAGE = "Product Deleted"

_ID_PATTERN = re.compile(r"[+-]?\d+")

# products.id is bigserial.
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

logger = logging.getLogger(__name__)


def parse_product_id(raw: str) -> int:
    value = (raw or "").strip()
    if not _ID_PATTERN.fullmatch(value) or not ID_MIN <= int(value) <= ID_MAX:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid product id.",
        )
    return int(value)


def decode_payload(body: bytes) -> schemas.ProductPayload:
    """
    Decode a request body leniently.

    A body that is empty, not JSON, or not a JSON object decodes to the
    zero-valued payload. Inside an object each field is decoded on its own:
    a field with the wrong type stays zero and the others are kept.
    """
    if not body.strip():
        logger.warning("payload_decode_failed reason=empty_body")
        return schemas.ProductPayload()
    try:
        raw = json.loads(body)
    except ValueError:
        logger.warning("payload_decode_failed reason=invalid_json")
        return schemas.ProductPayload()

    if not isinstance(raw, dict):
        logger.warning("payload_decode_failed reason=not_an_object")
        return schemas.ProductPayload()

    fields = {}
    rejected = []
    for key in schemas.ProductPayload.model_fields:
        if key not in raw:
            continue
        try:
            decoded = schemas.ProductPayload.model_validate({key: raw[key]})
        except ValidationError:
            rejected.append(key)
            continue
        fields[key] = getattr(decoded, key)

    if rejected:
        logger.warning("payload_decode_failed reason=invalid_fields fields=%s", ",".join(rejected))
    return schemas.ProductPayload(**fields)


def _to_product(row: dict) -> schemas.Product:
    return schemas.Product(
        id=int(row["id"]),
        name=str(row["name"]),
        quantity=int(row["quantity"]),
    )


async def list_products(pool: asyncpg.Pool) -> list[schemas.Product]:
    rows = await repository.list_products(pool)
    return [_to_product(row) for row in rows]


async def get_product(pool: asyncpg.Pool, product_id: int) -> schemas.Product:
    row = await repository.get_product(pool, product_id)
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found.",
        )
    return _to_product(row)


async def create_product(pool: asyncpg.Pool, payload: schemas.ProductPayload) -> schemas.Product:
    # The client-supplied id is ignored; storage assigns one.
    row = await repository.insert_product(pool, name=payload.name, quantity=payload.quantity)
    product = _to_product(row)
    logger.info("product_created id=%s", product.id, extra={"product_id": product.id})
    return product


async def update_product(
    pool: asyncpg.Pool,
    product_id: int,
    payload: schemas.ProductPayload,
) -> schemas.ProductPayload:
    rows = await repository.update_product(
        pool,
        product_id,
        name=payload.name,
        quantity=payload.quantity,
    )
    if rows == 0:
        logger.info("product_update_missed id=%s", product_id, extra={"product_id": product_id, "rows": rows})
    return payload


async def delete_product(pool: asyncpg.Pool, product_id: int) -> str:
    rows = await repository.delete_product(pool, product_id)
    if rows == 0:
        logger.info("product_delete_missed id=%s", product_id, extra={"product_id": product_id, "rows": rows})
    return DELETED_MESSAGE
