"""
Product persistence (raw SQL against `products(id, name, quantity)`).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db


async def list_products(pool: asyncpg.Pool) -> list[dict[str, Any]]:
    return await db.fetch_all(
        pool,
        """
        SELECT id, name, quantity
        FROM products
        """,
    )


async def get_product(pool: asyncpg.Pool, product_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        pool,
        """
        SELECT id, name, quantity
        FROM products
        WHERE id = $1
        """,
        product_id,
    )


async def insert_product(pool: asyncpg.Pool, *, name: str, quantity: int) -> dict[str, Any]:
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO products (name, quantity)
        VALUES ($1, $2)
        RETURNING id, name, quantity
        """,
        name,
        quantity,
    )
    if row is None:
        raise RuntimeError("Failed to insert product.")
    return row


async def update_product(pool: asyncpg.Pool, product_id: int, *, name: str, quantity: int) -> int:
    """
    Overwrite name and quantity. Returns the number of rows touched (0 or 1).
    """
    status = await db.execute(
        pool,
        """
        UPDATE products
        SET name = $1,
            quantity = $2
        WHERE id = $3
        """,
        name,
        quantity,
        product_id,
    )
    return db.affected_rows(status)


async def delete_product(pool: asyncpg.Pool, product_id: int) -> int:
    status = await db.execute(
        pool,
        """
        DELETE FROM products
        WHERE id = $1
        """,
        product_id,
    )
    return db.affected_rows(status)
