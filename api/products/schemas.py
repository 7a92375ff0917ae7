"""
Pydantic schemas for product endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Product(BaseModel):
    id: int
    name: str
    quantity: int


class ProductPayload(BaseModel):
    """
    Request body for create/update.

    Every field has a zero value so a partial or empty body still decodes.
    Fields are strict: "5" is not an int and 5.5 is not an int.
    `id` is accepted (and echoed by update) but never written to storage.
    """

    id: int = Field(default=0, strict=True)
    name: str = Field(default="", strict=True)
    quantity: int = Field(default=0, strict=True)
