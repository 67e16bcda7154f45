"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.cart_schemas import Item, CheckoutLine

__all__ = [
    "Item",
    "CheckoutLine",
]
