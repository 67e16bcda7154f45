"""
Services package - Checkout and strategy demos.
"""

from services.payment_strategies import (
    PaymentStrategy,
    PaypalStrategy,
    CreditCardStrategy,
)
from services.shopping_service import ShoppingCart
from services.strategy_service import (
    Strategy,
    ConcreteStrategyA,
    ConcreteStrategyB,
    Context,
)

__all__ = [
    "PaymentStrategy",
    "PaypalStrategy",
    "CreditCardStrategy",
    "ShoppingCart",
    "Strategy",
    "ConcreteStrategyA",
    "ConcreteStrategyB",
    "Context",
]
