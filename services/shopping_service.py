"""Shopping cart and checkout"""

import logging
from typing import List, Optional, Tuple

from app.exceptions import ServiceValidationError
from domain.schemas.cart_schemas import CheckoutLine, Item
from services.payment_strategies import PaymentStrategy

logger = logging.getLogger("patterns.checkout")


class ShoppingCart:
    """
    Ordered list of items paid through one interchangeable payment strategy.

    The total is always the sum of the prices of the items currently in the cart.
    """

    def __init__(self, payment_strategy: Optional[PaymentStrategy] = None):
        self._items: List[Item] = []
        self._payment_strategy = payment_strategy

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    @property
    def payment_strategy(self) -> Optional[PaymentStrategy]:
        return self._payment_strategy

    def add_item(self, item: Item) -> None:
        self._items.append(item)
        logger.debug("Added %s (%d) to cart", item.name, item.price)

    def remove_item(self, item: Item) -> None:
        """
        Remove the first item equal to the given one.

        Items not in the cart are ignored.
        """
        try:
            self._items.remove(item)
        except ValueError:
            logger.debug("%s is not in the cart, nothing removed", item.name)
            return
        logger.debug("Removed %s from cart", item.name)

    def calculate_total(self) -> int:
        return sum(item.price for item in self._items)

    def set_payment_strategy(self, strategy: PaymentStrategy) -> None:
        self._payment_strategy = strategy

    def checkout(self) -> int:
        """
        Print every item and pay the total with the active strategy.

        Returns:
            The amount paid

        Raises:
            ServiceValidationError: If no payment strategy is set
        """
        if self._payment_strategy is None:
            raise ServiceValidationError(
                "No payment strategy selected", code="payment_strategy_missing"
            )

        amount = self.calculate_total()
        logger.info(
            "Checking out %d items for %d using %s",
            len(self._items),
            amount,
            type(self._payment_strategy).__name__,
        )
        for item in self._items:
            print(CheckoutLine.from_item(item).render())
        self._payment_strategy.pay(amount)
        return amount
