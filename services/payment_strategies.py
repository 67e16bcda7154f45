"""Payment strategies used at checkout"""

import logging
from abc import ABC, abstractmethod

from domain.enums import PaymentMethod

logger = logging.getLogger("patterns.checkout")


class PaymentStrategy(ABC):
    """Interface every payment method implements."""

    method: PaymentMethod

    @abstractmethod
    def pay(self, amount: int) -> None:
        """Charge the given amount"""


class PaypalStrategy(PaymentStrategy):
    """Pay with a PayPal account."""

    method = PaymentMethod.PAYPAL

    def __init__(self, email: str, password: str):
        self.email = email
        self.password = password

    def pay(self, amount: int) -> None:
        logger.debug("Charging %d through PayPal", amount)
        print(f"Client: {self.email} paid {amount}$ using PayPal.")

    def __repr__(self):
        return f"PaypalStrategy(email={self.email!r})"


class CreditCardStrategy(PaymentStrategy):
    """Pay with a credit card."""

    method = PaymentMethod.CREDIT_CARD

    def __init__(self, name: str, card_number: str):
        self.name = name
        self.card_number = card_number

    def pay(self, amount: int) -> None:
        logger.debug("Charging %d to card ending %s", amount, self.card_number[-4:])
        print(f"Client: {self.name} paid {amount}$ using Credit Card.")

    def __repr__(self):
        return f"CreditCardStrategy(name={self.name!r})"
