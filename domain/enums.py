"""
Domain enums for the design patterns demos.
"""

import enum


class PaymentMethod(str, enum.Enum):
    """Payment methods available at checkout"""

    PAYPAL = "paypal"
    CREDIT_CARD = "credit_card"


class DemoName(str, enum.Enum):
    """Demos runnable from the command line"""

    CHECKOUT = "checkout"
    STRATEGY = "strategy"
    STUDENTS = "students"
    ALL = "all"
