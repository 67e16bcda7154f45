"""
Design patterns demos
Command line entry point running the checkout, strategy and student database demos
"""

import argparse
import logging
import sys
from typing import List, Optional

from adapters.sql_adapter import DatabaseConnection
from app.config import settings
from domain.enums import DemoName
from domain.schemas.cart_schemas import Item
from services.payment_strategies import CreditCardStrategy, PaypalStrategy
from services.shopping_service import ShoppingCart
from services.strategy_service import ConcreteStrategyA, ConcreteStrategyB, Context

_logger = logging.getLogger("patterns.main")

UPDATE_STUDENT_SQL = (
    "UPDATE students\n"
    "SET email = 'newemail@example.com', phone = '01234567890'\n"
    "WHERE student_id = 1;\n"
)
SELECT_STUDENTS_SQL = "SELECT * FROM students;"


def run_checkout_demo() -> None:
    """Pay the same cart once through PayPal and once by credit card"""
    cart = ShoppingCart()

    cart.add_item(Item(name="T-shirt", price=10))
    cart.add_item(Item(name="Jeans", price=20))

    cart.set_payment_strategy(PaypalStrategy("henry@gmail.com", "henry123"))
    cart.checkout()

    cart.set_payment_strategy(CreditCardStrategy("Henry Tran", "47136985569"))
    cart.checkout()


def run_strategy_demo() -> None:
    context = Context(ConcreteStrategyA())
    context.execute_strategy()

    context.set_strategy(ConcreteStrategyB())
    context.execute_strategy()


def run_students_demo() -> None:
    """Update one student, list all students, then close the connection"""
    db = DatabaseConnection.get_instance()

    print("Updating student information:")
    rows_affected = db.update(UPDATE_STUDENT_SQL)

    if rows_affected > 0:
        print(f"Student updated successfully. Rows affected: {rows_affected}")
    else:
        print("Student update failed.")

    print("Student list:")
    db.query(SELECT_STUDENTS_SQL)

    db.close()


DEMOS = {
    DemoName.CHECKOUT: run_checkout_demo,
    DemoName.STRATEGY: run_strategy_demo,
    DemoName.STUDENTS: run_students_demo,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patterns-demo",
        description=f"{settings.app_name}: run the singleton and strategy pattern demos",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {settings.app_version}",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default=DemoName.ALL.value,
        choices=[demo.value for demo in DemoName],
        help="Demo to run (default: all)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: from settings)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=settings.log_format,
    )

    selected = DemoName(args.demo)
    names = list(DEMOS) if selected is DemoName.ALL else [selected]
    for name in names:
        _logger.info("Running %s demo", name.value)
        DEMOS[name]()
    return 0


if __name__ == "__main__":
    sys.exit(main())
