"""Generic strategy switching"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger("patterns.strategy")


class Strategy(ABC):
    @abstractmethod
    def execute_strategy(self) -> None:
        """Run the behaviour"""


class ConcreteStrategyA(Strategy):
    def execute_strategy(self) -> None:
        print("Executing strategy A")


class ConcreteStrategyB(Strategy):
    def execute_strategy(self) -> None:
        print("Executing strategy B")


class Context:
    """Runs whichever strategy it currently holds."""

    def __init__(self, strategy: Strategy):
        self._strategy = strategy

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    def set_strategy(self, strategy: Strategy) -> None:
        logger.debug(
            "Switching strategy %s -> %s",
            type(self._strategy).__name__,
            type(strategy).__name__,
        )
        self._strategy = strategy

    def execute_strategy(self) -> None:
        self._strategy.execute_strategy()
