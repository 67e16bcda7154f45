"""
Tests for the generic strategy context.

Verifies that the context runs the strategy it currently holds and that
switching takes effect on the next call.
"""

import pytest
from unittest.mock import Mock

from services.strategy_service import (
    ConcreteStrategyA,
    ConcreteStrategyB,
    Context,
    Strategy,
)


def test_execute_runs_held_strategy(capsys):
    context = Context(ConcreteStrategyA())
    context.execute_strategy()
    assert capsys.readouterr().out == "Executing strategy A\n"


def test_switch_changes_next_execution(capsys):
    """
    Test Context.set_strategy().

    Verifies:
    - Next execution uses the new strategy
    - Previous strategy is not executed again
    """
    context = Context(ConcreteStrategyA())
    context.execute_strategy()
    context.set_strategy(ConcreteStrategyB())
    context.execute_strategy()

    assert capsys.readouterr().out.splitlines() == [
        "Executing strategy A",
        "Executing strategy B",
    ]


def test_switch_with_mocks():
    first = Mock(spec=Strategy)
    second = Mock(spec=Strategy)
    context = Context(first)

    context.execute_strategy()
    context.set_strategy(second)
    context.execute_strategy()
    context.execute_strategy()

    assert first.execute_strategy.call_count == 1
    assert second.execute_strategy.call_count == 2
    assert context.strategy is second


def test_strategy_interface_is_abstract():
    with pytest.raises(TypeError):
        Strategy()
