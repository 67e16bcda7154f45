"""
Tests for the singleton base class.

Verifies that Singleton subclasses are created once, are kept apart from each
other and can be reset explicitly.
"""

from core.base.singleton import Singleton, SingletonMeta


class Counter(Singleton):
    created = 0

    def __init__(self, start: int = 0):
        Counter.created += 1
        self.value = start


class Registry(Singleton):
    def __init__(self):
        self.entries = []


def setup_function(function):
    Counter.reset_instance()
    Registry.reset_instance()
    Counter.created = 0


def test_get_instance_is_shared():
    """Singleton.get_instance() always returns the same instance"""
    a = Counter.get_instance()
    b = Counter.get_instance()
    assert a is b
    assert Counter.created == 1


def test_direct_call_returns_instance():
    """Calling the class is equivalent to get_instance()"""
    assert Counter() is Counter.get_instance()


def test_later_arguments_are_ignored():
    first = Counter.get_instance(5)
    second = Counter.get_instance(10)
    assert second is first
    assert second.value == 5
    assert Counter.created == 1


def test_state_is_shared():
    Registry.get_instance().entries.append("x")
    assert Registry.get_instance().entries == ["x"]


def test_subclasses_have_separate_instances():
    assert Counter.get_instance() is not Registry.get_instance()


def test_reset_instance_creates_new_object():
    first = Counter.get_instance()
    assert Counter.has_instance()

    Counter.reset_instance()
    assert not Counter.has_instance()

    second = Counter.get_instance()
    assert second is not first
    assert Counter.created == 2


def test_reset_without_instance_is_noop():
    Counter.reset_instance()
    Counter.reset_instance()
    assert not Counter.has_instance()


def test_metaclass():
    assert isinstance(Counter, SingletonMeta)
