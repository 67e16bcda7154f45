"""
Base singleton for process-wide components.
A class using SingletonMeta is constructed once; every later call returns that instance.
"""

from typing import Any, Dict


class SingletonMeta(type):
    """
    Metaclass keeping exactly one instance per class.

    Arguments passed after the first construction are ignored.
    """

    _instances: Dict[type, Any] = {}

    def __call__(cls, *args, **kwargs):
        if cls not in SingletonMeta._instances:
            SingletonMeta._instances[cls] = super().__call__(*args, **kwargs)
        return SingletonMeta._instances[cls]

    def has_instance(cls) -> bool:
        """Check whether the instance has been created"""
        return cls in SingletonMeta._instances

    def reset_instance(cls) -> None:
        """Drop the cached instance so the next access constructs a new one"""
        SingletonMeta._instances.pop(cls, None)


class Singleton(metaclass=SingletonMeta):
    """
    Base class for singletons.
    Subclasses are obtained through get_instance().
    """

    @classmethod
    def get_instance(cls, *args, **kwargs):
        """Return the process-wide instance, creating it on first access"""
        return cls(*args, **kwargs)
