"""Errors raised by bean containers.

All of them are precondition violations: nothing in the engine catches
and retries them.
"""


class BeanError(ValueError):
    """Base class for illegal operations on a tin or bean supply."""


class EmptyContainerError(BeanError):
    """Raised when a bean is taken from a container that holds none."""


class FullContainerError(BeanError):
    """Raised when a bean is put into a container with no empty slot."""


class SupplyExhaustedError(BeanError):
    """Raised when the supply holds no bean of the requested color."""

    def __init__(self, color):
        self.color = color
        super().__init__(f"Bean supply exhausted: no {color.name.lower()} bean left")
