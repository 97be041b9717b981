from .coffee_tin_factory import CoffeeTinFactory

__all__ = ["CoffeeTinFactory"]
