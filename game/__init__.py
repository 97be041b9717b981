"""Coffee tin game: bean containers, colour rules and the reduction engine."""

from game.bean_supply import BeanSupply
from game.constants import BeanColor
from game.reduction_engine import ReductionEngine
from game.tin import Tin

__all__ = ["BeanColor", "BeanSupply", "ReductionEngine", "Tin"]
