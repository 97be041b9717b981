"""Controller module for the coffee tin game.

Contains the simulation controller, session and reduction logger.
"""

from controller.coffee_tin_controller import CoffeeTinController

__all__ = ["CoffeeTinController"]
