"""Game constants shared across modules.

This module contains the bean colors, the empty-slot marker and the
default sizes used by the tin, the bean supply and the reduction engine.
"""

from enum import IntEnum


class BeanColor(IntEnum):
    """Colour of a bean. The integer value is what a slot array stores."""

    BLUE = 1
    GREEN = 2

    @property
    def symbol(self) -> str:
        return COLOR_TO_SYMBOL[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "BeanColor":
        try:
            return SYMBOL_TO_COLOR[symbol.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown bean symbol: {symbol!r}. Must be 'B' or 'G'") from None

    def __str__(self) -> str:
        return self.symbol


# Slot value for an empty (removed) position
REMOVED = 0
REMOVED_SYMBOL = "-"

COLOR_TO_SYMBOL = {BeanColor.BLUE: "B", BeanColor.GREEN: "G"}
SYMBOL_TO_COLOR = dict((v, k) for k, v in COLOR_TO_SYMBOL.items())

# Bean supply configuration
DEFAULT_SUPPLY_SIZE = 60

# Engine states
RUNNING = "running"
DONE = "done"

# Sample tins run by the command line entry point
SAMPLE_TINS = ["BBBGG", "BBBGGG", "G", "B", "BG"]
