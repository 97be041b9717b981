"""Stateless colour rules for the coffee tin game.

Two beans of the same color are replaced by a Blue bean, two beans of
different colors by a Green one. Every move therefore keeps the parity of
the Green count:

    G + G -> B   greens - 2
    B + B -> B   greens unchanged
    B + G -> G   greens unchanged

so the last bean is Green exactly when the tin started with an odd number
of Green beans.
"""

from game.constants import BeanColor


def replacement_color(first: BeanColor, second: BeanColor) -> BeanColor:
    """Return the color of the bean that replaces the drawn pair."""
    if first == second:
        return BeanColor.BLUE
    return BeanColor.GREEN


def expected_last_bean(green_count: int) -> BeanColor:
    """Return the predicted last bean for a tin holding green_count Green beans."""
    if green_count < 0:
        raise ValueError(f"Invalid green count: {green_count}")
    return BeanColor.GREEN if green_count % 2 == 1 else BeanColor.BLUE
