from __future__ import annotations

import numpy as np

from game.bean_container import BeanContainer, SamplingMode
from game.constants import BeanColor, DEFAULT_SUPPLY_SIZE, REMOVED
from game.errors import SupplyExhaustedError


class BeanSupply(BeanContainer):
    """Finite reservoir of replacement beans shared by every tin in a session.

    Standard layout (capacity 60):
        [0, 20)   Blue
        [20, 40)  Green
        [40, 60)  empty, room for beans returned by draw_of_color

    The supply is never resized. Beans drawn with draw_of_color leave it for
    good; wrong-colored beans met along the way are put back.
    """

    @classmethod
    def standard(
        cls,
        capacity: int = DEFAULT_SUPPLY_SIZE,
        rng: np.random.Generator | None = None,
        sampling: SamplingMode = "rejection",
    ) -> BeanSupply:
        """Create a supply that is one third Blue, one third Green, one third empty.

        Args:
            capacity: Number of slots (positive multiple of 3)
            rng: Default random generator
            sampling: 'rejection' or 'live'
        """
        if capacity <= 0 or capacity % 3 != 0:
            raise ValueError(f"Invalid supply size: {capacity}. Must be a positive multiple of 3")

        third = capacity // 3
        beans = (
            [BeanColor.BLUE] * third
            + [BeanColor.GREEN] * third
            + [REMOVED] * (capacity - 2 * third)
        )
        return cls(beans, rng=rng, sampling=sampling)

    def remaining(self) -> dict[BeanColor, int]:
        """Count of beans left per color."""
        return {color: self.count_of(color) for color in BeanColor}

    def draw_of_color(self, color: BeanColor, rng: np.random.Generator | None = None) -> BeanColor:
        """Draw beans at random until one of the requested color comes out.

        Every bean of the other color drawn along the way is put back into the
        first empty slot before the next draw. The matching bean is kept out,
        so the total count drops by exactly one and the other color's count is
        unchanged.

        Args:
            color: Colour to draw
            rng: Generator to draw with (supply default if None)

        Returns:
            BeanColor: The drawn bean (always equal to color)

        Raises:
            SupplyExhaustedError: If the supply holds no bean of this color.
                Without this check the draw loop would never end.
        """
        if not isinstance(color, BeanColor):
            raise ValueError(f"Invalid bean: {color!r}. Must be a BeanColor")
        if self.count_of(color) == 0:
            raise SupplyExhaustedError(color)

        bean = self.take_one(rng)
        while bean != color:
            self.put_in(bean)
            bean = self.take_one(rng)
        return bean
