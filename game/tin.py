from __future__ import annotations

from typing import Iterable

import numpy as np

from game.bean_container import BeanContainer, SamplingMode
from game.constants import BeanColor
from game.rules import expected_last_bean


class Tin(BeanContainer):
    """The coffee tin being reduced to a single bean.

    Created full by the driver; afterwards only the reduction engine draws
    from it and puts replacement beans back in.
    """

    @classmethod
    def of(
        cls,
        colors: Iterable[BeanColor],
        rng: np.random.Generator | None = None,
        sampling: SamplingMode = "rejection",
    ) -> Tin:
        colors = list(colors)
        for color in colors:
            if not isinstance(color, BeanColor):
                raise ValueError(f"Invalid bean: {color!r}. Must be a BeanColor")
        return cls(colors, rng=rng, sampling=sampling)

    @classmethod
    def from_symbols(
        cls,
        symbols: str,
        rng: np.random.Generator | None = None,
        sampling: SamplingMode = "rejection",
    ) -> Tin:
        """Build a full tin from a symbol string such as 'BBBGG'."""
        return cls.of((BeanColor.from_symbol(s) for s in symbols), rng=rng, sampling=sampling)

    def has_at_least_two(self) -> bool:
        return self.bean_count() >= 2

    def take_two(self, rng: np.random.Generator | None = None) -> tuple[BeanColor, BeanColor]:
        """Take two beans, one after the other.

        The second draw cannot hit the slot emptied by the first.
        """
        first = self.take_one(rng)
        second = self.take_one(rng)
        return first, second

    def green_count(self) -> int:
        return self.count_of(BeanColor.GREEN)

    def expected_last_bean(self) -> BeanColor:
        """Colour the last bean must have, given the current Green count."""
        return expected_last_bean(self.green_count())
