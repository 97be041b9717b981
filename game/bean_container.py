from __future__ import annotations

from typing import Iterable, Literal

import numpy as np

from game.constants import BeanColor, REMOVED, REMOVED_SYMBOL
from game.errors import EmptyContainerError, FullContainerError

SamplingMode = Literal["rejection", "live"]


class BeanContainer:
    """A fixed-length row of bean slots.

    Slots are stored in a 1D int8 numpy array. Each entry is either REMOVED (0)
    or the value of a BeanColor. The length is fixed at construction.

    A slot only ever goes empty -> filled (put_in) or filled -> empty
    (take_one). It is never overwritten while holding a bean.

    Sampling modes:
        rejection: draw an index uniformly over ALL slots, retry on empty slots
        live:      draw an index uniformly over occupied slots only
    Both pick each occupied slot with equal probability; only the number of
    calls made on the generator differs.
    """

    SAMPLING_MODES = ("rejection", "live")

    def __init__(
        self,
        beans: Iterable[int],
        rng: np.random.Generator | None = None,
        sampling: SamplingMode = "rejection",
    ):
        """Initialize the container.

        Args:
            beans: Initial slot values (BeanColor or REMOVED)
            rng: Default random generator for draws (fresh unseeded one if None)
            sampling: 'rejection' or 'live'
        """
        if sampling not in self.SAMPLING_MODES:
            raise ValueError(f"Invalid sampling mode: {sampling}. Must be 'rejection' or 'live'")

        values = [int(b) for b in beans]
        valid = {REMOVED} | {int(c) for c in BeanColor}
        for value in values:
            if value not in valid:
                raise ValueError(f"Invalid slot value: {value}")

        self._slots = np.array(values, dtype=np.int8)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sampling = sampling

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return int(self._slots.size)

    @property
    def slots(self) -> np.ndarray:
        """Copy of the slot array."""
        return self._slots.copy()

    def bean_count(self) -> int:
        return int(np.count_nonzero(self._slots != REMOVED))

    def empty_count(self) -> int:
        return self.capacity - self.bean_count()

    def count_of(self, color: BeanColor) -> int:
        return int(np.count_nonzero(self._slots == int(color)))

    def any_remaining(self) -> BeanColor | None:
        """Return the color of the first occupied slot, or None if empty."""
        occupied = np.flatnonzero(self._slots != REMOVED)
        if occupied.size == 0:
            return None
        return BeanColor(int(self._slots[occupied[0]]))

    def symbols(self) -> list[str]:
        return [
            REMOVED_SYMBOL if value == REMOVED else BeanColor(int(value)).symbol
            for value in self._slots
        ]

    def __len__(self) -> int:
        return self.capacity

    def __str__(self) -> str:
        return "[" + ", ".join(self.symbols()) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({''.join(self.symbols())!r})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def take_one(self, rng: np.random.Generator | None = None) -> BeanColor:
        """Remove a uniformly random bean and return its color.

        Args:
            rng: Generator to draw with (container default if None)

        Raises:
            EmptyContainerError: If the container holds no bean
        """
        if self.bean_count() == 0:
            raise EmptyContainerError(
                f"Cannot take a bean: {type(self).__name__} of {self.capacity} slots is empty"
            )
        rng = self.rng if rng is None else rng

        if self.sampling == "live":
            occupied = np.flatnonzero(self._slots != REMOVED)
            index = int(occupied[int(rng.integers(occupied.size))])
        else:
            index = int(rng.integers(self.capacity))
            while self._slots[index] == REMOVED:
                index = int(rng.integers(self.capacity))

        bean = BeanColor(int(self._slots[index]))
        self._slots[index] = REMOVED
        return bean

    def put_in(self, color: BeanColor) -> int:
        """Place a bean in the first empty slot.

        Args:
            color: Colour of the bean to place

        Returns:
            int: Index of the filled slot

        Raises:
            ValueError: If color is not a BeanColor
            FullContainerError: If no slot is empty
        """
        if not isinstance(color, BeanColor):
            raise ValueError(f"Invalid bean: {color!r}. Must be a BeanColor")

        empty = np.flatnonzero(self._slots == REMOVED)
        if empty.size == 0:
            raise FullContainerError(
                f"Cannot put in a bean: all {self.capacity} slots of {type(self).__name__} are filled"
            )
        index = int(empty[0])
        self._slots[index] = int(color)
        return index
