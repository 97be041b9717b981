"""Reduction engine for the coffee tin game.

Drives a tin from its initial contents down to a single bean, taking every
replacement bean from a BeanSupply passed in by the caller.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from game.bean_supply import BeanSupply
from game.constants import BeanColor, DONE, RUNNING
from game.reduction_result import ReductionResult, ReductionStep
from game.rules import replacement_color
from game.tin import Tin


class ReductionEngine:
    """Reduces tins one iteration at a time.

    State machine over a single tin:
        running  while the tin holds at least two beans
        done     when it holds one bean (or none)

    The supply is shared by every tin this engine reduces.
    """

    def __init__(
        self,
        supply: BeanSupply,
        rng: np.random.Generator | None = None,
        step_observer: Callable[[ReductionStep], None] | None = None,
    ):
        """Initialize the engine.

        Args:
            supply: Bean supply to take replacement beans from
            rng: Generator used for every draw (tin and supply); when None each
                container draws with its own default generator
            step_observer: Optional callback invoked after every iteration
        """
        self.supply = supply
        self.rng = rng
        self._step_observer = step_observer

    def set_step_observer(self, observer: Callable[[ReductionStep], None] | None) -> None:
        self._step_observer = observer

    @staticmethod
    def state(tin: Tin) -> str:
        return RUNNING if tin.has_at_least_two() else DONE

    def step(self, tin: Tin, iteration: int = 1) -> ReductionStep:
        """Perform one reduction iteration on the tin.

        Args:
            tin: Tin in the running state
            iteration: Iteration number recorded in the returned step

        Returns:
            ReductionStep: What was drawn and what went back in

        Raises:
            ValueError: If the tin holds fewer than two beans
            SupplyExhaustedError: If the supply has no bean of the needed color.
                The two drawn beans are already out of the tin by then and no
                replacement goes in, so the tin is left two beans short; it
                should not be reduced further.
        """
        if self.state(tin) == DONE:
            raise ValueError(
                f"Cannot reduce tin {tin}: it holds {tin.bean_count()} bean(s), need at least 2"
            )

        first, second = tin.take_two(self.rng)
        bean = self.supply.draw_of_color(replacement_color(first, second), self.rng)
        tin.put_in(bean)

        step = ReductionStep(
            iteration=iteration,
            drawn=(first, second),
            replacement=bean,
            beans_left=tin.bean_count(),
        )
        if self._step_observer is not None:
            self._step_observer(step)
        return step

    def _reduce(self, tin: Tin) -> list[ReductionStep]:
        steps = []
        while self.state(tin) == RUNNING:
            steps.append(self.step(tin, iteration=len(steps) + 1))
        return steps

    def run(self, tin: Tin) -> BeanColor | None:
        """Reduce the tin and return its last bean (None if it started empty)."""
        self._reduce(tin)
        return tin.any_remaining()

    def reduce(self, tin: Tin) -> ReductionResult:
        """Reduce the tin and return a full record of the reduction."""
        initial = tin.symbols()
        green_count = tin.green_count()
        expected = tin.expected_last_bean()

        steps = self._reduce(tin)

        return ReductionResult(
            initial=initial,
            final=tin.symbols(),
            green_count=green_count,
            expected=expected,
            last_bean=tin.any_remaining(),
            steps=steps,
        )
