"""Value objects describing reduction steps and finished reductions.

They give writers and the controller everything they need to report a
reduction without reaching into the tin or the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from game.constants import BeanColor, REMOVED_SYMBOL


@dataclass(frozen=True)
class ReductionStep:
    """One draw-two / apply-rule / insert-one iteration.

    Attributes:
        iteration: 1-based iteration number within the reduction
        drawn: The two beans taken from the tin, in draw order
        replacement: The bean drawn from the supply and put into the tin
        beans_left: Number of beans in the tin after the step
    """

    iteration: int
    drawn: tuple[BeanColor, BeanColor]
    replacement: BeanColor
    beans_left: int


@dataclass
class ReductionResult:
    """Outcome of reducing one tin.

    Attributes:
        initial: Tin contents before the reduction (symbol list)
        final: Tin contents after the reduction (symbol list)
        green_count: Number of Green beans the tin started with
        expected: Last bean predicted from green_count parity
        last_bean: Last bean actually left (None for an empty tin)
        steps: Iterations performed, in order
    """

    initial: list[str]
    final: list[str]
    green_count: int
    expected: BeanColor
    last_bean: BeanColor | None
    steps: list[ReductionStep] = field(default_factory=list)

    def __repr__(self):
        return (
            f"ReductionResult(initial={''.join(self.initial)!r}, last_bean={self.last_bean}, "
            f"expected={self.expected}, iterations={self.iterations})"
        )

    @property
    def iterations(self) -> int:
        return len(self.steps)

    def is_degenerate(self) -> bool:
        """True when the tin started empty."""
        return len(self.initial) == 0 or all(s == REMOVED_SYMBOL for s in self.initial)

    def matches_expectation(self) -> bool:
        if self.is_degenerate():
            return self.last_bean is None
        return self.last_bean == self.expected
