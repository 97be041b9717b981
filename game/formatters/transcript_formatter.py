"""Transcript step formatter for coffee tin reductions.

Transcript format: "B+G -> G (4 left)"
"""

from game.reduction_result import ReductionStep


class TranscriptFormatter:
    """Converts reduction steps to transcript string format."""

    @staticmethod
    def step_to_transcript(step: ReductionStep) -> str:
        first, second = step.drawn
        return f"{first.symbol}+{second.symbol} -> {step.replacement.symbol} ({step.beans_left} left)"
