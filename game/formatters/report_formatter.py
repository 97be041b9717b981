"""Report formatter for coffee tin reductions.

Produces the per-tin report lines:
    TIN (2 Gs): [B, B, B, G, G]
    tin after: [B, -, -, -, -]
    last bean: B
"""

from __future__ import annotations

from game.constants import BeanColor
from game.reduction_result import ReductionResult


class ReportFormatter:
    """Converts reduction results to report lines."""

    @staticmethod
    def symbols_to_text(symbols: list[str]) -> str:
        """Format slot symbols as a bracketed list (e.g., "[B, -, G]")."""
        return "[" + ", ".join(symbols) + "]"

    @staticmethod
    def bean_to_text(bean: BeanColor | None) -> str:
        return "none" if bean is None else bean.symbol

    @classmethod
    def header_line(cls, symbols: list[str], green_count: int) -> str:
        return f"TIN ({green_count} Gs): {cls.symbols_to_text(symbols)}"

    @classmethod
    def after_line(cls, result: ReductionResult) -> str:
        return f"tin after: {cls.symbols_to_text(result.final)}"

    @classmethod
    def outcome_line(cls, result: ReductionResult) -> str:
        if result.matches_expectation():
            return f"last bean: {cls.bean_to_text(result.last_bean)}"
        return (
            f"Oops, wrong last bean: {cls.bean_to_text(result.last_bean)} "
            f"(expected: {cls.bean_to_text(result.expected)})"
        )
