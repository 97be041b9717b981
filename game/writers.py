"""Reduction writers for the coffee tin game.

Provides pluggable writer classes that combine formatters with output streams
to log reductions in various formats (report, transcript).
"""

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from game.formatters import ReportFormatter, TranscriptFormatter
from game.reduction_result import ReductionResult, ReductionStep


class ReductionWriter(ABC):
    """Abstract base class for reduction writers.

    A ReductionWriter combines a formatter with an output stream. Subclasses
    decide which events they write and how.
    """

    def __init__(self, output: TextIO):
        """Initialize the writer.

        Args:
            output: Output stream to write to (file, stdout, etc.)
        """
        self.output = output

    @abstractmethod
    def write_header(self, seed: int, supply_size: int, sampling: str = "rejection") -> None:
        """Write header with session metadata.

        Args:
            seed: Random seed for this session run
            supply_size: Number of slots in the bean supply
            sampling: Sampling mode used by the containers
        """
        pass

    def write_tin_start(self, tin_num: int, symbols: list[str], green_count: int) -> None:
        """Write the contents of a tin about to be reduced.

        Args:
            tin_num: 1-based tin number within the run
            symbols: Tin contents as slot symbols
            green_count: Number of Green beans in the tin
        """
        pass

    @abstractmethod
    def write_step(self, step: ReductionStep) -> None:
        """Write one reduction iteration."""
        pass

    @abstractmethod
    def write_result(self, tin_num: int, result: ReductionResult) -> None:
        """Write the outcome of one reduced tin."""
        pass

    def write_comment(self, message: str) -> None:
        """Write a status/comment message. Default implementation does nothing."""
        pass

    def write_footer(self, supply=None) -> None:
        """Write footer with the final supply state (optional).

        Args:
            supply: Optional BeanSupply after the run
        """
        pass

    def flush(self) -> None:
        self.output.flush()

    def close(self) -> None:
        """Close the output stream (but never close stdout/stderr)."""
        if self.output in (sys.stdout, sys.stderr):
            return
        if hasattr(self.output, "close"):
            self.output.close()


class ReportWriter(ReductionWriter):
    """Writes the per-tin report.

    Format:
                                      # blank line before each tin
        TIN (2 Gs): [B, B, B, G, G]
        tin after: [B, -, -, -, -]
        last bean: B
    """

    def __init__(self, output: TextIO):
        super().__init__(output)
        self.formatter = ReportFormatter()

    def write_header(self, seed: int, supply_size: int, sampling: str = "rejection") -> None:
        """Report output carries no header."""
        pass

    def write_tin_start(self, tin_num: int, symbols: list[str], green_count: int) -> None:
        self.output.write(f"\n{self.formatter.header_line(symbols, green_count)}\n")
        self.flush()

    def write_step(self, step: ReductionStep) -> None:
        """Steps are not part of the report."""
        pass

    def write_result(self, tin_num: int, result: ReductionResult) -> None:
        self.output.write(f"{self.formatter.after_line(result)}\n")
        self.output.write(f"{self.formatter.outcome_line(result)}\n")
        self.flush()


class TranscriptWriter(ReductionWriter):
    """Writes every reduction step in transcript format.

    File format:
        # Seed: 12345              # Header comments
        # Supply: 60 (rejection)
        #
        # Tin 1: BBBGG (2 Gs)
        Step 1: B+G -> G (4 left)
        Step 2: G+G -> B (3 left)
        ...
        # Tin 1 last bean: B (expected: B)
        #
        # Supply left: 18 B, 20 G  # Footer
    """

    def __init__(self, output: TextIO):
        super().__init__(output)
        self.formatter = TranscriptFormatter()

    def write_header(self, seed: int, supply_size: int, sampling: str = "rejection") -> None:
        self.output.write(f"# Seed: {seed}\n")
        self.output.write(f"# Supply: {supply_size} ({sampling})\n")
        self.output.write("#\n")
        self.flush()

    def write_tin_start(self, tin_num: int, symbols: list[str], green_count: int) -> None:
        self.output.write(f"# Tin {tin_num}: {''.join(symbols)} ({green_count} Gs)\n")
        self.flush()

    def write_step(self, step: ReductionStep) -> None:
        transcript_str = self.formatter.step_to_transcript(step)
        self.output.write(f"Step {step.iteration}: {transcript_str}\n")
        self.flush()

    def write_result(self, tin_num: int, result: ReductionResult) -> None:
        last = "none" if result.last_bean is None else result.last_bean.symbol
        self.output.write(
            f"# Tin {tin_num} last bean: {last} (expected: {result.expected.symbol})\n"
        )
        self.flush()

    def write_comment(self, message: str) -> None:
        self.output.write(f"# {message}\n")
        self.flush()

    def write_footer(self, supply=None) -> None:
        if supply is None:
            return

        remaining = supply.remaining()
        counts = ", ".join(f"{count} {color.symbol}" for color, count in remaining.items())
        self.output.write("#\n")
        self.output.write(f"# Supply left: {counts}\n")
        self.flush()
