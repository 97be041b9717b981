"""
Unit tests for reduction formatters and writers.

Tests report and transcript output formats written to in-memory streams.
"""

import pytest
import sys
from io import StringIO
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from game.bean_supply import BeanSupply
from game.constants import BeanColor
from game.formatters import ReportFormatter, TranscriptFormatter
from game.reduction_result import ReductionResult, ReductionStep
from game.writers import ReportWriter, TranscriptWriter

B = BeanColor.BLUE
G = BeanColor.GREEN


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def result():
    return ReductionResult(
        initial=["B", "G"],
        final=["G", "-"],
        green_count=1,
        expected=G,
        last_bean=G,
        steps=[ReductionStep(iteration=1, drawn=(B, G), replacement=G, beans_left=1)],
    )


@pytest.fixture
def wrong_result():
    return ReductionResult(
        initial=["B", "G"],
        final=["B", "-"],
        green_count=1,
        expected=G,
        last_bean=B,
    )


# ============================================================================
# Formatters
# ============================================================================


class TestReportFormatter:

    def test_header_line(self):
        assert ReportFormatter.header_line(["B", "B", "G"], 1) == "TIN (1 Gs): [B, B, G]"

    def test_after_line(self, result):
        assert ReportFormatter.after_line(result) == "tin after: [G, -]"

    def test_outcome_line_match(self, result):
        assert ReportFormatter.outcome_line(result) == "last bean: G"

    def test_outcome_line_mismatch(self, wrong_result):
        assert ReportFormatter.outcome_line(wrong_result) == "Oops, wrong last bean: B (expected: G)"

    def test_empty_tin(self):
        empty = ReductionResult(initial=[], final=[], green_count=0, expected=B, last_bean=None)
        assert ReportFormatter.after_line(empty) == "tin after: []"
        assert ReportFormatter.outcome_line(empty) == "last bean: none"


class TestTranscriptFormatter:

    def test_step_to_transcript(self, result):
        assert TranscriptFormatter.step_to_transcript(result.steps[0]) == "B+G -> G (1 left)"


# ============================================================================
# Writers
# ============================================================================


class TestReportWriter:

    def test_report_output(self, result):
        output = StringIO()
        writer = ReportWriter(output)

        writer.write_header(seed=1, supply_size=60)
        writer.write_tin_start(1, ["B", "G"], 1)
        writer.write_step(result.steps[0])
        writer.write_comment("ignored")
        writer.write_result(1, result)

        assert output.getvalue() == "\nTIN (1 Gs): [B, G]\ntin after: [G, -]\nlast bean: G\n"

    def test_mismatch_output(self, wrong_result):
        output = StringIO()
        ReportWriter(output).write_result(1, wrong_result)
        assert "Oops, wrong last bean: B (expected: G)" in output.getvalue()


class TestTranscriptWriter:

    def test_transcript_output(self, result):
        output = StringIO()
        writer = TranscriptWriter(output)

        writer.write_header(seed=12345, supply_size=60, sampling="live")
        writer.write_tin_start(1, ["B", "G"], 1)
        writer.write_step(result.steps[0])
        writer.write_result(1, result)
        writer.write_comment("Warning: something")
        writer.write_footer(BeanSupply.standard(60))

        assert output.getvalue().splitlines() == [
            "# Seed: 12345",
            "# Supply: 60 (live)",
            "#",
            "# Tin 1: BG (1 Gs)",
            "Step 1: B+G -> G (1 left)",
            "# Tin 1 last bean: G (expected: G)",
            "# Warning: something",
            "#",
            "# Supply left: 20 B, 20 G",
        ]

    def test_footer_without_supply_writes_nothing(self):
        output = StringIO()
        TranscriptWriter(output).write_footer()
        assert output.getvalue() == ""

    def test_close_never_closes_stdout(self):
        writer = TranscriptWriter(sys.stdout)
        writer.close()
        assert not sys.stdout.closed

    def test_close_closes_stream(self):
        output = StringIO()
        TranscriptWriter(output).close()
        assert output.closed
