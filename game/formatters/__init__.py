"""Output formatters for coffee tin reductions."""

from .report_formatter import ReportFormatter
from .transcript_formatter import TranscriptFormatter

__all__ = ["ReportFormatter", "TranscriptFormatter"]
