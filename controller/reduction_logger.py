"""Reduction logging for the coffee tin game.

Handles logging reports and step transcripts using pluggable writers.
"""

import os
import sys
from typing import Callable, TextIO

from game.reduction_result import ReductionResult, ReductionStep
from game.writers import ReductionWriter, ReportWriter, TranscriptWriter


class ReductionLogger:
    """Manages multiple reduction writers for flexible logging.

    Uses the Strategy pattern to support several output formats and destinations
    at once (e.g., report to screen, transcript to file).

    Screen writers persist for the whole session. File writers are created per
    run, named after the run's seed, and closed when the run ends.
    """

    def __init__(
        self,
        session,
        transcript_dir: str | None = None,
        log_to_screen: bool = False,
        report_stream: TextIO | None = None,
        status_reporter: Callable[[str], None] | None = None,
    ):
        """Initialize the reduction logger.

        Args:
            session: SimulationSession instance (for seed lookup)
            transcript_dir: Directory path for transcript log files (None to disable)
            log_to_screen: Whether to log the step transcript to stdout
            report_stream: Stream for the per-tin report (None to disable)
            status_reporter: Optional callback for status messages
        """
        self.session = session
        self._transcript_dir = transcript_dir
        self._log_to_screen = log_to_screen
        self._status_reporter = status_reporter
        self._run_active = False

        self._log_filenames = []

        self.writers: list[ReductionWriter] = []
        self._screen_writers: list[ReductionWriter] = []
        if report_stream is not None:
            self._add_screen_writer(ReportWriter(report_stream))
        if self._log_to_screen:
            self._add_screen_writer(TranscriptWriter(sys.stdout))

    def _add_screen_writer(self, writer: ReductionWriter) -> None:
        self.writers.append(writer)
        self._screen_writers.append(writer)

    def _create_file_writer(self, directory, filename, writer_class, log_type):
        """Create a file writer, reporting failures to stderr.

        Returns:
            Writer instance on success, None on failure
        """
        try:
            os.makedirs(directory, exist_ok=True)
            filepath = os.path.join(directory, filename)
            writer = writer_class(open(filepath, "w"))
            self._log_filenames.append(filepath)
            return writer
        except PermissionError as e:
            print(f"Error: Cannot create {log_type} log directory or file: {e}", file=sys.stderr)
            print(f"Attempted path: {directory}", file=sys.stderr)
            print(f"{log_type.capitalize()} logging to file disabled for this run", file=sys.stderr)
            return None
        except OSError as e:
            print(f"Error: Failed to create {log_type} log file: {e}", file=sys.stderr)
            print(f"Attempted path: {directory}", file=sys.stderr)
            print(f"{log_type.capitalize()} logging to file disabled for this run", file=sys.stderr)
            return None

    def _create_run_file_writers(self):
        if self._transcript_dir:
            filename = f"coffeetin_{self.session.get_seed()}.txt"
            writer = self._create_file_writer(
                self._transcript_dir, filename, TranscriptWriter, "transcript"
            )
            if writer:
                self.writers.append(writer)

    def _close_file_writers(self):
        kept = []
        for writer in self.writers:
            if writer in self._screen_writers:
                kept.append(writer)
            else:
                writer.close()
        self.writers = kept

    def get_log_filenames(self):
        """Get list of log filenames created."""
        return self._log_filenames.copy()

    def add_writer(self, writer: ReductionWriter) -> None:
        self.writers.append(writer)

    def remove_writer(self, writer: ReductionWriter) -> None:
        if writer in self.writers:
            self.writers.remove(writer)

    def start_log(self, seed: int, supply_size: int, sampling: str = "rejection") -> None:
        """Start logging a run and write headers to all writers.

        Any file writers still open from a previous run are closed first.

        Args:
            seed: Random seed for this run
            supply_size: Number of slots in the bean supply
            sampling: Sampling mode
        """
        if self._run_active:
            self._close_file_writers()
        self._create_run_file_writers()

        for writer in self.writers:
            writer.write_header(seed, supply_size, sampling)

        self._run_active = True

    def end_log(self, supply=None) -> None:
        """Write footers and close file writers. Screen writers stay open.

        Args:
            supply: Optional BeanSupply for the final supply state
        """
        for writer in self.writers:
            writer.write_footer(supply)

        self._close_file_writers()
        self._run_active = False

    def log_tin_start(self, tin_num: int, symbols: list[str], green_count: int) -> None:
        for writer in self.writers:
            writer.write_tin_start(tin_num, symbols, green_count)

    def log_step(self, step: ReductionStep) -> None:
        for writer in self.writers:
            writer.write_step(step)

    def log_result(self, tin_num: int, result: ReductionResult) -> None:
        for writer in self.writers:
            writer.write_result(tin_num, result)

    def log_comment(self, message: str) -> None:
        for writer in self.writers:
            writer.write_comment(message)

    def report(self, message: str | None) -> None:
        """Send a status message to the reporter and as a comment to all writers."""
        if message is None:
            return
        self.log_comment(message)
        if self._status_reporter is not None:
            self._status_reporter(message)
        else:
            print(message)
