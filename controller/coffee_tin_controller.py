"""Simulation controller for the coffee tin game.

Runs every tin of a session through the reduction engine, logs the results
and keeps statistics.
"""

from __future__ import annotations

import statistics
import time
from typing import Callable, Iterable, TextIO

from controller.reduction_logger import ReductionLogger
from controller.simulation_session import SimulationSession
from game.constants import BeanColor
from game.errors import SupplyExhaustedError
from game.reduction_result import ReductionResult
from game.sim_config import SimulationConfig
from game.tin import Tin


class CoffeeTinController:

    def __init__(
        self,
        config: SimulationConfig | None = None,
        tins: Iterable[Iterable[BeanColor]] | None = None,
        seed: int | None = None,
        runs: int = 1,
        log_to_file: str | None = None,
        log_to_screen: bool = False,
        report_stream: TextIO | None = None,
        track_statistics: bool = False,
        status_reporter: Callable[[str], None] | None = print,
    ):
        if runs < 1:
            raise ValueError(f"Invalid number of runs: {runs}. Must be at least 1")

        self.runs = runs
        self._status_reporter = status_reporter

        # Statistics tracking
        self.track_statistics = track_statistics
        self.results: list[ReductionResult] = []
        self.run_durations: list[float] = []
        self.mismatches = 0
        self.total_start_time = None

        self.session = SimulationSession(
            config=config,
            tins=tins,
            seed=seed,
            status_reporter=self._status_reporter,
        )

        self.logger = ReductionLogger(
            session=self.session,
            transcript_dir=log_to_file,
            log_to_screen=log_to_screen,
            report_stream=report_stream,
            status_reporter=self._status_reporter,
        )

    def _report(self, message: str) -> None:
        self.logger.report(message)

    def run(self) -> int:
        """Reduce every tin for the configured number of runs.

        Returns:
            int: Process exit code (0 on success, 1 if the bean supply ran out).
                A wrong last bean is reported but does not change the exit code.
        """
        self.total_start_time = time.time()

        for run_index in range(self.runs):
            if run_index > 0:
                self.session.next_run()

            config = self.session.config
            self.logger.start_log(self.session.get_seed(), config.supply_size, config.sampling)
            run_start = time.time()
            try:
                for tin_num, tin in enumerate(self.session.create_tins(), start=1):
                    self.play_tin(tin_num, tin)
            except SupplyExhaustedError as e:
                self._report(f"Error: {e}")
                self.logger.end_log(self.session.supply)
                return 1

            if self.track_statistics:
                self.run_durations.append(time.time() - run_start)
            self.logger.end_log(self.session.supply)

        for filename in self.logger.get_log_filenames():
            if self._status_reporter is not None:
                self._status_reporter(f"Transcript written to {filename}")
        return 0

    def play_tin(self, tin_num: int, tin: Tin) -> ReductionResult:
        """Reduce a single tin and log it."""
        self.logger.log_tin_start(tin_num, tin.symbols(), tin.green_count())
        if tin.bean_count() == 0:
            self._report(f"Warning: tin {tin_num} is empty, nothing to reduce")

        engine = self.session.engine
        engine.set_step_observer(self.logger.log_step)
        try:
            result = engine.reduce(tin)
        finally:
            engine.set_step_observer(None)

        self.logger.log_result(tin_num, result)
        if self.track_statistics:
            self.results.append(result)
            if not result.matches_expectation():
                self.mismatches += 1
        return result

    def print_statistics(self):
        """Print reduction statistics."""
        if not self.results:
            print("No tins were reduced.")
            return

        total_time = time.time() - self.total_start_time if self.total_start_time else 0
        iterations = [result.iterations for result in self.results]
        last_beans = [result.last_bean for result in self.results]
        blue = sum(1 for bean in last_beans if bean == BeanColor.BLUE)
        green = sum(1 for bean in last_beans if bean == BeanColor.GREEN)
        total = len(self.results)

        print("\n" + "=" * 60)
        print("STATISTICS")
        print("=" * 60)
        print(f"Runs completed: {len(self.run_durations)}")
        print(f"Tins reduced: {total}")
        print()
        print("Last bean:")
        print(f"  Blue: {blue} ({blue / total * 100:.1f}%)")
        print(f"  Green: {green} ({green / total * 100:.1f}%)")
        print(f"  Mismatches: {self.mismatches}")
        print()
        print("Iterations per tin:")
        print(f"  Mean: {statistics.mean(iterations):.2f}")
        print(f"  Min: {min(iterations)}")
        print(f"  Max: {max(iterations)}")
        print()
        print("Timing:")
        if self.run_durations:
            print(f"  Mean time per run: {statistics.mean(self.run_durations):.6f}s")
        print(f"  Total execution time: {total_time:.3f}s")
        print("=" * 60)
