"""Simulation session management for the coffee tin game.

Manages the tins to reduce, the shared bean supply, the engine and seeds.
"""

import hashlib
import time
from typing import Callable, Iterable

import numpy as np

from game.bean_supply import BeanSupply
from game.constants import BeanColor, SAMPLE_TINS
from game.reduction_engine import ReductionEngine
from game.sim_config import SimulationConfig, parse_tin_spec
from game.tin import Tin


class SimulationSession:
    """Manages one simulation run at a time (seed, bean supply, engine, tins).

    A run reduces every configured tin in order, all drawing from the same
    bean supply. next_run() starts another run with a derived seed and a
    refilled supply.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        tins: Iterable[Iterable[BeanColor]] | None = None,
        seed: int | None = None,
        status_reporter: Callable[[str], None] | None = None,
    ):
        """Initialize a simulation session.

        Args:
            config: Simulation configuration (default: rejection sampling, 60-bean supply)
            tins: Initial contents of each tin (default: the sample tins)
            seed: Random seed, overrides config.rng_seed (time based if both are None)
            status_reporter: Optional callback for status messages
        """
        self.config = config if config is not None else SimulationConfig()
        self._status_reporter = status_reporter

        if tins is None:
            self.tin_contents = [parse_tin_spec(spec) for spec in SAMPLE_TINS]
        else:
            self.tin_contents = [list(tin) for tin in tins]

        if seed is None:
            seed = self.config.rng_seed
        if seed is None:
            seed = int(time.time())

        self.current_seed = None
        self.rng = None
        self.supply = None
        self.engine = None
        self.runs_started = 0

        self._apply_seed(seed)

    def _apply_seed(self, seed):
        """Create a fresh generator, supply and engine for the given seed."""
        self._report(f"-- Setting Seed: {seed}")
        self.current_seed = seed
        self.rng = np.random.Generator(np.random.PCG64(seed))
        self.supply = BeanSupply.standard(
            self.config.supply_size, rng=self.rng, sampling=self.config.sampling
        )
        self.engine = ReductionEngine(self.supply, rng=self.rng)
        self.runs_started += 1

    def _generate_next_seed(self):
        """Generate the next seed deterministically from the current seed using hash.

        Returns:
            int: New seed value
        """
        hash_obj = hashlib.sha256(str(self.current_seed).encode())
        new_seed = int.from_bytes(hash_obj.digest()[:8], byteorder="big")
        return new_seed % (2**32)

    def next_run(self):
        """Start the next run with a derived seed and a refilled supply."""
        self._apply_seed(self._generate_next_seed())

    def get_seed(self):
        return self.current_seed

    def create_tins(self) -> list[Tin]:
        """Build fresh tins for the current run."""
        return [
            Tin.of(contents, rng=self.rng, sampling=self.config.sampling)
            for contents in self.tin_contents
        ]

    def _report(self, message: str | None) -> None:
        if message is None:
            return
        if self._status_reporter is not None:
            self._status_reporter(message)
