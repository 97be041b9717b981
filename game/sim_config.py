"""Simulation configuration for the coffee tin game."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from game.constants import BeanColor, DEFAULT_SUPPLY_SIZE

SamplingType = Literal["rejection", "live"]


@dataclass
class SimulationConfig:
    """Configuration for a simulation session.

    Attributes:
        sampling: How containers pick a random bean ('rejection' or 'live')
        supply_size: Number of slots in the bean supply (multiple of 3)
        rng_seed: Random seed for the session (None = time based)
    """

    sampling: SamplingType = "rejection"
    supply_size: int = DEFAULT_SUPPLY_SIZE
    rng_seed: int | None = None

    @classmethod
    def rejection(cls, supply_size: int = DEFAULT_SUPPLY_SIZE, seed: int | None = None) -> SimulationConfig:
        """Sample over every slot and retry on empty ones."""
        return cls(sampling="rejection", supply_size=supply_size, rng_seed=seed)

    @classmethod
    def live(cls, supply_size: int = DEFAULT_SUPPLY_SIZE, seed: int | None = None) -> SimulationConfig:
        """Sample over occupied slots only."""
        return cls(sampling="live", supply_size=supply_size, rng_seed=seed)


def parse_simulation_spec(spec: str) -> SimulationConfig:
    """Parse a simulation specification string into a SimulationConfig.

    Format:
        MODE[:PARAM=VALUE,PARAM=VALUE,...]

    Examples:
        "rejection" -> Rejection sampling, 60-bean supply
        "live:size=90" -> Live-index sampling, 90-slot supply
        "rejection:size=30,seed=7"

    Supported parameters:
        - size (int): Bean supply size, a positive multiple of 3
        - seed (int): Random seed
    """
    parts = spec.split(":", 1)
    mode = parts[0].strip().lower()

    if mode not in ["rejection", "live"]:
        raise ValueError(f"Invalid sampling mode: {mode}. Must be 'rejection' or 'live'")

    params = {}
    if len(parts) == 2:
        for param_pair in parts[1].split(","):
            param_pair = param_pair.strip()
            if not param_pair:
                continue
            if "=" not in param_pair:
                raise ValueError(f"Invalid parameter format: {param_pair}. Expected PARAM=VALUE")
            key, value = param_pair.split("=", 1)
            key = key.strip()
            value = value.strip()

            if key in ["size", "seed"]:
                params[key] = int(value)
            else:
                raise ValueError(f"Unknown parameter: {key}")

    size = params.get("size", DEFAULT_SUPPLY_SIZE)
    if size <= 0 or size % 3 != 0:
        raise ValueError(f"Invalid supply size: {size}. Must be a positive multiple of 3")

    if mode == "live":
        return SimulationConfig.live(supply_size=size, seed=params.get("seed"))
    return SimulationConfig.rejection(supply_size=size, seed=params.get("seed"))


def parse_tin_spec(spec: str) -> list[BeanColor]:
    """Parse a tin specification into a list of bean colors.

    Accepted forms: "BBBGG", "B,B,B,G,G", "B B B G G" (case-insensitive).
    An empty string describes an empty tin.
    """
    symbols = [s for s in re.split(r"[\s,]+", spec.strip()) if s]
    if len(symbols) == 1:
        symbols = list(symbols[0])
    return [BeanColor.from_symbol(s) for s in symbols]
