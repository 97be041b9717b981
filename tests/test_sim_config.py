"""Tests for simulation configuration parsing."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from game.constants import BeanColor
from game.sim_config import SimulationConfig, parse_simulation_spec, parse_tin_spec

B = BeanColor.BLUE
G = BeanColor.GREEN


class TestParseSimulationSpec:

    def test_defaults(self):
        config = parse_simulation_spec("rejection")
        assert config == SimulationConfig()
        assert config.supply_size == 60
        assert config.rng_seed is None

    def test_live_with_params(self):
        config = parse_simulation_spec("live:size=90,seed=7")
        assert config.sampling == "live"
        assert config.supply_size == 90
        assert config.rng_seed == 7

    def test_whitespace_and_case(self):
        config = parse_simulation_spec("Rejection: size = 30 , ")
        assert config.sampling == "rejection"
        assert config.supply_size == 30

    @pytest.mark.parametrize("spec, message", [
        ("fast", "Invalid sampling mode"),
        ("live:size", "Expected PARAM=VALUE"),
        ("live:colors=3", "Unknown parameter: colors"),
        ("live:size=10", "Invalid supply size"),
        ("rejection:size=0", "Invalid supply size"),
    ])
    def test_invalid_specs(self, spec, message):
        with pytest.raises(ValueError, match=message):
            parse_simulation_spec(spec)

    def test_non_integer_value(self):
        with pytest.raises(ValueError):
            parse_simulation_spec("live:seed=abc")


class TestParseTinSpec:

    @pytest.mark.parametrize("spec", ["BBG", "B,B,G", "B B G", "b, b, g", " BBG "])
    def test_forms(self, spec):
        assert parse_tin_spec(spec) == [B, B, G]

    def test_empty_spec_is_empty_tin(self):
        assert parse_tin_spec("") == []

    def test_unknown_symbol(self):
        with pytest.raises(ValueError, match="Unknown bean symbol"):
            parse_tin_spec("BWG")
