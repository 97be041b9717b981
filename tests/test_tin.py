"""
Unit tests for Tin.

Covers construction from symbols, random draws (rejection and live-index
sampling), first-empty-slot insertion and the inspection helpers.
"""

import pytest
import sys
import numpy as np
from pathlib import Path
from unittest.mock import Mock

# Add parent directory to path to import game modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from game.constants import BeanColor, REMOVED
from game.errors import EmptyContainerError, FullContainerError
from game.tin import Tin

B = BeanColor.BLUE
G = BeanColor.GREEN


def scripted_rng(*indices):
    """Generator stand-in whose integers() returns the given indices in order."""
    rng = Mock()
    rng.integers.side_effect = list(indices)
    return rng


# ============================================================================
# Construction
# ============================================================================


class TestTinConstruction:

    def test_from_symbols(self):
        tin = Tin.from_symbols("BBBGG")
        assert tin.capacity == 5
        assert tin.bean_count() == 5
        assert tin.count_of(B) == 3
        assert tin.count_of(G) == 2
        assert str(tin) == "[B, B, B, G, G]"

    def test_from_symbols_is_case_insensitive(self):
        assert Tin.from_symbols("bgG").symbols() == ["B", "G", "G"]

    def test_unknown_symbol_raises(self):
        with pytest.raises(ValueError, match="Unknown bean symbol"):
            Tin.from_symbols("BXG")

    def test_of_rejects_non_colors(self):
        with pytest.raises(ValueError, match="Must be a BeanColor"):
            Tin.of([B, "G"])

    def test_invalid_slot_value_raises(self):
        with pytest.raises(ValueError, match="Invalid slot value: 7"):
            Tin([1, 7])

    def test_invalid_sampling_mode_raises(self):
        with pytest.raises(ValueError, match="Invalid sampling mode"):
            Tin.from_symbols("BG", sampling="fast")

    def test_empty_tin(self):
        tin = Tin([])
        assert tin.capacity == 0
        assert tin.bean_count() == 0
        assert tin.any_remaining() is None
        assert not tin.has_at_least_two()

    def test_slots_returns_copy(self):
        tin = Tin.from_symbols("BG")
        slots = tin.slots
        slots[0] = REMOVED
        assert tin.bean_count() == 2


# ============================================================================
# Drawing
# ============================================================================


class TestTakeOne:

    def test_take_one_empties_slot(self):
        tin = Tin.from_symbols("BG")
        bean = tin.take_one(scripted_rng(1))
        assert bean == G
        assert tin.symbols() == ["B", "-"]

    def test_rejection_sampling_retries_empty_slots(self):
        tin = Tin.from_symbols("BG")
        tin.take_one(scripted_rng(1))

        rng = scripted_rng(1, 1, 0)
        bean = tin.take_one(rng)

        assert bean == B
        assert rng.integers.call_count == 3
        rng.integers.assert_called_with(2)
        assert tin.bean_count() == 0

    def test_live_sampling_draws_among_occupied_slots(self):
        tin = Tin([REMOVED, G, REMOVED, B], sampling="live")
        rng = scripted_rng(1)

        bean = tin.take_one(rng)

        assert bean == B
        rng.integers.assert_called_once_with(2)
        assert tin.symbols() == ["-", "G", "-", "-"]

    def test_take_one_uses_container_default_rng(self):
        tin = Tin.from_symbols("GB", rng=scripted_rng(0))
        assert tin.take_one() == G

    def test_take_one_on_empty_tin_raises(self):
        tin = Tin.from_symbols("B")
        tin.take_one(scripted_rng(0))
        with pytest.raises(EmptyContainerError, match="is empty"):
            tin.take_one(scripted_rng(0))

    def test_take_two_never_hits_same_slot(self):
        tin = Tin.from_symbols("BG")
        first, second = tin.take_two(scripted_rng(0, 0, 0, 1))
        assert (first, second) == (B, G)
        assert tin.bean_count() == 0

    @pytest.mark.parametrize("seed", range(20))
    def test_take_two_with_real_generator(self, seed):
        tin = Tin.from_symbols("BBGG", rng=np.random.default_rng(seed))
        first, second = tin.take_two()
        assert tin.bean_count() == 2
        drawn_blue = [first, second].count(B)
        assert tin.count_of(B) + drawn_blue == 2
        assert tin.count_of(G) + 2 - drawn_blue == 2


# ============================================================================
# Insertion and inspection
# ============================================================================


class TestPutIn:

    def test_put_in_fills_first_empty_slot(self):
        tin = Tin([B, REMOVED, G, REMOVED])
        assert tin.put_in(G) == 1
        assert tin.symbols() == ["B", "G", "G", "-"]

    def test_put_in_full_tin_raises(self):
        tin = Tin.from_symbols("BG")
        with pytest.raises(FullContainerError, match="all 2 slots"):
            tin.put_in(B)

    def test_put_in_rejects_non_colors(self):
        tin = Tin([REMOVED])
        with pytest.raises(ValueError, match="Must be a BeanColor"):
            tin.put_in(REMOVED)


class TestInspection:

    def test_has_at_least_two(self):
        assert Tin.from_symbols("BG").has_at_least_two()
        assert not Tin.from_symbols("B").has_at_least_two()
        assert not Tin([REMOVED, G, REMOVED]).has_at_least_two()

    def test_any_remaining_returns_first_bean_in_index_order(self):
        assert Tin([REMOVED, G, B]).any_remaining() == G

    def test_expected_last_bean_follows_green_parity(self):
        assert Tin.from_symbols("BBBGG").expected_last_bean() == B
        assert Tin.from_symbols("BBBGGG").expected_last_bean() == G
        assert Tin.from_symbols("G").expected_last_bean() == G
        assert Tin.from_symbols("B").expected_last_bean() == B
