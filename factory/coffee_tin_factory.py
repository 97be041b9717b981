"""Factory helpers for constructing coffee tin simulation components."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from controller.coffee_tin_controller import CoffeeTinController
from game.constants import BeanColor
from game.sim_config import SimulationConfig


class CoffeeTinFactory:
    """Centralised factory for assembling CoffeeTinController instances."""

    def __init__(self, text_stream: TextIO | None = None):
        self._text_stream = text_stream

    def create_controller(
        self,
        *,
        config: SimulationConfig | None = None,
        tins: Iterable[Iterable[BeanColor]] | None = None,
        seed: int | None = None,
        runs: int = 1,
        log_to_file: str | None = None,
        log_to_screen: bool = False,
        quiet: bool = False,
        track_statistics: bool = False,
    ) -> CoffeeTinController:
        """Create a fully-wired CoffeeTinController.

        The per-tin report goes to the factory's text stream (stdout by default)
        unless quiet is set.
        """
        report_stream = None
        if not quiet:
            report_stream = self._text_stream if self._text_stream is not None else sys.stdout

        return CoffeeTinController(
            config=config,
            tins=tins,
            seed=seed,
            runs=runs,
            log_to_file=log_to_file,
            log_to_screen=log_to_screen,
            report_stream=report_stream,
            track_statistics=track_statistics,
        )
