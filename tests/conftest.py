from __future__ import annotations

from dataclasses import replace

import pytest

from lane_dodge.fsm import GameMode
from lane_dodge.game import GameState, reset_state
from lane_dodge.params import GameParams


@pytest.fixture()
def params() -> GameParams:
    # One "second" is 12 master ticks; 1 Hz pulses land on cycles 6, 18, 30, ...
    return GameParams(clk_freq=12, refresh_hz=6)


@pytest.fixture()
def play_state(params: GameParams) -> GameState:
    return replace(reset_state(params), mode=GameMode.PLAY)
