from __future__ import annotations

from lane_dodge.game import GameState, Inputs, step
from lane_dodge.params import GameParams

NO_INPUT = Inputs()


def run_to_move(state: GameState, params: GameParams, limit: int = 1000) -> GameState:
    """Step up to and including the next tick that carries a move pulse."""
    for _ in range(limit):
        is_move = state.ticks.pulses().move
        state = step(state, NO_INPUT, params)
        if is_move:
            return state
    raise AssertionError("no move pulse within limit")


def run_until(state: GameState, params: GameParams, pred, limit: int = 1000) -> GameState:
    for _ in range(limit):
        if pred(state):
            return state
        state = step(state, NO_INPUT, params)
    raise AssertionError("condition not reached within limit")
