# -*- coding: utf-8 -*-
"""Simulation wrapper around the lane-dodge step function.

Stimuli drive button *levels* (`sim.left = 1`) the same way they would
poke the ports of a compiled netlist; the wrapper turns each level into a
single-tick pulse on its rising edge, so a button held across many master
ticks still presses exactly once.
"""
from __future__ import annotations

from .fsm import GameMode
from .game import GameState, Inputs, outputs, reset_state, step
from .params import DEMO_PARAMS, GameParams
from .scoring import score_value


class ButtonEdges:
    """Rising-edge detector for the three game buttons."""

    def __init__(self):
        self._prev = (0, 0, 0)

    def clear(self) -> None:
        self._prev = (0, 0, 0)

    def sample(self, left: int, right: int, center: int) -> tuple[bool, bool, bool]:
        now = (int(bool(left)), int(bool(right)), int(bool(center)))
        edges = tuple(bool(n and not p) for n, p in zip(now, self._prev))
        self._prev = now
        return edges


class LaneDodgeSim:
    def __init__(self, params: GameParams | None = None, trace=None):
        self.params = params if params is not None else DEMO_PARAMS
        self._state = reset_state(self.params)
        self._edges = ButtonEdges()
        self._trace = trace
        self.rst = 0
        self.left = 0
        self.right = 0
        self.center = 0

    def reset(self, cycles: int = 2):
        for _ in range(cycles):
            self._state = step(self._state, Inputs(reset=True), self.params)
        self._edges.clear()

    def _sample_inputs(self) -> Inputs:
        left, right, center = self._edges.sample(self.left, self.right, self.center)
        return Inputs(left=left, right=right, center=center, reset=bool(self.rst))

    def tick(self):
        self._state = step(self._state, self._sample_inputs(), self.params)
        if self._trace is not None:
            self._trace.write(self._state)

    def run_cycles(self, n: int):
        for _ in range(n):
            self.tick()

    def run_seconds(self, seconds: float):
        self.run_cycles(int(seconds * self.params.clk_freq))

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def mode(self) -> GameMode:
        return self._state.mode

    @property
    def lane(self) -> int:
        return self._state.lane

    @property
    def score(self) -> int:
        return score_value(self._state.score)

    @property
    def score_digits(self) -> tuple[int, ...]:
        return self._state.score

    @property
    def track(self) -> tuple[int, ...]:
        return self._state.track

    @property
    def collision(self) -> bool:
        return self._state.collision

    @property
    def glyphs(self) -> tuple[int, ...]:
        return outputs(self._state).glyphs

    @property
    def refresh(self) -> bool:
        return outputs(self._state).refresh

    @property
    def cycle(self) -> int:
        return self._state.cycle
