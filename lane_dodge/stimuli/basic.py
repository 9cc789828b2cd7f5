# -*- coding: utf-8 -*-
"""Basic stimulus: start a round, then shuffle between lanes."""
from __future__ import annotations


def init(sim) -> None:
    sim.rst = 0
    sim.center = 0
    sim.left = 0
    sim.right = 0


def total_frames() -> int:
    return 60


def sleep_s() -> float:
    return 0.15


def step(frame: int, sim) -> None:
    # Start the game at frame 0
    sim.center = 1 if frame == 0 else 0

    # After the countdown, tap left twice (second tap hits the wall), then right
    sim.left = 1 if frame in (24, 27) else 0
    sim.right = 1 if frame in (33, 36, 39) else 0
