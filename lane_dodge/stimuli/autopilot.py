# -*- coding: utf-8 -*-
"""Autopilot stimulus: looks one row ahead and steps out of the way."""
from __future__ import annotations

from lane_dodge.fsm import GameMode
from lane_dodge.obstacles import LANES


def total_frames() -> int:
    return 240


def sleep_s() -> float:
    return 0.08


def _blocked(sim, lane: int) -> bool:
    return bool(((sim.track[0] | sim.track[1]) >> lane) & 1)


def step(frame: int, sim) -> None:
    # Release last frame's press so the next one is a fresh edge.
    if sim.left or sim.right or sim.center:
        sim.left = sim.right = sim.center = 0
        return

    if sim.mode == GameMode.SCORE_IDLE:
        sim.center = 1
        return
    if sim.mode != GameMode.PLAY or not _blocked(sim, sim.lane):
        return

    for target in sorted(range(LANES), key=lambda ln: abs(ln - sim.lane)):
        if not _blocked(sim, target):
            if target < sim.lane:
                sim.left = 1
            elif target > sim.lane:
                sim.right = 1
            return
