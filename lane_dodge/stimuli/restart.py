# -*- coding: utf-8 -*-
"""Restart stimulus: reset mid-round, then start again."""
from __future__ import annotations


def total_frames() -> int:
    return 72


def sleep_s() -> float:
    return 0.1


def step(frame: int, sim) -> None:
    sim.rst = 1 if frame == 30 else 0
    sim.center = 1 if frame in (0, 33) else 0
