# -*- coding: utf-8 -*-
"""Crash stimulus: start and never move, until LOST hands back to the score."""
from __future__ import annotations


def total_frames() -> int:
    return 150


def sleep_s() -> float:
    return 0.08


def step(frame: int, sim) -> None:
    sim.center = 1 if frame == 0 else 0
