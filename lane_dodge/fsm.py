# -*- coding: utf-8 -*-
"""Game mode FSM: SCORE_IDLE -> COUNTDOWN -> PLAY -> LOST -> SCORE_IDLE.

Dwell timers count 1 Hz pulses while their mode is active and sit at 0
otherwise; the transition fires on the tick after the timer reaches its
limit, like every other registered compare in the design.
"""
from __future__ import annotations

from enum import IntEnum


class GameMode(IntEnum):
    SCORE_IDLE = 0
    COUNTDOWN = 1
    PLAY = 2
    LOST = 3


STATE_NAMES = {
    GameMode.SCORE_IDLE: "SCORE",
    GameMode.COUNTDOWN: "COUNTDOWN",
    GameMode.PLAY: "PLAY",
    GameMode.LOST: "LOST",
}


def decode_mode(value: int) -> GameMode:
    """Raw state bits -> GameMode; unknown encodings fall back to SCORE_IDLE."""
    try:
        return GameMode(value)
    except ValueError:
        return GameMode.SCORE_IDLE


def gameplay_enabled(mode: GameMode) -> bool:
    return mode == GameMode.PLAY


def score_reset(mode: GameMode) -> bool:
    return mode == GameMode.COUNTDOWN


def next_dwell(timer: int, *, active: bool, one_hz: bool) -> int:
    if not active:
        return 0
    return timer + 1 if one_hz else timer


def next_mode(
    mode: GameMode,
    *,
    center: bool,
    collision: bool,
    countdown_timer: int,
    lost_timer: int,
    countdown_s: int,
    lost_s: int,
) -> GameMode:
    if mode == GameMode.SCORE_IDLE:
        return GameMode.COUNTDOWN if center else mode
    if mode == GameMode.COUNTDOWN:
        return GameMode.PLAY if countdown_timer >= countdown_s else mode
    if mode == GameMode.PLAY:
        return GameMode.LOST if collision else mode
    if mode == GameMode.LOST:
        return GameMode.SCORE_IDLE if lost_timer >= lost_s else mode
    return GameMode.SCORE_IDLE
