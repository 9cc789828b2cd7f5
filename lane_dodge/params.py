# -*- coding: utf-8 -*-
"""Build-time parameters for the lane-dodge core.

Parameters:
  clk_freq     — master ticks per second (default 100 MHz, like the board)
  one_hz       — dwell-timer rate used by Countdown / Lost
  blink_hz     — player blink rate
  move_hz      — obstacle advance rate
  refresh_hz   — display refresh cadence handed to the renderer
  spawn_every  — move-ticks per spawn event
  countdown_s  — Countdown dwell, in 1 Hz ticks
  lost_s       — Lost dwell, in 1 Hz ticks
  prng_seed    — LFSR seed (non-zero, 8 bits)

Only the ratios to clk_freq matter; the emulator runs with a small demo
clock so the whole game fits in real time.
"""
from __future__ import annotations

from dataclasses import dataclass


def half_period(clk_freq: int, rate_hz: int, *, name: str = "rate") -> int:
    """Master ticks per half-period of a divider running at `rate_hz`."""
    if rate_hz <= 0:
        raise ValueError(f"{name} must be > 0")
    half = clk_freq // (2 * rate_hz)
    if half < 1:
        raise ValueError(f"{name}={rate_hz} is too fast for clk_freq={clk_freq}")
    return half


@dataclass(frozen=True)
class GameParams:
    clk_freq: int = 100_000_000
    one_hz: int = 1
    blink_hz: int = 3
    move_hz: int = 1
    refresh_hz: int = 1000
    spawn_every: int = 2
    countdown_s: int = 3
    lost_s: int = 5
    prng_seed: int = 0xA5

    def __post_init__(self) -> None:
        if self.clk_freq <= 0:
            raise ValueError("clk_freq must be > 0")
        for name in ("one_hz", "blink_hz", "move_hz", "refresh_hz"):
            half_period(self.clk_freq, getattr(self, name), name=name)
        if self.spawn_every < 1:
            raise ValueError("spawn_every must be >= 1")
        if self.countdown_s < 1 or self.lost_s < 1:
            raise ValueError("countdown_s and lost_s must be >= 1")
        if not 0 < self.prng_seed <= 0xFF:
            raise ValueError("prng_seed must be a non-zero 8-bit value")

    @property
    def halves(self) -> tuple[int, int, int, int]:
        """Half-periods for (one_hz, blink, move, refresh)."""
        f = self.clk_freq
        return (
            half_period(f, self.one_hz),
            half_period(f, self.blink_hz),
            half_period(f, self.move_hz),
            half_period(f, self.refresh_hz),
        )


# Demo clock used by the terminal emulator (must divide evenly into frames).
DEMO_PARAMS = GameParams(clk_freq=600, refresh_hz=100)
