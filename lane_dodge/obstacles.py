# -*- coding: utf-8 -*-
"""Obstacle pipeline — spawn gate + 4-row conveyor.

Track slot 0 is the bottom row (next to the player), slot 3 the spawn row.
Masks are 3-bit lane sets; a spawn only ever produces a single-bit mask.
"""
from __future__ import annotations

from dataclasses import dataclass

TRACK_DEPTH = 4
LANES = 3
EMPTY_TRACK: tuple[int, ...] = (0,) * TRACK_DEPTH


def lane_mask(lane: int) -> int:
    assert 0 <= lane < LANES, lane
    return 1 << lane


def mask_lane(mask: int) -> int | None:
    """Lane held by a single-bit mask, else None (empty or malformed)."""
    for lane in range(LANES):
        if mask == 1 << lane:
            return lane
    return None


@dataclass(frozen=True)
class SpawnGate:
    count: int = 0
    lane: int = 0  # held lane of the last spawn

    def advance(self, *, enabled: bool, move: bool, lane_now: int, spawn_every: int) -> tuple[SpawnGate, bool]:
        """Next gate state and whether a spawn fires this tick."""
        if not enabled:
            return SpawnGate(), False
        if not move:
            return self, False
        if self.count == spawn_every - 1:
            return SpawnGate(count=0, lane=lane_now), True
        return SpawnGate(count=self.count + 1, lane=self.lane), False


def shift_track(track: tuple[int, ...], top: int) -> tuple[int, ...]:
    """Move every row one slot toward the player; `top` fills slot 3."""
    assert bin(top).count("1") <= 1, top
    return tuple(track[1:]) + (top,)
