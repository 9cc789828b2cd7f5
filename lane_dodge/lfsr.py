# -*- coding: utf-8 -*-
"""8-bit LFSR lane generator.

Feedback = r[7] ^ r[5] ^ r[4] ^ r[3]; shifting left drops r[7] and inserts
the feedback bit at r[0]. Lane = r[1:0], with the spare code 3 folded to
lane 0 so the output is always a valid lane.
"""
from __future__ import annotations

from collections.abc import Iterator

LFSR_W = 8
LFSR_MASK = (1 << LFSR_W) - 1
TAPS = (7, 5, 4, 3)


def lfsr_next(value: int) -> int:
    fb = 0
    for t in TAPS:
        fb ^= (value >> t) & 1
    return ((value << 1) & LFSR_MASK) | fb


def lfsr_lane(value: int) -> int:
    low = value & 0b11
    return 0 if low == 0b11 else low


def lane_sequence(seed: int, n: int) -> Iterator[int]:
    """Lanes produced by `n` consecutive advances starting from `seed`."""
    v = seed
    for _ in range(n):
        yield lfsr_lane(v)
        v = lfsr_next(v)
