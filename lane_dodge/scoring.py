# -*- coding: utf-8 -*-
"""Collision check and the 4-digit BCD score counter.

Score digits are stored ones-first: (ones, tens, hundreds, thousands).
"""
from __future__ import annotations

SCORE_DIGITS = 4
ZERO_SCORE: tuple[int, ...] = (0,) * SCORE_DIGITS
MAX_SCORE = 10 ** SCORE_DIGITS - 1


def hits(bottom: int, lane: int) -> bool:
    return bool((bottom >> lane) & 1)


def bcd_increment(digits: tuple[int, ...]) -> tuple[int, ...]:
    """+1 with per-digit carry; saturates at 9999 instead of wrapping."""
    if all(d == 9 for d in digits):
        return digits
    out = list(digits)
    for i, d in enumerate(out):
        if d == 9:
            out[i] = 0
            continue
        out[i] = d + 1
        break
    return tuple(out)


def bcd_digits(value: int) -> tuple[int, ...]:
    if not 0 <= value <= MAX_SCORE:
        raise ValueError(f"score must be in [0, {MAX_SCORE}]")
    return tuple((value // 10 ** i) % 10 for i in range(SCORE_DIGITS))


def score_value(digits: tuple[int, ...]) -> int:
    return sum(d * 10 ** i for i, d in enumerate(digits))
