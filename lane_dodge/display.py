# -*- coding: utf-8 -*-
"""Display composer — (mode, score, lane, track, blink) -> 4 glyphs.

Glyphs are seven-segment patterns, bit0..bit6 = segments a..g. Row 0 is
the bottom digit (the player's row / score ones digit), row 3 the top.
The board is read sideways, so the three horizontal segments double as
the three lanes: left = a, middle = g, right = d.
"""
from __future__ import annotations

from .fsm import GameMode
from .obstacles import LANES, TRACK_DEPTH, mask_lane

SEG_A = 1 << 0
SEG_B = 1 << 1
SEG_C = 1 << 2
SEG_D = 1 << 3
SEG_E = 1 << 4
SEG_F = 1 << 5
SEG_G = 1 << 6
BLANK = 0

DIGIT_GLYPHS = (
    0x3F, 0x06, 0x5B, 0x4F, 0x66,
    0x6D, 0x7D, 0x07, 0x7F, 0x6F,
)

LANE_GLYPHS = (SEG_A, SEG_G, SEG_D)

GLYPH_L = SEG_D | SEG_E | SEG_F
GLYPH_O = DIGIT_GLYPHS[0]
GLYPH_S = DIGIT_GLYPHS[5]
GLYPH_T = SEG_D | SEG_E | SEG_F | SEG_G

# Bottom row first: reading top-down gives "LOST".
LOST_GLYPHS = (GLYPH_T, GLYPH_S, GLYPH_O, GLYPH_L)
BLANK_GLYPHS = (BLANK,) * TRACK_DEPTH


def digit_glyph(d: int) -> int:
    return DIGIT_GLYPHS[d] if 0 <= d <= 9 else BLANK


def lane_glyph(lane: int) -> int:
    return LANE_GLYPHS[lane] if 0 <= lane < LANES else BLANK


def mask_glyph(mask: int) -> int:
    lane = mask_lane(mask)
    return BLANK if lane is None else LANE_GLYPHS[lane]


def compose(
    mode: GameMode,
    score: tuple[int, ...],
    lane: int,
    track: tuple[int, ...],
    blink: bool,
) -> tuple[int, ...]:
    if mode == GameMode.COUNTDOWN:
        return BLANK_GLYPHS
    if mode == GameMode.PLAY:
        player = lane_glyph(lane) if blink else BLANK
        if track[0]:
            player &= mask_glyph(track[0])
        return (player,) + tuple(mask_glyph(m) for m in track[1:])
    if mode == GameMode.LOST:
        return LOST_GLYPHS
    return tuple(digit_glyph(d) for d in score)
