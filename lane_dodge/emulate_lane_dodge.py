#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
emulate_lane_dodge.py — cycle-accurate simulation of the lane-dodge game
with a terminal visualization of its 4-digit seven-segment display.

Run:
  python -m lane_dodge.emulate_lane_dodge --stim autopilot
  python -m lane_dodge.emulate_lane_dodge --stim crash --trace crash.jsonl --no-sleep
"""
from __future__ import annotations

import argparse
import importlib
import re as _re
import time

from .display import SEG_A, SEG_B, SEG_C, SEG_D, SEG_E, SEG_F, SEG_G
from .fsm import STATE_NAMES, GameMode
from .obstacles import LANES
from .params import DEMO_PARAMS
from .sim import LaneDodgeSim
from .trace import TraceWriter

# =============================================================================
# ANSI helpers
# =============================================================================

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
WHITE = "\033[37m"

_ANSI = _re.compile(r"\x1b\[[0-9;]*m")


def _vl(s: str) -> int:
    return len(_ANSI.sub("", s))


def clear_screen() -> None:
    print("\033[2J\033[H", end="")


# =============================================================================
# 7-segment ASCII art (from raw segment bits)
# =============================================================================


def glyph_rows(glyph: int, color: str = WHITE) -> list[str]:
    def seg(bit: int, ch: str) -> str:
        return ch if glyph & bit else " "

    rows = (
        f" {seg(SEG_A, '_')} ",
        f"{seg(SEG_F, '|')}{seg(SEG_G, '_')}{seg(SEG_B, '|')}",
        f"{seg(SEG_E, '|')}{seg(SEG_D, '_')}{seg(SEG_C, '|')}",
    )
    return [f"{color}{r}{RESET}" for r in rows]


def render_display(glyphs: tuple[int, ...], color: str = WHITE) -> list[str]:
    """Digits laid out as on the board: row 3 leftmost, row 0 rightmost."""
    cols = [glyph_rows(g, color) for g in reversed(glyphs)]
    return ["  " + " ".join(c[i] for c in cols) for i in range(3)]


_MODE_COLOR = {
    GameMode.SCORE_IDLE: WHITE,
    GameMode.COUNTDOWN: YELLOW,
    GameMode.PLAY: GREEN,
    GameMode.LOST: RED,
}


def render_track(track: tuple[int, ...], lane: int, collision: bool) -> list[str]:
    """Debug view: top row first, `#` obstacle, `A` player."""
    lines: list[str] = []
    for row in reversed(range(len(track))):
        cells = []
        for ln in range(LANES):
            if (track[row] >> ln) & 1:
                cells.append(f"{RED}#{RESET}")
            elif row == 0 and ln == lane:
                cells.append(f"{RED if collision else GREEN}A{RESET}")
            else:
                cells.append(f"{DIM}.{RESET}")
        lines.append(f"  {row} |" + " ".join(cells) + "|")
    return lines


# =============================================================================
# Stimulus loading
# =============================================================================


def _load_stimulus(name: str):
    if "." in name:
        return importlib.import_module(name)
    return importlib.import_module(f"lane_dodge.stimuli.{name}")


FRAMES_PER_SECOND = 6


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Lane-dodge terminal emulator")
    ap.add_argument(
        "--stim",
        default="autopilot",
        help="Stimulus module name (e.g. basic, autopilot, crash, restart)",
    )
    ap.add_argument("--frames", type=int, default=None, help="Override the stimulus frame count")
    ap.add_argument("--trace", default=None, help="Write a per-tick JSONL state trace")
    ap.add_argument("--no-sleep", action="store_true", help="Run as fast as possible")
    args = ap.parse_args(argv)

    stim = _load_stimulus(args.stim)
    params = DEMO_PARAMS
    cycles_per_frame = params.clk_freq // FRAMES_PER_SECOND

    trace = TraceWriter(args.trace).open() if args.trace else None

    try:
        sim = LaneDodgeSim(params, trace=trace)
        sim.reset()
        if hasattr(stim, "init"):
            stim.init(sim)

        total_frames = args.frames
        if total_frames is None:
            total_frames = int(getattr(stim, "total_frames", lambda: 120)())
        frame_sleep = 0.0 if args.no_sleep else float(getattr(stim, "sleep_s", lambda: 1 / FRAMES_PER_SECOND)())

        for frame in range(total_frames):
            if hasattr(stim, "step"):
                stim.step(frame, sim)
            sim.run_cycles(cycles_per_frame)

            clear_screen()
            color = _MODE_COLOR.get(sim.mode, WHITE)
            print(f"{BOLD}{CYAN}lane_dodge{RESET}  frame={frame}")
            print(f"cycle={sim.cycle}  mode={color}{STATE_NAMES[sim.mode]}{RESET}  "
                  f"score={sim.score:04d}  lane={sim.lane}")
            print(f"RST={sim.rst}  L={sim.left}  R={sim.right}  C={sim.center}  CLK_FREQ={params.clk_freq}")
            print("")
            display = render_display(sim.glyphs, color)
            for line in display:
                print(line)
            print("  " + "-" * (_vl(display[0]) - 2))
            for line in render_track(sim.track, sim.lane, sim.collision):
                print(line)

            if frame_sleep:
                time.sleep(frame_sleep)
    finally:
        if trace is not None:
            trace.close()
            print(f"trace: {trace.records} records -> {args.trace}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
