# -*- coding: utf-8 -*-
"""Lane-dodge core — one synchronous step per master tick.

Architecture (single clock domain, no pipeline):

  cycle 0:  read every register of the current GameState
            -> tick pulses, mode flags, collision / spawn / score logic
  cycle 1:  commit all next values at once (returned as a new GameState)

Because every next value is computed from the same snapshot, the score
logic sees the bottom row *before* this tick's shift, and the mode FSM
sees the collision registered on the previous tick.

Inputs (single-tick pulses from the button conditioner):
  left, right, center — edge pulses
  reset               — synchronous reset of every register

Outputs (`outputs(state)`):
  glyphs          — 4 seven-segment patterns, bottom row first
  refresh         — display-refresh cadence pulse for the renderer
  gameplay        — high only in PLAY
  score_reset     — high only in COUNTDOWN
"""
from __future__ import annotations

from dataclasses import dataclass

from .display import compose
from .fsm import GameMode, gameplay_enabled, next_dwell, next_mode, score_reset
from .lfsr import lfsr_lane, lfsr_next
from .obstacles import EMPTY_TRACK, SpawnGate, lane_mask, shift_track
from .params import GameParams
from .player import START_LANE, next_lane
from .scoring import ZERO_SCORE, bcd_increment, hits
from .ticks import TickFabric, TickSet


@dataclass(frozen=True)
class Inputs:
    left: bool = False
    right: bool = False
    center: bool = False
    reset: bool = False


@dataclass(frozen=True)
class GameState:
    ticks: TickFabric
    blink: bool
    mode: GameMode
    countdown_timer: int
    lost_timer: int
    lane: int
    prng: int
    spawn: SpawnGate
    track: tuple[int, ...]
    collision: bool
    score: tuple[int, ...]
    cycle: int = 0


@dataclass(frozen=True)
class Frame:
    glyphs: tuple[int, ...]
    refresh: bool
    gameplay: bool
    score_reset: bool


def reset_state(params: GameParams) -> GameState:
    return GameState(
        ticks=TickFabric(),
        blink=False,
        mode=GameMode.SCORE_IDLE,
        countdown_timer=0,
        lost_timer=0,
        lane=START_LANE,
        prng=params.prng_seed,
        spawn=SpawnGate(),
        track=EMPTY_TRACK,
        collision=False,
        score=ZERO_SCORE,
    )


def step(state: GameState, inputs: Inputs, params: GameParams) -> GameState:
    if inputs.reset:
        return reset_state(params)

    # ================================================================
    # Combinational logic (cycle 0)
    # ================================================================
    pulses: TickSet = state.ticks.pulses()
    mode = state.mode
    enabled = gameplay_enabled(mode)
    round_reset = score_reset(mode)
    move = enabled and pulses.move

    # --- Mode FSM ---
    mode_next = next_mode(
        mode,
        center=inputs.center,
        collision=state.collision,
        countdown_timer=state.countdown_timer,
        lost_timer=state.lost_timer,
        countdown_s=params.countdown_s,
        lost_s=params.lost_s,
    )
    enter_play = mode_next == GameMode.PLAY and mode != GameMode.PLAY

    # --- Spawn gate + lane capture ---
    lane_now = lfsr_lane(state.prng)
    spawn_next, spawned = state.spawn.advance(
        enabled=enabled,
        move=pulses.move,
        lane_now=lane_now,
        spawn_every=params.spawn_every,
    )

    # --- Collision / pass-through (pre-shift bottom row) ---
    bottom = state.track[0]
    collision_next = enabled and hits(bottom, state.lane)
    passed = move and bottom != 0 and not (state.collision or collision_next)

    # ================================================================
    # DFF boundary — flop updates, last write wins
    # ================================================================

    # --- Track (round reset beats the shift) ---
    track = state.track
    if move:
        track = shift_track(track, lane_mask(spawn_next.lane) if spawned else 0)
    if round_reset:
        track = EMPTY_TRACK

    # --- Score (held reset in COUNTDOWN) ---
    score = state.score
    if passed:
        score = bcd_increment(score)
    if round_reset:
        score = ZERO_SCORE

    # --- Player ---
    lane = next_lane(state.lane, left=inputs.left, right=inputs.right, enabled=enabled)
    if enter_play:
        lane = START_LANE

    return GameState(
        ticks=state.ticks.advance(params),
        blink=(not state.blink) if pulses.blink else state.blink,
        mode=mode_next,
        countdown_timer=next_dwell(
            state.countdown_timer, active=mode == GameMode.COUNTDOWN, one_hz=pulses.one_hz,
        ),
        lost_timer=next_dwell(
            state.lost_timer, active=mode == GameMode.LOST, one_hz=pulses.one_hz,
        ),
        lane=lane,
        prng=lfsr_next(state.prng) if move else state.prng,
        spawn=spawn_next,
        track=track,
        collision=collision_next,
        score=score,
        cycle=state.cycle + 1,
    )


def outputs(state: GameState) -> Frame:
    return Frame(
        glyphs=compose(state.mode, state.score, state.lane, state.track, state.blink),
        refresh=state.ticks.refresh.pulse,
        gameplay=gameplay_enabled(state.mode),
        score_reset=score_reset(state.mode),
    )
