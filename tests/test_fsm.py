from __future__ import annotations

import pytest

from lane_dodge.fsm import GameMode, decode_mode, gameplay_enabled, next_dwell, next_mode, score_reset


def _next(mode, **kw):
    args = dict(center=False, collision=False, countdown_timer=0, lost_timer=0, countdown_s=3, lost_s=5)
    args.update(kw)
    return next_mode(mode, **args)


@pytest.mark.parametrize("mode", list(GameMode))
def test_enable_and_reset_outputs(mode: GameMode) -> None:
    assert gameplay_enabled(mode) == (mode == GameMode.PLAY)
    assert score_reset(mode) == (mode == GameMode.COUNTDOWN)
    assert not (gameplay_enabled(mode) and score_reset(mode))


def test_transitions() -> None:
    assert _next(GameMode.SCORE_IDLE) == GameMode.SCORE_IDLE
    assert _next(GameMode.SCORE_IDLE, center=True) == GameMode.COUNTDOWN
    assert _next(GameMode.COUNTDOWN, countdown_timer=2) == GameMode.COUNTDOWN
    assert _next(GameMode.COUNTDOWN, countdown_timer=3) == GameMode.PLAY
    assert _next(GameMode.PLAY) == GameMode.PLAY
    assert _next(GameMode.PLAY, collision=True) == GameMode.LOST
    assert _next(GameMode.LOST, lost_timer=4) == GameMode.LOST
    assert _next(GameMode.LOST, lost_timer=5) == GameMode.SCORE_IDLE


def test_center_ignored_outside_score_idle() -> None:
    for mode in (GameMode.COUNTDOWN, GameMode.PLAY, GameMode.LOST):
        assert _next(mode, center=True) == mode


def test_dwell_counts_pulses_only_while_active() -> None:
    assert next_dwell(2, active=True, one_hz=True) == 3
    assert next_dwell(2, active=True, one_hz=False) == 2
    assert next_dwell(2, active=False, one_hz=True) == 0


def test_unknown_encoding_falls_back_to_score_idle() -> None:
    assert decode_mode(2) == GameMode.PLAY
    assert decode_mode(7) == GameMode.SCORE_IDLE
