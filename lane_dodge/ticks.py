# -*- coding: utf-8 -*-
"""Tick fabric — clock division + edge-pulse generation.

Each stream is two flop stages:

  divider:  free-running half-period counter toggling `level`
  edge:     `level_d` holds last cycle's level; pulse = level & ~level_d

so every pulse is exactly one master tick wide, whatever the divide ratio,
and can fire at most once per period.
"""
from __future__ import annotations

from dataclasses import dataclass

from .params import GameParams


@dataclass(frozen=True)
class Divider:
    count: int = 0
    level: bool = False
    level_d: bool = False

    @property
    def pulse(self) -> bool:
        return self.level and not self.level_d

    def advance(self, half: int) -> Divider:
        wrap = self.count == half - 1
        return Divider(
            count=0 if wrap else self.count + 1,
            level=(not self.level) if wrap else self.level,
            level_d=self.level,
        )


@dataclass(frozen=True)
class TickSet:
    one_hz: bool = False
    blink: bool = False
    move: bool = False
    refresh: bool = False


@dataclass(frozen=True)
class TickFabric:
    one_hz: Divider = Divider()
    blink: Divider = Divider()
    move: Divider = Divider()
    refresh: Divider = Divider()

    def pulses(self) -> TickSet:
        return TickSet(
            one_hz=self.one_hz.pulse,
            blink=self.blink.pulse,
            move=self.move.pulse,
            refresh=self.refresh.pulse,
        )

    def advance(self, params: GameParams) -> TickFabric:
        h_one, h_blink, h_move, h_refresh = params.halves
        return TickFabric(
            one_hz=self.one_hz.advance(h_one),
            blink=self.blink.advance(h_blink),
            move=self.move.advance(h_move),
            refresh=self.refresh.advance(h_refresh),
        )
