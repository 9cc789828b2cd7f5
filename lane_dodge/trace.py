# -*- coding: utf-8 -*-
"""Per-tick JSONL trace of the registered game state."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from .fsm import decode_mode
from .game import GameState, outputs
from .scoring import score_value

TRACE_FIELDS = [
    "cycle",
    "mode",
    "lane",
    "track",
    "score",
    "collision",
    "countdown_timer",
    "lost_timer",
    "prng",
    "glyphs",
]


@dataclass(frozen=True)
class TraceRec:
    raw: dict

    @property
    def mode(self):
        return decode_mode(int(self.raw.get("mode", 0)))


def trace_record(state: GameState) -> dict:
    return {
        "cycle": state.cycle,
        "mode": int(state.mode),
        "lane": state.lane,
        "track": list(state.track),
        "score": score_value(state.score),
        "collision": int(state.collision),
        "countdown_timer": state.countdown_timer,
        "lost_timer": state.lost_timer,
        "prng": state.prng,
        "glyphs": list(outputs(state).glyphs),
    }


class TraceWriter:
    """Appends one JSON object per tick; use as a context manager."""

    def __init__(self, path: str | Path, *, every: int = 1):
        if every < 1:
            raise ValueError("every must be >= 1")
        self._path = Path(path)
        self._every = every
        self._f = None
        self.records = 0

    def open(self) -> TraceWriter:
        self._f = self._path.open("w", encoding="utf-8")
        return self

    def __enter__(self):
        return self.open()

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        if self._f is not None:
            self._f.close()
            self._f = None

    def write(self, state: GameState) -> None:
        if self._f is None:
            raise RuntimeError("trace file is not open")
        if state.cycle % self._every:
            return
        self._f.write(json.dumps(trace_record(state), separators=(",", ":")) + "\n")
        self.records += 1


def load_jsonl(path: str | Path) -> list[TraceRec]:
    out: list[TraceRec] = []
    with open(path, "r", encoding="utf-8") as f:
        for ln, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError as e:
                raise SystemExit(f"error: {path}:{ln}: invalid JSON: {e}") from e
            if not isinstance(obj, dict):
                raise SystemExit(f"error: {path}:{ln}: expected JSON object per line")
            out.append(TraceRec(obj))
    return out
