"""Lane-dodge: a tick-driven three-lane dodging game core."""
from __future__ import annotations

from .fsm import GameMode
from .game import Frame, GameState, Inputs, outputs, reset_state, step
from .params import DEMO_PARAMS, GameParams
from .sim import LaneDodgeSim

__version__ = "0.1.0"
