# -*- coding: utf-8 -*-
"""Player lane register."""
from __future__ import annotations

LANE_LEFT = 0
LANE_MIDDLE = 1
LANE_RIGHT = 2
START_LANE = LANE_MIDDLE


def next_lane(lane: int, *, left: bool, right: bool, enabled: bool) -> int:
    # Left wins a same-tick left+right press; the right press is dropped.
    if not enabled:
        return lane
    if left:
        return lane - 1 if lane > LANE_LEFT else lane
    if right:
        return lane + 1 if lane < LANE_RIGHT else lane
    return lane
