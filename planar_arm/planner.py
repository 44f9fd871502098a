"""Core entry point: validate a straight-line motion and sample its joint trajectory.

plan() never exits the process or prints; infeasible requests come back as a
PlanResult carrying the error so the caller decides what to do with it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import planar_arm.config as cfg
from planar_arm.planning import feasibility
from planar_arm.planning.errors import PlanningError
from planar_arm.planning.geometry import LinkLengths, Position
from planar_arm.planning.trajectory import Trajectory, sample

logger = logging.getLogger(__name__)


@dataclass
class PlanResult:
    trajectory: Optional[Trajectory] = None
    error: Optional[PlanningError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def plan(start: Position, goal: Position, links: LinkLengths, segments: int = cfg.SEGMENTS) -> PlanResult:
    try:
        feasibility.check(start, goal, links)
    except PlanningError as e:
        logger.debug("Rejected motion (%s): %s", e.kind, e)
        return PlanResult(error=e)

    return PlanResult(trajectory=sample(start, goal, links, segments=segments))
