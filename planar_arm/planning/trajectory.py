"""Trajectory utilities: straight-line sampling of end-effector positions.
"""
import logging
from dataclasses import dataclass, field
from typing import List

import numpy as np

from .geometry import JointAngles, LinkLengths, Position
from .kinematics import solve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Waypoint:
    position: Position
    angles: JointAngles


@dataclass
class Trajectory:
    """The initial pose followed by one waypoint per segment end."""

    initial: Waypoint
    waypoints: List[Waypoint] = field(default_factory=list)

    @property
    def points(self) -> List[Waypoint]:
        return [self.initial] + self.waypoints

    @property
    def final(self) -> Waypoint:
        return self.waypoints[-1] if self.waypoints else self.initial

    def __len__(self):
        return len(self.waypoints) + 1


def lerp(a, b, t):
    return a + (b - a) * t


def sample(start: Position, goal: Position, links: LinkLengths, segments: int = 50) -> Trajectory:
    """Split the segment start -> goal into equal parts and solve IK at each end.

    start, goal: end points, assumed to have passed feasibility.check
    segments: number of parts; the result has segments + 1 points and the
    last one is goal itself.
    """
    if isinstance(segments, bool) or not isinstance(segments, (int, np.integer)):
        raise ValueError(f"segments must be an integer, got {segments!r}")
    if segments < 1:
        raise ValueError(f"segments must be at least 1, got {segments}")

    trajectory = Trajectory(initial=Waypoint(start, solve(start, links)))
    fractions = np.arange(1, segments + 1, dtype=float) / segments
    xs = lerp(start.x, goal.x, fractions)
    ys = lerp(start.y, goal.y, fractions)
    # interpolation at 1.0 can be an ulp off goal, which may leave the annulus
    xs[-1], ys[-1] = goal.x, goal.y
    for x, y in zip(xs.tolist(), ys.tolist()):
        pos = Position(x, y)
        trajectory.waypoints.append(Waypoint(pos, solve(pos, links)))

    logger.debug("Sampled %d segments from (%s, %s) to (%s, %s)",
                 segments, start.x, start.y, goal.x, goal.y)
    return trajectory
