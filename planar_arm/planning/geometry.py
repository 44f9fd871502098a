"""Planar geometry primitives shared by the planner modules."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidLinkLengths


def norm(a: float, b: float) -> float:
    """Euclidean length of the vector (a, b)."""
    return math.sqrt(a * a + b * b)


@dataclass(frozen=True)
class Position:
    """End-effector location relative to the base of link 1."""

    x: float
    y: float


@dataclass(frozen=True)
class LinkLengths:
    """Lengths of the proximal (l1) and distal (l2) links."""

    l1: float
    l2: float

    def __post_init__(self):
        if not (self.l1 > 0 and self.l2 > 0):
            raise InvalidLinkLengths(f"Link lengths must be positive, got ({self.l1}, {self.l2})")

    @property
    def inner_radius(self) -> float:
        return abs(self.l1 - self.l2)

    @property
    def outer_radius(self) -> float:
        return self.l1 + self.l2


@dataclass(frozen=True)
class JointAngles:
    """Base (theta1) and elbow (theta2) angles in radians."""

    theta1: float
    theta2: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.theta1, self.theta2)


def forward_kinematics(angles: JointAngles, links: LinkLengths) -> Position:
    """End-effector position reached by the given joint angles."""
    t1, t2 = angles.theta1, angles.theta2
    x = links.l1 * math.cos(t1) + links.l2 * math.cos(t1 + t2)
    y = links.l1 * math.sin(t1) + links.l2 * math.sin(t1 + t2)
    return Position(x, y)


def elbow_position(angles: JointAngles, links: LinkLengths) -> Position:
    return Position(links.l1 * math.cos(angles.theta1), links.l1 * math.sin(angles.theta1))
