"""Inverse kinematics for a 2-link planar arm.

Only the positive-angle ("elbow-up") branch is computed: theta2 comes straight
from arccos and therefore lies in [0, pi]. Callers are expected to validate the
target with planning.feasibility first.
"""
import math
from typing import Tuple

from .errors import DomainError
from .geometry import JointAngles, LinkLengths, Position


def solve(pos: Position, links: LinkLengths) -> JointAngles:
    """Joint angles that place the end-effector at pos.

    Raises DomainError when pos is outside the reachable annulus. The arccos
    argument is not clamped.
    """
    l1, l2 = links.l1, links.l2
    c2 = (pos.x * pos.x + pos.y * pos.y - l1 * l1 - l2 * l2) / (2 * l1 * l2)
    if c2 > 1 or c2 < -1:
        raise DomainError(f"({pos.x}, {pos.y}) is unreachable with links ({l1}, {l2}): cos(theta2)={c2}")

    theta2 = math.acos(c2)
    k1 = l1 + l2 * math.cos(theta2)
    k2 = l2 * math.sin(theta2)
    theta1 = math.atan2(pos.y, pos.x) - math.atan2(k2, k1)
    return JointAngles(theta1, theta2)


class IKSolver2R:
    """2R planar arm solver bound to a fixed pair of link lengths.

    solve(x, y) expects planar coordinates in the same unit as the links and
    returns (theta1, theta2) in radians.
    """
    def __init__(self, l1: float, l2: float):
        self.links = LinkLengths(l1, l2)

    def solve(self, x: float, y: float) -> Tuple[float, float]:
        return solve(Position(x, y), self.links).as_tuple()
