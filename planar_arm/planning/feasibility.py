"""Feasibility checks for a straight-line end-effector motion.

A motion is accepted when both end points lie inside the reachable annulus
``|l1 - l2| <= r <= l1 + l2`` and the chord between them stays clear of the
inner disk and, for equal links, of the singular origin.

Comparisons are exact, with no tolerance: a chord that passes the origin at a
distance of 1e-17 is not treated as singular.
"""
import logging
import math

from .errors import OutOfRangeError, PathInfeasibleError, SingularPathError
from .geometry import LinkLengths, Position, norm

logger = logging.getLogger(__name__)


def is_reachable(pos: Position, links: LinkLengths) -> bool:
    r = norm(pos.x, pos.y)
    return links.inner_radius <= r <= links.outer_radius


def chord_distance_from_origin(start: Position, goal: Position) -> float:
    """Perpendicular distance from the origin to the line through start and goal.

    The line is written as a*x + b*y + c = 0 with unnormalised a, b. When start
    and goal coincide the path is a single point and its own radius is returned.
    """
    x0, y0 = start.x, start.y
    x1, y1 = goal.x, goal.y
    a = y0 - y1
    b = x1 - x0
    c = y0 * (x0 - x1) - (y0 - y1) * x0
    denom = math.sqrt(a * a + b * b)
    if denom == 0:
        return norm(x0, y0)
    return abs(c) / denom


def check(start: Position, goal: Position, links: LinkLengths) -> None:
    """Raise a PlanningError subclass if the motion from start to goal is infeasible."""
    if not (is_reachable(start, links) and is_reachable(goal, links)):
        logger.debug("Reachable radii are [%s, %s]; start r=%s, goal r=%s",
                     links.inner_radius, links.outer_radius,
                     norm(start.x, start.y), norm(goal.x, goal.y))
        raise OutOfRangeError()

    d = chord_distance_from_origin(start, goal)
    logger.debug("Chord distance from origin: %s", d)
    if d < links.inner_radius:
        raise PathInfeasibleError()
    if links.l1 == links.l2 and d == 0:
        raise SingularPathError()
