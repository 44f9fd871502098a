"""Exceptions raised by the planning layer."""


class InvalidLinkLengths(ValueError):
    pass


class PlanningError(Exception):
    """Base class for conditions that make a straight-line motion impossible.

    Subclasses carry a short ``kind`` tag and a default, human readable message.
    """

    kind = "PlanningError"
    default_message = "Requested motion is not feasible."

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class OutOfRangeError(PlanningError):
    kind = "OutOfRange"
    default_message = "Position(s) is(are) not in the operable range."


class PathInfeasibleError(PlanningError):
    kind = "PathInfeasible"
    default_message = "Straight-line trajectory is not possible."


class SingularPathError(PlanningError):
    kind = "SingularPath"
    default_message = "Straight-line trajectory includes a singular point."


class DomainError(ValueError):
    """The solver was asked for a position outside the reachable annulus."""
