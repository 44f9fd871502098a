import math

import pytest

from planar_arm.planning.errors import (
    InvalidLinkLengths,
    OutOfRangeError,
    PathInfeasibleError,
    PlanningError,
    SingularPathError,
)
from planar_arm.planning.feasibility import chord_distance_from_origin, check, is_reachable
from planar_arm.planning.geometry import LinkLengths, Position, norm


def test_norm():
    assert norm(3, 4) == 5.0
    assert norm(0, 0) == 0.0


def test_link_lengths_must_be_positive():
    with pytest.raises(InvalidLinkLengths):
        LinkLengths(-1.0, 2.0)
    with pytest.raises(InvalidLinkLengths):
        LinkLengths(1.0, 0.0)


def test_reachable_annulus_bounds_are_inclusive():
    links = LinkLengths(3.0, 1.0)
    assert is_reachable(Position(4.0, 0.0), links)
    assert is_reachable(Position(0.0, -2.0), links)
    assert not is_reachable(Position(1.9, 0.0), links)
    assert not is_reachable(Position(4.1, 0.0), links)


def test_chord_distance():
    assert chord_distance_from_origin(Position(0, 1), Position(1, 0)) == pytest.approx(1 / math.sqrt(2))
    assert chord_distance_from_origin(Position(3, -1), Position(3, 1)) == pytest.approx(3.0)
    # single-point path: distance of that point
    assert chord_distance_from_origin(Position(3, 4), Position(3, 4)) == 5.0


def test_start_out_of_range():
    with pytest.raises(OutOfRangeError):
        check(Position(5, 5), Position(3, 0), LinkLengths(3, 1))


def test_goal_out_of_range():
    with pytest.raises(OutOfRangeError):
        check(Position(3, 0), Position(1, 0), LinkLengths(3, 1))


def test_path_through_inner_disk():
    with pytest.raises(PathInfeasibleError):
        check(Position(3, 0), Position(-3, 0), LinkLengths(3, 1))


def test_singular_path_with_equal_links():
    with pytest.raises(SingularPathError) as exc:
        check(Position(2, 0), Position(-2, 0), LinkLengths(2, 2))
    assert exc.value.kind == "SingularPath"
    assert "singular point" in str(exc.value)


def test_singular_point_as_both_ends():
    with pytest.raises(SingularPathError):
        check(Position(0, 0), Position(0, 0), LinkLengths(2, 2))


def test_unequal_links_through_origin_is_inner_disk_failure():
    # d == 0 < |l1 - l2|: clearance fails before the singularity test
    with pytest.raises(PathInfeasibleError):
        check(Position(3, 0), Position(-3, 0), LinkLengths(2.5, 1.0))


def test_feasible_motions_pass():
    check(Position(3, 0), Position(0, 3), LinkLengths(2, 2))
    check(Position(3, -1), Position(3, 1), LinkLengths(3, 1))
    check(Position(3, 0), Position(3, 0), LinkLengths(3, 1))


def test_errors_share_base_class():
    for err in (OutOfRangeError, PathInfeasibleError, SingularPathError):
        assert issubclass(err, PlanningError)
