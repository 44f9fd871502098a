"""Command line tool: joint angles along a straight end-effector path.

Positions and link lengths not given as options are asked for interactively.
Edit `planar_arm/config.py` for the default segment count and table layout.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import planar_arm.config as cfg
from planar_arm import inputs
from planar_arm.planner import plan
from planar_arm.planning.errors import InvalidLinkLengths
from planar_arm.planning.geometry import LinkLengths, Position
from planar_arm.report.table import format_table, write_csv

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Inverse kinematics of a 2-link planar arm along a straight-line path."
    )
    parser.add_argument(
        "--start",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        help="Initial end-effector position.",
    )
    parser.add_argument(
        "--goal",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        help="Desired end-effector position.",
    )
    parser.add_argument(
        "--links",
        type=float,
        nargs=2,
        metavar=("L1", "L2"),
        help="Lengths of the first and second link.",
    )
    parser.add_argument(
        "--segments",
        type=int,
        default=cfg.SEGMENTS,
        help="Number of straight-line segments between the two positions.",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="Also write the trajectory table to this CSV file.",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Also save a PNG of the workspace, path and arm poses.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details (chord distance, sampling).",
    )
    args = parser.parse_args(argv)
    if args.segments < 1:
        parser.error("--segments must be at least 1")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else cfg.LOG_LEVEL, format=cfg.LOG_FORMAT)

    # prompt order: initial position, desired position, link lengths
    start = args.start or inputs.ask_initial_position()
    goal = args.goal or inputs.ask_desired_position()
    lengths = args.links or inputs.ask_link_lengths()

    try:
        links = LinkLengths(*lengths)
    except InvalidLinkLengths as e:
        logger.error(str(e))
        return cfg.EXIT_INVALID_INPUT

    result = plan(Position(*start), Position(*goal), links, segments=args.segments)
    if not result.ok:
        logger.error("%s Terminating ...", result.error)
        return cfg.EXIT_INFEASIBLE

    print(format_table(result.trajectory), end="")
    logger.info("Solved %d points from (%g, %g) to (%g, %g)", len(result.trajectory), *start, *goal)

    if args.csv is not None:
        logger.info("Trajectory written to %s", write_csv(result.trajectory, args.csv))
    if args.plot is not None:
        # matplotlib is only needed when a figure is requested
        from planar_arm.report.plot import plot_trajectory
        logger.info("Figure saved to %s", plot_trajectory(result.trajectory, links, args.plot))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
