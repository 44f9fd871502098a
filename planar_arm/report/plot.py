"""Figure of a planned motion: workspace bounds, straight path and arm poses."""
from __future__ import annotations

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

import planar_arm.config as cfg
from planar_arm.planning.geometry import LinkLengths, elbow_position
from planar_arm.planning.trajectory import Trajectory, Waypoint


def _draw_arm(ax, point: Waypoint, links: LinkLengths, style: str, label: str) -> None:
    elbow = elbow_position(point.angles, links)
    ax.plot([0, elbow.x, point.position.x], [0, elbow.y, point.position.y], style, lw=3, label=label)


def plot_trajectory(trajectory: Trajectory, links: LinkLengths, path: Path) -> Path:
    """Save a PNG showing the reachable annulus, the sampled path and both end poses."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(6, 6), dpi=cfg.PLOT_DPI)
    phi = np.linspace(0.0, 2 * np.pi, 256)
    for radius in (links.inner_radius, links.outer_radius):
        if radius > 0:
            ax.plot(radius * np.cos(phi), radius * np.sin(phi), "k--", lw=0.8)

    xs = [p.position.x for p in trajectory.points]
    ys = [p.position.y for p in trajectory.points]
    ax.plot(xs, ys, ".", color="tab:gray", ms=3, label="waypoints")

    _draw_arm(ax, trajectory.initial, links, "o-", "initial")
    _draw_arm(ax, trajectory.final, links, "s-", "final")

    rng = links.outer_radius + cfg.PLOT_MARGIN
    ax.set_xlim(-rng, rng)
    ax.set_ylim(-rng, rng)
    ax.set_aspect("equal")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.grid(True)
    ax.legend(loc="upper right")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
