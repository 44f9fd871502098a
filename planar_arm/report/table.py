"""Tabular output of a sampled trajectory: console text, DataFrame and CSV."""
from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

import planar_arm.config as cfg
from planar_arm.planning.trajectory import Trajectory

COLUMNS = ["theta1", "theta2", "x", "y", "label"]


def _center(text: str, width: int) -> str:
    # odd padding puts the extra space on the right
    padding = width - len(text)
    spaces = " " * (padding // 2) if padding > 0 else ""
    out = spaces + text + spaces
    if padding > 0 and padding % 2 != 0:
        out += " "
    return out


def _fixed(value: float, width: int) -> str:
    return f"{value:>{width}.{cfg.DECIMALS}f}"


def _labels(n_points: int) -> List[str]:
    labels = [""] * n_points
    labels[0] = "initial"
    if n_points > 1:
        labels[-1] = "final"
    return labels


def format_table(trajectory: Trajectory) -> str:
    """Render the trajectory as the fixed-width angle/position table."""
    aw, pw = cfg.ANGLE_COLUMN_WIDTH, cfg.POSITION_COLUMN_WIDTH
    widths = (aw, aw, pw, pw)
    sep = cfg.COLUMN_SEPARATOR

    lines = [sep.join(_center(h, w) for h, w in zip(cfg.HEADERS, widths))]
    lines.append("-" * (pw * 2 + pw * 2 + 2 * 4))

    points = trajectory.points
    for point, label in zip(points, _labels(len(points))):
        cells = (point.angles.theta1, point.angles.theta2, point.position.x, point.position.y)
        row = sep.join(_fixed(v, w) for v, w in zip(cells, widths))
        if label:
            row += f" ({label})"
        lines.append(row)
    return "\n".join(lines) + "\n"


def to_dataframe(trajectory: Trajectory) -> pd.DataFrame:
    points = trajectory.points
    rows = [
        (p.angles.theta1, p.angles.theta2, p.position.x, p.position.y, label)
        for p, label in zip(points, _labels(len(points)))
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def write_csv(trajectory: Trajectory, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    to_dataframe(trajectory).to_csv(path, index=False)
    return path
