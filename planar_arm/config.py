"""Planner and report configuration.

Edit this file to change the defaults used by the command line tool.
"""

# Number of straight-line segments between the initial and desired positions.
# The report has SEGMENTS + 1 rows (the initial pose plus one per segment end).
SEGMENTS = 50

# Table layout
ANGLE_COLUMN_WIDTH = 13
POSITION_COLUMN_WIDTH = 15
DECIMALS = 3
COLUMN_SEPARATOR = " | "
HEADERS = ("Angle 1 [rad]", "Angle 2 [rad]", "x, end-effector", "y, end-effector")

# Process exit status when the requested motion is infeasible
EXIT_INFEASIBLE = 1
# Exit status for non-positive link lengths
EXIT_INVALID_INPUT = 2

# Plot settings
PLOT_DPI = 120
PLOT_MARGIN = 0.5

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
