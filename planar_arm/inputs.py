"""Interactive collection of the motion request from the terminal."""
from typing import Callable, Optional, Tuple

Reader = Callable[[str], str]


def _read_float(prompt: str, reader: Optional[Reader]) -> float:
    reader = reader or input
    while True:
        raw = reader(prompt + "\n")
        try:
            return float(raw)
        except ValueError:
            print(f"'{raw}' is not a number, try again.")


def ask_initial_position(reader: Optional[Reader] = None) -> Tuple[float, float]:
    x = _read_float("Type the x coordinate of the initial position of the end-effector:", reader)
    y = _read_float("Type the y coordinate of the initial position of the end-effector:", reader)
    return x, y


def ask_desired_position(reader: Optional[Reader] = None) -> Tuple[float, float]:
    x = _read_float("Type the x coordinate of the desired position of the end-effector:", reader)
    y = _read_float("Type the y coordinate of the desired position of the end-effector:", reader)
    return x, y


def ask_link_lengths(reader: Optional[Reader] = None) -> Tuple[float, float]:
    l1 = _read_float("Type the length of the first link:", reader)
    l2 = _read_float("Type the length of the second link:", reader)
    return l1, l2
