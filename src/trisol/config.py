import os
from dotenv import load_dotenv

from trisol.triangle.geometry import hole_to_index

load_dotenv()


def get_start_hole() -> int:
    hole = int(os.getenv("TRISOL_START_HOLE", "5"))

    # Raises ValueError for holes outside the triangle.
    hole_to_index(hole)
    return hole


def get_frame_delay() -> float:
    delay = float(os.getenv("TRISOL_FRAME_DELAY", "1"))

    if delay < 0:
        raise ValueError(f"TRISOL_FRAME_DELAY must not be negative, got {delay}")

    return delay
