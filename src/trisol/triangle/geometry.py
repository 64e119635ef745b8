from __future__ import annotations

from typing import Iterable

TRIANGLE_ROWS = 5

# Two invalid cells on every side, so a jump can look two cells away
# in any direction without bounds checks.
BORDER = 2

NUM_ROWS = TRIANGLE_ROWS + 2 * BORDER
NUM_COLS = 2 * TRIANGLE_ROWS - 1 + 2 * BORDER

NUM_HOLES = TRIANGLE_ROWS * (TRIANGLE_ROWS + 1) // 2

FULL_MASK = (1 << NUM_HOLES) - 1


def _build_holes() -> list[tuple[int, int]]:
    holes: list[tuple[int, int]] = []
    apex_col = NUM_COLS // 2

    for row in range(TRIANGLE_ROWS):
        for offset in range(row + 1):
            holes.append((row + BORDER, apex_col - row + 2 * offset))

    return holes


# Grid coordinates of every hole, in reading order.
HOLES = _build_holes()

# Grid coordinates to hole index, only for cells inside the triangle.
HOLE_INDEXES = {square: index for index, square in enumerate(HOLES)}


def is_valid_square(row: int, col: int) -> bool:
    return (row, col) in HOLE_INDEXES


def square_to_index(row: int, col: int) -> int:
    try:
        return HOLE_INDEXES[(row, col)]
    except KeyError:
        raise ValueError(f"Square ({row}, {col}) is not inside the triangle")


def index_to_square(index: int) -> tuple[int, int]:
    if index not in range(NUM_HOLES):
        raise ValueError(f'Invalid hole index "{index}"')
    return HOLES[index]


def hole_to_index(hole: int) -> int:
    """
    Holes are numbered 1 to 15 in reading order, starting at the apex.
    """
    if hole not in range(1, NUM_HOLES + 1):
        raise ValueError(f'Invalid hole "{hole}", expected 1 to {NUM_HOLES}')
    return hole - 1


def index_to_hole(index: int) -> int:
    if index not in range(NUM_HOLES):
        raise ValueError(f'Invalid hole index "{index}"')
    return index + 1


def holes_to_mask(holes: Iterable[int]) -> int:
    mask = 0
    for hole in holes:
        mask |= 1 << hole_to_index(hole)
    return mask


def mask_to_holes(mask: int) -> list[int]:
    return [index + 1 for index in range(NUM_HOLES) if mask & (1 << index)]


def row_label(row: int) -> str:
    """Label of a grid row as shown to the user, empty for border rows."""
    triangle_row = row - BORDER
    if triangle_row not in range(TRIANGLE_ROWS):
        return ""
    return str(triangle_row + 1)
