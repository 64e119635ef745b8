from __future__ import annotations

from typing import NamedTuple

from trisol.triangle.geometry import HOLES, NUM_HOLES, is_valid_square, square_to_index

# (row offset, column offset), tried in this order for every peg.
DIRECTIONS = [
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
    (0, -2),
    (0, 2),
]


class Jump(NamedTuple):
    source: int
    jumped: int
    landing: int

    @property
    def required(self) -> int:
        """Bitset of the pegs that must be present for this jump."""
        return (1 << self.source) | (1 << self.jumped)

    @property
    def landing_bit(self) -> int:
        return 1 << self.landing

    def __str__(self) -> str:
        return f"{self.source + 1}-{self.landing + 1}"


def _build_jumps() -> list[list[Jump]]:
    jumps_by_source: list[list[Jump]] = []

    for row, col in HOLES:
        jumps: list[Jump] = []

        for dr, dc in DIRECTIONS:
            jumped = (row + dr, col + dc)
            landing = (row + 2 * dr, col + 2 * dc)

            if not (is_valid_square(*jumped) and is_valid_square(*landing)):
                continue

            jumps.append(
                Jump(
                    square_to_index(row, col),
                    square_to_index(*jumped),
                    square_to_index(*landing),
                )
            )

        jumps_by_source.append(jumps)

    assert len(jumps_by_source) == NUM_HOLES
    return jumps_by_source


# Jumps per source hole. Holes are in reading order, so iterating this
# table visits jumps top-to-bottom, left-to-right, then by direction.
JUMPS_BY_SOURCE = _build_jumps()

JUMPS = [jump for jumps in JUMPS_BY_SOURCE for jump in jumps]
