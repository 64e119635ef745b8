from __future__ import annotations

from typing import Iterable, Optional

from trisol.triangle.geometry import (
    FULL_MASK,
    HOLE_INDEXES,
    NUM_COLS,
    NUM_HOLES,
    NUM_ROWS,
    hole_to_index,
    holes_to_mask,
    mask_to_holes,
)
from trisol.triangle.moves import JUMPS_BY_SOURCE, Jump

EMPTY = 0
OCCUPIED = 1
INVALID = 2


class InvalidMove(Exception):
    pass


class Board:
    """
    Board stores which holes of the triangle have a peg and which peg moved last.
    The last moved peg is only used for display.
    """

    def __init__(self, pegs: int, last_moved: Optional[int] = None) -> None:
        if pegs & FULL_MASK != pegs:
            raise ValueError("pegs must only use holes inside the triangle")

        if last_moved is not None and not pegs & (1 << last_moved):
            raise ValueError("last moved peg must be on the board")

        # Bitset of holes with a peg, bit i is hole i + 1
        self.pegs = pegs

        # Hole index of the peg that moved last, if any
        self.last_moved = last_moved

    @classmethod
    def start(cls, hole: int) -> Board:
        return Board(FULL_MASK & ~(1 << hole_to_index(hole)))

    @classmethod
    def empty(cls) -> Board:
        return Board(0)

    @classmethod
    def from_holes(cls, holes: Iterable[int]) -> Board:
        return Board(holes_to_mask(holes))

    def __repr__(self) -> str:
        return f"Board({hex(self.pegs)}, {self.last_moved})"

    def get_square(self, row: int, col: int) -> int:
        if row not in range(NUM_ROWS) or col not in range(NUM_COLS):
            raise ValueError(f"Square ({row}, {col}) is not on the grid")

        try:
            index = HOLE_INDEXES[(row, col)]
        except KeyError:
            return INVALID

        if self.pegs & (1 << index):
            return OCCUPIED
        return EMPTY

    def is_last_moved(self, row: int, col: int) -> bool:
        if self.last_moved is None:
            return False
        return HOLE_INDEXES.get((row, col)) == self.last_moved

    def has_peg(self, hole: int) -> bool:
        return self.pegs & (1 << hole_to_index(hole)) != 0

    def get_holes(self) -> list[int]:
        return mask_to_holes(self.pegs)

    def count_pegs(self) -> int:
        return bin(self.pegs).count("1")

    def count_empties(self) -> int:
        return NUM_HOLES - self.count_pegs()

    def is_winner(self) -> bool:
        return self.count_pegs() == 1

    def is_valid_jump(self, jump: Jump) -> bool:
        return (
            self.pegs & jump.required == jump.required
            and self.pegs & jump.landing_bit == 0
        )

    def get_jumps(self) -> list[Jump]:
        return [
            jump
            for jumps in JUMPS_BY_SOURCE
            for jump in jumps
            if self.is_valid_jump(jump)
        ]

    def has_jumps(self) -> bool:
        return any(
            self.is_valid_jump(jump) for jumps in JUMPS_BY_SOURCE for jump in jumps
        )

    def do_jump(self, jump: Jump) -> Board:
        if not self.is_valid_jump(jump):
            raise InvalidMove(f"Jump {jump} is not possible on {self}")

        pegs = (self.pegs & ~jump.required) | jump.landing_bit
        return Board(pegs, jump.landing)

    def get_children(self) -> list[Board]:
        return [self.do_jump(jump) for jump in self.get_jumps()]

    def find_jump(self, child: Board) -> Jump:
        """Returns the jump that turns this board into child."""
        for jump in self.get_jumps():
            if self.do_jump(jump) == child:
                return jump
        raise InvalidMove(f"No single jump leads from {self} to {child}")

    def as_tuple(self) -> tuple[int, Optional[int]]:
        return (self.pegs, self.last_moved)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()
