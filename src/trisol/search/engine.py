from __future__ import annotations

from typing import Callable, Optional

from trisol.search.tree import NO_BOARD, BoardTree
from trisol.triangle.board import Board
from trisol.triangle.moves import JUMPS_BY_SOURCE

VisitCallback = Callable[["SearchContext", int], None]

# (source bit, [(required pegs, landing bit, landing)]) per source hole,
# in the same order as JUMPS_BY_SOURCE.
JUMP_BITS = [
    (1 << source, [(jump.required, jump.landing_bit, jump.landing) for jump in jumps])
    for source, jumps in enumerate(JUMPS_BY_SOURCE)
]


class SearchContext:
    def __init__(
        self, tree: BoardTree, on_visit: Optional[VisitCallback] = None
    ) -> None:
        self.tree = tree
        self.on_visit = on_visit

        self.total_winning_boards = 0

        # Number of boards on the path above the board being explored
        self.depth = 0

        # Index of the first board with a single peg, if any
        self.winning_board: Optional[int] = None

    @property
    def total_boards(self) -> int:
        return len(self.tree)


def explore(context: SearchContext, index: int) -> bool:
    """
    Generates every board reachable with one jump from the board at index and
    explores each of them before trying the next jump. Returns whether any
    jump was possible.
    """
    tree = context.tree
    pegs = tree.pegs[index]

    if context.on_visit:
        context.on_visit(context, index)

    if bin(pegs).count("1") == 1:
        if context.winning_board is None:
            context.winning_board = index
        context.total_winning_boards += 1

    context.depth += 1

    last_child = NO_BOARD

    for source_bit, jumps in JUMP_BITS:
        if not pegs & source_bit:
            continue

        for required, landing_bit, landing in jumps:
            if pegs & required != required or pegs & landing_bit:
                continue

            child_pegs = (pegs & ~required) | landing_bit
            last_child = tree.add_child(index, child_pegs, landing, last_child)
            explore(context, last_child)

    context.depth -= 1

    return last_child != NO_BOARD


def search(board: Board, on_visit: Optional[VisitCallback] = None) -> SearchContext:
    context = SearchContext(BoardTree(board), on_visit)
    explore(context, 0)
    return context
