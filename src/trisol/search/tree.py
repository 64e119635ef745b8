from __future__ import annotations

from array import array
from typing import Iterator, Optional

from trisol.triangle.board import Board

NO_BOARD = -1


class BoardTree:
    """
    BoardTree keeps every board created by a search.

    A full search from a single-hole start creates millions of boards, so
    boards are stored column-wise in compact arrays and addressed by index.
    The root has index 0. Boards are only materialised when requested.
    """

    def __init__(self, root: Board) -> None:
        self.pegs = array("H")
        self.last_moved = array("b")
        self.parents = array("l")
        self.first_children = array("l")
        self.next_siblings = array("l")

        # Forward links along the reconstructed solution, parent -> child
        self.nextwin: dict[int, int] = {}

        self._append(root.pegs, root.last_moved, NO_BOARD)

    def __len__(self) -> int:
        return len(self.pegs)

    def _append(self, pegs: int, last_moved: Optional[int], parent: int) -> int:
        index = len(self.pegs)
        self.pegs.append(pegs)
        self.last_moved.append(NO_BOARD if last_moved is None else last_moved)
        self.parents.append(parent)
        self.first_children.append(NO_BOARD)
        self.next_siblings.append(NO_BOARD)
        return index

    def add_child(
        self, parent: int, pegs: int, last_moved: int, previous_sibling: int
    ) -> int:
        """
        Adds a child board below parent. previous_sibling is the index of the
        child most recently added to the same parent, or NO_BOARD.
        """
        assert parent in range(len(self))

        index = self._append(pegs, last_moved, parent)

        if previous_sibling == NO_BOARD:
            self.first_children[parent] = index
        else:
            assert self.parents[previous_sibling] == parent
            self.next_siblings[previous_sibling] = index

        return index

    def board(self, index: int) -> Board:
        last_moved: Optional[int] = self.last_moved[index]
        if last_moved == NO_BOARD:
            last_moved = None
        return Board(self.pegs[index], last_moved)

    def boardnum(self, index: int) -> int:
        """Sequence number in creation order, the root is board 1."""
        assert index in range(len(self))
        return index + 1

    def prev(self, index: int) -> Optional[int]:
        parent = self.parents[index]
        if parent == NO_BOARD:
            return None
        return parent

    def children(self, index: int) -> Iterator[int]:
        child = self.first_children[index]
        while child != NO_BOARD:
            yield child
            child = self.next_siblings[child]

    def count_children(self, index: int) -> int:
        return sum(1 for _ in self.children(index))

    def count_pegs(self, index: int) -> int:
        return bin(self.pegs[index]).count("1")

    def depth(self, index: int) -> int:
        depth = 0
        parent = self.prev(index)
        while parent is not None:
            depth += 1
            parent = self.prev(parent)
        return depth
