from __future__ import annotations

from trisol.search.engine import SearchContext
from trisol.triangle.board import Board


def link_solution(context: SearchContext) -> list[int]:
    """
    Links the path from the root to the winning board through the tree's
    nextwin links and returns the board indexes along it, root first.
    Returns an empty list if the search found no winning board.
    """
    if context.total_winning_boards == 0 or context.winning_board is None:
        return []

    tree = context.tree

    index = context.winning_board
    parent = tree.prev(index)

    while parent is not None:
        tree.nextwin[parent] = index
        index = parent
        parent = tree.prev(index)

    assert index == 0

    path = [index]
    while index in tree.nextwin:
        index = tree.nextwin[index]
        path.append(index)

    assert path[-1] == context.winning_board
    return path


def reconstruct(context: SearchContext) -> list[Board]:
    return [context.tree.board(index) for index in link_solution(context)]
