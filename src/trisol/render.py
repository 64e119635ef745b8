from __future__ import annotations

import time
from typing import Iterable

from trisol.arguments import DisplayArguments
from trisol.search.engine import SearchContext
from trisol.triangle.board import INVALID, OCCUPIED, Board
from trisol.triangle.geometry import NUM_COLS, NUM_ROWS, row_label

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
INVERSE_VIDEO = "\x1b[7m"
NORMAL_VIDEO = "\x1b[m"

BOARD_HEADER = "+" * 22
BOARD_FOOTER = "-" * 22


def render_board(board: Board) -> str:
    lines = [BOARD_HEADER]

    for row in range(NUM_ROWS):
        label = row_label(row)
        line = f"{label}  " if label else ""

        for col in range(NUM_COLS):
            square = board.get_square(row, col)

            if square == OCCUPIED:
                if board.is_last_moved(row, col):
                    line += INVERSE_VIDEO + "X" + NORMAL_VIDEO
                else:
                    line += "X"
            elif square == INVALID:
                line += " "
            else:
                line += "."

        lines.append(line.rstrip())

    lines.append(BOARD_FOOTER)
    lines.append("")
    return "\n".join(lines)


class Renderer:
    def __init__(self, args: DisplayArguments) -> None:
        self.args = args

    def start(self) -> None:
        if self.args.visual:
            print(CLEAR_SCREEN + CURSOR_HOME, end="")

    def show(self, board: Board) -> None:
        if self.args.visual:
            print(CURSOR_HOME, end="")

        print(render_board(board))

        if self.args.visual:
            time.sleep(self.args.frame_delay)

    def trace(self, context: SearchContext, index: int) -> None:
        tree = context.tree
        count = tree.count_pegs(index)

        prev = tree.prev(index)
        prevnum = 0 if prev is None else tree.boardnum(prev)

        if count == 1:
            print("Board is a winner!")

        print(
            f"DEPTH: {context.depth} COUNT: {count} "
            f"BOARDNUM {tree.boardnum(index)} PREV {prevnum}"
        )
        self.show(tree.board(index))

    def show_totals(self, context: SearchContext) -> None:
        print(f"Total boards: {context.total_boards}")

    def show_solution(self, boards: Iterable[Board]) -> None:
        for board in boards:
            self.show(board)
