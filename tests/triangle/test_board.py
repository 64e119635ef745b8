import pytest

from trisol.triangle.board import EMPTY, INVALID, OCCUPIED, Board, InvalidMove
from trisol.triangle.moves import Jump

BOARD_APEX_START = Board.start(1)
BOARD_CENTER_START = Board.start(5)
BOARD_ONE_PEG = Board.from_holes([13])
BOARD_STUCK = Board.from_holes([1, 15])


def test_init_error() -> None:
    with pytest.raises(ValueError):
        Board(1 << 15)


def test_init_last_moved_error() -> None:
    with pytest.raises(ValueError):
        Board(0x1, 1)


@pytest.mark.parametrize(
    ["hole"],
    [pytest.param(hole, id=f"hole-{hole}") for hole in range(1, 16)],
)
def test_start(hole: int) -> None:
    board = Board.start(hole)
    assert board.count_pegs() == 14
    assert board.count_empties() == 1
    assert not board.has_peg(hole)
    assert board.last_moved is None


def test_start_error() -> None:
    with pytest.raises(ValueError):
        Board.start(16)


def test_empty() -> None:
    board = Board.empty()
    assert board.count_pegs() == 0
    assert board.get_holes() == []
    assert not board.has_jumps()


def test_from_holes() -> None:
    board = Board.from_holes([1, 5, 15])
    assert board.get_holes() == [1, 5, 15]
    assert board.pegs == 0x4011


@pytest.mark.parametrize(
    ["row", "col", "expected"],
    [
        pytest.param(2, 6, EMPTY, id="apex"),
        pytest.param(3, 5, OCCUPIED, id="row-2"),
        pytest.param(6, 10, OCCUPIED, id="bottom-right"),
        pytest.param(0, 0, INVALID, id="border"),
        pytest.param(2, 5, INVALID, id="between-holes"),
        pytest.param(7, 6, INVALID, id="below-triangle"),
    ],
)
def test_get_square(row: int, col: int, expected: int) -> None:
    assert BOARD_APEX_START.get_square(row, col) == expected


@pytest.mark.parametrize(
    ["row", "col"],
    [
        pytest.param(-1, 0, id="row-too-small"),
        pytest.param(9, 0, id="row-too-big"),
        pytest.param(0, 13, id="col-too-big"),
    ],
)
def test_get_square_error(row: int, col: int) -> None:
    with pytest.raises(ValueError):
        BOARD_APEX_START.get_square(row, col)


def test_get_jumps() -> None:
    assert BOARD_APEX_START.get_jumps() == [Jump(3, 1, 0), Jump(5, 2, 0)]
    assert BOARD_APEX_START.has_jumps()


def test_get_jumps_center() -> None:
    # Only the bottom row can jump into the centre, the sides are too close.
    assert BOARD_CENTER_START.get_jumps() == [Jump(11, 7, 4), Jump(13, 8, 4)]


@pytest.mark.parametrize(
    ["board"],
    [
        pytest.param(BOARD_ONE_PEG, id="one-peg"),
        pytest.param(BOARD_STUCK, id="stuck"),
        pytest.param(Board.empty(), id="empty"),
    ],
)
def test_no_jumps(board: Board) -> None:
    assert board.get_jumps() == []
    assert not board.has_jumps()
    assert board.get_children() == []


def test_do_jump() -> None:
    child = BOARD_APEX_START.do_jump(Jump(3, 1, 0))
    assert child.count_pegs() == 13
    assert child.has_peg(1)
    assert not child.has_peg(2)
    assert not child.has_peg(4)
    assert child.last_moved == 0
    assert child.is_last_moved(2, 6)
    assert not child.is_last_moved(3, 5)


def test_do_jump_clears_last_moved() -> None:
    child = BOARD_APEX_START.do_jump(Jump(3, 1, 0))
    grandchild = child.do_jump(Jump(10, 6, 3))
    assert grandchild.last_moved == 3
    assert not grandchild.is_last_moved(2, 6)


@pytest.mark.parametrize(
    ["jump"],
    [
        pytest.param(Jump(0, 1, 3), id="source-empty"),
        pytest.param(Jump(10, 6, 3), id="landing-occupied"),
    ],
)
def test_do_jump_error(jump: Jump) -> None:
    with pytest.raises(InvalidMove):
        BOARD_APEX_START.do_jump(jump)


def test_find_jump() -> None:
    child = BOARD_APEX_START.do_jump(Jump(5, 2, 0))
    assert BOARD_APEX_START.find_jump(child) == Jump(5, 2, 0)


def test_find_jump_error() -> None:
    with pytest.raises(InvalidMove):
        BOARD_APEX_START.find_jump(BOARD_ONE_PEG)


def test_is_winner() -> None:
    assert BOARD_ONE_PEG.is_winner()
    assert not BOARD_STUCK.is_winner()
    assert not Board.empty().is_winner()


def test_eq() -> None:
    assert Board.start(1) == BOARD_APEX_START
    assert Board.start(1) != BOARD_CENTER_START
    assert Board(0x1, 0) != Board(0x1)


def test_eq_error() -> None:
    with pytest.raises(TypeError):
        BOARD_APEX_START == 1


def test_hash() -> None:
    assert len({Board.start(1), Board.start(1), Board.start(2)}) == 2


def test_repr() -> None:
    assert repr(Board(0x1, 0)) == "Board(0x1, 0)"
