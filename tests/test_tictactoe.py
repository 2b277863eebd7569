import pytest

from consoleapps.tictactoe import (
    CORNERS,
    EMPTY,
    O,
    X,
    Difficulty,
    Score,
    check_draw,
    check_win,
    computer_move,
    format_board,
    is_valid_move,
    new_board,
)


def _board(rows):
    return [list(row) for row in rows]


@pytest.mark.parametrize(
    "rows",
    [
        ["XXX", "   ", "   "],
        ["X  ", "X  ", "X  "],
        ["X  ", " X ", "  X"],
        ["  X", " X ", "X  "],
        ["   ", "   ", "XXX"],
    ],
)
def test_check_win_lines(rows):
    board = _board(rows)
    assert check_win(board, X)
    assert not check_win(board, O)


def test_no_win_on_empty_board():
    assert not check_win(new_board(), X)
    assert not check_draw(new_board())


def test_full_board_is_draw():
    board = _board(["XOX", "XOO", "OXX"])
    assert check_draw(board)
    assert not check_win(board, X) and not check_win(board, O)


def test_is_valid_move_bounds_and_occupied():
    board = _board(["X  ", "   ", "   "])
    assert not is_valid_move(board, 0, 0)
    assert not is_valid_move(board, -1, 0)
    assert not is_valid_move(board, 0, 3)
    assert is_valid_move(board, 2, 2)


def test_computer_takes_winning_move():
    board = _board(["OO ", "XX ", "X  "])
    assert computer_move(board, Difficulty.EASY) == (0, 2)
    assert check_win(board, O)


def test_computer_blocks_player():
    board = _board(["XX ", "O  ", "   "])
    assert computer_move(board, Difficulty.EASY) == (0, 2)
    assert board[0][2] == O


def test_hard_takes_centre():
    board = _board(["X  ", "   ", "   "])
    assert computer_move(board, Difficulty.HARD) == (1, 1)


def test_hard_takes_corner_when_centre_taken():
    board = _board(["   ", " X ", "   "])
    assert computer_move(board, Difficulty.HARD) == CORNERS[0]


def test_easy_takes_first_free_cell():
    board = _board(["   ", " X ", "   "])
    assert computer_move(board, Difficulty.EASY) == (0, 0)
    board = _board(["X  ", "   ", "   "])
    assert computer_move(board, Difficulty.EASY) == (0, 1)


def test_computer_move_on_full_board_changes_nothing():
    board = _board(["XOX", "XOO", "OXX"])
    before = [row[:] for row in board]
    assert computer_move(board, Difficulty.HARD) is None
    assert board == before


def test_computer_places_exactly_one_mark():
    board = new_board()
    computer_move(board, Difficulty.HARD)
    assert sum(cell == O for row in board for cell in row) == 1
    assert sum(cell == EMPTY for row in board for cell in row) == 8


def test_format_empty_board():
    expected = (
        "Score - Player : 0, Computer : 0, Draw : 0\nTic-Tac-Toe\n"
        "   |   |   \n---+---+---\n   |   |   \n---+---+---\n   |   |   "
    )
    assert format_board(new_board(), Score()) == expected


def test_format_board_shows_marks_and_score():
    text = format_board(_board(["X  ", " O ", "   "]), Score(player=2, computer=1, draw=3))
    lines = text.split("\n")
    assert lines[0].endswith("Draw : 3")
    assert lines[2] == " X |   |   "
    assert lines[4] == "   | O |   "