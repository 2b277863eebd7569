"""Tic-tac-toe against a computer opponent with two difficulty levels."""

from __future__ import annotations

import argparse
import enum
import random
from dataclasses import dataclass

from consoleapps.clock import clear_screen

BOARD_SIZE = 3
X = "X"
O = "O"
EMPTY = " "
CORNERS = ((0, 0), (0, 2), (2, 0), (2, 2))

Board = list[list[str]]


class Difficulty(enum.IntEnum):
    EASY = 1
    HARD = 2


@dataclass
class Score:
    player: int = 0
    computer: int = 0
    draw: int = 0


def new_board() -> Board:
    return [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def _cells():
    return ((r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE))


def check_win(board: Board, mark: str) -> bool:
    """Tell whether mark fills a row, a column or a diagonal."""
    lines = [[board[i][j] for j in range(BOARD_SIZE)] for i in range(BOARD_SIZE)]
    lines += [[board[j][i] for j in range(BOARD_SIZE)] for i in range(BOARD_SIZE)]
    lines.append([board[i][i] for i in range(BOARD_SIZE)])
    lines.append([board[i][BOARD_SIZE - 1 - i] for i in range(BOARD_SIZE)])
    return any(all(cell == mark for cell in line) for line in lines)


def check_draw(board: Board) -> bool:
    """Tell whether no empty cell remains."""
    return all(board[r][c] != EMPTY for r, c in _cells())


def is_valid_move(board: Board, row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE and board[row][col] == EMPTY


def _completing_cell(board: Board, mark: str) -> tuple[int, int] | None:
    for r, c in _cells():
        if board[r][c] == EMPTY:
            board[r][c] = mark
            wins = check_win(board, mark)
            board[r][c] = EMPTY
            if wins:
                return r, c
    return None


def computer_move(board: Board, difficulty: Difficulty) -> tuple[int, int] | None:
    """Place O by win, block, then (hard) centre and corners, then first free cell."""
    choice = _completing_cell(board, O) or _completing_cell(board, X)
    if choice is None and difficulty == Difficulty.HARD:
        preferred = [(1, 1), *CORNERS]
        choice = next(((r, c) for r, c in preferred if board[r][c] == EMPTY), None)
    if choice is None:
        choice = next(((r, c) for r, c in _cells() if board[r][c] == EMPTY), None)
    if choice is not None:
        row, col = choice
        board[row][col] = O
    return choice


def format_board(board: Board, score: Score) -> str:
    header = (
        f"Score - Player : {score.player}, Computer : {score.computer}, "
        f"Draw : {score.draw}\nTic-Tac-Toe\n"
    )
    rows = ["|".join(f" {cell} " for cell in row) for row in board]
    return header + "\n---+---+---\n".join(rows)


def _read_ints(prompt: str, count: int) -> list[int]:
    numbers: list[int] = []
    text = prompt
    while len(numbers) < count:
        for word in input(text).split():
            try:
                numbers.append(int(word))
            except ValueError:
                break
            if len(numbers) == count:
                break
        text = ""
    return numbers


def _input_difficulty() -> Difficulty:
    while True:
        print("Select Difficulty Level :")
        print("1. Easy Mode")
        print("2. Hard Mode")
        (choice,) = _read_ints("Enter you choice : ", 1)
        if choice in (Difficulty.EASY, Difficulty.HARD):
            return Difficulty(choice)
        print("Incorrect Choice enter(1/2)!!")


def _show(board: Board, score: Score) -> None:
    clear_screen()
    print(format_board(board, score))


def _player_move(board: Board) -> None:
    free = [(r, c) for r, c in _cells() if board[r][c] == EMPTY]
    if len(free) == 1:
        row, col = free[0]
        board[row][col] = X
        return
    while True:
        print("Player X's turn.")
        row, col = _read_ints("Enter row and column (1-3) for X (e.g., 1 3): ", 2)
        if is_valid_move(board, row - 1, col - 1):
            board[row - 1][col - 1] = X
            return


def _play(score: Score, difficulty: Difficulty, rng: random.Random) -> None:
    board = new_board()
    _show(board, score)
    current = X if rng.randrange(2) == 0 else O
    while True:
        if current == X:
            _player_move(board)
            _show(board, score)
            if check_win(board, X):
                score.player += 1
                _show(board, score)
                print("Congratulations! You have won!!")
                return
            current = O
        else:
            computer_move(board, difficulty)
            _show(board, score)
            if check_win(board, O):
                score.computer += 1
                _show(board, score)
                print("Computer Won.!!")
                return
            current = X
        if check_draw(board):
            score.draw += 1
            _show(board, score)
            print("It is a Draw Match")
            return


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against the computer.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    score = Score()
    try:
        while True:
            difficulty = _input_difficulty()
            _play(score, difficulty, rng)
            (again,) = _read_ints("Play again ? (1 for yes and 0 for no) : ", 1)
            if again == 0:
                break
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())