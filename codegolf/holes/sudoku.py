"""Sudoku puzzles with a unique solution, drawn as text grids."""

from __future__ import annotations

import random

SIZE = 9
BLOCK = 3

_DIGITS = range(1, SIZE + 1)
_CELLS = SIZE * SIZE
_REMOVAL_ATTEMPTS = 51

_TOP = "┏━━━┯━━━┯━━━┳━━━┯━━━┯━━━┳━━━┯━━━┯━━━┓"
_BLOCK_RULE = "┣━━━┿━━━┿━━━╋━━━┿━━━┿━━━╋━━━┿━━━┿━━━┫"
_RULE = "┠───┼───┼───╂───┼───┼───╂───┼───┼───┨"
_BOTTOM = "┗━━━┷━━━┷━━━┻━━━┷━━━┷━━━┻━━━┷━━━┷━━━┛"


def format_sudoku(board: list[list[int]]) -> str:
    """Draw a board in box-drawing characters, blanks for zero."""
    lines = []
    for i, row in enumerate(board):
        if i == 0:
            lines.append(_TOP)
        elif i % BLOCK == 0:
            lines.append(_BLOCK_RULE)
        else:
            lines.append(_RULE)
        cells = "".join(
            ("┃" if j % BLOCK == 0 else "│") + f" {number or ' '} "
            for j, number in enumerate(row)
        )
        lines.append(cells + "┃")
    lines.append(_BOTTOM)
    return "\n".join(lines)


def _fits(board: list[list[int]], i: int, j: int, number: int) -> bool:
    if number in board[i]:
        return False
    if any(row[j] == number for row in board):
        return False
    i0, j0 = i - i % BLOCK, j - j % BLOCK
    return all(
        number not in row[j0 : j0 + BLOCK] for row in board[i0 : i0 + BLOCK]
    )


def _check_shape(board: list[list[int]]) -> None:
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError("a sudoku board must be 9 by 9")


def has_multiple_solutions(
    board: list[list[int]], rng: random.Random | None = None
) -> bool:
    """Report whether the board, zeros being blanks, has more than one solution."""
    _check_shape(board)
    if rng is None:
        rng = random.Random()

    work = [list(row) for row in board]
    found = 0

    def solve(cell: int) -> bool:
        nonlocal found
        while cell < _CELLS and work[cell // SIZE][cell % SIZE]:
            cell += 1
        if cell == _CELLS:
            found += 1
            return found == 2

        i, j = divmod(cell, SIZE)
        for number in rng.sample(_DIGITS, SIZE):
            if _fits(work, i, j, number):
                work[i][j] = number
                if solve(cell + 1):
                    return True
        work[i][j] = 0
        return False

    solve(0)
    return found >= 2


def generate_board(rng: random.Random | None = None) -> list[list[int]]:
    """Return a random completely filled valid board."""
    if rng is None:
        rng = random.Random()
    board = [[0] * SIZE for _ in range(SIZE)]

    def fill(cell: int) -> bool:
        i, j = divmod(cell, SIZE)
        for number in rng.sample(_DIGITS, SIZE):
            if _fits(board, i, j, number):
                board[i][j] = number
                if cell + 1 == _CELLS or fill(cell + 1):
                    return True
        board[i][j] = 0
        return False

    fill(0)
    return board


def sudoku(v2: bool, rng: random.Random | None = None) -> tuple[list[str], str]:
    """Generate a puzzle; v2 draws it as a grid, otherwise as rows with underscores."""
    if rng is None:
        rng = random.Random()

    board = generate_board(rng)
    out = format_sudoku(board)

    for cell in rng.sample(range(_CELLS), _REMOVAL_ATTEMPTS):
        i, j = divmod(cell, SIZE)
        original = board[i][j]
        board[i][j] = 0
        if has_multiple_solutions(board, rng):
            board[i][j] = original

    if v2:
        return [format_sudoku(board)], out
    return [
        "".join(str(number) if number else "_" for number in row) for row in board
    ], out