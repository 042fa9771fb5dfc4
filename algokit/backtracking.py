"""Backtracking solvers: N queens, rat in a maze and sudoku."""

from __future__ import annotations

from collections.abc import Sequence

_SUDOKU_SIZE = 9
_BOX = 3


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Place ``n`` queens column by column; return the board of 1s and 0s, or None."""
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]

    def is_safe(row: int, col: int) -> bool:
        if any(board[row][:col]):
            return False
        upper = zip(range(row, -1, -1), range(col, -1, -1))
        lower = zip(range(row, n), range(col, -1, -1))
        return not any(board[i][j] for i, j in (*upper, *lower))

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if is_safe(row, col):
                board[row][col] = 1
                if place(col + 1):
                    return True
                board[row][col] = 0
        return False

    return board if place(0) else None


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path of 1-cells from the top-left to the bottom-right corner.

    Moves go down first, then right. Returns the path marked with 1s, or None.
    """
    rows = len(maze)
    if rows == 0 or len(maze[0]) == 0:
        raise ValueError("maze must not be empty")
    cols = len(maze[0])
    if any(len(row) != cols for row in maze):
        raise ValueError("maze rows must all have the same length")
    solution = [[0] * cols for _ in range(rows)]

    def walk(x: int, y: int) -> bool:
        if x == rows - 1 and y == cols - 1 and maze[x][y] == 1:
            solution[x][y] = 1
            return True
        if 0 <= x < rows and 0 <= y < cols and maze[x][y] == 1:
            solution[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            solution[x][y] = 0
        return False

    return solution if walk(0, 0) else None


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Fill the zeros of a 9x9 sudoku grid; return the solved grid, or None.

    The given grid is not modified.
    """
    if len(grid) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in grid):
        raise ValueError("sudoku grid must be 9x9")
    if any(not 0 <= value <= _SUDOKU_SIZE for row in grid for value in row):
        raise ValueError("sudoku values must lie between 0 and 9")
    board = [list(row) for row in grid]

    def is_safe(row: int, col: int, num: int) -> bool:
        if num in board[row]:
            return False
        if any(board[r][col] == num for r in range(_SUDOKU_SIZE)):
            return False
        top, left = row - row % _BOX, col - col % _BOX
        return not any(
            board[r][c] == num
            for r in range(top, top + _BOX)
            for c in range(left, left + _BOX)
        )

    def fill(index: int) -> bool:
        if index == _SUDOKU_SIZE * _SUDOKU_SIZE:
            return True
        row, col = divmod(index, _SUDOKU_SIZE)
        if board[row][col] > 0:
            return fill(index + 1)
        for num in range(1, _SUDOKU_SIZE + 1):
            if is_safe(row, col, num):
                board[row][col] = num
                if fill(index + 1):
                    return True
            board[row][col] = 0
        return False

    return board if fill(0) else None