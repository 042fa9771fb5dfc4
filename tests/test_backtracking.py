import pytest

from algokit.backtracking import solve_maze, solve_n_queens, solve_sudoku

SOURCE_MAZE = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [0, 1, 0, 0],
    [1, 1, 1, 1],
]

SOURCE_SUDOKU = [
    [3, 0, 6, 5, 0, 8, 4, 0, 0],
    [5, 2, 0, 0, 0, 0, 0, 0, 0],
    [0, 8, 7, 0, 0, 0, 0, 3, 1],
    [0, 0, 3, 0, 1, 0, 0, 8, 0],
    [9, 0, 0, 8, 6, 3, 0, 0, 5],
    [0, 5, 0, 0, 9, 0, 6, 0, 0],
    [1, 3, 0, 0, 0, 0, 2, 5, 0],
    [0, 0, 0, 0, 0, 0, 0, 7, 4],
    [0, 0, 5, 2, 0, 6, 3, 0, 0],
]


def _queens_valid(board):
    n = len(board)
    positions = [(r, c) for r in range(n) for c in range(n) if board[r][c]]
    if len(positions) != n:
        return False
    rows = {r for r, _ in positions}
    cols = {c for _, c in positions}
    diagonals = {r - c for r, c in positions}
    anti = {r + c for r, c in positions}
    return len(rows) == len(cols) == len(diagonals) == len(anti) == n


def test_four_queens_first_solution():
    assert solve_n_queens(4) == [
        [0, 0, 1, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 1],
        [0, 1, 0, 0],
    ]


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_queens_solutions_are_valid(n):
    board = solve_n_queens(n)
    assert len(board) == n
    assert all(len(row) == n for row in board)
    assert sum(map(sum, board)) == n
    assert _queens_valid(board) is True


@pytest.mark.parametrize("n", [2, 3])
def test_queens_without_solution(n):
    assert solve_n_queens(n) is None


def test_queens_rejects_negative():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_maze_source_example():
    assert solve_maze(SOURCE_MAZE) == [
        [1, 0, 0, 0],
        [1, 1, 0, 0],
        [0, 1, 0, 0],
        [0, 1, 1, 1],
    ]


def test_maze_path_only_uses_open_cells():
    solution = solve_maze(SOURCE_MAZE)
    assert all(
        SOURCE_MAZE[r][c] == 1
        for r, row in enumerate(solution)
        for c, mark in enumerate(row)
        if mark
    )
    assert solution[0][0] == 1 and solution[-1][-1] == 1


def test_maze_blocked_exit_has_no_solution():
    maze = [row[:] for row in SOURCE_MAZE]
    maze[3][3] = 0
    assert solve_maze(maze) is None


def test_maze_blocked_entrance_has_no_solution():
    maze = [row[:] for row in SOURCE_MAZE]
    maze[0][0] = 0
    assert solve_maze(maze) is None


def test_maze_rejects_empty():
    with pytest.raises(ValueError):
        solve_maze([])


def test_maze_rejects_ragged_rows():
    with pytest.raises(ValueError):
        solve_maze([[1, 1], [1]])


def _sudoku_valid(board):
    full = set(range(1, 10))
    rows_ok = all(set(row) == full for row in board)
    cols_ok = all({board[r][c] for r in range(9)} == full for c in range(9))
    boxes_ok = all(
        {board[r][c] for r in range(top, top + 3) for c in range(left, left + 3)} == full
        for top in range(0, 9, 3)
        for left in range(0, 9, 3)
    )
    return rows_ok and cols_ok and boxes_ok


def test_sudoku_source_grid_is_solved_validly():
    solved = solve_sudoku(SOURCE_SUDOKU)
    assert len(solved) == 9
    assert all(len(row) == 9 for row in solved)
    assert _sudoku_valid(solved) is True


def test_sudoku_keeps_givens_and_leaves_input_alone():
    original = [row[:] for row in SOURCE_SUDOKU]
    solved = solve_sudoku(SOURCE_SUDOKU)
    assert SOURCE_SUDOKU == original
    assert all(
        solved[r][c] == value
        for r, row in enumerate(original)
        for c, value in enumerate(row)
        if value
    )


def test_sudoku_without_solution():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][8] = 9
    assert solve_sudoku(grid) is None


def test_sudoku_rejects_wrong_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])


def test_sudoku_rejects_out_of_range_values():
    grid = [[0] * 9 for _ in range(9)]
    grid[4][4] = 10
    with pytest.raises(ValueError):
        solve_sudoku(grid)