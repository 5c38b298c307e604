"""Algorithms over rectangular grids given as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product
from typing import TypeVar

T = TypeVar("T")

_STEPS = ((1, 0), (-1, 0), (0, -1), (0, 1))


def find_ball(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return the exit column of a ball dropped into each column, or -1.

    A cell of 1 deflects to the right and -1 to the left; a ball is stuck
    when it hits a wall or a V formed by two neighbouring cells.
    """
    width = len(grid[0]) if grid else 0
    result = []
    for column in range(width):
        for row in grid:
            slope = row[column]
            following = column + slope
            if not 0 <= following < width or row[following] != slope:
                result.append(-1)
                break
            column = following
        else:
            result.append(column)
    return result


def live_neighbours(board: Sequence[Sequence[int]], i: int, j: int) -> int:
    """Count the live cells among the up to eight neighbours of (i, j)."""
    height = len(board)
    width = len(board[0]) if board else 0
    return sum(
        1
        for di, dj in product((-1, 0, 1), repeat=2)
        if (di or dj)
        and 0 <= i + di < height
        and 0 <= j + dj < width
        and board[i + di][j + dj] == 1
    )


def _next_state(cell: int, neighbours: int) -> int:
    if cell == 0 and neighbours == 3:
        return 1
    if cell == 1 and not 2 <= neighbours <= 3:
        return 0
    return cell


def game_of_life(board: list[list[int]]) -> None:
    """Advance a board of Conway's Game of Life by one generation in place."""
    following = [
        [_next_state(cell, live_neighbours(board, i, j)) for j, cell in enumerate(row)]
        for i, row in enumerate(board)
    ]
    for row, new_row in zip(board, following):
        row[:] = new_row


def rotate_image(matrix: list[list[T]]) -> None:
    """Rotate a square matrix a quarter turn clockwise in place."""
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def spiral_order(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Return the elements of a matrix in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[T] = []
    while True:
        result.extend(matrix[top][left : right + 1])
        top += 1
        if top > bottom:
            break
        result.extend(matrix[r][right] for r in range(top, bottom + 1))
        right -= 1
        if left > right:
            break
        result.extend(matrix[bottom][c] for c in range(right, left - 1, -1))
        bottom -= 1
        if top > bottom:
            break
        result.extend(matrix[r][left] for r in range(bottom, top - 1, -1))
        left += 1
        if left > right:
            break
    return result


def generate_spiral_matrix(n: int) -> list[list[int]]:
    """Return an n×n matrix filled with 1..n² in clockwise spiral order."""
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    matrix = [[0] * n for _ in range(n)]
    positions = spiral_order([[(r, c) for c in range(n)] for r in range(n)])
    for number, (r, c) in enumerate(positions, start=1):
        matrix[r][c] = number
    return matrix


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the size of the largest 4-connected group of 1 cells."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    seen: set[tuple[int, int]] = set()
    best = 0
    for start in product(range(height), range(width)):
        if start in seen or grid[start[0]][start[1]] != 1:
            continue
        seen.add(start)
        pending = [start]
        area = 0
        while pending:
            r, c = pending.pop()
            area += 1
            for dr, dc in _STEPS:
                cell = (r + dr, c + dc)
                if (
                    0 <= cell[0] < height
                    and 0 <= cell[1] < width
                    and cell not in seen
                    and grid[cell[0]][cell[1]] == 1
                ):
                    seen.add(cell)
                    pending.append(cell)
        best = max(best, area)
    return best


def flood_fill(
    image: list[list[int]], sr: int, sc: int, new_color: int
) -> list[list[int]]:
    """Recolour the region connected to (sr, sc) in place and return the image."""
    height = len(image)
    width = len(image[0]) if image else 0
    if not (0 <= sr < height and 0 <= sc < width):
        raise IndexError(f"start ({sr}, {sc}) is outside the image")
    original = image[sr][sc]
    if original == new_color:
        return image
    pending = [(sr, sc)]
    while pending:
        r, c = pending.pop()
        if 0 <= r < height and 0 <= c < width and image[r][c] == original:
            image[r][c] = new_color
            pending.extend((r + dr, c + dc) for dr, dc in _STEPS)
    return image


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells, each used once."""
    height = len(board)
    width = len(board[0]) if board else 0
    used: set[tuple[int, int]] = set()

    def search(r: int, c: int, index: int) -> bool:
        if index == len(word):
            return True
        if (
            not (0 <= r < height and 0 <= c < width)
            or (r, c) in used
            or board[r][c] != word[index]
        ):
            return False
        used.add((r, c))
        found = any(search(r + dr, c + dc, index + 1) for dr, dc in _STEPS)
        used.discard((r, c))
        return found

    return any(search(r, c, 0) for r, c in product(range(height), range(width)))