"""Maze generation by recursive backtracking, drawn with and without its solution."""

from __future__ import annotations

import random

NORTH = 1
SOUTH = 2
WEST = 4
EAST = 8
WIDTH = 25
HEIGHT = 25

WALL = "█"
_MAZES = 5

_DIRECTIONS = (NORTH, SOUTH, WEST, EAST)
_MOVES = {NORTH: (-1, 0), SOUTH: (1, 0), WEST: (0, -1), EAST: (0, 1)}
_OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, WEST: EAST, EAST: WEST}


def _shuffled_directions(rng: random.Random) -> list[int]:
    directions = list(_DIRECTIONS)
    rng.shuffle(directions)
    return directions


def dig(
    start_i: int, start_j: int, rng: random.Random | None = None
) -> tuple[list[list[int]], list[list[int]]]:
    """Carve a maze from a start cell; return passage bits and distances from the start."""
    if not (0 <= start_i < HEIGHT and 0 <= start_j < WIDTH):
        raise ValueError(f"start ({start_i}, {start_j}) is outside the maze")
    if rng is None:
        rng = random.Random()

    grid = [[0] * WIDTH for _ in range(HEIGHT)]
    dist = [[0] * WIDTH for _ in range(HEIGHT)]

    stack = [(start_i, start_j, iter(_shuffled_directions(rng)))]
    while stack:
        i, j, directions = stack[-1]
        for d in directions:
            di, dj = _MOVES[d]
            ni, nj = i + di, j + dj
            if 0 <= ni < HEIGHT and 0 <= nj < WIDTH and grid[ni][nj] == 0:
                grid[i][j] |= d
                dist[ni][nj] = dist[i][j] + 1
                grid[ni][nj] |= _OPPOSITE[d]
                stack.append((ni, nj, iter(_shuffled_directions(rng))))
                break
        else:
            stack.pop()

    return grid, dist


def find_exit(
    dist: list[list[int]], rng: random.Random | None = None
) -> tuple[int, int]:
    """Pick an exit: the furthest cell so far, stopping early at random."""
    if rng is None:
        rng = random.Random()
    best = -1
    exit_cell = (0, 0)
    for i, row in enumerate(dist):
        for j, d in enumerate(row):
            if d > best:
                best = d
                exit_cell = (i, j)
                if rng.random() < 0.1:
                    return exit_cell
    return exit_cell


def trace_path(
    dist: list[list[int]], exit_i: int, exit_j: int
) -> list[list[bool]]:
    """Mark cells walking from the exit down the distances to the start."""
    height, width = len(dist), len(dist[0])
    path = [[False] * width for _ in range(height)]
    i, j = exit_i, exit_j
    d = dist[i][j]
    path[i][j] = True
    while d > 0:
        for direction in _DIRECTIONS:
            di, dj = _MOVES[direction]
            ni, nj = i + di, j + dj
            if 0 <= ni < height and 0 <= nj < width and dist[ni][nj] == d - 1:
                d -= 1
                path[ni][nj] = True
                i, j = ni, nj
                break
        else:
            raise ValueError(f"no neighbour of ({i}, {j}) is at distance {d - 1}")
    return path


def draw(
    grid: list[list[int]],
    start: tuple[int, int],
    end: tuple[int, int],
    path: list[list[bool]],
    draw_path: bool,
) -> str:
    """Draw the maze in block characters, marking the path with dots if asked."""
    width = len(grid[0])
    track = "." if draw_path else " "

    lines = [WALL * (2 * width + 1)]
    for i, row in enumerate(grid):
        top, bottom = [WALL], [WALL]
        for j, cell in enumerate(row):
            if (i, j) == start:
                mark = "S"
            elif (i, j) == end:
                mark = "E"
            else:
                mark = track if path[i][j] else " "

            if cell & EAST:
                east = track if path[i][j + 1] and path[i][j] else " "
            else:
                east = WALL

            if cell & SOUTH:
                south = track if path[i + 1][j] and path[i][j] else " "
            else:
                south = WALL

            top.append(mark + east)
            bottom.append(south + WALL)
        lines.append("".join(top))
        lines.append("".join(bottom))
    return "\n".join(lines) + "\n"


def maze(rng: random.Random | None = None) -> tuple[list[str], str]:
    """Generate five mazes; the answer draws each with its solution path."""
    if rng is None:
        rng = random.Random()

    args, solved = [], []
    for _ in range(_MAZES):
        sj = rng.randrange(WIDTH)
        si = rng.randrange(HEIGHT)

        grid, dist = dig(si, sj, rng)
        ei, ej = find_exit(dist, rng)
        path = trace_path(dist, ei, ej)

        args.append(draw(grid, (si, sj), (ei, ej), path, False)[:-1])
        solved.append(draw(grid, (si, sj), (ei, ej), path, True)[:-1])

    return args, "\n\n".join(solved)