import random

import pytest

from codegolf.holes.maze import (
    EAST,
    HEIGHT,
    NORTH,
    SOUTH,
    WALL,
    WEST,
    WIDTH,
    dig,
    draw,
    find_exit,
    maze,
    trace_path,
)


class _FixedRandom(random.Random):
    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


def test_dig_visits_every_cell_as_a_tree():
    grid, dist = dig(4, 9, random.Random(1))
    assert dist[4][9] == 0
    assert all(cell != 0 for row in grid for cell in row)
    links = sum(bin(cell).count("1") for row in grid for cell in row)
    assert links // 2 == WIDTH * HEIGHT - 1


def test_dig_passages_are_symmetric():
    grid, dist = dig(0, 0, random.Random(2))
    for i in range(HEIGHT):
        for j in range(WIDTH):
            if grid[i][j] & EAST:
                assert grid[i][j + 1] & WEST
                assert abs(dist[i][j] - dist[i][j + 1]) == 1
            if grid[i][j] & SOUTH:
                assert grid[i + 1][j] & NORTH
                assert abs(dist[i][j] - dist[i + 1][j]) == 1
            if j == 0:
                assert not grid[i][j] & WEST
            if i == 0:
                assert not grid[i][j] & NORTH


def test_dig_rejects_start_outside():
    with pytest.raises(ValueError):
        dig(HEIGHT, 0, random.Random(0))


def test_find_exit_without_roulette_picks_first_furthest():
    dist = [[0, 1], [3, 2]]
    assert find_exit(dist, _FixedRandom(0.5)) == (1, 0)


def test_find_exit_roulette_stops_immediately():
    dist = [[0, 1], [3, 2]]
    assert find_exit(dist, _FixedRandom(0.0)) == (0, 0)


def test_trace_path_walks_back_to_start():
    dist = [[0, 1], [3, 2]]
    assert trace_path(dist, 1, 0) == [[True, True], [True, True]]


def test_trace_path_length_matches_distance():
    grid, dist = dig(10, 10, random.Random(9))
    ei, ej = find_exit(dist, random.Random(9))
    path = trace_path(dist, ei, ej)
    assert path[10][10]
    assert sum(cell for row in path for cell in row) == dist[ei][ej] + 1


def test_trace_path_without_route_raises():
    with pytest.raises(ValueError):
        trace_path([[0, 5]], 0, 1)


def test_draw_small_corridor():
    grid = [[EAST, WEST]]
    path = [[True, True]]
    solved = draw(grid, (0, 0), (0, 1), path, True)
    plain = draw(grid, (0, 0), (0, 1), path, False)
    assert solved == f"{WALL * 5}\n{WALL}S.E{WALL}\n{WALL * 5}\n"
    assert plain == f"{WALL * 5}\n{WALL}S E{WALL}\n{WALL * 5}\n"


def test_maze_shapes_and_solutions():
    args, out = maze(random.Random(123))
    solved = out.split("\n\n")
    assert len(args) == len(solved) == 5
    for plain, answer in zip(args, solved):
        lines = plain.split("\n")
        assert len(lines) == 2 * HEIGHT + 1
        assert all(len(line) == 2 * WIDTH + 1 for line in lines)
        assert plain.count("S") == 1
        assert plain.count("E") <= 1
        assert "." not in plain
        assert answer.replace(".", " ") == plain
        assert set(answer) <= {WALL, " ", ".", "S", "E", "\n"}


def test_maze_generates_distinct_mazes():
    args, _ = maze(random.Random(4))
    assert len(set(args)) == 5