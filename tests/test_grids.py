import pytest

from csesalgo.errors import ImpossibleError
from csesalgo.grids import count_rooms, labyrinth, monsters

_MOVES = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}


def _walk(grid, path, mark="A"):
    r = next(i for i, row in enumerate(grid) if mark in row)
    c = grid[r].index(mark)
    for step in path:
        dr, dc = _MOVES[step]
        r, c = r + dr, c + dc
        assert 0 <= r < len(grid) and 0 <= c < len(grid[0])
        assert grid[r][c] != "#"
    return r, c


def test_count_rooms_example():
    grid = [
        "########",
        "#..#...#",
        "####.#.#",
        "#..#...#",
        "########",
    ]
    assert count_rooms(grid) == 3


def test_count_rooms_all_walls():
    assert count_rooms(["###", "###"]) == 0


def test_count_rooms_open_floor():
    assert count_rooms(["...", "..."]) == 1


def test_count_rooms_ragged_grid():
    with pytest.raises(ValueError):
        count_rooms(["...", ".."])


def test_labyrinth_path_reaches_b():
    grid = [
        "########",
        "#.A#...#",
        "#.##.#B#",
        "#......#",
        "########",
    ]
    path = labyrinth(grid)
    r, c = _walk(grid, path)
    assert grid[r][c] == "B"


def test_labyrinth_open_grid_is_shortest():
    grid = ["A....", ".....", "....B"]
    path = labyrinth(grid)
    assert len(path) == 2 + 4
    assert grid[_walk(grid, path)[0]][_walk(grid, path)[1]] == "B"


def test_labyrinth_blocked():
    with pytest.raises(ImpossibleError):
        labyrinth(["A#B"])


def test_labyrinth_missing_target():
    with pytest.raises(ValueError):
        labyrinth(["A.."])


def test_monsters_escape_reaches_edge():
    grid = [
        "########",
        "#M..A..#",
        "#.#.M#.#",
        "#M#..#..",
        "#.######",
    ]
    path = monsters(grid)
    r, c = _walk(grid, path)
    assert r in (0, len(grid) - 1) or c in (0, len(grid[0]) - 1)


def test_monsters_corridor_escape():
    grid = ["#####", "#A...", "#####"]
    path = monsters(grid)
    assert set(path) == {"R"}
    assert _walk(grid, path) == (1, 4)


def test_monsters_start_on_edge():
    assert monsters(["A.", ".."]) == ""


def test_monsters_blocked_by_monster():
    with pytest.raises(ImpossibleError):
        monsters(["#####", "#A..M", "#####"])


def test_monsters_walled_in():
    with pytest.raises(ImpossibleError):
        monsters(["###", "#A#", "###"])


def test_monsters_missing_player():
    with pytest.raises(ValueError):
        monsters(["..M", "..."])