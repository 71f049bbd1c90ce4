import pytest

from aocsolutions.antennas import (
    count_antinodes,
    count_harmonic_antinodes,
    in_bounds,
    parse_map,
)

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""

T_EXAMPLE = """T.........
...T......
.T........
..........
..........
..........
..........
..........
..........
..........
"""


def test_parse_map():
    assert parse_map("a.\n.#\n") == [[ord("a"), 0], [0, ord("#")]]


def test_count_antinodes_example():
    assert count_antinodes(parse_map(EXAMPLE)) == 14


def test_count_harmonic_example():
    assert count_harmonic_antinodes(parse_map(EXAMPLE)) == 34


def test_count_harmonic_t_example():
    assert count_harmonic_antinodes(parse_map(T_EXAMPLE)) == 9


def test_vertical_flip_invariant():
    grid = parse_map(EXAMPLE)
    flipped = grid[::-1]
    assert count_antinodes(flipped) == count_antinodes(grid)
    assert count_harmonic_antinodes(flipped) == count_harmonic_antinodes(grid)


def test_horizontal_flip_invariant():
    grid = parse_map(EXAMPLE)
    mirrored = [row[::-1] for row in grid]
    assert count_antinodes(mirrored) == count_antinodes(grid)


def test_frequency_name_does_not_matter():
    renamed = EXAMPLE.replace("0", "x")
    assert count_antinodes(parse_map(renamed)) == count_antinodes(parse_map(EXAMPLE))


def test_single_antenna_has_no_antinodes():
    grid = parse_map("...\n.a.\n...\n")
    assert count_antinodes(grid) == 0
    assert count_harmonic_antinodes(grid) == 0


def test_harmonic_leaves_wide_grid():
    grid = parse_map("a.....\na.....\n")
    with pytest.raises(ValueError):
        count_harmonic_antinodes(grid)


@pytest.mark.parametrize(
    "args, expected",
    [((0, 0, 1, 1), True), ((-1, 0, 5, 5), False), ((1, 4, 2, 5), True), ((2, 0, 2, 5), False)],
)
def test_in_bounds(args, expected):
    assert in_bounds(*args) is expected