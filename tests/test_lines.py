import pytest

from rasterkit.lines import Line, bresenham, brute_force, incremental, incremental_v2

ALGORITHMS = [brute_force, incremental, incremental_v2, bresenham]

SAMPLE_LINES = [
    Line(0, 0, 7, 3),
    Line(0, 0, 2, 6),
    Line(5, 0, 1, 7),
    Line(9, 2, 0, 5),
    Line(3, 9, 4, 0),
    Line(0, 8, 8, 6),
    Line(1, 1, 10, 10),
]


def _chebyshev(a, b):
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_horizontal_line(algorithm):
    points = list(algorithm(Line(0, 0, 5, 0)))
    assert sorted(points) == [(x, 0) for x in range(6)]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_vertical_line(algorithm):
    points = list(algorithm(Line(3, 1, 3, 6)))
    assert sorted(points) == [(3, y) for y in range(1, 7)]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_diagonal_line(algorithm):
    points = list(algorithm(Line(0, 0, 4, 4)))
    assert sorted(points) == [(i, i) for i in range(5)]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_single_point(algorithm):
    assert list(algorithm(Line(2, 3, 2, 3))) == [(2, 3)]


@pytest.mark.parametrize("line", SAMPLE_LINES)
def test_point_count_matches_dominant_axis(line):
    expected = max(abs(line.x1 - line.x0), abs(line.y1 - line.y0)) + 1
    assert len(list(brute_force(line))) == expected
    assert len(list(incremental(line))) == expected
    assert len(list(incremental_v2(line))) == expected
    assert len(list(bresenham(line))) == expected


@pytest.mark.parametrize("algorithm", [brute_force, incremental, incremental_v2])
@pytest.mark.parametrize("line", SAMPLE_LINES)
def test_float_algorithms_hit_both_endpoints(algorithm, line):
    points = set(algorithm(line))
    assert (line.x0, line.y0) in points
    assert (line.x1, line.y1) in points


@pytest.mark.parametrize("algorithm", [brute_force, incremental])
@pytest.mark.parametrize("line", SAMPLE_LINES)
def test_path_is_connected(algorithm, line):
    points = sorted(algorithm(line), key=lambda p: (p[0], p[1]) if line.is_shallow else (p[1], p[0]))
    assert all(_chebyshev(a, b) == 1 for a, b in zip(points, points[1:]))


@pytest.mark.parametrize("line", SAMPLE_LINES)
def test_incremental_v2_steps_are_connected(line):
    points = list(incremental_v2(line))
    assert all(_chebyshev(a, b) == 1 for a, b in zip(points, points[1:]))


@pytest.mark.parametrize(
    "line",
    [
        Line(0, 0, 7, 3),   # first octant
        Line(0, 0, 2, 6),   # second octant
        Line(5, 0, 1, 7),   # third octant
        Line(9, 2, 0, 5),   # fourth octant
        Line(3, 9, 1, 0),   # sixth octant
        Line(3, 9, 4, 0),   # seventh octant
        Line(0, 8, 8, 6),   # eighth octant
    ],
)
def test_bresenham_walks_from_start_to_end(line):
    points = list(bresenham(line))
    assert points[0] == (line.x0, line.y0)
    assert points[-1] == (line.x1, line.y1)
    assert all(_chebyshev(a, b) == 1 for a, b in zip(points, points[1:]))


def test_bresenham_fifth_octant_steps_along_x():
    line = Line(9, 6, 2, 3)
    points = list(bresenham(line))
    assert points[0] == (9, 6)
    assert [x for x, _ in points] == list(range(9, 1, -1))
    assert all(b[1] <= a[1] for a, b in zip(points, points[1:]))


def test_brute_force_rounds_half_away_from_zero():
    assert list(brute_force(Line(0, 0, 2, 1))) == [(0, 0), (1, 1), (2, 1)]


def test_incremental_matches_brute_force_on_exact_slopes():
    line = Line(0, 0, 8, 2)
    assert list(incremental(line)) == list(brute_force(line))


def test_bresenham_tie_prefers_straight_step():
    assert list(bresenham(Line(0, 0, 2, 1))) == [(0, 0), (1, 0), (2, 1)]


def test_reversed_line_gives_same_pixels_for_float_algorithms():
    forward = Line(1, 2, 8, 5)
    backward = Line(8, 5, 1, 2)
    assert set(brute_force(forward)) == set(brute_force(backward))
    assert set(incremental(forward)) == set(incremental(backward))