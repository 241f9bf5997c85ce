import random

import pytest

from rasterkit.benchmark import (
    Algorithm,
    ImageCanvas,
    main,
    parse_number_argument,
    random_lines,
    run_algorithm,
    validate_positive,
)
from rasterkit.lines import Line


def test_parse_plain_decimal():
    assert parse_number_argument("42") == 42


def test_parse_leading_zero_is_read_as_decimal():
    assert parse_number_argument("010") == 10


@pytest.mark.parametrize("text", ["12abc", "0x", "08", "abc", "-", "1.5"])
def test_parse_rejects_non_numbers(text):
    with pytest.raises(ValueError, match="expecting a number"):
        parse_number_argument(text)


def test_parse_hex_is_accepted_but_has_no_decimal_value():
    assert parse_number_argument("0x1F") == 0


def test_validate_positive_returns_value():
    assert validate_positive(5, "resolution") == 5


@pytest.mark.parametrize("value", [0, -3])
def test_validate_positive_rejects(value):
    with pytest.raises(ValueError, match="numberOfRuns"):
        validate_positive(value, "numberOfRuns")


def test_random_lines_are_within_bounds():
    segments = random_lines(50, 20, random.Random(7))
    assert len(segments) == 50
    coords = [c for s in segments for c in (s.x0, s.y0, s.x1, s.y1)]
    assert all(0 <= c <= 18 for c in coords)


def test_random_lines_are_reproducible_with_a_seed():
    first = random_lines(10, 100, random.Random(3))
    second = random_lines(10, 100, random.Random(3))
    assert first == second


def test_run_algorithm_plots_with_algorithm_color():
    plotted = []
    count = run_algorithm(Algorithm.BRESENHAM, [Line(0, 0, 3, 0)], 1, lambda x, y, c: plotted.append((x, y, c)))
    assert count == len(plotted) == 4
    assert {c for _, _, c in plotted} == {Algorithm.BRESENHAM.color}
    assert [(x, y) for x, y, _ in plotted] == [(x, 0) for x in range(4)]


def test_run_algorithm_repeats_runs():
    segments = [Line(0, 0, 5, 2), Line(1, 4, 3, 0)]
    once = run_algorithm(Algorithm.INCREMENTAL, segments, 1)
    assert run_algorithm(Algorithm.INCREMENTAL, segments, 3) == 3 * once


def test_canvas_save_writes_p6_header_and_white_pixels(tmp_path):
    canvas = ImageCanvas(4)
    path = tmp_path / "out.ppm"
    canvas.save(path)
    data = path.read_bytes()
    header = b"P6\n4 4\n255\n"
    assert data.startswith(header)
    body = data[len(header):]
    assert body == b"\xff" * (4 * 4 * 3)


def test_canvas_plot_stores_x_as_row(tmp_path):
    canvas = ImageCanvas(4)
    canvas.plot(1, 2, (255, 0, 0))
    path = tmp_path / "out.ppm"
    canvas.save(path)
    body = path.read_bytes()[len(b"P6\n4 4\n255\n"):]
    offset = (1 * 4 + 2) * 3
    assert body[offset:offset + 3] == bytes((255, 0, 0))
    assert body.count(b"\x00") == 2


def test_canvas_clear_restores_white():
    canvas = ImageCanvas(3)
    canvas.plot(0, 0, (0, 0, 0))
    canvas.clear()
    assert canvas.pixels == bytearray(b"\xff" * 27)


def test_canvas_plot_out_of_range():
    canvas = ImageCanvas(3)
    with pytest.raises(IndexError):
        canvas.plot(3, 0, (0, 0, 0))


def test_main_requires_three_arguments(capsys):
    assert main(["10", "5"]) == 1
    assert "at least four arguments" in capsys.readouterr().out


def test_main_rejects_zero_lines(capsys):
    assert main(["10", "0", "1"]) == 1
    assert "numberOfLines" in capsys.readouterr().err


def test_main_rejects_non_numeric_argument(capsys):
    assert main(["10", "x", "1"]) == 1
    assert "invalid argument x" in capsys.readouterr().err