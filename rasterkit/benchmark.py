"""Timing of the line algorithms with no output, image output and screen output."""

from __future__ import annotations

import random
import re
import sys
import time
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from rasterkit import lines as _lines
from rasterkit.lines import Line

Color = tuple[int, int, int]
PlotFunction = Callable[[int, int, Color], None]

WHITE: Color = (255, 255, 255)
SEPARATOR = "------------------------------------"

_STRTOL_BASE0 = re.compile(r"[ \t\n\v\f\r]*[+-]?(?:0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class Algorithm(Enum):
    """The line algorithms in the order they are benchmarked."""

    BRUTE_FORCE = (1, "Brute force", "Brute Force Algorithm", "BruteForceOutput.ppm", (255, 0, 0), _lines.brute_force)
    INCREMENTAL = (2, "Incremental", "Incremental Algorithm", "IncrementalOutput.ppm", (0, 0, 255), _lines.incremental)
    INCREMENTAL_V2 = (
        3,
        "Incremental v2",
        "Incremental V2 Algorithm",
        "IncrementalV2Output.ppm",
        (0, 255, 0),
        _lines.incremental_v2,
    )
    BRESENHAM = (4, "Bresenham", "Bresenham Algorithm", "BresenhamV2Output.ppm", (0, 0, 0), _lines.bresenham)

    def __init__(self, number, label, title, filename, color, draw):
        self.number = number
        self.label = label
        self.title = title
        self.filename = filename
        self.color = color
        self.draw = draw


class ImageCanvas:
    """A square RGB frame buffer that can be written as a binary PPM."""

    def __init__(self, resolution: int):
        self.resolution = resolution
        self.pixels = bytearray(bytes(WHITE) * (resolution * resolution))

    def clear(self) -> None:
        """Paint every pixel white."""
        self.pixels[:] = bytes(WHITE) * (self.resolution * self.resolution)

    def plot(self, x: int, y: int, color: Color) -> None:
        """Set the pixel stored at row ``x``, column ``y``."""
        if not (0 <= x < self.resolution and 0 <= y < self.resolution):
            raise IndexError(f"pixel ({x}, {y}) outside a {self.resolution}x{self.resolution} canvas")
        offset = (x * self.resolution + y) * 3
        self.pixels[offset:offset + 3] = bytes(color)

    def save(self, path) -> None:
        """Write the canvas as a P6 image."""
        header = f"P6\n{self.resolution} {self.resolution}\n255\n".encode("ascii")
        with open(path, "wb") as image_file:
            image_file.write(header)
            image_file.write(self.pixels)


def parse_number_argument(text: str) -> int:
    """Check that ``text`` is a whole number and return its decimal value."""
    if text and not _STRTOL_BASE0.fullmatch(text):
        raise ValueError(f"invalid argument {text} - expecting a number.")
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def validate_positive(value: int, name: str) -> int:
    """Return ``value`` if it is greater than zero."""
    if value <= 0:
        raise ValueError(f"Error: The {name} option must be major than 0.")
    return value


def random_lines(count: int, resolution: int, rng: Optional[random.Random] = None) -> list[Line]:
    """Random segments with every coordinate in ``[0, resolution - 2]``."""
    rng = rng if rng is not None else random.Random(time.time())
    limit = resolution - 1
    return [
        Line(rng.randrange(limit), rng.randrange(limit), rng.randrange(limit), rng.randrange(limit))
        for _ in range(count)
    ]


def run_algorithm(
    algorithm: Algorithm,
    lines: Iterable[Line],
    runs: int,
    plot: Optional[PlotFunction] = None,
) -> int:
    """Draw every line ``runs`` times and return the number of pixels produced."""
    segments = list(lines)
    produced = 0
    for _ in range(runs):
        for line in segments:
            for x, y in algorithm.draw(line):
                if plot is not None:
                    plot(x, y, algorithm.color)
                produced += 1
    return produced


class _NullTarget:
    """Computes the lines without showing them."""

    plot: Optional[PlotFunction] = None

    def pause(self) -> None:
        pass

    def begin(self, algorithm: Algorithm) -> None:
        pass

    def present_run(self) -> None:
        pass

    def finish(self, algorithm: Algorithm) -> None:
        pass


class _ImageTarget(_NullTarget):
    """Writes one PPM file per algorithm."""

    def __init__(self, resolution: int, directory: Path):
        self.canvas = ImageCanvas(resolution)
        self.directory = directory
        self.plot = self.canvas.plot

    def begin(self, algorithm: Algorithm) -> None:
        self.canvas.clear()

    def finish(self, algorithm: Algorithm) -> None:
        self.canvas.save(self.directory / algorithm.filename)


class _ScreenTarget(_NullTarget):
    """Draws into a window, pausing between algorithms."""

    def __init__(self, resolution: int):
        import pygame

        self._pygame = pygame
        pygame.init()
        self.surface = pygame.display.set_mode((resolution, resolution))
        pygame.display.set_caption("Drawing Lines SDL")
        self.surface.fill(WHITE)
        pygame.display.flip()

    def plot(self, x: int, y: int, color: Color) -> None:
        self.surface.set_at((x, y), color)

    def pause(self) -> None:
        print("\nPress Enter to continue the program.")
        input()

    def begin(self, algorithm: Algorithm) -> None:
        self._pygame.display.set_caption(algorithm.title)

    def present_run(self) -> None:
        self._pygame.event.pump()
        self._pygame.display.flip()

    def finish(self, algorithm: Algorithm) -> None:
        self._pygame.display.flip()
        self._pygame.time.delay(16)

    def close(self) -> None:
        self._pygame.quit()


def _draw_all(resolution: int, line_count: int, runs: int, target: _NullTarget) -> None:
    segments = random_lines(line_count, resolution)
    for index, algorithm in enumerate(Algorithm):
        if index:
            target.pause()
        print(f"Running {algorithm.label} algorithm. ", end="", flush=True)
        start = time.process_time()
        target.begin(algorithm)
        for _ in range(runs):
            run_algorithm(algorithm, segments, 1, target.plot)
            target.present_run()
        target.finish(algorithm)
        elapsed = time.process_time() - start
        print(f"Algorithm took {elapsed:.6f} seconds to execute. \n")


def _read_arguments(args: Sequence[str]) -> tuple[int, int, int]:
    names = ("resolution", "numberOfLines", "numberOfRuns")
    values: list[int] = []
    for index, text in enumerate(args):
        value = parse_number_argument(text)
        if index >= len(names):
            continue
        values.append(validate_positive(value, names[index]))
        if index == 0:
            print(f"Resolution set to {value} x {value}")
        elif index == 1:
            print(f"Number of lines set to {value}")
        else:
            print(f"Number of runs set to {value}")
    resolution, line_count, runs = values
    return resolution, line_count, runs


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Benchmark the line algorithms without output, to images and on screen."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print(
            "Error: This program must receive at least four arguments in this order "
            "<resolution> <numberOfLines> <numberOfRuns> <programVersion>."
        )
        return 1
    print(SEPARATOR)
    print("Reading arguments in this order <resolution> <numberOfLines> <numberOfRuns> \n")
    try:
        resolution, line_count, runs = _read_arguments(args)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(SEPARATOR + "\n")

    print("Running version of program with no output")
    print("*****************************************")
    _draw_all(resolution, line_count, runs, _NullTarget())
    print(SEPARATOR + "\n")

    print("Running version of program with image output")
    print("********************************************")
    try:
        _draw_all(resolution, line_count, runs, _ImageTarget(resolution, Path.cwd()))
    except OSError:
        print("\nError: Cannot create or update file.", file=sys.stderr)
        return 1
    print(SEPARATOR + "\n")

    print("Running version of program with on-screen output")
    print("************************************************")
    try:
        screen = _ScreenTarget(resolution)
    except Exception as error:  # pygame reports display failures with its own error type
        print(f"SDL could not initialize! SDL_Error: {error}")
        return 1
    try:
        _draw_all(resolution, line_count, runs, screen)
    finally:
        screen.close()
    print(SEPARATOR + "\n")

    print("\nPress Enter to continue the program.")
    input()
    return 0


if __name__ == "__main__":
    sys.exit(main())