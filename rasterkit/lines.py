"""Line rasterisation algorithms producing the pixels of a segment."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

Point = tuple[int, int]


@dataclass(frozen=True)
class Line:
    """A segment between two integer pixel coordinates."""

    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def is_shallow(self) -> bool:
        """True when the segment is at least as wide as it is tall."""
        return abs(self.x1 - self.x0) >= abs(self.y1 - self.y0)


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _endpoints(line: Line) -> tuple[int, int, int, int]:
    """Endpoints ordered so the dominant axis increases."""
    x0, y0, x1, y1 = line.x0, line.y0, line.x1, line.y1
    if line.is_shallow:
        if x0 > x1:
            return x1, y1, x0, y0
    elif y0 > y1:
        return x1, y1, x0, y0
    return x0, y0, x1, y1


def brute_force(line: Line) -> Iterator[Point]:
    """Evaluate y = m*x + b at every step of the dominant axis."""
    x0, y0, x1, y1 = _endpoints(line)
    if line.is_shallow:
        if x0 == x1:
            yield x0, y0
            return
        slope = (y1 - y0) / (x1 - x0)
        intercept = y0 - slope * x0
        for x in range(x0, x1 + 1):
            yield x, _round(slope * x + intercept)
    else:
        slope = (x1 - x0) / (y1 - y0)
        intercept = x0 - slope * y0
        for y in range(y0, y1 + 1):
            yield _round(slope * y + intercept), y


def incremental(line: Line) -> Iterator[Point]:
    """Accumulate the slope along the dominant axis."""
    x0, y0, x1, y1 = _endpoints(line)
    if line.is_shallow:
        if x0 == x1:
            yield x0, y0
            return
        slope = (y1 - y0) / (x1 - x0)
        y = float(y0)
        for x in range(x0, x1 + 1):
            yield x, _round(y)
            y += slope
    else:
        slope = (x1 - x0) / (y1 - y0)
        x = float(x0)
        for y in range(y0, y1 + 1):
            yield _round(x), y
            x += slope


def incremental_v2(line: Line) -> Iterator[Point]:
    """Step both coordinates by fractional increments from the start point."""
    width = max(abs(line.x1 - line.x0), abs(line.y1 - line.y0))
    if width == 0:
        yield line.x0, line.y0
        return
    x_step = (line.x1 - line.x0) / width
    y_step = (line.y1 - line.y0) / width
    x, y = float(line.x0), float(line.y0)
    for _ in range(width + 1):
        yield _round(x), _round(y)
        x += x_step
        y += y_step


def bresenham(line: Line) -> Iterator[Point]:
    """Integer midpoint algorithm, dispatched over the eight octants."""
    x0, y0, x1, y1 = line.x0, line.y0, line.x1, line.y1
    step_x = 1 if x0 <= x1 else -1
    step_y = 1 if y0 <= y1 else -1
    shallow = line.is_shallow
    if shallow:
        major, minor = abs(x1 - x0), abs(y1 - y0)
    else:
        major, minor = abs(y1 - y0), abs(x1 - x0)

    if shallow and step_x < 0 and step_y < 0:
        # The fifth octant seeds its decision variable from x0 - y1.
        decision = 2 * minor - (x0 - y1)
    else:
        decision = 2 * minor - major
    straight = 2 * minor
    diagonal = 2 * (minor - major)

    x, y = x0, y0
    yield x, y
    for _ in range(major):
        if decision <= 0:
            decision += straight
            if shallow:
                x += step_x
            else:
                y += step_y
        else:
            decision += diagonal
            x += step_x
            y += step_y
        yield x, y