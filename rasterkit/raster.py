"""Frame buffer, Bresenham lines, Bezier curves and scan-line polygon filling."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence

from rasterkit.signature import Curve
from rasterkit.texture import Texture
from rasterkit.world2d import Polygon

Color = tuple[int, int, int]
Point = tuple[int, int]

WHITE: Color = (255, 255, 255)


class ColoringMode(Enum):
    """How polygons are painted."""

    LINES = -1
    SOLID = 0
    TEXTURES = 1
    ONE_TEXTURE = 2


class FrameBuffer:
    """An RGB image addressed by ``(x, y)``, stored row by row in ``data``."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError("frame buffer dimensions must be positive")
        self.width = width
        self.height = height
        self.data = bytearray(bytes(WHITE) * (width * height))

    def clear(self) -> None:
        """Paint every pixel white."""
        self.data[:] = bytes(WHITE) * (self.width * self.height)

    def _offset(self, x: int, y: int) -> Optional[int]:
        if 0 <= x < self.width and 0 <= y < self.height:
            return (y * self.width + x) * 3
        return None

    def plot(self, x: int, y: int, color: Color) -> None:
        """Set a pixel; pixels outside the buffer are dropped."""
        offset = self._offset(x, y)
        if offset is not None:
            self.data[offset:offset + 3] = bytes(color)

    def plot_texel(self, x: int, y: int, texture: Texture) -> None:
        """Set a pixel to the texel that tiles onto it."""
        self.plot(x, y, texture.texel(x, y))

    def pixel(self, x: int, y: int) -> Color:
        """The colour of a pixel."""
        offset = self._offset(x, y)
        if offset is None:
            raise IndexError(f"pixel ({x}, {y}) outside a {self.width}x{self.height} buffer")
        r, g, b = self.data[offset:offset + 3]
        return r, g, b


@dataclass
class Border:
    """A polygon edge in frame coordinates with ``y0 >= y1``."""

    x0: int
    y0: int
    x1: int
    y1: int
    active: bool = False

    @property
    def is_horizontal(self) -> bool:
        return self.y0 == self.y1


@dataclass
class IntersectionPoint:
    """Where an edge crosses a scan line, and whether it is one of its ends."""

    x: int
    is_y_low: bool = False
    is_y_high: bool = False


def bresenham_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point]:
    """The pixels of a segment, both ends included, for any octant."""
    step_x = 1 if x0 <= x1 else -1
    step_y = 1 if y0 <= y1 else -1
    shallow = abs(x1 - x0) >= abs(y1 - y0)
    if shallow:
        major, minor = abs(x1 - x0), abs(y1 - y0)
    else:
        major, minor = abs(y1 - y0), abs(x1 - x0)
    straight = 2 * minor
    diagonal = 2 * (minor - major)
    decision = 2 * minor - major
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


def binomial_coefficient(n: int, i: int) -> int:
    """n choose i."""
    return math.comb(n, i)


def bezier_points(curve: Curve) -> Iterator[Point]:
    """Sample a Bezier curve ``sample_count + 1`` times, rounding to pixels."""
    points = curve.control_points
    samples = curve.sample_count
    if not points or samples <= 0:
        return
    n = len(points) - 1
    weights = [binomial_coefficient(n, i) for i in range(n + 1)]
    for j in range(samples + 1):
        t = j / samples
        x = y = 0.0
        for i, ((px, py), weight) in enumerate(zip(points, weights)):
            coefficient = weight * (1 - t) ** (n - i) * t ** i
            x += coefficient * px
            y += coefficient * py
        yield int(x + 0.5), int(y + 0.5)


def borders_from_polygon(polygon: Polygon) -> list[Border]:
    """The edges of a polygon's working vertices, each oriented with ``y0 >= y1``."""
    vertices = polygon.next_vertices
    count = len(vertices)
    borders = []
    for index, start in enumerate(vertices):
        end = vertices[(index + 1) % count]
        if start.yf >= end.yf:
            borders.append(Border(start.xf, start.yf, end.xf, end.yf))
        else:
            borders.append(Border(end.xf, end.yf, start.xf, start.yf))
    borders.sort(key=lambda border: border.y0)
    return borders


def _edge_points(border: Border) -> Iterator[tuple[int, int]]:
    if border.x0 == border.x1:
        for y in range(border.y1, border.y0 + 1):
            yield border.x0, y
        return
    slope = (border.x1 - border.x0) / (border.y0 - border.y1)
    x = float(border.x1)
    yield border.x1, border.y1
    for y in range(border.y1 + 1, border.y0 + 1):
        x -= slope
        yield int(x + 0.5), y


def scanline_intersections(borders: Sequence[Border], height: int) -> list[list[IntersectionPoint]]:
    """Intersections of the edges with scan lines ``0`` to ``height``, by scan line.

    An edge takes part when it is not horizontal and its upper end ``y1`` lies
    on one of the scan lines; edges are walked from the highest scan line down.
    """
    rows: list[list[IntersectionPoint]] = [[] for _ in range(height + 1)]
    for border in borders:
        border.active = False
    candidates = [b for b in borders if not b.is_horizontal and 0 <= b.y1 <= height]
    for border in sorted(candidates, key=lambda b: -b.y1):
        border.active = True
        for x, y in _edge_points(border):
            if 0 <= y <= height:
                rows[y].append(IntersectionPoint(x, is_y_low=y == border.y0, is_y_high=y == border.y1))
    return rows


def spans_for_scanline(points: Iterable[IntersectionPoint]) -> list[tuple[int, int]]:
    """Pair the intersections of one scan line into the spans to fill."""
    ordered = sorted(points, key=lambda point: point.x)
    spans: list[tuple[int, int]] = []
    start: Optional[int] = None
    end: Optional[int] = None
    index = 0
    count = len(ordered)
    while index < count:
        current = ordered[index]
        following = ordered[index + 1] if index < count - 1 else None
        if following is not None and (
            (current.is_y_low and following.is_y_low) or (current.is_y_high and following.is_y_high)
        ):
            if start is None:
                start, end = current.x, following.x
            index += 1
        elif following is not None and (
            (current.is_y_low and following.is_y_high) or (current.is_y_high and following.is_y_low)
        ):
            if start is None:
                start = following.x
                index += 2
                continue
            if end is None:
                end = following.x
                index += 1
        elif start is None:
            start = current.x
            index += 1
            continue
        elif end is None:
            end = current.x
        if start is not None and end is not None:
            spans.append((start, end))
            start = end = None
        index += 1
    return spans


def fill_polygon(
    framebuffer: FrameBuffer,
    polygon: Polygon,
    mode: ColoringMode,
    texture: Optional[Texture] = None,
) -> None:
    """Fill a polygon's working outline with its colour or with a texture."""
    mode = ColoringMode(mode)
    if mode is ColoringMode.LINES:
        return
    borders = borders_from_polygon(polygon)
    rows = scanline_intersections(borders, framebuffer.height)
    for scanline in range(framebuffer.height, -1, -1):
        for start, end in spans_for_scanline(rows[scanline]):
            for x in range(start, end + 1):
                if mode is not ColoringMode.SOLID and texture is not None:
                    framebuffer.plot_texel(x, scanline, texture)
                else:
                    framebuffer.plot(x, scanline, polygon.color)