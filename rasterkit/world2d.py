"""A two-dimensional world of coloured polygons, with rotation and window clipping."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

Color = tuple[int, int, int]
Point = tuple[float, float]


@dataclass
class Vertex:
    """A world-space vertex and the frame-buffer position it maps to."""

    x: float
    y: float
    xf: int = 0
    yf: int = 0


@dataclass
class Polygon:
    """A closed polygon with its solid colour and optional texture.

    The world's y axis grows upwards while the window is described with
    ``y_min`` as its top edge, so ``min_y`` holds the largest y and ``max_y``
    the smallest one.
    """

    vertices: list[Vertex]
    color: Color = (0, 0, 0)
    texture_path: Optional[str] = None
    next_vertices: list[Vertex] = field(default_factory=list)
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0
    needs_clipping: bool = False
    is_out_of_window: bool = False

    def __post_init__(self) -> None:
        if not self.vertices:
            raise ValueError("a polygon needs at least one vertex")
        if not self.next_vertices:
            self.next_vertices = [Vertex(v.x, v.y) for v in self.vertices]
        self.update_boundaries()

    def update_boundaries(self) -> None:
        """Recompute the bounding box from the original vertices."""
        xs = [v.x for v in self.vertices]
        ys = [v.y for v in self.vertices]
        self.min_x = min(xs)
        self.max_x = max(xs)
        self.min_y = max(ys)
        self.max_y = min(ys)

    def reset_next_vertices(self) -> None:
        """Start the working vertex list again from the original vertices."""
        self.next_vertices = [Vertex(v.x, v.y) for v in self.vertices]


@dataclass
class World:
    """Every polygon of the scene, in file order."""

    polygons: list[Polygon] = field(default_factory=list)

    @property
    def total_vertex_count(self) -> int:
        return sum(len(p.vertices) for p in self.polygons)


def _parse_point(token: str) -> Vertex:
    parts = token.split(",")
    if len(parts) != 2:
        raise ValueError(f"invalid vertex {token!r}: expected x,y")
    try:
        return Vertex(float(parts[0]), float(parts[1]))
    except ValueError:
        raise ValueError(f"invalid vertex {token!r}: expected x,y") from None


def _parse_color(line: str) -> Color:
    parts = line.strip().split(",")
    if len(parts) != 3:
        raise ValueError(f"invalid colour {line.strip()!r}: expected r,g,b")
    try:
        r, g, b = (int(part) % 256 for part in parts)
    except ValueError:
        raise ValueError(f"invalid colour {line.strip()!r}: expected r,g,b") from None
    return r, g, b


def parse_world(lines: Iterable[str]) -> World:
    """Build a world from the lines of a world description.

    ``#`` lines are comments. A line starting with ``C`` announces a colour
    ``r,g,b`` on the next line, which applies to every following polygon. A
    line starting with ``T`` announces a texture path on the next line, which
    applies to the next polygon only. The first data line of the description
    is always taken as a texture path. Every other line is a polygon given as
    space separated ``x,y`` vertices.
    """
    world = World()
    read_color = False
    read_texture = True
    color: Color = (0, 0, 0)
    texture: Optional[str] = None
    for raw in lines:
        if raw.startswith("#"):
            continue
        if raw.startswith("C"):
            read_color = True
            continue
        if raw.startswith("T"):
            read_texture = True
            continue
        if read_color:
            color = _parse_color(raw)
            read_color = False
            continue
        if read_texture:
            tokens = raw.split()
            texture = tokens[0] if tokens else None
            read_texture = False
            continue
        tokens = raw.split()
        if not tokens:
            continue
        vertices = [_parse_point(token) for token in tokens]
        world.polygons.append(Polygon(vertices, color, texture))
        texture = None
    return world


def load_world(path) -> World:
    """Read a world description from a file."""
    with open(path, "r", encoding="utf-8") as handle:
        return parse_world(handle)


def rotate(world: World, xc: float, yc: float, angle_degree: int) -> None:
    """Rotate every polygon's original vertices around ``(xc, yc)``."""
    radians = angle_degree * math.pi / 180
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    tx = xc - xc * cos_a + yc * sin_a
    ty = yc - xc * sin_a - yc * sin_a
    for polygon in world.polygons:
        for vertex in polygon.vertices:
            x, y = vertex.x, vertex.y
            vertex.x = cos_a * x - sin_a * y + tx
            vertex.y = sin_a * x + cos_a * y + ty
        polygon.update_boundaries()


def mark_polygons_for_clipping(world: World, x_min: float, y_min: float, x_max: float, y_max: float) -> None:
    """Reset working vertices and flag polygons outside or across the window.

    ``y_min`` is the top edge (the larger y) and ``y_max`` the bottom edge.
    """
    for polygon in world.polygons:
        polygon.reset_next_vertices()
        outside = (
            polygon.max_x < x_min
            or polygon.min_x > x_max
            or polygon.max_y > y_min
            or polygon.min_y < y_max
        )
        inside = (
            polygon.min_x >= x_min
            and polygon.max_x <= x_max
            and polygon.min_y <= y_min
            and polygon.max_y >= y_max
        )
        polygon.is_out_of_window = outside
        polygon.needs_clipping = not outside and not inside


def y_intercept(x0: float, y0: float, x1: float, y1: float, x: float) -> float:
    """The y where the line through two points meets the vertical ``x``."""
    if y0 == y1:
        return y0
    slope = (y1 - y0) / (x1 - x0)
    return slope * (x - x0) + y0


def x_intercept(x0: float, y0: float, x1: float, y1: float, y: float) -> float:
    """The x where the line through two points meets the horizontal ``y``."""
    if x0 == x1:
        return x0
    slope = (x1 - x0) / (y1 - y0)
    return slope * (y - y0) + x0


def _clip(
    points: Sequence[Point],
    inside: Callable[[Point], bool],
    crossing: Callable[[Point, Point], Point],
) -> list[Point]:
    """Clip a closed polygon against one edge, walking edges from the first vertex."""
    result: list[Point] = []
    count = len(points)
    for index in range(count):
        start = points[index]
        end = points[(index + 1) % count]
        start_in, end_in = inside(start), inside(end)
        if start_in and end_in:
            result.append(end)
        elif start_in:
            result.append(crossing(start, end))
        elif end_in:
            result.append(crossing(start, end))
            result.append(end)
    return result


def _as_points(points: Iterable) -> list[Point]:
    return [(p.x, p.y) if isinstance(p, Vertex) else (float(p[0]), float(p[1])) for p in points]


def clip_min_x(points: Sequence, x_min: float) -> list[Point]:
    """Keep the part of a polygon with ``x >= x_min``."""
    return _clip(
        _as_points(points),
        lambda p: p[0] >= x_min,
        lambda a, b: (x_min, y_intercept(a[0], a[1], b[0], b[1], x_min)),
    )


def clip_max_x(points: Sequence, x_max: float) -> list[Point]:
    """Keep the part of a polygon with ``x <= x_max``."""
    return _clip(
        _as_points(points),
        lambda p: p[0] <= x_max,
        lambda a, b: (x_max, y_intercept(a[0], a[1], b[0], b[1], x_max)),
    )


def clip_min_y(points: Sequence, y_min: float) -> list[Point]:
    """Keep the part of a polygon with ``y <= y_min`` (the top edge)."""
    return _clip(
        _as_points(points),
        lambda p: p[1] <= y_min,
        lambda a, b: (x_intercept(a[0], a[1], b[0], b[1], y_min), y_min),
    )


def clip_max_y(points: Sequence, y_max: float) -> list[Point]:
    """Keep the part of a polygon with ``y >= y_max`` (the bottom edge)."""
    return _clip(
        _as_points(points),
        lambda p: p[1] >= y_max,
        lambda a, b: (x_intercept(a[0], a[1], b[0], b[1], y_max), y_max),
    )


def clip_world(world: World, x_min: float, y_min: float, x_max: float, y_max: float) -> None:
    """Clip every polygon that crosses the window into its working vertices."""
    mark_polygons_for_clipping(world, x_min, y_min, x_max, y_max)
    for polygon in world.polygons:
        if not polygon.needs_clipping:
            continue
        points = _as_points(polygon.next_vertices)
        points = clip_min_x(points, x_min)
        points = clip_max_x(points, x_max)
        points = clip_max_y(points, y_max)
        points = clip_min_y(points, y_min)
        polygon.next_vertices = [Vertex(x, y) for x, y in points]