"""A three-dimensional scene of spheres and point lights read from a text description."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from rasterkit.vector import Vector

Color = tuple[int, int, int]

_MARKERS = {
    "O": "output",
    "P": "projection",
    "E": "eye",
    "S": "sphere",
    "L": "light",
    "A": "ambient",
}

# When several sections are pending, the first one in this order reads the next line.
_PRIORITY = (
    "output",
    "eye",
    "projection",
    "ambient",
    "sphere",
    "sphere_factors",
    "sphere_color",
    "light",
    "light_factors",
    "light_color",
)


@dataclass
class Sphere:
    """A sphere with its lighting coefficients and colour."""

    center: Vector
    radius: float = 0.0
    kd: float = 0.0
    ka: float = 0.0
    ks: float = 0.0
    kn: int = 0
    color: Color = (0, 0, 0)


@dataclass
class LightSource:
    """A point light with its power and attenuation coefficients."""

    point: Vector
    lp: float = 0.0
    c1: float = 0.0
    c2: float = 0.0
    c3: float = 0.0
    color: Color = (0, 0, 0)


@dataclass
class Scene:
    """Spheres, lights, the eye and the projection window of a scene."""

    spheres: list[Sphere] = field(default_factory=list)
    lights: list[LightSource] = field(default_factory=list)
    eye: Vector = Vector(0.0, 0.0, 0.0)
    output_to_screen: bool = False
    projection_min_x: float = 0.0
    projection_min_y: float = 0.0
    projection_max_x: float = 0.0
    projection_max_y: float = 0.0
    ambient: float = 0.0


def _numbers(line: str, count: int, what: str) -> list[float]:
    parts = line.strip().split(",")
    if len(parts) < count:
        raise ValueError(f"invalid {what} {line.strip()!r}: expected {count} values")
    try:
        return [float(part) for part in parts[:count]]
    except ValueError:
        raise ValueError(f"invalid {what} {line.strip()!r}") from None


def _vector(line: str, what: str) -> Vector:
    x, y, z = _numbers(line, 3, what)
    return Vector(x, y, z)


def _color(line: str) -> Color:
    parts = line.strip().split(",")
    if len(parts) < 3:
        raise ValueError(f"invalid colour {line.strip()!r}: expected r,g,b")
    try:
        r, g, b = (int(part) & 0xFF for part in parts[:3])
    except ValueError:
        raise ValueError(f"invalid colour {line.strip()!r}: expected r,g,b") from None
    return r, g, b


def _sphere_factors(line: str, sphere: Sphere) -> None:
    parts = line.strip().split(",")
    if len(parts) < 5:
        raise ValueError(f"invalid sphere factors {line.strip()!r}: expected 5 values")
    try:
        sphere.radius, sphere.kd, sphere.ka, sphere.ks = (float(p) for p in parts[:4])
        sphere.kn = int(parts[4])
    except ValueError:
        raise ValueError(f"invalid sphere factors {line.strip()!r}") from None


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from the lines of a scene description.

    ``#`` lines are comments. A line starting with a section letter announces
    the data on the following lines: ``O`` the output flag (``1`` for screen),
    ``P`` the projection window ``minX,minY,maxX,maxY``, ``E`` the eye
    ``x,y,z``, ``A`` the ambient intensity, ``S`` a sphere (centre, then
    ``radius,kd,ka,ks,kn``, then ``r,g,b``) and ``L`` a light (position, then
    ``lp,c1,c2,c3``, then ``r,g,b``).
    """
    scene = Scene()
    pending: set[str] = set()
    for raw in lines:
        if raw.startswith("#"):
            continue
        marker = _MARKERS.get(raw[:1])
        if marker is not None:
            pending.add(marker)
            continue
        if not raw.strip():
            continue
        state = next((name for name in _PRIORITY if name in pending), None)
        if state is None:
            continue
        pending.discard(state)
        if state == "output":
            scene.output_to_screen = raw.startswith("1")
        elif state == "eye":
            scene.eye = _vector(raw, "eye")
        elif state == "projection":
            (
                scene.projection_min_x,
                scene.projection_min_y,
                scene.projection_max_x,
                scene.projection_max_y,
            ) = _numbers(raw, 4, "projection window")
        elif state == "ambient":
            (scene.ambient,) = _numbers(raw, 1, "ambient intensity")
        elif state == "sphere":
            scene.spheres.append(Sphere(_vector(raw, "sphere centre")))
            pending.add("sphere_factors")
        elif state == "sphere_factors":
            _sphere_factors(raw, scene.spheres[-1])
            pending.add("sphere_color")
        elif state == "sphere_color":
            scene.spheres[-1].color = _color(raw)
        elif state == "light":
            scene.lights.append(LightSource(_vector(raw, "light position")))
            pending.add("light_factors")
        elif state == "light_factors":
            light = scene.lights[-1]
            light.lp, light.c1, light.c2, light.c3 = _numbers(raw, 4, "light factors")
            pending.add("light_color")
        elif state == "light_color":
            scene.lights[-1].color = _color(raw)
    return scene


def load_scene(path) -> Scene:
    """Read a scene description from a file."""
    with open(path, "r", encoding="utf-8") as handle:
        return parse_scene(handle)