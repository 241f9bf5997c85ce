import math

import pytest

from rasterkit.raytracer import (
    BACKGROUND,
    Ray,
    first_intersection,
    intersect_sphere,
    render,
    shade,
    write_ppm,
)
from rasterkit.scene import LightSource, Scene, Sphere
from rasterkit.vector import Vector

FORWARD = Ray(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, 1.0))


def _sphere(z, radius=1.0, color=(100, 150, 200), ka=1.0, kd=0.0, ks=0.0, kn=1):
    return Sphere(Vector(0.0, 0.0, z), radius, kd, ka, ks, kn, color)


def test_intersection_lies_on_sphere_surface():
    sphere = _sphere(10.0, radius=2.0)
    hit = intersect_sphere(FORWARD, sphere)
    assert hit is not None
    assert hit.sphere is sphere
    assert math.isclose((hit.point - sphere.center).length(), sphere.radius)
    assert hit.t > 0
    assert hit.point.z < sphere.center.z


def test_ray_missing_sphere_gives_none():
    sphere = Sphere(Vector(5.0, 0.0, 10.0), 1.0)
    assert intersect_sphere(FORWARD, sphere) is None


def test_sphere_behind_ray_gives_none():
    assert intersect_sphere(FORWARD, _sphere(-10.0)) is None


def test_ray_starting_inside_sphere_gives_none():
    assert intersect_sphere(FORWARD, _sphere(0.0, radius=5.0)) is None


def test_first_intersection_picks_nearest_sphere():
    near = _sphere(5.0)
    far = _sphere(20.0)
    hit = first_intersection(FORWARD, [far, near])
    assert hit is not None
    assert hit.sphere is near


def test_first_intersection_without_spheres():
    assert first_intersection(FORWARD, []) is None


def test_shade_background_when_nothing_is_hit():
    assert shade(FORWARD, Scene()) == (192, 192, 192)


def test_full_ambient_gives_sphere_colour():
    scene = Scene(spheres=[_sphere(10.0)], ambient=1.0)
    assert shade(FORWARD, scene) == (100, 150, 200)


def test_ambient_scales_colour():
    scene = Scene(spheres=[_sphere(10.0)], ambient=0.5)
    assert shade(FORWARD, scene) == (50, 75, 100)


def test_lit_sphere_is_not_darker_than_ambient():
    sphere = _sphere(10.0, ka=0.2, kd=0.8, ks=0.5, kn=4)
    light = LightSource(Vector(0.0, 0.0, -5.0), 1.0, 1.0, 0.0, 0.0)
    ambient_only = shade(FORWARD, Scene(spheres=[sphere], ambient=0.5))
    lit = shade(FORWARD, Scene(spheres=[sphere], lights=[light], ambient=0.5))
    assert all(a <= b for a, b in zip(ambient_only, lit))
    assert lit != ambient_only


def test_blocked_light_casts_shadow():
    target = _sphere(10.0, ka=0.2, kd=0.8)
    light = LightSource(Vector(0.0, 0.0, -20.0), 1.0, 1.0, 0.0, 0.0)
    ray = Ray(Vector(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
    blocker = Sphere(Vector(0.0, 0.0, -10.0), 1.0)
    ambient_only = shade(ray, Scene(spheres=[target], ambient=0.5))
    shadowed = shade(ray, Scene(spheres=[target, blocker], lights=[light], ambient=0.5))
    assert shadowed == ambient_only


def test_render_empty_scene_is_background():
    scene = Scene(eye=Vector(0.0, 0.0, -10.0), projection_min_x=-1, projection_min_y=-1,
                  projection_max_x=1, projection_max_y=1)
    pixels = render(scene, 4, 3)
    assert len(pixels) == 3
    assert all(len(row) == 4 for row in pixels)
    assert all(color == BACKGROUND for row in pixels for color in row)


def test_render_shows_sphere_in_centre():
    scene = Scene(
        spheres=[_sphere(10.0, radius=3.0)],
        eye=Vector(0.0, 0.0, -10.0),
        projection_min_x=-10,
        projection_min_y=-10,
        projection_max_x=10,
        projection_max_y=10,
        ambient=1.0,
    )
    pixels = render(scene, 5, 5)
    assert pixels[2][2] == (100, 150, 200)
    assert pixels[0][0] == BACKGROUND


def test_render_rejects_empty_image():
    with pytest.raises(ValueError):
        render(Scene(), 0, 5)


def test_write_ppm_layout(tmp_path):
    path = tmp_path / "scene.ppm"
    write_ppm([[(1, 2, 3), (4, 5, 6)]], 2, 1, path)
    assert path.read_text(encoding="ascii") == "P3\n2 1\n255\n1 2 3 4 5 6 \n"


def test_write_ppm_round_trip_of_pixel_values(tmp_path):
    pixels = [[(10, 20, 30), (40, 50, 60)], [(70, 80, 90), (0, 0, 255)]]
    path = tmp_path / "image.ppm"
    write_ppm(pixels, 2, 2, path)
    lines = path.read_text(encoding="ascii").splitlines()
    assert lines[:3] == ["P3", "2 2", "255"]
    values = [int(v) for line in lines[3:] for v in line.split()]
    assert values == [c for row in pixels for pixel in row for c in pixel]