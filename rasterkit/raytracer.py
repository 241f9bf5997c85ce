"""Ray tracing of a sphere scene with diffuse, specular and ambient light and shadows."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from rasterkit.scene import Scene, Sphere, load_scene
from rasterkit.vector import Vector

Color = tuple[int, int, int]

EPSILON = 0.0005
BACKGROUND: Color = (192, 192, 192)
NO_HIT_DISTANCE = 999999999999999.0
WORLD_FILE = "world.txt"
IMAGE_FILE = "scene.ppm"
DEFAULT_WIDTH = 1008
DEFAULT_HEIGHT = 567
SEPARATOR = "---------------------------------------------------"


@dataclass(frozen=True)
class Ray:
    """A half line from ``origin`` along ``direction``."""

    origin: Vector
    direction: Vector


@dataclass(frozen=True)
class Intersection:
    """Where a ray first meets a sphere, at distance parameter ``t``."""

    sphere: Sphere
    point: Vector
    t: float


def intersect_sphere(ray: Ray, sphere: Sphere) -> Optional[Intersection]:
    """The intersection of a ray with a sphere, or None if there is none in front."""
    origin_center = ray.origin - sphere.center
    alpha = ray.direction.dot(ray.direction)
    beta = 2.0 * origin_center.dot(ray.direction)
    gamma = origin_center.dot(origin_center) - sphere.radius ** 2
    discriminant = beta ** 2 - 4 * alpha * gamma
    if discriminant < 0:
        return None
    root = math.sqrt(discriminant)
    t1 = (-beta - root) / (2.0 * alpha)
    t2 = (-beta + root) / (2.0 * alpha)
    if t1 > EPSILON and t1 < t2:
        t = t1
    elif t2 > EPSILON and t2 < t1:
        t = t2
    else:
        return None
    return Intersection(sphere, ray.origin + ray.direction * t, t)


def first_intersection(ray: Ray, spheres: Sequence[Sphere]) -> Optional[Intersection]:
    """The nearest intersection of a ray with any of the spheres."""
    nearest: Optional[Intersection] = None
    t_min = NO_HIT_DISTANCE
    for sphere in spheres:
        hit = intersect_sphere(ray, sphere)
        if hit is not None and hit.t < t_min:
            t_min = hit.t
            nearest = hit
    return nearest


def _to_byte(value: float) -> int:
    return max(0, min(255, int(value)))


def _attenuation(c1: float, c2: float, c3: float, distance: float) -> float:
    denominator = c1 + c2 * distance + c3 * distance * distance
    return math.inf if denominator == 0 else 1.0 / denominator


def shade(ray: Ray, scene: Scene) -> Color:
    """The colour seen along a ray."""
    hit = first_intersection(ray, scene.spheres)
    if hit is None:
        return BACKGROUND
    sphere = hit.sphere
    normal = (hit.point - sphere.center).normalized()
    view = ray.direction * -1
    diffuse = 0.0
    specular = 0.0
    for light in scene.lights:
        to_light = light.point - hit.point
        direction = to_light.normalized()
        distance = to_light.length()
        cos_theta = direction.dot(normal)
        if cos_theta <= 0:
            continue
        fatt = _attenuation(light.c1, light.c2, light.c3, distance)
        reflected = normal * (2 * normal.dot(direction)) - direction
        blocker = first_intersection(Ray(hit.point, direction), scene.spheres)
        if blocker is not None and blocker.t <= distance:
            continue
        diffuse += cos_theta * sphere.kd * fatt * light.lp
        cos_angle = reflected.dot(view)
        if cos_angle > 0:
            specular += cos_angle ** sphere.kn * sphere.ks * fatt * light.lp
    diffuse = min(1.0, diffuse + scene.ambient * sphere.ka)
    specular = min(1.0, specular)
    lit = [_to_byte(channel * diffuse) for channel in sphere.color]
    r, g, b = (_to_byte(channel + specular * (255 - channel)) for channel in lit)
    return r, g, b


def _render_columns(scene: Scene, width: int, height: int) -> Iterator[tuple[int, list[Color]]]:
    """Yield each column of the image, left to right, as ``(x, colours top to bottom)``."""
    span_x = scene.projection_max_x - scene.projection_min_x
    span_y = scene.projection_max_y - scene.projection_min_y
    for i in range(width):
        xw = (i + 0.5) * span_x / width + scene.projection_min_x
        column = []
        for j in range(height):
            yw = (j + 0.5) * span_y / height + scene.projection_min_y
            direction = (Vector(xw, yw, 0.0) - scene.eye).normalized()
            column.append(shade(Ray(scene.eye, direction), scene))
        yield i, column


def render(scene: Scene, width: int, height: int) -> list[list[Color]]:
    """Trace one ray per pixel; the result is indexed ``[y][x]``."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    pixels: list[list[Color]] = [[BACKGROUND] * width for _ in range(height)]
    for x, column in _render_columns(scene, width, height):
        for y, color in enumerate(column):
            pixels[y][x] = color
    return pixels


def write_ppm(pixels: Sequence[Sequence[Color]], width: int, height: int, path) -> None:
    """Write pixels indexed ``[y][x]`` as a plain-text P3 image."""
    with open(path, "w", encoding="ascii") as image_file:
        image_file.write(f"P3\n{width} {height}\n255\n")
        for row in pixels[:height]:
            image_file.write("".join(f"{r} {g} {b} " for r, g, b in row[:width]))
            image_file.write("\n")


def _show_on_screen(scene: Scene, width: int, height: int) -> int:
    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((width, height))
    except pygame.error as error:
        print(f"SDL could not initialize! SDL_Error: {error}")
        return 1
    pygame.display.set_caption("Ray tracer")
    try:
        screen.fill((255, 255, 255))
        pygame.display.flip()
        for x, column in _render_columns(scene, width, height):
            for y, color in enumerate(column):
                screen.set_at((x, y), color)
            pygame.display.update(pygame.Rect(x, 0, 1, height))
            pygame.event.pump()
        image = screen.copy()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == pygame.WINDOWEXPOSED:
                    screen.blit(image, (0, 0))
                    pygame.display.flip()
            pygame.time.wait(16)
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the scene in the current directory to the screen or to an image."""
    parser = argparse.ArgumentParser(description="Ray trace a scene of spheres.")
    parser.parse_args(argv)

    print("Generating scene please wait... \n")
    print(SEPARATOR + "\n")
    try:
        scene = load_scene(WORLD_FILE)
    except OSError as error:
        print(f"Failed to open file: {error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    eye = scene.eye
    print("Universal world created")
    print(f"Sphere count: {len(scene.spheres)}")
    print(f"Lights count: {len(scene.lights)}")
    print(f"Eye: ({eye.x:f}, {eye.y:f}, {eye.z:f})")
    print(
        f"Projection window: ({scene.projection_min_x:f}, {scene.projection_min_y:f}, "
        f"{scene.projection_max_x:f}, {scene.projection_max_y:f})"
    )
    print(SEPARATOR + "\n")
    sys.stdout.flush()

    if scene.output_to_screen:
        return _show_on_screen(scene, DEFAULT_WIDTH, DEFAULT_HEIGHT)

    pixels = render(scene, DEFAULT_WIDTH, DEFAULT_HEIGHT)
    print(f"Saving image to {IMAGE_FILE}...")
    try:
        write_ppm(pixels, DEFAULT_WIDTH, DEFAULT_HEIGHT, IMAGE_FILE)
    except OSError:
        print("Error: Cannot open file for writing.", file=sys.stderr)
        return 1
    print(f"Image saved to {IMAGE_FILE}")
    return 0


if __name__ == "__main__":
    sys.exit(main())