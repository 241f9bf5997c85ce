"""Interactive viewer for a polygon world, with panning, zooming, rotation and fills."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from rasterkit.raster import (
    ColoringMode,
    FrameBuffer,
    bezier_points,
    bresenham_points,
    fill_polygon,
)
from rasterkit.signature import Signature, load_signature
from rasterkit.texture import Texture, TextureFormatError, load_texture
from rasterkit.world2d import Polygon, World, clip_world, load_world, rotate

Color = tuple[int, int, int]

WORLD_FILE = "car.txt"
SIGNATURE_FILE = "my_signature.txt"
DEFAULT_TEXTURE_PATH = "textures/default_texture.ppm"
DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
OUTLINE_COLOR: Color = (0, 0, 0)
SIGNATURE_COLOR: Color = (255, 0, 239)
ROTATION_DEGREES = 45
SEPARATOR = "---------------------------------------------------"

_INITIAL_BOUNDS = (0.0, 1080.0, 1920.0, 0.0)


@dataclass
class ViewWindow:
    """The region of the world shown on screen.

    ``y_min`` is the top edge of the window and ``y_max`` its bottom edge.
    ``width`` and ``height`` are the size of the frame the window maps onto.
    """

    x_min: float = _INITIAL_BOUNDS[0]
    y_min: float = _INITIAL_BOUNDS[1]
    x_max: float = _INITIAL_BOUNDS[2]
    y_max: float = _INITIAL_BOUNDS[3]
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    def map_x(self, xw: float) -> int:
        """Frame column of a world x coordinate."""
        return int(self.width * ((xw - self.x_min) / (self.x_max - self.x_min)) + 0.5)

    def map_y(self, yw: float) -> int:
        """Frame row of a world y coordinate."""
        return int(self.height * ((yw - self.y_max) / (self.y_min - self.y_max)) + 0.5)

    def translate(self, dx: float, dy: float) -> None:
        """Move the window by a world-space offset."""
        self.x_min += dx
        self.x_max += dx
        self.y_min += dy
        self.y_max += dy

    def zoom(self, scale: float, mouse_x: int, mouse_y: int, width: int, height: int) -> None:
        """Scale the window around the world point under the mouse."""
        xc = self.x_min + (mouse_x / width) * (self.x_max - self.x_min)
        yc = self.y_max + (mouse_y / height) * (self.y_min - self.y_max)
        shift_x = xc - scale * xc
        shift_y = yc - scale * yc
        self.x_min, self.x_max = scale * self.x_min + shift_x, scale * self.x_max + shift_x
        self.y_min, self.y_max = scale * self.y_min + shift_y, scale * self.y_max + shift_y

    def reset(self) -> None:
        """Return to the initial window."""
        self.x_min, self.y_min, self.x_max, self.y_max = _INITIAL_BOUNDS


def load_textures(world: World, default_path: str = DEFAULT_TEXTURE_PATH) -> dict[str, Texture]:
    """Load every texture the world refers to, and the default texture, once each."""
    textures: dict[str, Texture] = {}
    for path in [p.texture_path for p in world.polygons if p.texture_path] + [default_path]:
        if path not in textures:
            textures[path] = load_texture(path)
    return textures


class Viewer:
    """Renders a world and a signature into a frame buffer through a view window."""

    def __init__(
        self,
        world: World,
        signature: Optional[Signature] = None,
        textures: Optional[Mapping[str, Texture]] = None,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ):
        self.world = world
        self.signature = signature
        self.textures = dict(textures or {})
        self.width = width
        self.height = height
        self.framebuffer = FrameBuffer(width, height)
        self.window = ViewWindow(width=width, height=height)
        self.mode = ColoringMode.LINES
        self.z_scale = 1.0
        self.default_texture_path = DEFAULT_TEXTURE_PATH
        self._zoom_steps = 0
        self._did_zoom_in = False
        self._did_zoom_out = False

    def _texture_for(self, polygon: Polygon) -> Optional[Texture]:
        if self.mode is ColoringMode.TEXTURES and polygon.texture_path:
            return self.textures.get(polygon.texture_path)
        if self.mode is ColoringMode.ONE_TEXTURE:
            return self.textures.get(self.default_texture_path)
        return None

    def _outline(self, polygon: Polygon) -> None:
        vertices = polygon.next_vertices
        if not vertices:
            return
        for vertex in vertices:
            vertex.xf = self.window.map_x(vertex.x)
            vertex.yf = self.window.map_y(vertex.y)
        if self.mode is not ColoringMode.LINES:
            return
        for start, end in zip(vertices, vertices[1:] + vertices[:1]):
            for x, y in bresenham_points(start.xf, start.yf, end.xf, end.yf):
                self.framebuffer.plot(x, y, OUTLINE_COLOR)

    def render(self) -> FrameBuffer:
        """Draw the world and the signature into the frame buffer and return it."""
        framebuffer = self.framebuffer
        framebuffer.clear()
        window = self.window
        clip_world(self.world, window.x_min, window.y_min, window.x_max, window.y_max)
        for polygon in self.world.polygons:
            if polygon.is_out_of_window:
                continue
            self._outline(polygon)
            if self.mode is not ColoringMode.LINES:
                fill_polygon(framebuffer, polygon, self.mode, self._texture_for(polygon))
        if self.signature is not None:
            for curve in self.signature.curves:
                if curve.control_points:
                    for x, y in bezier_points(curve):
                        framebuffer.plot(x, y, SIGNATURE_COLOR)
        return framebuffer

    def rotate(self) -> None:
        """Rotate the world around the frame's centre."""
        rotate(self.world, self.width // 2, self.height // 2, ROTATION_DEGREES)

    def pan(self, start_x: int, start_y: int, end_x: int, end_y: int) -> bool:
        """Move the window by a mouse drag; return whether it moved."""
        delta_x = start_x - end_x
        delta_y = start_y - end_y
        if delta_x == 0 and delta_y == 0:
            return False
        window = self.window
        world_dx = int((delta_x / self.width) * (window.x_max - window.x_min))
        world_dy = int((delta_y / self.height) * (window.y_min - window.y_max))
        window.translate(world_dx, world_dy)
        return True

    def _scroll(self, wheel_y: int, mouse_x: int, mouse_y: int) -> bool:
        """Count wheel steps and zoom every third step; return whether it zoomed."""
        if wheel_y > 0:
            self._zoom_steps += 1
        elif wheel_y < 0:
            self._zoom_steps -= 1
        if self._zoom_steps == 3:
            self._did_zoom_in = True
            if self._did_zoom_out:
                self.z_scale = 1.0
                self._did_zoom_out = False
            self._zoom_steps = 0
            self.z_scale -= 0.05
            if self.z_scale == 0:
                self.z_scale -= 0.05
        elif self._zoom_steps == -3:
            self._did_zoom_out = True
            if self._did_zoom_in:
                self.z_scale = self.z_scale + self.z_scale + 1
                self._did_zoom_in = False
            self._zoom_steps = 0
            self.z_scale += 0.05
            if self.z_scale == 0:
                self.z_scale += 0.05
        else:
            return False
        self.window.zoom(self.z_scale, mouse_x, mouse_y, self.width, self.height)
        return True


def _print_help(world: World) -> None:
    print("Universal world created")
    print(f"Poligon count: {len(world.polygons)}")
    print(f"Vertex count: {world.total_vertex_count}")
    print(SEPARATOR + "\n")
    print("Press the following keys to switch modes:")
    print("  - Press Key '1' to just draw lines.")
    print("  - Press Key '2' to draw lines and coloring.")
    print("  - Press Key '3' to draw lines and fill with different textures.")
    print("  - Press Key '4' to draw lines and fill with  one texture.")
    print("\n")
    print("Additional Controls:")
    print("  - Press Key F5 to reset the image to the initial state..")
    print()
    print("  - Use the mouse wheel to zoom in or out.")
    print()
    print("  - Click and drag the mouse to move the image to another position.")
    print()
    print("  - Press 'r' key to rotate the image 45 degrees on clock direction.")
    sys.stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the viewer window on the world in the current directory."""
    parser = argparse.ArgumentParser(description="Interactive polygon world viewer.")
    parser.parse_args(argv)

    print("Please interact with the program from the UI window \n")
    print(SEPARATOR + "\n")
    try:
        world = load_world(WORLD_FILE)
        signature = load_signature(SIGNATURE_FILE)
        textures = load_textures(world, DEFAULT_TEXTURE_PATH)
    except OSError as error:
        print(f"Failed to open file: {error}", file=sys.stderr)
        return 1
    except (TextureFormatError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    _print_help(world)

    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((DEFAULT_WIDTH, DEFAULT_HEIGHT))
    except pygame.error as error:
        print(f"SDL could not initialize! SDL_Error: {error}")
        return 1
    pygame.display.set_caption("Polygon viewer")

    viewer = Viewer(world, signature, textures, DEFAULT_WIDTH, DEFAULT_HEIGHT)

    def redraw() -> None:
        framebuffer = viewer.render()
        image = pygame.image.frombuffer(bytes(framebuffer.data), (viewer.width, viewer.height), "RGB")
        screen.blit(image, (0, 0))
        pygame.display.flip()
        pygame.time.delay(16)

    modes = {
        pygame.K_1: ColoringMode.LINES,
        pygame.K_2: ColoringMode.SOLID,
        pygame.K_3: ColoringMode.TEXTURES,
        pygame.K_4: ColoringMode.ONE_TEXTURE,
    }
    redraw()
    pan_start: Optional[tuple[int, int]] = None
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == pygame.WINDOWEXPOSED:
                    redraw()
                elif event.type == pygame.KEYUP:
                    if event.key in modes:
                        viewer.mode = modes[event.key]
                        redraw()
                    elif event.key == pygame.K_r:
                        viewer.rotate()
                        redraw()
                    elif event.key == pygame.K_F5:
                        viewer.window.reset()
                        viewer.z_scale = 1.0
                        viewer.mode = ColoringMode.LINES
                        viewer.world = load_world(WORLD_FILE)
                        redraw()
                elif event.type == pygame.MOUSEWHEEL:
                    mouse_x, mouse_y = pygame.mouse.get_pos()
                    if viewer._scroll(event.y, mouse_x, mouse_y):
                        redraw()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and pan_start is None:
                    pan_start = event.pos
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and pan_start is not None:
                    start_x, start_y = pan_start
                    pan_start = None
                    if viewer.pan(start_x, start_y, event.pos[0], event.pos[1]):
                        redraw()
            pygame.time.wait(5)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())