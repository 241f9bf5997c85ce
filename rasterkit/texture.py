"""Textures read from plain-text (P3) PPM files as written by GIMP."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

Color = tuple[int, int, int]


class TextureFormatError(ValueError):
    """Raised when a texture file cannot be understood."""


@dataclass
class Texture:
    """A grid of texels, stored row by row, that repeats in both directions."""

    filepath: str
    width: int
    height: int
    texels: list[list[Color]] = field(default_factory=list)

    def texel(self, x: int, y: int) -> Color:
        """The texel at ``(x, y)``, wrapping around the texture's edges."""
        return self.texels[y % self.height][x % self.width]


def _parse_dimensions(line: str, filepath: str) -> tuple[int, int]:
    tokens = line.split()
    try:
        width, height = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError):
        raise TextureFormatError(f"invalid dimensions {line.strip()!r} in {filepath}") from None
    if width <= 0 or height <= 0:
        raise TextureFormatError(f"dimensions must be positive in {filepath}")
    return width, height


def _parse_channel(line: str, filepath: str) -> int:
    token = line.split()[0]
    try:
        return int(token) & 0xFF
    except ValueError:
        raise TextureFormatError(f"invalid colour value {token!r} in {filepath}") from None


def parse_texture(lines: Iterable[str], filepath: str = "") -> Texture:
    """Build a texture from the lines of a P3 file with one value per line.

    The layout expected is the one GIMP writes: the ``P3`` magic, a comment,
    the width and height, the maximum value, then one channel value per line.
    Comment lines count towards the four header lines.
    """
    line_number = 0
    dimensions: Optional[tuple[int, int]] = None
    texels: list[list[Color]] = []
    pending: list[int] = []
    x = y = 0
    for raw in lines:
        if raw.startswith("#"):
            line_number += 1
            continue
        if line_number == 0 and not raw.startswith("P3"):
            raise TextureFormatError(f"Error: Unsupported file {filepath} format (must be P3)")
        if line_number == 2:
            dimensions = _parse_dimensions(raw, filepath)
            width, height = dimensions
            texels = [[(0, 0, 0)] * width for _ in range(height)]
        if line_number < 4:
            line_number += 1
            continue
        if not raw.strip():
            continue
        if dimensions is None:
            raise TextureFormatError(f"missing dimensions in {filepath}")
        pending.append(_parse_channel(raw, filepath))
        if len(pending) < 3:
            continue
        width, height = dimensions
        if y >= height:
            raise TextureFormatError(f"more texels than {width}x{height} in {filepath}")
        texels[y][x] = (pending[0], pending[1], pending[2])
        pending.clear()
        x += 1
        if x == width:
            x = 0
            y += 1
    if dimensions is None:
        raise TextureFormatError(f"missing dimensions in {filepath}")
    return Texture(filepath, dimensions[0], dimensions[1], texels)


def load_texture(path) -> Texture:
    """Read a texture from a P3 PPM file."""
    with open(path, "r", encoding="ascii") as handle:
        return parse_texture(handle, str(path))