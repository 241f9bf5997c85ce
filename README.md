# rasterkit

A small toolkit of classic raster graphics techniques, with three programs
built on it:

- **rasterkit-benchmark** times four line drawing algorithms (brute force,
  incremental, incremental v2 and Bresenham) on random lines.
- **rasterkit-viewer** shows a 2D world of polygons with clipping, scanline
  filling, textures, Bezier curves, zoom, pan and rotation.
- **rasterkit-raytrace** renders spheres lit by point lights with diffuse,
  specular and ambient shading and shadows.

## Installation

```
pip install .
```

Windowed output uses pygame, which is installed with the package.

## Line algorithm benchmark

```
rasterkit-benchmark <resolution> <numberOfLines> <numberOfRuns>
```

At least three arguments are required; each must be a whole number (decimal,
octal with a leading `0`, or hexadecimal with `0x`), and the first three must
be greater than zero. Further arguments are checked to be numbers and
otherwise ignored.

One set of random lines is generated per pass and drawn with each algorithm
in turn; the processor time each algorithm takes is printed. The program
makes three passes:

1. with no output;
2. with image output, writing `BruteForceOutput.ppm`, `IncrementalOutput.ppm`,
   `IncrementalV2Output.ppm` and `BresenhamV2Output.ppm` (binary P6) to the
   working directory;
3. on screen, in a window, waiting for Enter between algorithms.

At the end it waits for Enter once more.

## 2D world viewer

```
rasterkit-viewer
```

The viewer reads `car.txt` (the polygons), `my_signature.txt` (Bezier
curves) and `textures/default_texture.ppm` from the working directory, plus
every texture the world refers to, and opens a 1920×1080 window.

Keys:

- `1` draw polygon outlines only
- `2` fill polygons with their solid colours
- `3` fill polygons with their own textures (solid colour where a polygon has none)
- `4` fill every polygon with the default texture
- `r` rotate the world 45 degrees about the centre of the frame
- `F5` reset the view, the zoom and the mode, and reload the world

Every third step of the mouse wheel zooms in or out around the pointer.
Dragging with the left button pans the view. The signature is drawn over the
world in magenta.

### World file

Lines starting with `#` are comments. A line starting with `C` is followed by
a line `r,g,b` giving the colour of all the polygons that follow. A line
starting with `T` is followed by a line holding a texture path for the next
polygon only. The first data line of the file is always read as a texture
path. Any other line is a polygon: vertices `x,y` separated by spaces.

### Signature file

Lines starting with `#` are comments. A line starting with `S` is followed by
a line holding the number of samples for the curves that follow. Any other
line is a curve: control points `x,y` separated by spaces.

### Textures

Textures are plain (`P3`) PPM files in the layout GIMP writes: the `P3` line,
a comment, the width and height, the maximum value, then one colour component
per line. Comment lines count towards the four header lines. Textures repeat
across the polygons they fill.

## Ray tracer

```
rasterkit-raytrace
```

Reads the scene from `world.txt` in the working directory and renders it at
1008×567. Depending on the scene's output flag it either draws the image in a
window, column by column, and keeps it open until the window is closed, or
writes it to `scene.ppm` (plain P3). Pixels that hit no sphere are grey.

### Scene file

Lines starting with `#` are comments. Each section header is a line whose
first letter names it, followed by its data lines:

- `O` then `1` to show on screen, anything else to write `scene.ppm`
- `P` then `minX,minY,maxX,maxY`, the projection window
- `E` then `x,y,z`, the eye
- `A` then the ambient light intensity
- `S` then the centre `x,y,z`, then `radius,kd,ka,ks,kn`, then `r,g,b`
- `L` then the position `x,y,z`, then `power,c1,c2,c3`, then `r,g,b`

## Using the library

The modules can be used on their own:

- `rasterkit.lines`: `Line` and the four line algorithms `brute_force`,
  `incremental`, `incremental_v2` and `bresenham`, each yielding the pixels
  of a segment
- `rasterkit.benchmark`: `Algorithm`, `ImageCanvas` (a square buffer saved as
  P6), `random_lines`, `run_algorithm`, `parse_number_argument` and
  `validate_positive`
- `rasterkit.world2d`: `World`, `Polygon` and `Vertex`; `parse_world` and
  `load_world`, `rotate`, and Sutherland–Hodgman style clipping with
  `clip_min_x`, `clip_max_x`, `clip_min_y`, `clip_max_y` and `clip_world`
- `rasterkit.signature`: `Signature` and `Curve`; `parse_signature` and
  `load_signature`
- `rasterkit.texture`: `Texture`, `parse_texture`, `load_texture` and
  `TextureFormatError`
- `rasterkit.raster`: `FrameBuffer`, `ColoringMode`, `bresenham_points`,
  `bezier_points`, `borders_from_polygon`, `scanline_intersections`,
  `spans_for_scanline` and `fill_polygon`
- `rasterkit.viewer`: `ViewWindow` (world-to-frame mapping, pan and zoom),
  `Viewer` (renders a world and signature into a `FrameBuffer` without a
  window) and `load_textures`
- `rasterkit.vector`: a 3D `Vector` with `+`, `-`, scalar `*`, `dot`,
  `cross`, `length` and `normalized`
- `rasterkit.scene`: `Scene`, `Sphere`, `LightSource`, `parse_scene` and
  `load_scene`
- `rasterkit.raytracer`: `Ray`, `Intersection`, `intersect_sphere`,
  `first_intersection`, `shade`, `render` (pixels indexed `[y][x]`) and
  `write_ppm`

Example:

```python
from rasterkit.lines import Line, bresenham
from rasterkit.scene import load_scene
from rasterkit.raytracer import render, write_ppm

print(list(bresenham(Line(0, 0, 4, 2))))

scene = load_scene("world.txt")
pixels = render(scene, 320, 180)
write_ppm(pixels, 320, 180, "small.ppm")
```

## Running the tests

```
pip install .[test]
pytest
```