import pytest

from rasterkit.texture import Texture, TextureFormatError, load_texture, parse_texture


def _gimp_lines(width, height, texels):
    lines = ["P3\n", "# Created by GIMP version 3.0.0 PNM plug-in\n", f"{width} {height}\n", "255\n"]
    for r, g, b in texels:
        lines.extend([f"{r}\n", f"{g}\n", f"{b}\n"])
    return lines


TEXELS = [(10, 20, 30), (40, 50, 60), (70, 80, 90), (100, 110, 120), (130, 140, 150), (160, 170, 180)]


def test_parse_reads_dimensions_and_rows():
    texture = parse_texture(_gimp_lines(3, 2, TEXELS), "brick.ppm")
    assert texture.width == 3
    assert texture.height == 2
    assert texture.filepath == "brick.ppm"
    assert texture.texels[0] == TEXELS[:3]
    assert texture.texels[1] == TEXELS[3:]


def test_texel_lookup_and_wrapping():
    texture = parse_texture(_gimp_lines(3, 2, TEXELS))
    assert texture.texel(1, 1) == TEXELS[4]
    assert texture.texel(4, 3) == texture.texel(1, 1)
    assert texture.texel(3, 2) == texture.texel(0, 0)


def test_rejects_other_formats():
    lines = _gimp_lines(1, 1, [(1, 2, 3)])
    lines[0] = "P6\n"
    with pytest.raises(TextureFormatError):
        parse_texture(lines, "binary.ppm")


def test_rejects_too_many_texels():
    with pytest.raises(TextureFormatError):
        parse_texture(_gimp_lines(1, 1, [(1, 2, 3), (4, 5, 6)]))


def test_rejects_missing_dimensions():
    with pytest.raises(TextureFormatError):
        parse_texture(["P3\n", "# comment\n"])


def test_rejects_non_numeric_values():
    lines = _gimp_lines(1, 1, [(1, 2, 3)])
    lines[5] = "green\n"
    with pytest.raises(TextureFormatError):
        parse_texture(lines)


def test_blank_lines_in_data_are_ignored():
    lines = _gimp_lines(2, 1, [(1, 2, 3), (4, 5, 6)])
    lines.insert(6, "\n")
    texture = parse_texture(lines)
    assert texture.texels == [[(1, 2, 3), (4, 5, 6)]]


def test_load_texture_from_file(tmp_path):
    path = tmp_path / "tile.ppm"
    path.write_text("".join(_gimp_lines(3, 2, TEXELS)), encoding="ascii")
    texture = load_texture(path)
    assert texture == Texture(str(path), 3, 2, [TEXELS[:3], TEXELS[3:]])


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_texture(tmp_path / "absent.ppm")