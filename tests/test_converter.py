import io

import numpy as np
from PIL import Image

from asciipatch.converter import image_to_ascii, write_lines
from asciipatch.engine import ArrayImage, RenderConfig


def test_accepts_array_image():
    image = ArrayImage(np.zeros((8, 8), dtype=np.uint8))
    assert image_to_ascii(image, RenderConfig(width=2, height=2)) == "$$\n$$"


def test_accepts_pil_image():
    img = Image.new("RGB", (8, 8), (255, 255, 255))
    assert image_to_ascii(img, RenderConfig(width=2, height=2)) == "  \n  "


def test_accepts_file_path(image_file):
    path = image_file(Image.new("L", (8, 8), 0))
    assert image_to_ascii(path, RenderConfig(width=4, height=1)) == "$$$$"


def test_accepts_str_path(image_file):
    path = image_file(Image.new("L", (8, 8), 0))
    assert image_to_ascii(str(path), RenderConfig(width=1, height=1)) == "$"


def test_gradient_produces_varying_characters():
    img = Image.new("L", (20, 10))
    pixels = img.load()
    for y in range(10):
        for x in range(10, 20):
            pixels[x, y] = 255
    assert image_to_ascii(img, RenderConfig(width=2, height=1)) == "$ "


def test_write_lines_appends_newlines():
    stream = io.StringIO()
    write_lines(["$$", "  "], stream)
    assert stream.getvalue() == "$$\n  \n"


def test_write_lines_empty():
    stream = io.StringIO()
    write_lines([], stream)
    assert stream.getvalue() == ""
