import numpy as np
import pytest

from asciipatch.charsets import EXTENDED, PALETTES, REDUCED
from asciipatch.engine import ArrayImage, RenderConfig


def test_palette_sizes():
    assert len(EXTENDED) == 69
    assert len(REDUCED) == 14
    assert len(set(EXTENDED)) == 69
    assert len(set(REDUCED)) == 14


def test_palettes_run_dense_to_light():
    for palette in PALETTES.values():
        assert palette[0] == "$"
        assert palette[-1] == " "


def test_default_config():
    config = RenderConfig()
    assert (config.width, config.height) == (64, 64)
    assert config.palette == REDUCED
    assert config.bias == 0.8
    assert config.cover_edges is False


def test_from_options_selects_palette():
    assert RenderConfig.from_options(use_extended_char_list=True).palette == EXTENDED
    assert RenderConfig.from_options(use_extended_char_list=False).palette == REDUCED


def test_from_options_maps_bias():
    assert RenderConfig.from_options(char_bias=1.5).bias == 1.5


def test_array_image_indexes_x_then_y():
    pixels = np.array([[1, 2, 3], [4, 5, 6]], dtype=np.uint8)
    image = ArrayImage(pixels)
    assert (image.width, image.height) == (3, 2)
    assert image.luminance(2, 0) == 3
    assert image.luminance(0, 1) == 4


def test_array_image_rejects_colour_array():
    with pytest.raises(ValueError, match="2-D"):
        ArrayImage(np.zeros((2, 2, 3), dtype=np.uint8))


def test_array_image_rejects_empty():
    with pytest.raises(ValueError, match="no pixels"):
        ArrayImage(np.zeros((0, 4), dtype=np.uint8))
