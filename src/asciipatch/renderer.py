import logging

import numpy as np

from asciipatch.engine import LuminanceImage, RenderConfig
from asciipatch.sampling import (
    brightness_to_index,
    compute_grid,
    covering_brightness,
    luminance_array,
    patch_brightness,
)

logger = logging.getLogger(__name__)


def render(image: LuminanceImage, config: RenderConfig | None = None) -> list[str]:
    """Render an image as lines of palette glyphs, top row first."""
    if config is None:
        config = RenderConfig()
    config.validate()

    lum = luminance_array(image)
    if config.cover_edges:
        cols = min(config.width, image.width)
        rows = min(config.height, image.height)
        logger.debug(f"Covering {image.width}x{image.height} image with a {cols}x{rows} grid")
        brightness = covering_brightness(lum, cols, rows)
    else:
        grid = compute_grid(image.width, image.height, config.width, config.height)
        logger.debug(
            f"Sampling {image.width}x{image.height} image as {grid.cols}x{grid.rows} patches "
            f"of {grid.patch_width}x{grid.patch_height}"
        )
        brightness = patch_brightness(lum, grid)

    indices = brightness_to_index(brightness, config.bias, len(config.palette))
    glyphs = np.array(list(config.palette))
    return ["".join(glyphs[row]) for row in indices]
