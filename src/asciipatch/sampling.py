import numpy as np

from asciipatch.engine import ArrayImage, LuminanceImage, PatchGrid

MAX_BRIGHTNESS = 255


def compute_grid(image_width: int, image_height: int, width: int, height: int) -> PatchGrid:
    """Size the patch grid for an image and a requested character grid.

    The requested grid is clamped to the image so every patch holds at least
    one pixel. Patch size and patch count both use truncating division, so a
    strip on the right and bottom edges can fall outside every patch.
    """
    grid_width = min(width, image_width)
    grid_height = min(height, image_height)
    patch_width = image_width // grid_width
    patch_height = image_height // grid_height
    return PatchGrid(
        patch_width=patch_width,
        patch_height=patch_height,
        cols=image_width // patch_width,
        rows=image_height // patch_height,
    )


def luminance_array(image: LuminanceImage) -> np.ndarray:
    """Return a (height, width) int64 array of the image's luminance."""
    if isinstance(image, ArrayImage):
        return image.pixels.astype(np.int64)
    arr = np.empty((image.height, image.width), dtype=np.int64)
    for y in range(image.height):
        for x in range(image.width):
            arr[y, x] = image.luminance(x, y)
    return arr


def patch_brightness(lum: np.ndarray, grid: PatchGrid) -> np.ndarray:
    """Integer mean brightness of each patch. Returns array of shape (rows, cols)."""
    pw, ph = grid.patch_width, grid.patch_height
    trimmed = lum[: grid.rows * ph, : grid.cols * pw]
    # (rows, ph, cols, pw) -> sum over each patch's pixels
    totals = trimmed.reshape(grid.rows, ph, grid.cols, pw).sum(axis=(1, 3), dtype=np.int64)
    return totals // (pw * ph)


def covering_brightness(lum: np.ndarray, cols: int, rows: int) -> np.ndarray:
    """Integer mean brightness over a rows x cols grid that spans every pixel.

    Patch edges sit at i * size // count, so neighbouring patches can differ
    in size by one pixel.
    """
    h, w = lum.shape
    out = np.empty((rows, cols), dtype=np.int64)
    for i in range(rows):
        y0 = i * h // rows
        y1 = (i + 1) * h // rows
        for j in range(cols):
            x0 = j * w // cols
            x1 = (j + 1) * w // cols
            region = lum[y0:y1, x0:x1]
            out[i, j] = int(region.sum(dtype=np.int64)) // region.size
    return out


def brightness_to_index(brightness, bias: float, palette_length: int) -> np.ndarray:
    """Map brightness in [0, 255] to palette indices through the bias curve.

    Rounds half away from zero and clamps to the palette.
    """
    t = np.asarray(brightness, dtype=np.float64) / MAX_BRIGHTNESS
    scaled = np.power(t, bias) * (palette_length - 1)
    whole = np.floor(scaled)
    index = whole + (scaled - whole >= 0.5)
    return np.clip(index, 0, palette_length - 1).astype(np.intp)
