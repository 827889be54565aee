import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciipatch.engine import ArrayImage
from asciipatch.errors import ImageLoadFailure

logger = logging.getLogger(__name__)

MAX_WIDE_VALUE = 65535


def _is_wide_greyscale(image: Image.Image) -> bool:
    return image.mode == "I" or image.mode.startswith("I;16")


def from_pil(image: Image.Image) -> ArrayImage:
    """Convert a Pillow image to 8-bit luminance.

    16-bit greyscale is scaled down to 8 bits, rounding to nearest. Everything
    else goes through Pillow's ITU-R 601-2 luma transform.
    """
    if _is_wide_greyscale(image):
        wide = np.clip(np.asarray(image).astype(np.int64), 0, MAX_WIDE_VALUE)
        return ArrayImage(((wide + 128) // 257).astype(np.uint8))
    return ArrayImage(np.asarray(image.convert("L"), dtype=np.uint8))


def load_image(path: str | Path) -> ArrayImage:
    path = Path(path)
    try:
        with Image.open(path) as image:
            decoded = from_pil(image)
    except FileNotFoundError as e:
        raise ImageLoadFailure(f"File not found: {path}") from e
    except UnidentifiedImageError as e:
        raise ImageLoadFailure(f"Unsupported image format: {path}") from e
    except Image.DecompressionBombError as e:
        raise ImageLoadFailure(f"Image too large: {path}: {e}") from e
    except (OSError, ValueError) as e:
        raise ImageLoadFailure(f"Could not decode {path}: {e}") from e
    logger.debug(f"Loaded {path} ({decoded.width}x{decoded.height} from mode {image.mode})")
    return decoded
