from pathlib import Path
from typing import Iterable, TextIO

from PIL import Image

from asciipatch.engine import LuminanceImage, RenderConfig
from asciipatch.loader import from_pil, load_image
from asciipatch.renderer import render


def write_lines(lines: Iterable[str], stream: TextIO) -> None:
    for line in lines:
        stream.write(line + "\n")


def image_to_ascii(
    image: LuminanceImage | Image.Image | str | Path,
    config: RenderConfig | None = None,
) -> str:
    if isinstance(image, (str, Path)):
        image = load_image(image)
    elif isinstance(image, Image.Image):
        image = from_pil(image)
    return "\n".join(render(image, config))
