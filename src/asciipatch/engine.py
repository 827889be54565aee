from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from asciipatch.charsets import EXTENDED, REDUCED
from asciipatch.errors import EmptyPalette, InvalidConfiguration


class LuminanceImage(Protocol):
    width: int
    height: int

    def luminance(self, x: int, y: int) -> int:
        """Brightness of the pixel at (x, y), in [0, 255]."""
        ...


@dataclass(frozen=True)
class ArrayImage:
    """Decoded greyscale image backed by a (height, width) uint8 array."""

    pixels: np.ndarray

    def __post_init__(self):
        if self.pixels.ndim != 2:
            raise ValueError(f"Expected a 2-D luminance array, got shape {self.pixels.shape}")
        if self.pixels.shape[0] == 0 or self.pixels.shape[1] == 0:
            raise ValueError(f"Image has no pixels: shape {self.pixels.shape}")

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def luminance(self, x: int, y: int) -> int:
        return int(self.pixels[y, x])


@dataclass(frozen=True)
class RenderConfig:
    width: int = 64
    height: int = 64
    palette: str = REDUCED
    bias: float = 0.8
    cover_edges: bool = False

    @classmethod
    def from_options(
        cls,
        width: int = 64,
        height: int = 64,
        use_extended_char_list: bool = False,
        char_bias: float = 0.8,
        cover_edges: bool = False,
    ) -> "RenderConfig":
        return cls(
            width=width,
            height=height,
            palette=EXTENDED if use_extended_char_list else REDUCED,
            bias=char_bias,
            cover_edges=cover_edges,
        )

    def validate(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration(f"Grid size must be positive, got {self.width}x{self.height}")
        if not (math.isfinite(self.bias) and self.bias > 0):
            raise InvalidConfiguration(f"Character bias must be a positive number, got {self.bias}")
        if len(self.palette) < 2:
            raise EmptyPalette(f"Palette needs at least 2 glyphs, got {len(self.palette)}")


@dataclass(frozen=True)
class PatchGrid:
    patch_width: int
    patch_height: int
    cols: int
    rows: int
