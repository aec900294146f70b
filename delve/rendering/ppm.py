"""Plain-text PPM (P3) image buffer.

Output layout: a ``P3 <width> <height>`` header line, a ``255`` max-value
line, then one ``R G B`` line per pixel in row-major order from the top-left.
"""

from __future__ import annotations

import sys
from typing import List, NamedTuple, Optional, TextIO

from ..errors import RasterBoundsError

MAX_CHANNEL = 255


class Color(NamedTuple):
    r: int
    g: int
    b: int

    def darker(self, factor: float) -> "Color":
        return Color(int(self.r * factor), int(self.g * factor), int(self.b * factor))

    def __str__(self) -> str:
        return f"{self.r} {self.g} {self.b}"


class PPM:
    def __init__(self, width: int, height: int, background: Color):
        self.width = width
        self.height = height
        self.pixels: List[Color] = [background] * (width * height)

    def get(self, point) -> Color:
        x, y = point
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise RasterBoundsError(f"pixel {(x, y)} outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]

    def set(self, point, color: Color) -> None:
        x, y = point
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise RasterBoundsError(f"pixel {(x, y)} outside {self.width}x{self.height} image")
        self.pixels[y * self.width + x] = color

    def draw_rectangle(self, rect, color: Color) -> None:
        for point in rect:
            self.set(point, color)

    def to_ppm(self) -> str:
        lines = [f"P3 {self.width} {self.height}", str(MAX_CHANNEL)]
        lines.extend(str(c) for c in self.pixels)
        return "\n".join(lines) + "\n"

    def print(self, stream: Optional[TextIO] = None) -> None:
        out = stream if stream is not None else sys.stdout
        out.write(self.to_ppm())
        out.flush()


__all__ = ["Color", "PPM", "MAX_CHANNEL"]
