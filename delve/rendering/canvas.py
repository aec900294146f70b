from __future__ import annotations

from typing import Optional, TextIO

from .palette import DARK_COLOR
from .ppm import PPM, Color
from ..dungeon.geometry import Rect

CELL_SIZE = 7
BORDER_SHADE = 0.70


class Canvas:
    """Pixel view of a tile grid.

    Each grid cell covers a ``CELL_SIZE`` square: a one-pixel border a shade
    darker than the cell color, then the cell color inset by one pixel. The
    extra pixel row/column closes the border of the last cell.
    """

    def __init__(self, grid_width: int, grid_height: int, stream: Optional[TextIO] = None):
        self.image = PPM(grid_width * CELL_SIZE + 1, grid_height * CELL_SIZE + 1, DARK_COLOR)
        self.stream = stream
        self.frames = 0

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def paint_cell(self, v, color: Color) -> None:
        x, y = v[0] * CELL_SIZE, v[1] * CELL_SIZE
        self.image.draw_rectangle(Rect(x, y, CELL_SIZE, CELL_SIZE), color.darker(BORDER_SHADE))
        self.image.draw_rectangle(Rect(x + 1, y + 1, CELL_SIZE - 1, CELL_SIZE - 1), color)

    def emit(self) -> None:
        """Write the current frame to the stream; without a stream only the frame is counted."""
        if self.stream is not None:
            self.image.print(self.stream)
        self.frames += 1

    def to_ppm(self) -> str:
        return self.image.to_ppm()


__all__ = ["Canvas", "CELL_SIZE", "BORDER_SHADE"]
