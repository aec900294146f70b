"""Dungeon generation pipeline.

Phases, in order (each runs to completion before the next starts):
    * Room Placer: rejection-sample odd-aligned rooms separated by at least one wall.
    * Maze Carver: grow a perfect maze from every still-walled odd lattice cell.
    * Connector Selector: give every room exactly one door into the maze, plus
      occasional extra doors that braid loops into it.
    * Dead-End Pruner: wall up corridor stubs that are not protected by a door.

A single RandomSource is shared by the phases in that order, so a seed
reproduces a dungeon exactly. When a Canvas is attached every carve is painted
onto it; with ``animate`` enabled a frame is emitted after each cell-level
mutation, and one final frame is always emitted after the last phase.

Public contract:
    Dungeon(config, rng=None, canvas=None).generate() -> Dungeon
    Attributes: grid (TileGrid), rooms, room_colors, config, seed, metrics
"""

from __future__ import annotations

import time
from dataclasses import replace
from typing import Any, Dict, List, Optional

from ..errors import DungeonError
from ..logging_utils import get_logger
from ..rendering.palette import DARK_COLOR, DOOR_COLOR, LIGHT_COLOR, ROOM_CHANNEL_MAX, ROOM_CHANNEL_MIN
from ..rendering.ppm import Color
from .config import DungeonConfig
from .connectors import connect_rooms
from .geometry import Rect
from .grid import TileGrid
from .maze import fill_maze
from .metrics import init_metrics
from .pruning import remove_dead_ends
from .rng import RandomSource, SeededRandom, random_seed
from .rooms import place_rooms
from .tiles import DOOR, FLOOR, WALL, Tile

log = get_logger("delve.dungeon")


class Dungeon:
    def __init__(
        self,
        config: Optional[DungeonConfig] = None,
        *,
        rng: Optional[RandomSource] = None,
        canvas=None,
    ):
        # Private copy; the recorded seed is never written back to the caller's config
        self.config = replace(config or DungeonConfig()).validate()
        if rng is None:
            # Preserve seed semantics: 0 is a valid deterministic seed; None => random
            if self.config.seed is None:
                self.config.seed = random_seed()
            rng = SeededRandom(self.config.seed)
        self.rng = rng
        self.seed = getattr(rng, "seed", self.config.seed)
        self.canvas = canvas
        self.grid = TileGrid(self.config.width, self.config.height)
        self.room_colors: List[Color] = []
        self.metrics: Dict[str, Any] = init_metrics()

    @property
    def bounds(self) -> Rect:
        return self.grid.bounds

    @property
    def rooms(self) -> List[Rect]:
        return self.grid.rooms

    # ------------------------------------------------------------------
    # Generation Pipeline
    # ------------------------------------------------------------------
    def generate(self) -> "Dungeon":
        start = time.perf_counter()
        phase_times = self.metrics["phase_ms"]

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            log.debug(event="phase_done", phase=label, ms=phase_times[label])
            return r

        try:
            _phase("place_rooms", place_rooms, self)
            _phase("fill_maze", fill_maze, self)
            _phase("connect_rooms", connect_rooms, self)
            _phase("remove_dead_ends", remove_dead_ends, self)
        except DungeonError as e:
            log.error(event="generation_failed", seed=self.seed, error=type(e).__name__, detail=str(e))
            raise

        self.metrics["runtime_ms"] = int((time.perf_counter() - start) * 1000)
        if self.canvas is not None:
            self.canvas.emit()
            self.metrics["snapshots_emitted"] += 1
        log.info(
            event="dungeon_generated",
            seed=self.seed,
            size=f"{self.config.width}x{self.config.height}",
            rooms=len(self.rooms),
            doors=self.metrics["doors_created"],
            pruned=self.metrics["dead_ends_pruned"],
            runtime_ms=self.metrics["runtime_ms"],
        )
        return self

    # ------------------------------------------------------------------
    # Carve primitives (every tile mutation goes through carve_cell)
    # ------------------------------------------------------------------
    def get_tile(self, v) -> Tile:
        return self.grid.get(v)

    def carve_cell(self, v, color: Color, tile: Tile) -> None:
        self.grid.set(v, tile)
        if self.canvas is not None:
            self.canvas.paint_cell(v, color)

    def carve_floor(self, v) -> None:
        self.carve_cell(v, LIGHT_COLOR, FLOOR)

    def carve_door(self, v) -> None:
        self.carve_cell(v, DOOR_COLOR, DOOR)

    def fill_cell(self, v) -> None:
        self.carve_cell(v, DARK_COLOR, WALL)

    def draw_room(self, rect: Rect, color: Optional[Color] = None) -> Color:
        """Mark every cell of ``rect`` as floor; draws a random light color when none is given."""
        if color is None:
            rnd = self.rng
            color = Color(
                rnd.randrange(ROOM_CHANNEL_MIN, ROOM_CHANNEL_MAX + 1),
                rnd.randrange(ROOM_CHANNEL_MIN, ROOM_CHANNEL_MAX + 1),
                rnd.randrange(ROOM_CHANNEL_MIN, ROOM_CHANNEL_MAX + 1),
            )
        for point in rect:
            self.carve_cell(point, color, FLOOR)
        return color

    def snapshot(self) -> None:
        if self.config.animate and self.canvas is not None:
            self.canvas.emit()
            self.metrics["snapshots_emitted"] += 1

    # ------------------------------------------------------------------
    # Read helpers
    # ------------------------------------------------------------------
    def to_ascii(self) -> str:
        return self.grid.to_ascii()


__all__ = ["Dungeon"]
