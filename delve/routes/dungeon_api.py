"""
project: Delve
module: dungeon_api.py
License: MIT

Dungeon raster API routes.

Every request generates a fresh dungeon and answers with exactly one PPM
snapshot of it; nothing is cached or stored between requests.
"""

import hashlib
import random

from flask import Blueprint, Response, current_app, jsonify, request

from delve.dungeon import Dungeon, DungeonConfig
from delve.errors import ConfigurationError, UnreachableRoomError
from delve.logging_utils import get_logger
from delve.rendering.canvas import Canvas

bp_dungeon = Blueprint("dungeon_api", __name__)
log = get_logger("delve.api")

MAX_SEED = 2**31 - 1


def _coerce_seed(payload_seed):
    """Convert a provided seed (int or str) into a bounded non-negative int."""
    if payload_seed is None:
        return random.randint(0, MAX_SEED)
    if isinstance(payload_seed, int):
        return payload_seed % MAX_SEED
    s = str(payload_seed).strip()
    if not s:
        return random.randint(0, MAX_SEED)
    if s.isdigit():
        return int(s) % MAX_SEED
    h = hashlib.sha256(s.encode("utf-8")).digest()
    return int.from_bytes(h[:8], "big") % MAX_SEED


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


def _config_from_request() -> DungeonConfig:
    base = DungeonConfig.from_env()
    cfg = DungeonConfig(
        width=_int_arg("width", base.width),
        height=_int_arg("height", base.height),
        attempts=_int_arg("attempts", base.attempts),
        animate=False,
        seed=_coerce_seed(request.args.get("seed", base.seed)),
        winding_percent=_int_arg("winding", base.winding_percent),
        extra_door_chance=base.extra_door_chance,
    )
    limits = current_app.config
    if cfg.width > limits["DELVE_MAX_WIDTH"] or cfg.height > limits["DELVE_MAX_HEIGHT"]:
        raise ConfigurationError(
            f"grid {cfg.width}x{cfg.height} exceeds limit "
            f"{limits['DELVE_MAX_WIDTH']}x{limits['DELVE_MAX_HEIGHT']}"
        )
    if cfg.attempts > limits["DELVE_MAX_ATTEMPTS"]:
        raise ConfigurationError(f"attempts exceeds limit {limits['DELVE_MAX_ATTEMPTS']}")
    return cfg.validate()


@bp_dungeon.route("/api/dungeon.ppm", methods=["GET"])
def dungeon_ppm():
    """Generate a dungeon and return it as a plain-text PPM image.

    Query (all optional): width, height, attempts, seed (int or any string),
    winding. Response headers carry the effective seed and room count.
    """
    try:
        cfg = _config_from_request()
    except ConfigurationError as e:
        log.warn(event="bad_request", error=str(e))
        return jsonify({"error": str(e)}), 400

    canvas = Canvas(cfg.width, cfg.height)
    try:
        dungeon = Dungeon(cfg, canvas=canvas).generate()
    except UnreachableRoomError as e:
        return jsonify({"error": str(e), "seed": cfg.seed, "room": e.index}), 422

    return Response(
        canvas.to_ppm(),
        mimetype="image/x-portable-pixmap",
        headers={
            "X-Dungeon-Seed": str(dungeon.seed),
            "X-Dungeon-Rooms": str(len(dungeon.rooms)),
        },
    )
