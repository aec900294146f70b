import pytest

import delve.routes.dungeon_api as dungeon_api
from delve.dungeon import Dungeon
from delve.routes.dungeon_api import MAX_SEED, _coerce_seed

from dungeon_test_utils import FirstChoiceRandom


@pytest.fixture()
def scripted_api(monkeypatch):
    """Route requests through a scripted RNG so layouts are predictable."""

    def factory(cfg, canvas=None):
        rng = FirstChoiceRandom()
        rng.seed = cfg.seed
        return Dungeon(cfg, rng=rng, canvas=canvas)

    monkeypatch.setattr(dungeon_api, "Dungeon", factory)


def test_ppm_endpoint_returns_raster(client, scripted_api):
    r = client.get("/api/dungeon.ppm?width=11&height=9&seed=12")
    assert r.status_code == 200
    assert r.mimetype == "image/x-portable-pixmap"
    assert r.headers["X-Dungeon-Seed"] == "12"
    assert r.headers["X-Dungeon-Rooms"] == "1"
    body = r.get_data(as_text=True)
    lines = body.splitlines()
    assert lines[0] == "P3 78 64"
    assert lines[1] == "255"
    assert len(lines) == 2 + 78 * 64


def test_unreachable_room_is_422(client, scripted_api):
    r = client.get("/api/dungeon.ppm?width=7&height=7&seed=3")
    assert r.status_code == 422
    data = r.get_json()
    assert data["room"] == 0
    assert data["seed"] == 3
    assert "connector" in data["error"]


@pytest.mark.parametrize(
    "query",
    [
        "width=12&height=9",
        "width=abc",
        "attempts=0",
        "winding=101",
        "width=401&height=9",
        "attempts=5000",
    ],
)
def test_bad_parameters_are_400(client, query):
    r = client.get(f"/api/dungeon.ppm?{query}")
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_limits_follow_app_config(test_app):
    test_app.config["DELVE_MAX_WIDTH"] = 21
    r = test_app.test_client().get("/api/dungeon.ppm?width=23&height=9")
    assert r.status_code == 400
    assert "exceeds limit" in r.get_json()["error"]


def test_same_seed_same_raster(client):
    r1 = client.get("/api/dungeon.ppm?width=31&height=21&attempts=40&seed=dragon")
    r2 = client.get("/api/dungeon.ppm?width=31&height=21&attempts=40&seed=dragon")
    assert r1.status_code == r2.status_code
    assert r1.status_code in (200, 422)
    assert r1.get_data() == r2.get_data()


def test_coerce_seed_variants():
    assert _coerce_seed(42) == 42
    assert _coerce_seed("42") == 42
    assert _coerce_seed(" 7 ") == 7
    assert _coerce_seed(MAX_SEED + 3) == 3
    s = _coerce_seed("dragon")
    assert 0 <= s < MAX_SEED
    assert s == _coerce_seed("dragon")
    assert 0 <= _coerce_seed(None) <= MAX_SEED
    assert 0 <= _coerce_seed("") <= MAX_SEED
