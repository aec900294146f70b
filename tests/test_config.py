import pytest

from delve.dungeon import Dungeon, DungeonConfig
from delve.errors import ConfigurationError, DungeonError


def test_defaults_are_valid():
    cfg = DungeonConfig().validate()
    assert (cfg.width, cfg.height, cfg.attempts, cfg.animate) == (121, 91, 200, False)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 10},
        {"height": 8},
        {"width": 0},
        {"height": -3},
        {"attempts": 0},
        {"winding_percent": 101},
        {"extra_door_chance": 1.5},
    ],
)
def test_invalid_parameters_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        DungeonConfig(**kwargs).validate()


def test_configuration_error_is_value_error_and_dungeon_error():
    with pytest.raises(ValueError):
        DungeonConfig(width=4).validate()
    with pytest.raises(DungeonError):
        DungeonConfig(width=4).validate()


def test_dungeon_rejects_even_grid_before_generating():
    with pytest.raises(ConfigurationError, match="odd"):
        Dungeon(DungeonConfig(width=12, height=9))


def test_from_env_reads_delve_variables():
    env = {
        "DELVE_WIDTH": "31",
        "DELVE_HEIGHT": "21",
        "DELVE_ATTEMPTS": "40",
        "DELVE_ANIMATE": "yes",
        "DELVE_SEED": "99",
        "DELVE_WINDING_PERCENT": "30",
        "DELVE_EXTRA_DOOR_CHANCE": "0.1",
    }
    cfg = DungeonConfig.from_env(env)
    assert cfg == DungeonConfig(
        width=31, height=21, attempts=40, animate=True, seed=99, winding_percent=30, extra_door_chance=0.1
    )


def test_from_env_overrides_win_unless_none():
    cfg = DungeonConfig.from_env({"DELVE_WIDTH": "31", "DELVE_SEED": "5"}, width=11, seed=None)
    assert cfg.width == 11
    assert cfg.seed == 5


def test_from_env_bad_value():
    with pytest.raises(ConfigurationError):
        DungeonConfig.from_env({"DELVE_WIDTH": "wide"})


def test_seed_recorded_when_missing():
    d = Dungeon(DungeonConfig(width=11, height=9))
    assert isinstance(d.seed, int)
    assert d.config.seed == d.seed


def test_dungeon_does_not_mutate_callers_config():
    cfg = DungeonConfig(width=11, height=9)
    d = Dungeon(cfg)
    assert cfg.seed is None
    assert d.config is not cfg
    assert isinstance(d.config.seed, int)


def test_explicit_seed_is_kept():
    cfg = DungeonConfig(width=11, height=9, seed=0)
    assert Dungeon(cfg).seed == 0
