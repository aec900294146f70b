import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..errors import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class DungeonConfig:
    width: int = 121
    height: int = 91
    attempts: int = 200
    animate: bool = False
    seed: Optional[int] = None
    winding_percent: int = 0
    extra_door_chance: float = 1 / 50

    def validate(self) -> "DungeonConfig":
        """Raise ConfigurationError unless every parameter is usable; returns self."""
        for name in ("width", "height"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
            # Odd sizes keep an even separator row/column around the odd lattice
            if value % 2 == 0:
                raise ConfigurationError(f"Grid must be odd-sized! ({name}={value})")
        if self.attempts <= 0:
            raise ConfigurationError(f"attempts must be positive, got {self.attempts}")
        if not 0 <= self.winding_percent <= 100:
            raise ConfigurationError(f"winding_percent must be within 0..100, got {self.winding_percent}")
        if not 0.0 <= self.extra_door_chance <= 1.0:
            raise ConfigurationError(f"extra_door_chance must be within 0..1, got {self.extra_door_chance}")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "DungeonConfig":
        """Build a config from DELVE_* environment variables.

        Keyword overrides whose value is not None win over the environment.
        """
        env = os.environ if environ is None else environ
        cfg = cls()
        try:
            if "DELVE_WIDTH" in env:
                cfg.width = int(env["DELVE_WIDTH"])
            if "DELVE_HEIGHT" in env:
                cfg.height = int(env["DELVE_HEIGHT"])
            if "DELVE_ATTEMPTS" in env:
                cfg.attempts = int(env["DELVE_ATTEMPTS"])
            if "DELVE_ANIMATE" in env:
                cfg.animate = env["DELVE_ANIMATE"].strip().lower() in _TRUTHY
            if env.get("DELVE_SEED", "").strip():
                cfg.seed = int(env["DELVE_SEED"])
            if "DELVE_WINDING_PERCENT" in env:
                cfg.winding_percent = int(env["DELVE_WINDING_PERCENT"])
            if "DELVE_EXTRA_DOOR_CHANCE" in env:
                cfg.extra_door_chance = float(env["DELVE_EXTRA_DOOR_CHANCE"])
        except ValueError as e:
            raise ConfigurationError(f"invalid DELVE_* environment value: {e}") from e
        for key, value in overrides.items():
            if value is not None:
                setattr(cfg, key, value)
        return cfg


__all__ = ["DungeonConfig"]
