from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from . import rng

log = logging.getLogger(__name__)

_PACKAGE_LOGGER = "vecalg"


@dataclass
class VectorConfig:
    tolerance: float = 1e-9
    random_min: float = -1.0
    random_max: float = 1.0
    seed: Optional[int] = None
    log_level: Optional[str] = None

    def __post_init__(self) -> None:
        self.tolerance = float(self.tolerance)
        self.random_min = float(self.random_min)
        self.random_max = float(self.random_max)
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")
        if self.random_min > self.random_max:
            raise ValueError(f"random_min ({self.random_min}) is greater than random_max ({self.random_max})")
        if self.log_level is not None and not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log_level {self.log_level!r}")

    @staticmethod
    def from_yaml(path: Path) -> "VectorConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        log.debug("Loaded vector config from %s", path)
        return load_config(data)


def load_config(raw: dict) -> VectorConfig:
    # Accept either a bare mapping or one nested under a "vector" section.
    values = raw.get("vector", raw)
    known = {f.name for f in fields(VectorConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"unknown vector config keys: {', '.join(unknown)}")
    return VectorConfig(**values)


_active = VectorConfig()


def get_config() -> VectorConfig:
    return _active


def configure(config: Optional[VectorConfig] = None) -> VectorConfig:
    """Make ``config`` the active configuration and apply its side effects.

    Passing ``None`` restores the defaults. The package logger level is only
    touched when the config sets ``log_level``.
    """
    global _active
    _active = config if config is not None else VectorConfig()
    if _active.log_level is not None:
        logging.getLogger(_PACKAGE_LOGGER).setLevel(_active.log_level.upper())
    if _active.seed is not None:
        rng.seed(_active.seed)
    log.debug("Applied vector config %s", _active)
    return _active
