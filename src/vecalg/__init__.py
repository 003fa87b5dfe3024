from __future__ import annotations

from .config import VectorConfig, configure, get_config, load_config
from .rng import VectorRng, default_rng, seed
from .vector import (
    Vec,
    add,
    angle_between,
    axis_rot,
    cross,
    dist,
    dist_2d,
    dist_3d,
    dist_sq,
    div,
    dot,
    heading,
    invert,
    is_equal,
    is_equal_with_tolerance,
    is_zero,
    lerp,
    limit,
    mag,
    mag_sq,
    mult,
    norm,
    project,
    reflect,
    rotate_2d,
    rotation_matrix,
    rounded,
    set_mag,
    sub,
)

__all__ = [
    "Vec",
    "VectorConfig",
    "VectorRng",
    "add",
    "angle_between",
    "axis_rot",
    "configure",
    "cross",
    "default_rng",
    "dist",
    "dist_2d",
    "dist_3d",
    "dist_sq",
    "div",
    "dot",
    "get_config",
    "heading",
    "invert",
    "is_equal",
    "is_equal_with_tolerance",
    "is_zero",
    "lerp",
    "limit",
    "load_config",
    "mag",
    "mag_sq",
    "mult",
    "norm",
    "project",
    "reflect",
    "rotate_2d",
    "rotation_matrix",
    "rounded",
    "seed",
    "set_mag",
    "sub",
]
