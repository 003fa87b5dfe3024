"""Mutable 2D/3D vector with a pure and a mutating calling convention.

Every operation exists twice. The module-level functions are pure: they
return a new ``Vec`` and never touch their arguments. The methods of the
same name on ``Vec`` compute through the pure function, copy the result
into ``self`` and return ``self`` so calls can be chained::

    v = Vec(3, 4)
    w = norm(v)          # v unchanged
    v.norm().mult(2)     # v is now (1.2, 1.6, 0)

2D vectors are plain ``Vec`` values with ``z == 0``.

Degenerate inputs follow IEEE-754 instead of raising: dividing by a zero
magnitude gives ``inf``/``nan`` components, and ``angle_between`` with a
zero-length operand gives ``nan``. ``project`` is the one guarded case and
returns the zero vector when projecting onto a zero-length vector.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union

from . import rng as _rng
from .config import get_config

Number = Union[int, float]


def _fdiv(a: float, b: float) -> float:
    if b == 0:
        if a != a or a == 0:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _acos(value: float) -> float:
    if not -1.0 <= value <= 1.0:
        return math.nan
    return math.acos(value)


def _cos(theta: float) -> float:
    if math.isinf(theta):
        return math.nan
    return math.cos(theta)


def _sin(theta: float) -> float:
    if math.isinf(theta):
        return math.nan
    return math.sin(theta)


def _delta(value: Optional[float]) -> float:
    return 0.0 if value is None else value


def _round_half_up(value: float) -> float:
    if not math.isfinite(value):
        return value
    floor = math.floor(value)
    # value - floor is exact for doubles, unlike floor(value + 0.5)
    return float(floor + 1 if value - floor >= 0.5 else floor)


@dataclass(slots=True, eq=False)
class Vec:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    # Construction and assignment

    def set(self, x: Union["Vec", Number] = 0.0, y: Number = 0.0, z: Number = 0.0) -> "Vec":
        """Overwrite all three components from a vector or explicit values."""
        if isinstance(x, Vec):
            x, y, z = x.x, x.y, x.z
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        return self

    def clone(self) -> "Vec":
        return Vec(self.x, self.y, self.z)

    def to_array(self) -> list[float]:
        return [self.x, self.y, self.z]

    @classmethod
    def from_array(cls, values: Sequence[Number]) -> "Vec":
        """Build from ``[x, y, z]``; missing trailing elements default to 0."""
        components = [values[i] if i < len(values) and values[i] is not None else 0.0 for i in range(3)]
        return cls(*components)

    @classmethod
    def from_angle(cls, angle: float, magnitude: float = 1.0) -> "Vec":
        """Polar construction in the XY plane."""
        return cls(magnitude * _cos(angle), magnitude * _sin(angle), 0.0)

    @classmethod
    def from_angles(cls, theta: float, phi: float, length: float = 1.0) -> "Vec":
        """Spherical construction.

        ``theta`` is the azimuth in the XY plane measured from +x and ``phi``
        is the polar angle measured from +z.
        """
        sin_phi = _sin(phi)
        return cls(
            length * sin_phi * _cos(theta),
            length * sin_phi * _sin(theta),
            length * _cos(phi),
        )

    @classmethod
    def random_2d(
        cls,
        min: Optional[float] = None,
        max: Optional[float] = None,
        rng: Optional[_rng.VectorRng] = None,
    ) -> "Vec":
        low, high, source = _random_setup(min, max, rng)
        return cls(source.uniform(low, high), source.uniform(low, high), 0.0)

    @classmethod
    def random_3d(
        cls,
        min: Optional[float] = None,
        max: Optional[float] = None,
        rng: Optional[_rng.VectorRng] = None,
    ) -> "Vec":
        low, high, source = _random_setup(min, max, rng)
        return cls(source.uniform(low, high), source.uniform(low, high), source.uniform(low, high))

    # Mutating operations

    def add(
        self, x: Union["Vec", Number, None] = None, y: Optional[Number] = None, z: Optional[Number] = None
    ) -> "Vec":
        return self.set(add(self, x, y, z))

    def sub(
        self, x: Union["Vec", Number, None] = None, y: Optional[Number] = None, z: Optional[Number] = None
    ) -> "Vec":
        return self.set(sub(self, x, y, z))

    def mult(self, other: Union["Vec", Number]) -> "Vec":
        return self.set(mult(self, other))

    def div(self, other: Union["Vec", Number]) -> "Vec":
        return self.set(div(self, other))

    def invert(self) -> "Vec":
        return self.set(invert(self))

    def norm(self) -> "Vec":
        return self.set(norm(self))

    def set_mag(self, magnitude: float) -> "Vec":
        return self.set(set_mag(self, magnitude))

    def limit(self, max_magnitude: float) -> "Vec":
        return self.set(limit(self, max_magnitude))

    def axis_rot(self, axis: "Vec", theta: float) -> "Vec":
        return self.set(axis_rot(self, axis, theta))

    def rotate_2d(self, theta: float) -> "Vec":
        return self.set(rotate_2d(self, theta))

    def lerp(self, target: "Vec", amount: float) -> "Vec":
        return self.set(lerp(self, target, amount))

    def round(self) -> "Vec":
        return self.set(rounded(self))

    def project(self, onto: "Vec") -> "Vec":
        return self.set(project(self, onto))

    def reflect(self, normal: "Vec") -> "Vec":
        return self.set(reflect(self, normal))

    # Queries

    def dot(self, other: "Vec") -> float:
        return dot(self, other)

    def cross(self, other: "Vec") -> "Vec":
        return cross(self, other)

    def mag_sq(self) -> float:
        return mag_sq(self)

    def mag(self) -> float:
        return mag(self)

    def dist(self, other: "Vec") -> float:
        return dist(self, other)

    def dist_sq(self, other: "Vec") -> float:
        return dist_sq(self, other)

    def dist_2d(self, other: "Vec") -> float:
        return dist_2d(self, other)

    def dist_3d(self, other: "Vec") -> float:
        return dist_3d(self, other)

    def heading(self) -> float:
        return heading(self)

    def angle_between(self, other: "Vec") -> float:
        return angle_between(self, other)

    def is_equal(self, other: "Vec") -> bool:
        return is_equal(self, other)

    def is_equal_with_tolerance(self, other: "Vec", tolerance: Optional[float] = None) -> bool:
        return is_equal_with_tolerance(self, other, tolerance)

    def is_zero(self) -> bool:
        return is_zero(self)

    # Python protocol

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return is_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> "Vec":
        return self.clone()

    def __neg__(self) -> "Vec":
        return invert(self)

    def __add__(self, other: "Vec") -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: "Vec") -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        return sub(self, other)

    def __mul__(self, other: Union["Vec", Number]) -> "Vec":
        if not isinstance(other, (Vec, int, float)):
            return NotImplemented
        return mult(self, other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Vec", Number]) -> "Vec":
        if not isinstance(other, (Vec, int, float)):
            return NotImplemented
        return div(self, other)

    def __iadd__(self, other: "Vec") -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other: "Vec") -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        return self.sub(other)

    def __imul__(self, other: Union["Vec", Number]) -> "Vec":
        if not isinstance(other, (Vec, int, float)):
            return NotImplemented
        return self.mult(other)

    def __itruediv__(self, other: Union["Vec", Number]) -> "Vec":
        if not isinstance(other, (Vec, int, float)):
            return NotImplemented
        return self.div(other)


def _random_setup(
    low: Optional[float], high: Optional[float], source: Optional[_rng.VectorRng]
) -> tuple[float, float, _rng.VectorRng]:
    config = get_config()
    if low is None:
        low = config.random_min
    if high is None:
        high = config.random_max
    if source is None:
        source = _rng.default_rng()
    return low, high, source


# Arithmetic


def add(
    a: Vec, x: Union[Vec, Number, None] = None, y: Optional[Number] = None, z: Optional[Number] = None
) -> Vec:
    """Component-wise sum with a vector, or with loose ``x, y, z`` deltas.

    Omitted or ``None`` deltas count as 0.
    """
    if isinstance(x, Vec):
        return Vec(a.x + x.x, a.y + x.y, a.z + x.z)
    return Vec(a.x + _delta(x), a.y + _delta(y), a.z + _delta(z))


def sub(
    a: Vec, x: Union[Vec, Number, None] = None, y: Optional[Number] = None, z: Optional[Number] = None
) -> Vec:
    if isinstance(x, Vec):
        return Vec(a.x - x.x, a.y - x.y, a.z - x.z)
    return Vec(a.x - _delta(x), a.y - _delta(y), a.z - _delta(z))


def mult(a: Vec, b: Union[Vec, Number]) -> Vec:
    """Component-wise product with a vector, or uniform scaling by a scalar."""
    if isinstance(b, Vec):
        return Vec(a.x * b.x, a.y * b.y, a.z * b.z)
    return Vec(a.x * b, a.y * b, a.z * b)


def div(a: Vec, b: Union[Vec, Number]) -> Vec:
    """Component-wise quotient. Zero divisors give ``inf``/``nan``, never raise."""
    if isinstance(b, Vec):
        return Vec(_fdiv(a.x, b.x), _fdiv(a.y, b.y), _fdiv(a.z, b.z))
    return Vec(_fdiv(a.x, b), _fdiv(a.y, b), _fdiv(a.z, b))


def invert(v: Vec) -> Vec:
    return Vec(-v.x, -v.y, -v.z)


def dot(a: Vec, b: Vec) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec, b: Vec) -> Vec:
    return Vec(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


# Magnitude and scaling


def mag_sq(v: Vec) -> float:
    return v.x * v.x + v.y * v.y + v.z * v.z


def mag(v: Vec) -> float:
    return math.sqrt(mag_sq(v))


def dist_2d(a: Vec, b: Vec) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def dist_sq(a: Vec, b: Vec) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return dx * dx + dy * dy + dz * dz


def dist_3d(a: Vec, b: Vec) -> float:
    return math.sqrt(dist_sq(a, b))


def dist(a: Vec, b: Vec) -> float:
    return dist_3d(a, b)


def norm(v: Vec) -> Vec:
    """Unit vector along ``v``. A zero vector yields ``nan`` components."""
    return div(v, mag(v))


def set_mag(v: Vec, magnitude: float) -> Vec:
    return mult(norm(v), magnitude)


def limit(v: Vec, max_magnitude: float) -> Vec:
    """Scale ``v`` down to ``max_magnitude`` if it is longer; never scales up."""
    if mag(v) > max_magnitude:
        return set_mag(v, max_magnitude)
    return v.clone()


# Rotation


def rotation_matrix(axis: Vec, theta: float) -> tuple[Vec, Vec, Vec]:
    """Rows of the Rodrigues rotation matrix for ``theta`` radians about ``axis``.

    The axis is normalized first; a zero-length axis gives ``nan`` rows.
    """
    c = _cos(theta)
    s = _sin(theta)
    t = 1.0 - c
    x, y, z = norm(axis)
    return (
        Vec(c + x * x * t, x * y * t - z * s, x * z * t + y * s),
        Vec(x * y * t + z * s, c + y * y * t, y * z * t - x * s),
        Vec(z * x * t - y * s, z * y * t + x * s, c + z * z * t),
    )


def axis_rot(v: Vec, axis: Vec, theta: float) -> Vec:
    row0, row1, row2 = rotation_matrix(axis, theta)
    return Vec(dot(row0, v), dot(row1, v), dot(row2, v))


def rotate_2d(v: Vec, theta: float) -> Vec:
    """Rotate in the XY plane, i.e. about +z."""
    return axis_rot(v, Vec(0.0, 0.0, 1.0), theta)


# Projection and reflection


def project(v: Vec, onto: Vec) -> Vec:
    onto_mag_sq = mag_sq(onto)
    if onto_mag_sq == 0:
        return Vec()
    return mult(onto, dot(v, onto) / onto_mag_sq)


def reflect(v: Vec, normal: Vec) -> Vec:
    return sub(v, mult(project(v, normal), 2))


# Angles


def heading(v: Vec) -> float:
    """Angle of ``v`` from +x in the XY plane; z is ignored."""
    return math.atan2(v.y, v.x)


def angle_between(a: Vec, b: Vec) -> float:
    return _acos(_fdiv(dot(a, b), mag(a) * mag(b)))


# Interpolation


def lerp(a: Vec, b: Vec, amount: float) -> Vec:
    """Linear interpolation; ``amount`` is not clamped, so it can extrapolate."""
    return Vec(
        a.x + (b.x - a.x) * amount,
        a.y + (b.y - a.y) * amount,
        a.z + (b.z - a.z) * amount,
    )


# Equality and rounding


def is_equal(a: Vec, b: Vec) -> bool:
    return a.x == b.x and a.y == b.y and a.z == b.z


def is_equal_with_tolerance(a: Vec, b: Vec, tolerance: Optional[float] = None) -> bool:
    if tolerance is None:
        tolerance = get_config().tolerance
    return abs(a.x - b.x) <= tolerance and abs(a.y - b.y) <= tolerance and abs(a.z - b.z) <= tolerance


def is_zero(v: Vec) -> bool:
    return v.x == 0 and v.y == 0 and v.z == 0


def rounded(v: Vec) -> Vec:
    """Round each component to the nearest integer, ties toward +inf."""
    return Vec(_round_half_up(v.x), _round_half_up(v.y), _round_half_up(v.z))

