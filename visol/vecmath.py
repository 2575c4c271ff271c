"""2D/3D vectors, 4x4 matrices, perspective projection and angle helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class Direction(Enum):
    """Where one 2D vector lies relative to another."""

    LEFT = "left"
    RIGHT = "right"
    COLLINEAR = "collinear"


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Vec2:
        return Vec2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def dot(self, other: Vec2) -> float:
        """Return the dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """Return the z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Return a unit vector; the zero vector is returned unchanged."""
        length = self.length()
        if length == 0:
            return self
        return Vec2(self.x / length, self.y / length)

    def to_vec3(self) -> Vec3:
        """Return this vector in the z = 0 plane."""
        return Vec3(self.x, self.y, 0.0)


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, s: float) -> Vec3:
        return Vec3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def dot(self, other: Vec3) -> float:
        """Return the dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return a unit vector; the zero vector is returned unchanged."""
        length = self.length()
        if length == 0:
            return self
        return self * (1.0 / length)


@dataclass(frozen=True)
class ViewAngles:
    """Elevation ``psi`` and azimuth ``phi``, in radians."""

    psi: float = 0.0
    phi: float = 0.0


Rows = tuple[tuple[float, float, float, float], ...]


@dataclass(frozen=True)
class Mat4:
    """A row-major 4x4 matrix acting on column vectors."""

    rows: Rows

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("Mat4 needs 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.rows[row][col]

    def __matmul__(self, other: Mat4) -> Mat4:
        cols = list(zip(*other.rows))
        return Mat4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in cols)
                for row in self.rows
            )
        )

    def _with(self, **cells: float) -> Mat4:
        rows = [list(row) for row in self.rows]
        for name, value in cells.items():
            rows[int(name[1])][int(name[2])] = value
        return Mat4(tuple(tuple(row) for row in rows))

    @classmethod
    def identity(cls) -> Mat4:
        """Return the identity matrix."""
        return cls(tuple(tuple(1.0 if r == c else 0.0 for c in range(4)) for r in range(4)))

    @classmethod
    def translation(cls, tx: float, ty: float, tz: float) -> Mat4:
        """Return a translation by (tx, ty, tz)."""
        return cls.identity()._with(m03=tx, m13=ty, m23=tz)

    @classmethod
    def rotation_x(cls, angle: float) -> Mat4:
        """Return a rotation about the x axis by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return cls.identity()._with(m11=c, m12=-s, m21=s, m22=c)

    @classmethod
    def rotation_y(cls, angle: float) -> Mat4:
        """Return a rotation about the y axis by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return cls.identity()._with(m00=c, m02=s, m20=-s, m22=c)

    @classmethod
    def rotation_z(cls, angle: float) -> Mat4:
        """Return a rotation about the z axis by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return cls.identity()._with(m00=c, m01=-s, m10=s, m11=c)

    def transform(self, v: Vec3) -> Vec3:
        """Apply to the point ``v`` (w = 1), dividing by w when w is not zero."""
        x, y, z, w = (
            v.x * row[0] + v.y * row[1] + v.z * row[2] + row[3] for row in self.rows
        )
        if w != 0.0:
            x, y, z = x / w, y / w, z / w
        return Vec3(x, y, z)


def project_to_screen(point: Vec3, width: int, height: int) -> Vec2:
    """Map a point in normalised device coordinates to screen pixels."""
    return Vec2(
        (point.x + 1.0) * 0.5 * width,
        (1.0 - (point.y + 1.0) * 0.5) * height,
    )


def direction(src: Vec2, dst: Vec2) -> Vec2:
    """Return the unit vector pointing from ``src`` to ``dst``."""
    return (dst - src).normalized()


def relative_direction(a: Vec2, b: Vec2) -> Direction:
    """Return whether ``b`` lies to the left or right of ``a``, or along it."""
    cross = a.cross(b)
    if cross > 0:
        return Direction.LEFT
    if cross < 0:
        return Direction.RIGHT
    return Direction.COLLINEAR


def _projection(point: Vec3, fov: float, aspect: float, m22: float, m23: float, m32: float) -> Vec3:
    factor = 1.0 / math.tan(fov / 2.0)
    matrix = Mat4(
        (
            (factor / aspect, 0.0, 0.0, 0.0),
            (0.0, factor, 0.0, 0.0),
            (0.0, 0.0, m22, m23),
            (0.0, 0.0, m32, 0.0),
        )
    )
    return matrix.transform(point)


def perspective_rh(point: Vec3, fov: float, aspect: float, near: float, far: float) -> Vec3:
    """Project ``point`` with a right-handed (OpenGL style) perspective."""
    return _projection(
        point,
        fov,
        aspect,
        (far + near) / (near - far),
        (2 * far * near) / (near - far),
        -1.0,
    )


def perspective_lh(point: Vec3, fov: float, aspect: float, near: float, far: float) -> Vec3:
    """Project ``point`` with a left-handed (DirectX style) perspective."""
    return _projection(
        point,
        fov,
        aspect,
        far / (far - near),
        (-far * near) / (far - near),
        1.0,
    )


projection_perspective: Callable[[Vec3, float, float, float, float], Vec3] = perspective_rh
"""The projection used by default."""


def clip_point(p: Vec3, q: Vec3, clip_z: float) -> Vec3:
    """Move ``p`` along the line towards ``q`` onto the plane z = clip_z."""
    t = (clip_z - p.z) / (q.z - p.z)
    return Vec3(p.x + t * (q.x - p.x), p.y + t * (q.y - p.y), clip_z)


def clip_line_near_far(a: Vec3, b: Vec3, near: float, far: float) -> bool:
    """Return False when the segment lies wholly in front of near or behind far.

    The camera looks down -z: points with z > near are in front of the near
    plane and points with z < -far are beyond the far plane.
    """
    if a.z > near and b.z > near:
        return False
    if a.z < -far and b.z < -far:
        return False
    return True


def cartesian_to_spherical(v: Vec3) -> tuple[float, float, float]:
    """Return (r, phi, psi): radius, polar angle and azimuth in [0, 2*pi)."""
    r = v.length()
    if r == 0:
        return 0.0, 0.0, 0.0
    phi = math.acos(v.z / r)
    psi = math.atan2(v.y, v.x)
    if psi < 0:
        psi += 2 * math.pi
    return r, phi, psi


def spherical_to_cartesian(phi: float, psi: float) -> Vec3:
    """Return the unit vector with polar angle ``phi`` and azimuth ``psi``."""
    return spherical_to_cartesian_r(1.0, phi, psi)


def spherical_to_cartesian_r(r: float, phi: float, psi: float) -> Vec3:
    """Return the vector of length ``r`` with polar angle ``phi`` and azimuth ``psi``."""
    sin_phi = math.sin(phi)
    return Vec3(r * sin_phi * math.cos(psi), r * sin_phi * math.sin(psi), r * math.cos(phi))


def angles_to_vec3(angles: ViewAngles) -> Vec3:
    """Return the direction with elevation ``psi`` and azimuth ``phi`` (z up)."""
    return Vec3(
        math.cos(angles.psi) * math.cos(angles.phi),
        math.cos(angles.psi) * math.sin(angles.phi),
        math.sin(angles.psi),
    )


def angles_to_vec3_opengl(angles: ViewAngles) -> Vec3:
    """Return the direction for a right-handed system with z up."""
    cos_elev = math.cos(angles.psi)
    return Vec3(
        cos_elev * math.cos(angles.phi),
        cos_elev * math.sin(angles.phi),
        math.sin(angles.psi),
    )


def angles_to_vec3_directx(angles: ViewAngles) -> Vec3:
    """Return the direction for a left-handed system with y up and z forward."""
    cos_elev = math.cos(angles.psi)
    return Vec3(
        math.sin(angles.phi) * cos_elev,
        math.sin(angles.psi),
        math.cos(angles.phi) * cos_elev,
    )