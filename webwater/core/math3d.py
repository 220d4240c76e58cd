# webwater/core/math3d.py
"""
Core math types for the water scene.
CPU-side vectors, matrices and quaternions; matrices are stored column-major
so `Mat4.to_list()` can be uploaded as a uniform without transposition.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

# Pivots smaller than this make a matrix singular for inversion purposes.
PIVOT_EPSILON = 1e-12

# Above this quaternion dot product slerp degrades to lerp.
SLERP_LINEAR_THRESHOLD = 0.9995


# =============================================================================
# Vector Types
# =============================================================================

@dataclass(frozen=True)
class Vec2:
    """2D vector for texture and screen coordinates."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self.__mul__(scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vec2:
        ln = self.length()
        if ln == 0.0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / ln, self.y / ln)

    def lerp(self, other: Vec2, t: float) -> Vec2:
        return Vec2(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t
        )

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @staticmethod
    def from_tuple(t: Sequence[float]) -> Vec2:
        return Vec2(float(t[0]), float(t[1]))


@dataclass(frozen=True)
class Vec3:
    """3D vector for positions and directions in world space."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Right-handed cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        ln = self.length()
        if ln == 0.0:
            return Vec3(0.0, 0.0, 0.0)
        return Vec3(self.x / ln, self.y / ln, self.z / ln)

    def distance(self, other: Vec3) -> float:
        return (self - other).length()

    def lerp(self, other: Vec3, t: float) -> Vec3:
        return Vec3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t
        )

    def extend(self, w: float) -> Vec4:
        """Homogeneous form: w=1 for points, w=0 for directions."""
        return Vec4(self.x, self.y, self.z, w)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @staticmethod
    def from_tuple(t: Sequence[float]) -> Vec3:
        return Vec3(float(t[0]), float(t[1]), float(t[2]))

    @staticmethod
    def zero() -> Vec3:
        return Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def one() -> Vec3:
        return Vec3(1.0, 1.0, 1.0)

    @staticmethod
    def up() -> Vec3:
        return Vec3(0.0, 1.0, 0.0)

    @staticmethod
    def forward() -> Vec3:
        return Vec3(0.0, 0.0, -1.0)

    @staticmethod
    def right() -> Vec3:
        return Vec3(1.0, 0.0, 0.0)


@dataclass(frozen=True)
class Vec4:
    """4D vector for homogeneous coordinates."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __add__(self, other: Vec4) -> Vec4:
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4) -> Vec4:
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> Vec4:
        return Vec4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Vec4:
        return self.__mul__(scalar)

    def __neg__(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def dot(self, other: Vec4) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def normalized(self) -> Vec4:
        ln = self.length()
        if ln == 0.0:
            return Vec4(0.0, 0.0, 0.0, 0.0)
        return Vec4(self.x / ln, self.y / ln, self.z / ln, self.w / ln)

    def xyz(self) -> Vec3:
        """Drop w (direction)."""
        return Vec3(self.x, self.y, self.z)

    def to_vec3(self) -> Vec3:
        """Perspective divide to get a 3D point. w == 0 is returned undivided."""
        if self.w == 0.0:
            return Vec3(self.x, self.y, self.z)
        return Vec3(self.x / self.w, self.y / self.w, self.z / self.w)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    @staticmethod
    def point(x: float, y: float, z: float) -> Vec4:
        """Create a point (w=1)."""
        return Vec4(x, y, z, 1.0)

    @staticmethod
    def direction(x: float, y: float, z: float) -> Vec4:
        """Create a direction vector (w=0)."""
        return Vec4(x, y, z, 0.0)


# =============================================================================
# Matrix
# =============================================================================

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


class Mat4:
    """
    4x4 matrix for 3D transforms and projections.

    Storage is column-major: each run of four values is one column and
    `m[col * 4 + row]` is the element at (row, col). `Mat4((...))` takes
    values in that storage order; use `Mat4.from_rows` to write a matrix
    the way it reads on paper.
    """

    __slots__ = ('m',)

    def __init__(self, values: Optional[Iterable[float]] = None):
        """Initialize with column-major values or identity."""
        if values is None:
            self.m = _IDENTITY
        else:
            m = tuple(float(v) for v in values)
            if len(m) != 16:
                raise ValueError(f"Mat4 needs 16 values, got {len(m)}")
            self.m = m

    @staticmethod
    def from_rows(values: Sequence[float]) -> Mat4:
        """Build from 16 row-major values."""
        if len(values) != 16:
            raise ValueError(f"Mat4 needs 16 values, got {len(values)}")
        return Mat4(values[row * 4 + col] for col in range(4) for row in range(4))

    def get(self, row: int, col: int) -> float:
        return self.m[col * 4 + row]

    def __getitem__(self, idx: Tuple[int, int]) -> float:
        row, col = idx
        return self.m[col * 4 + row]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.m == other.m

    def __hash__(self) -> int:
        return hash(self.m)

    def __repr__(self) -> str:
        rows = ', '.join(
            '[' + ', '.join(f'{self[row, col]:.4g}' for col in range(4)) + ']'
            for row in range(4)
        )
        return f'Mat4({rows})'

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return self.multiply(other)
        elif isinstance(other, Vec4):
            return self.multiply_vec4(other)
        elif isinstance(other, Vec3):
            return self.multiply_vec3_point(other)
        return NotImplemented

    def multiply(self, other: Mat4) -> Mat4:
        """Matrix product self * other (other is applied first)."""
        result = [0.0] * 16
        for row in range(4):
            for col in range(4):
                result[col * 4 + row] = sum(self[row, k] * other[k, col] for k in range(4))
        return Mat4(result)

    def multiply_vec4(self, v: Vec4) -> Vec4:
        m = self.m
        return Vec4(
            m[0]*v.x + m[4]*v.y + m[8]*v.z + m[12]*v.w,
            m[1]*v.x + m[5]*v.y + m[9]*v.z + m[13]*v.w,
            m[2]*v.x + m[6]*v.y + m[10]*v.z + m[14]*v.w,
            m[3]*v.x + m[7]*v.y + m[11]*v.z + m[15]*v.w
        )

    def multiply_vec3_point(self, v: Vec3) -> Vec3:
        """Transform a point (w=1) and divide by the resulting w."""
        return self.multiply_vec4(v.extend(1.0)).to_vec3()

    def multiply_vec3_vector(self, v: Vec3) -> Vec3:
        """Transform a direction (w=0); translation does not apply."""
        return self.multiply_vec4(v.extend(0.0)).xyz()

    def transpose(self) -> Mat4:
        return Mat4(self[col, row] for col in range(4) for row in range(4))

    def inverse(self) -> Tuple[Mat4, bool]:
        """
        Invert by Gauss-Jordan elimination with partial pivoting.

        Returns (inverse, True), or (undefined, False) when a pivot vanishes.
        The matrix half of a failed result must not be used.
        """
        aug = [
            [self[row, col] for col in range(4)] + [1.0 if row == i else 0.0 for i in range(4)]
            for row in range(4)
        ]

        for i in range(4):
            pivot_row = max(range(i, 4), key=lambda k: abs(aug[k][i]))
            aug[i], aug[pivot_row] = aug[pivot_row], aug[i]

            pivot = aug[i][i]
            if abs(pivot) < PIVOT_EPSILON:
                return Mat4.zero(), False

            aug[i] = [v / pivot for v in aug[i]]

            for k in range(4):
                if k == i:
                    continue
                factor = aug[k][i]
                if factor != 0.0:
                    aug[k] = [a - factor * b for a, b in zip(aug[k], aug[i])]

        return Mat4.from_rows([aug[row][col + 4] for row in range(4) for col in range(4)]), True

    def determinant(self) -> float:
        m = self.m
        return (
            m[0] * (m[5] * (m[10]*m[15] - m[11]*m[14]) - m[6] * (m[9]*m[15] - m[11]*m[13]) + m[7] * (m[9]*m[14] - m[10]*m[13]))
            - m[1] * (m[4] * (m[10]*m[15] - m[11]*m[14]) - m[6] * (m[8]*m[15] - m[11]*m[12]) + m[7] * (m[8]*m[14] - m[10]*m[12]))
            + m[2] * (m[4] * (m[9]*m[15] - m[11]*m[13]) - m[5] * (m[8]*m[15] - m[11]*m[12]) + m[7] * (m[8]*m[13] - m[9]*m[12]))
            - m[3] * (m[4] * (m[9]*m[14] - m[10]*m[13]) - m[5] * (m[8]*m[14] - m[10]*m[12]) + m[6] * (m[8]*m[13] - m[9]*m[12]))
        )

    def get_translation(self) -> Vec3:
        return Vec3(self.m[12], self.m[13], self.m[14])

    def with_translation(self, v: Vec3) -> Mat4:
        m = list(self.m)
        m[12], m[13], m[14] = v.x, v.y, v.z
        return Mat4(m)

    def is_close(self, other: Mat4, eps: float = 1e-6) -> bool:
        return all(abs(a - b) <= eps for a, b in zip(self.m, other.m))

    def to_list(self) -> list:
        """Column-major floats, the order uniformMatrix4fv expects."""
        return list(self.m)

    def to_numpy(self):
        return np.array(self.m, dtype=np.float32)

    @staticmethod
    def identity() -> Mat4:
        return Mat4()

    @staticmethod
    def zero() -> Mat4:
        return Mat4((0.0,) * 16)

    @staticmethod
    def translation(tx: float, ty: float, tz: float) -> Mat4:
        return Mat4((
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            tx,  ty,  tz,  1.0
        ))

    @staticmethod
    def translation_vec(v: Vec3) -> Mat4:
        return Mat4.translation(v.x, v.y, v.z)

    @staticmethod
    def scale(sx: float, sy: float, sz: float) -> Mat4:
        return Mat4((
            sx,  0.0, 0.0, 0.0,
            0.0, sy,  0.0, 0.0,
            0.0, 0.0, sz,  0.0,
            0.0, 0.0, 0.0, 1.0
        ))

    @staticmethod
    def scale_uniform(s: float) -> Mat4:
        return Mat4.scale(s, s, s)

    @staticmethod
    def scale_vec(v: Vec3) -> Mat4:
        return Mat4.scale(v.x, v.y, v.z)

    @staticmethod
    def rotation_x(angle: float) -> Mat4:
        c = math.cos(angle)
        s = math.sin(angle)
        return Mat4.from_rows((
            1.0, 0.0, 0.0, 0.0,
            0.0, c,   -s,  0.0,
            0.0, s,    c,  0.0,
            0.0, 0.0, 0.0, 1.0
        ))

    @staticmethod
    def rotation_y(angle: float) -> Mat4:
        c = math.cos(angle)
        s = math.sin(angle)
        return Mat4.from_rows((
            c,   0.0, s,   0.0,
            0.0, 1.0, 0.0, 0.0,
            -s,  0.0, c,   0.0,
            0.0, 0.0, 0.0, 1.0
        ))

    @staticmethod
    def rotation_z(angle: float) -> Mat4:
        c = math.cos(angle)
        s = math.sin(angle)
        return Mat4.from_rows((
            c,   -s,  0.0, 0.0,
            s,    c,  0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0
        ))

    @staticmethod
    def look_at(eye: Vec3, target: Vec3, up: Optional[Vec3] = None) -> Mat4:
        """Right-handed view matrix: the camera looks down its -Z axis."""
        if up is None:
            up = Vec3.up()

        forward = (target - eye).normalized()
        right = forward.cross(up).normalized()
        true_up = right.cross(forward)

        return Mat4.from_rows((
            right.x,    right.y,    right.z,    -right.dot(eye),
            true_up.x,  true_up.y,  true_up.z,  -true_up.dot(eye),
            -forward.x, -forward.y, -forward.z,  forward.dot(eye),
            0.0,        0.0,        0.0,         1.0
        ))

    @staticmethod
    def perspective(fov_y: float, aspect: float, near: float, far: float) -> Mat4:
        f = 1.0 / math.tan(fov_y / 2.0)
        dz = near - far

        return Mat4.from_rows((
            f/aspect, 0.0, 0.0,            0.0,
            0.0,      f,   0.0,            0.0,
            0.0,      0.0, (far+near)/dz,  2.0*far*near/dz,
            0.0,      0.0, -1.0,           0.0
        ))

    @staticmethod
    def ortho(left: float, right: float, bottom: float, top: float,
              near: float, far: float) -> Mat4:
        dx = right - left
        dy = top - bottom
        dz = far - near

        return Mat4.from_rows((
            2.0/dx,  0.0,     0.0,      -(right+left)/dx,
            0.0,     2.0/dy,  0.0,      -(top+bottom)/dy,
            0.0,     0.0,    -2.0/dz,   -(far+near)/dz,
            0.0,     0.0,     0.0,       1.0
        ))


# =============================================================================
# Quaternion
# =============================================================================

@dataclass(frozen=True)
class Quat:
    """
    Quaternion (x, y, z, w) with w the scalar part.

    Unit quaternions are rotations. Products compose right to left:
    `a * b` rotates by `b` first, then by `a`.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __add__(self, other: Quat) -> Quat:
        return Quat(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Quat) -> Quat:
        return Quat(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: Quat) -> Quat:
        return self.multiply(other)

    def __neg__(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def scale(self, s: float) -> Quat:
        return Quat(self.x * s, self.y * s, self.z * s, self.w * s)

    def multiply(self, other: Quat) -> Quat:
        """Hamilton product. The result applies `other` first, then `self`."""
        return Quat(
            self.w*other.x + self.x*other.w + self.y*other.z - self.z*other.y,
            self.w*other.y - self.x*other.z + self.y*other.w + self.z*other.x,
            self.w*other.z + self.x*other.y - self.y*other.x + self.z*other.w,
            self.w*other.w - self.x*other.x - self.y*other.y - self.z*other.z
        )

    def dot(self, other: Quat) -> float:
        return self.x*other.x + self.y*other.y + self.z*other.z + self.w*other.w

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x*self.x + self.y*self.y + self.z*self.z + self.w*self.w

    def normalized(self) -> Quat:
        """Unit quaternion; a zero quaternion becomes the identity."""
        ln = self.length()
        if ln == 0.0:
            return Quat.identity()
        return Quat(self.x/ln, self.y/ln, self.z/ln, self.w/ln)

    def conjugate(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> Quat:
        length_sq = self.length_squared()
        if length_sq == 0.0:
            return Quat.identity()
        return self.conjugate().scale(1.0 / length_sq)

    def rotate_vec3(self, v: Vec3) -> Vec3:
        result = self * Quat(v.x, v.y, v.z, 0.0) * self.conjugate()
        return Vec3(result.x, result.y, result.z)

    def to_mat4(self) -> Mat4:
        q = self.normalized()
        x, y, z, w = q.x, q.y, q.z, q.w

        xx = x*x; yy = y*y; zz = z*z
        xy = x*y; xz = x*z; yz = y*z
        wx = w*x; wy = w*y; wz = w*z

        return Mat4.from_rows((
            1-2*(yy+zz),  2*(xy-wz),    2*(xz+wy),    0.0,
            2*(xy+wz),    1-2*(xx+zz),  2*(yz-wx),    0.0,
            2*(xz-wy),    2*(yz+wx),    1-2*(xx+yy),  0.0,
            0.0,          0.0,          0.0,          1.0
        ))

    def to_axis_angle(self) -> Tuple[Vec3, float]:
        """
        Axis and angle (radians) of the rotation.

        Rotations too small to define an axis come back as ((1, 0, 0), 0).
        """
        q = self.normalized()
        if q.w >= 1.0:
            return Vec3.right(), 0.0

        angle = 2.0 * math.acos(max(-1.0, min(1.0, q.w)))
        s = math.sqrt(max(0.0, 1.0 - q.w * q.w))
        if s < 0.001:
            return Vec3.right(), 0.0

        return Vec3(q.x / s, q.y / s, q.z / s), angle

    def to_euler(self) -> Tuple[float, float, float]:
        """Inverse of `from_euler`: returns (yaw, pitch, roll) in radians."""
        q = self.normalized()
        x, y, z, w = q.x, q.y, q.z, q.w

        roll = math.atan2(2.0 * (w*x + y*z), 1.0 - 2.0 * (x*x + y*y))

        sinp = 2.0 * (w*y - z*x)
        if abs(sinp) >= 1.0:
            # gimbal lock
            pitch = math.copysign(math.pi / 2.0, sinp)
        else:
            pitch = math.asin(sinp)

        yaw = math.atan2(2.0 * (w*z + x*y), 1.0 - 2.0 * (y*y + z*z))

        return yaw, pitch, roll

    def slerp(self, other: Quat, t: float) -> Quat:
        """Spherical interpolation along the shortest arc."""
        q1 = self.normalized()
        q2 = other.normalized()
        dot = q1.dot(q2)

        if dot < 0.0:
            q2 = -q2
            dot = -dot

        if dot > SLERP_LINEAR_THRESHOLD:
            return (q1 + (q2 - q1).scale(t)).normalized()

        theta = math.acos(dot)
        sin_theta = math.sin(theta)

        s0 = math.sin((1.0 - t) * theta) / sin_theta
        s1 = math.sin(t * theta) / sin_theta

        return q1.scale(s0) + q2.scale(s1)

    def lerp(self, other: Quat, t: float) -> Quat:
        return (self + (other - self).scale(t)).normalized()

    def angle_to(self, other: Quat) -> float:
        dot = abs(self.normalized().dot(other.normalized()))
        if dot >= 1.0:
            return 0.0
        return 2.0 * math.acos(dot)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    @staticmethod
    def identity() -> Quat:
        return Quat(0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def from_axis_angle(axis: Vec3, angle: float) -> Quat:
        axis = axis.normalized()
        half = angle / 2.0
        s = math.sin(half)
        return Quat(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @staticmethod
    def from_euler(yaw: float, pitch: float, roll: float) -> Quat:
        """
        Rotation from Euler angles in radians.

        Roll turns about X, pitch about Y and yaw about Z; `to_euler` returns
        the same triple for pitch inside (-pi/2, pi/2).
        """
        cy = math.cos(yaw / 2);   sy = math.sin(yaw / 2)
        cp = math.cos(pitch / 2); sp = math.sin(pitch / 2)
        cr = math.cos(roll / 2);  sr = math.sin(roll / 2)

        return Quat(
            sr*cp*cy - cr*sp*sy,
            cr*sp*cy + sr*cp*sy,
            cr*cp*sy - sr*sp*cy,
            cr*cp*cy + sr*sp*sy
        )

    @staticmethod
    def from_mat4(m: Mat4) -> Quat:
        """
        Extract the rotation from the upper 3x3 block.

        The branch divides by the largest of trace and diagonal terms so
        rotations near 180 degrees stay stable.
        """
        trace = m[0, 0] + m[1, 1] + m[2, 2]

        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0  # 4 * w
            return Quat(
                (m[2, 1] - m[1, 2]) / s,
                (m[0, 2] - m[2, 0]) / s,
                (m[1, 0] - m[0, 1]) / s,
                0.25 * s
            )
        elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
            s = math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2]) * 2.0  # 4 * x
            return Quat(
                0.25 * s,
                (m[0, 1] + m[1, 0]) / s,
                (m[0, 2] + m[2, 0]) / s,
                (m[2, 1] - m[1, 2]) / s
            )
        elif m[1, 1] > m[2, 2]:
            s = math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2]) * 2.0  # 4 * y
            return Quat(
                (m[0, 1] + m[1, 0]) / s,
                0.25 * s,
                (m[1, 2] + m[2, 1]) / s,
                (m[0, 2] - m[2, 0]) / s
            )
        else:
            s = math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1]) * 2.0  # 4 * z
            return Quat(
                (m[0, 2] + m[2, 0]) / s,
                (m[1, 2] + m[2, 1]) / s,
                0.25 * s,
                (m[1, 0] - m[0, 1]) / s
            )


# =============================================================================
# Utility Functions
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))
