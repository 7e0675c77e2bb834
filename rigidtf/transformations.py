import logging
from dataclasses import dataclass, field
from numbers import Real

import numpy as np
import quantities as q

logger = logging.getLogger(__name__)

UNIT_TOLERANCE = 1e-9


def _fmt(value):
    return f"{value:g}"


@dataclass(frozen=True)
class Vector3:
    """
    A class representing a vector in three dimensions.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_array(cls, values):
        if isinstance(values, Vector3):
            return values
        values = np.asarray(values, dtype=np.float64)
        if len(values) == 4:
            values = values[:3]
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def to_array(self):
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return sub(self, other)

    def __neg__(self):
        return negate(self)

    def __matmul__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return dot(self, other)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return scale(self, scalar)

    __rmul__ = __mul__

    def __str__(self):
        return f"[{_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)}]"


def add(a, b):
    return Vector3(a.x + b.x, a.y + b.y, a.z + b.z)


def sub(a, b):
    return Vector3(a.x - b.x, a.y - b.y, a.z - b.z)


def dot(a, b):
    return a.x * b.x + a.y * b.y + a.z * b.z


def negate(a):
    return Vector3(-a.x, -a.y, -a.z)


def cross(a, b):
    return Vector3(a.y * b.z - a.z * b.y,
                   a.z * b.x - a.x * b.z,
                   a.x * b.y - a.y * b.x)


def scale(a, s):
    return Vector3(s * a.x, s * a.y, s * a.z)


@dataclass(frozen=True)
class Quaternion:
    """
    A class representing a quaternion as a scalar part `w` and a vector part `v`.

    Only unit quaternions represent rotations. Nothing here enforces that:
    quaternions built from raw components are used exactly as given, and
    `normalized` or `require_unit` must be called explicitly where a checked
    rotation is wanted.
    """
    w: float = 1.0
    v: Vector3 = field(default_factory=Vector3)

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def from_components(cls, w, x, y, z):
        return cls(w, Vector3(x, y, z))

    @classmethod
    def from_array(cls, values):
        values = np.asarray(values, dtype=np.float64)
        return cls.from_components(*(float(c) for c in values[:4]))

    @classmethod
    def from_axis_angle(cls, axis, angle, normalize_axis=False):
        """
        Rotation of `angle` about `axis`.

        The axis is expected to be a unit vector and is used as given unless
        `normalize_axis` is set. `angle` is in radians, or any angular
        quantity from the `quantities` package.
        """
        if hasattr(angle, 'rescale'):
            angle_rad = float(angle.rescale(q.rad).magnitude)
        else:
            angle_rad = angle
        axis = Vector3.from_array(axis)
        if normalize_axis:
            length = np.sqrt(dot(axis, axis))
            if length == 0:
                raise ValueError("Cannot normalize a zero-length rotation axis")
            axis = scale(axis, 1.0 / length)
        half_angle = angle_rad / 2
        return cls(float(np.cos(half_angle)), scale(axis, float(np.sin(half_angle))))

    def to_array(self):
        return np.array([self.w, self.v.x, self.v.y, self.v.z], dtype=np.float64)

    def norm(self):
        return norm(self)

    def conjugate(self):
        return conjugate(self)

    def normalized(self):
        return normalize(self)

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return multiply(self, other)
        if isinstance(other, Vector3):
            return rotate(self, other)
        return NotImplemented

    def __invert__(self):
        return conjugate(self)

    def __str__(self):
        return f"[{_fmt(self.w)}, {self.v}]"


def norm(quat):
    return float(np.sqrt(quat.w * quat.w + dot(quat.v, quat.v)))


def conjugate(quat):
    return Quaternion(quat.w, negate(quat.v))


def multiply(a, b):
    # Hamilton product
    w = a.w * b.w - dot(a.v, b.v)
    v = scale(b.v, a.w) + scale(a.v, b.w) + cross(a.v, b.v)
    return Quaternion(w, v)


def rotate(quat, vector):
    # vector represented as pure quaternion
    p = Quaternion(0.0, vector)
    return multiply(multiply(quat, p), conjugate(quat)).v


def normalize(quat):
    length = norm(quat)
    if length == 0:
        raise ValueError("Cannot normalize a zero quaternion")
    logger.debug("Normalizing quaternion %s with norm %r", quat, length)
    return Quaternion(quat.w / length, scale(quat.v, 1.0 / length))


def is_unit(quat, tol=UNIT_TOLERANCE):
    return abs(norm(quat) - 1.0) <= tol


def require_unit(quat, tol=UNIT_TOLERANCE):
    """Return `quat` unchanged, or raise ValueError if it is not unit-norm."""
    if not is_unit(quat, tol):
        raise ValueError(f"Expected a unit quaternion, got norm {norm(quat)!r} for {quat}")
    return quat


@dataclass(frozen=True)
class Transform:
    """
    A rigid transformation: a position and a rotation.

    Maps a point `p` given in the local (child) frame to
    `position + rotation * p` in the parent frame.
    """
    position: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def from_translation(cls, offset):
        return cls(Vector3.from_array(offset), Quaternion())

    @classmethod
    def from_rotation(cls, rotation):
        return cls(Vector3(), rotation)

    def compose(self, other):
        """
        Compose this transformation with another transformation.
        `other` is the frame expressed relative to this one; the result maps
        `other`'s local frame into this transformation's parent frame.
        """
        return compose(self, other)

    def inverse(self):
        return invert(self)

    def apply(self, vector):
        return apply(self, vector)

    def apply_points(self, points):
        return apply_points(self, points)

    def __mul__(self, other):
        if isinstance(other, Transform):
            return compose(self, other)
        if isinstance(other, Vector3):
            return apply(self, other)
        return NotImplemented

    def __invert__(self):
        return invert(self)

    def __str__(self):
        return f"{{pos: {self.position}, rot: {self.rotation}}}"


def compose(a, b):
    return Transform(a.position + rotate(a.rotation, b.position),
                     multiply(a.rotation, b.rotation))


def invert(tf):
    rotation = conjugate(tf.rotation)
    return Transform(rotate(rotation, negate(tf.position)), rotation)


def apply(tf, vector):
    return tf.position + rotate(tf.rotation, vector)


def apply_points(tf, points):
    """
    Apply transformation to an array of points.
    Points can be a single point [x, y, z] or an array of points [[x1, y1, z1], ...].
    """
    points = np.asarray(points, dtype=np.float64)
    w = tf.rotation.w
    u = tf.rotation.v.to_array()

    # Expanded form of the sandwich product, valid for any quaternion
    uv = points @ u
    rotated = ((w * w - u @ u) * points
               + 2.0 * np.multiply.outer(uv, u)
               + 2.0 * w * np.cross(u, points))
    return rotated + tf.position.to_array()
