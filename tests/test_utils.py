"""Tests for axis constants and approximate comparisons."""

import math

from rigidtf import Quaternion, Transform, Vector3, X_AX, Y_AX, Z_AX
from rigidtf.utils import EPS, quaternions_close, rotations_close, transforms_close, vectors_close


class TestAxes:
    """Test axis constants."""

    def test_unit_axes(self):
        assert X_AX == Vector3(1, 0, 0)
        assert Y_AX == Vector3(0, 1, 0)
        assert Z_AX == Vector3(0, 0, 1)


class TestClose:
    """Test tolerance-based comparisons."""

    def test_vectors_close(self):
        assert vectors_close(Vector3(1, 2, 3), Vector3(1, 2, 3 + EPS / 2))
        assert not vectors_close(Vector3(1, 2, 3), Vector3(1, 2, 3 + 10 * EPS))

    def test_vectors_close_custom_tolerance(self):
        assert vectors_close(Vector3(1, 2, 3), Vector3(1.001, 2, 3), tol=1e-2)

    def test_nan_is_never_close(self):
        assert not vectors_close(Vector3(math.nan, 0, 0), Vector3(math.nan, 0, 0))

    def test_quaternions_close(self):
        assert quaternions_close(Quaternion(1, Vector3()), Quaternion(1 - EPS / 2, Vector3()))
        assert not quaternions_close(Quaternion(1, Vector3()), Quaternion(-1, Vector3()))

    def test_rotations_close_ignores_sign(self):
        quat = Quaternion.from_axis_angle(Z_AX, 1.0)
        flipped = Quaternion(-quat.w, -quat.v)
        assert rotations_close(quat, flipped)
        assert not rotations_close(quat, Quaternion.from_axis_angle(Z_AX, 1.5))

    def test_transforms_close(self):
        tf = Transform(Vector3(1, 2, 3), Quaternion.from_axis_angle(X_AX, 0.5))
        assert transforms_close(tf, tf)
        assert not transforms_close(tf, Transform(Vector3(1, 2, 3)))
