"""Tests for the opt-in normalization and unit-norm checks."""

import math

import pytest

from rigidtf import Quaternion, Vector3, Z_AX, is_unit, normalize, norm, require_unit
from rigidtf.utils import quaternions_close, vectors_close


class TestNormalize:
    """Test explicit normalization."""

    def test_scales_to_unit(self):
        quat = normalize(Quaternion(2, Vector3()))
        assert quat == Quaternion(1, Vector3())

    def test_keeps_direction(self):
        quat = Quaternion(1, Vector3(1, 2, 3))
        unit = quat.normalized()
        assert norm(unit) == pytest.approx(1.0)
        assert quaternions_close(unit, Quaternion(1 / math.sqrt(15), Vector3(1, 2, 3) * (1 / math.sqrt(15))))

    def test_zero_raises(self):
        with pytest.raises(ValueError, match="zero quaternion"):
            normalize(Quaternion(0, Vector3()))


class TestUnitCheck:
    """Test the unit-norm precondition check."""

    def test_is_unit(self):
        assert is_unit(Quaternion.from_axis_angle(Z_AX, 0.3))
        assert not is_unit(Quaternion(1, Vector3(1, 0, 0)))

    def test_tolerance(self):
        almost = Quaternion(1 + 1e-6, Vector3())
        assert not is_unit(almost)
        assert is_unit(almost, tol=1e-5)

    def test_require_unit_passes_through(self):
        quat = Quaternion.from_axis_angle(Z_AX, 1.2)
        assert require_unit(quat) is quat

    def test_require_unit_raises(self):
        with pytest.raises(ValueError, match="Expected a unit quaternion"):
            require_unit(Quaternion(2, Vector3()))


class TestAxisNormalization:
    """Test opt-in axis normalization in the axis-angle constructor."""

    def test_default_keeps_axis(self):
        quat = Quaternion.from_axis_angle(Vector3(0, 0, 2), math.pi)
        assert not is_unit(quat)

    def test_normalize_axis(self):
        quat = Quaternion.from_axis_angle(Vector3(0, 0, 2), math.pi, normalize_axis=True)
        assert is_unit(quat)
        assert vectors_close(quat.v, Vector3(0, 0, 1))

    def test_zero_axis_raises(self):
        with pytest.raises(ValueError, match="zero-length"):
            Quaternion.from_axis_angle(Vector3(), 1.0, normalize_axis=True)
