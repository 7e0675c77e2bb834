from .transformations import (
    Vector3,
    Quaternion,
    Transform,
    add,
    sub,
    dot,
    negate,
    cross,
    scale,
    norm,
    conjugate,
    multiply,
    rotate,
    normalize,
    is_unit,
    require_unit,
    compose,
    invert,
    apply,
    apply_points,
)
from .frames import CoordinateFrame
from .utils import X_AX, Y_AX, Z_AX, EPS, UNIT_TOLERANCE

__all__ = [
    "Vector3",
    "Quaternion",
    "Transform",
    "add",
    "sub",
    "dot",
    "negate",
    "cross",
    "scale",
    "norm",
    "conjugate",
    "multiply",
    "rotate",
    "normalize",
    "is_unit",
    "require_unit",
    "compose",
    "invert",
    "apply",
    "apply_points",
    "CoordinateFrame",
    "X_AX",
    "Y_AX",
    "Z_AX",
    "EPS",
    "UNIT_TOLERANCE",
]
