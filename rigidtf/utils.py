from .transformations import UNIT_TOLERANCE, Vector3, Quaternion

X_AX = Vector3(1.0, 0.0, 0.0)
Y_AX = Vector3(0.0, 1.0, 0.0)
Z_AX = Vector3(0.0, 0.0, 1.0)

EPS = 1e-10

__all__ = [
    "X_AX",
    "Y_AX",
    "Z_AX",
    "EPS",
    "UNIT_TOLERANCE",
    "vectors_close",
    "quaternions_close",
    "rotations_close",
    "transforms_close",
]


def _almost_equal(p, q, tol):
    return abs(p - q) < tol


def vectors_close(a, b, tol=EPS):
    return (_almost_equal(a.x, b.x, tol)
            and _almost_equal(a.y, b.y, tol)
            and _almost_equal(a.z, b.z, tol))


def quaternions_close(a, b, tol=EPS):
    return _almost_equal(a.w, b.w, tol) and vectors_close(a.v, b.v, tol)


def rotations_close(a, b, tol=EPS):
    """
    Compare two quaternions as rotations: `q` and `-q` rotate every vector
    the same way, so either sign matches.
    """
    flipped = Quaternion(-b.w, -b.v)
    return quaternions_close(a, b, tol) or quaternions_close(a, flipped, tol)


def transforms_close(a, b, tol=EPS):
    return (vectors_close(a.position, b.position, tol)
            and quaternions_close(a.rotation, b.rotation, tol))
