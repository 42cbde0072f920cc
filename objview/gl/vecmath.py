"""3-vector helpers used by the matrix builders.

All functions are pure and accept any array-like of length 3.
"""

import numpy as np


def normalize(v):
    """Return ``v`` scaled to unit length.

    Parameters
    ----------
    v : array-like
        3-vector.

    Returns
    -------
    numpy.ndarray
        Unit 3-vector (float64).

    Raises
    ------
    ValueError
        If ``v`` has zero length.
    """
    v = np.asarray(v, dtype=np.float64)
    length = np.sqrt(np.dot(v, v))
    if length == 0.0:
        raise ValueError(f"Cannot normalize a zero-length vector {v.tolist()!r}.")
    return v / length


def cross(a, b):
    """Return the cross product ``a x b``."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ])


def dot(a, b):
    """Return the scalar product of ``a`` and ``b``."""
    return float(np.dot(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)))
