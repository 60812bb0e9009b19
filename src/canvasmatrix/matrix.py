"""2D affine matrix construction and composition.

A matrix is a 6-tuple ``(a, b, c, d, e, f)`` describing the map::

    x' = a*x + c*y + e
    y' = b*x + d*y + f

which is the same component order used by HTML canvas ``setTransform``
and by PDF content stream ``cm`` operators. Every function here returns
a new tuple; nothing is mutated in place.
"""

import math

Matrix = tuple[float, float, float, float, float, float]

IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def identity() -> Matrix:
    """Return the identity matrix."""
    return IDENTITY


def transform(a: float, b: float, c: float, d: float, e: float, f: float) -> Matrix:
    """Build a matrix from its six raw components, unchanged."""
    return (a, b, c, d, e, f)


def translate(tx: float, ty: float) -> Matrix:
    """Build a translation by ``(tx, ty)``."""
    return (1.0, 0.0, 0.0, 1.0, tx, ty)


def scale(sx: float, sy: float) -> Matrix:
    """Build a scale by ``sx`` horizontally and ``sy`` vertically."""
    return (sx, 0.0, 0.0, sy, 0.0, 0.0)


def rotate(angle: float) -> Matrix:
    """Build a rotation by ``angle`` radians.

    Positive angles turn the x axis towards the y axis, so on a y-down
    surface such as a canvas the rotation appears clockwise.
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return (cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0)


def multiply(m1: Matrix, m2: Matrix) -> Matrix:
    """
    Compose two matrices as 3x3 homogeneous matrices, returning ``m1 . m2``.

    Callers tracking a drawing context pass the current transform as
    ``m1`` and the newly applied operation as ``m2``; the product then maps
    user space through ``m2`` first and ``m1`` second, as a canvas does.
    Swapping the operands changes the result.

    Args:
        m1: Left-hand matrix
        m2: Right-hand matrix

    Returns:
        The composed matrix
    """
    a1, b1, c1, d1, e1, f1 = m1
    a2, b2, c2, d2, e2, f2 = m2
    return (
        a1 * a2 + c1 * b2,
        b1 * a2 + d1 * b2,
        a1 * c2 + c1 * d2,
        b1 * c2 + d1 * d2,
        a1 * e2 + c1 * f2 + e1,
        b1 * e2 + d1 * f2 + f1,
    )


def apply_to_point(m: Matrix, x: float, y: float) -> tuple[float, float]:
    """Map the point ``(x, y)`` through ``m``."""
    a, b, c, d, e, f = m
    return (a * x + c * y + e, b * x + d * y + f)
