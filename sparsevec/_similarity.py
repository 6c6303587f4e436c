"""Angle based measures of how closely two vectors point in the same direction.

None of these raise on degenerate input. If either vector has magnitude 0,
or the cosine is outside of [-1, 1] by more than rounding error, the result
is ``nan``. A cosine that overshoots by rounding error alone is clamped.
"""

from __future__ import annotations

import logging
import math

from sparsevec._vector import SparseVector, dot

logger = logging.getLogger(__name__)

_ROUNDING_TOLERANCE = 1e-12


def angle(v1: SparseVector, v2: SparseVector) -> float:
    """The angle in radians between two vectors.

    Computed as ``acos(dot(v1, v2) / (|v1| * |v2|))``.

    Parameters
    ----------
    v1 :
        The first vector.
    v2 :
        The second vector.

    Returns
    -------
    float
        A value in ``[0, pi]``, or ``nan`` if either vector has magnitude 0.

    Examples
    --------
    >>> from sparsevec import SparseVector, angle
    >>> angle(SparseVector.from_array([1, 0]), SparseVector.from_array([0, 1]))
    1.5707963267948966
    >>> angle(SparseVector.from_array([1, 0]), SparseVector.from_array([-3, 0]))
    3.141592653589793
    >>> angle(SparseVector(3), SparseVector.from_array([1, 2, 3]))
    nan
    """
    denominator = v1.magnitude() * v2.magnitude()
    if denominator == 0:
        logger.debug("angle() got a vector with magnitude 0, returning nan")
        return math.nan
    return _acos(dot(v1, v2) / denominator)


def normalized_angle(v1: SparseVector, v2: SparseVector) -> float:
    """The angle in radians between two vectors, after scaling both to unit length.

    Mathematically the same as :func:`angle`, but the rounding differs since
    the division happens before the dot product instead of after.
    Returns ``nan`` if either vector has magnitude 0.
    """
    m1 = v1.magnitude()
    m2 = v2.magnitude()
    if m1 == 0 or m2 == 0:
        logger.debug("normalized_angle() got a vector with magnitude 0, returning nan")
        return math.nan
    return _acos(dot(v1.scale(1 / m1), v2.scale(1 / m2)))


def similarity(v1: SparseVector, v2: SparseVector) -> float:
    """The cosine similarity of two vectors, as ``cos(angle(v1, v2))``.

    Examples
    --------
    >>> from sparsevec import SparseVector, similarity
    >>> v = SparseVector.from_array([3, 4])
    >>> similarity(v, v)
    1.0
    >>> similarity(v, SparseVector(2))
    nan
    """
    return math.cos(angle(v1, v2))


def normalized_similarity(v1: SparseVector, v2: SparseVector) -> float:
    """``cos(normalized_angle(v1, v2))``"""
    return math.cos(normalized_angle(v1, v2))


def _acos(x: float) -> float:
    # math.acos raises outside of its domain, we want nan instead
    if -1 <= x <= 1:
        return math.acos(x)
    # cos(v, v) can come out as 1 + a few ulps
    if abs(x) <= 1 + _ROUNDING_TOLERANCE:
        return math.acos(math.copysign(1.0, x))
    logger.debug(f"Cosine {x} is outside of [-1, 1], returning nan")
    return math.nan
