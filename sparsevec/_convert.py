"""Conversion between SparseVector and ibis map expressions or numpy arrays."""

from __future__ import annotations

from typing import Mapping

import ibis
from ibis.expr import types as ir
import numpy as np

from sparsevec._vector import SparseVector
from sparsevec.exceptions import IndexOutOfRangeError, InvalidDimensionError

_MAP_TYPE = "map<int64, float64>"


def to_ibis(vector: SparseVector) -> ir.MapValue:
    """Convert to an ibis ``map<int64, float64>`` literal of the stored entries.

    The dimension is not part of the result.

    Examples
    --------
    >>> from sparsevec import SparseVector, to_ibis
    >>> m = to_ibis(SparseVector.from_array([0, 3, 0, 5]))
    >>> m.execute()
    {1: 3.0, 3: 5.0}
    """
    entries = vector.to_dict()
    if not entries:
        return ibis.literal(entries, type=_MAP_TYPE)
    keys = ibis.literal(list(entries.keys()), type="array<int64>")
    # float literals nested in a map compile to DECIMAL on duckdb,
    # so pass the exact reprs through and cast those
    values = ibis.literal([repr(v) for v in entries.values()], type="array<string>")
    return ibis.map(keys, values.map(lambda v: v.cast("float64")))


def from_ibis(
    value: ir.MapValue | Mapping[int, float] | None, dimension: int | None = None
) -> SparseVector:
    """Build a SparseVector from an ibis map, or from an already executed mapping.

    Parameters
    ----------
    value :
        A scalar ibis map expression, which will be executed with its
        default backend, or a plain mapping of index to value.
        ``None`` (eg from a NULL map) gives an empty vector, and NULL
        values inside the map are skipped like zeros.
    dimension :
        The dimension of the result. Defaults to one more than the largest index.

    Returns
    -------
    SparseVector
        A vector holding the nonzero values of the map.

    Examples
    --------
    >>> from sparsevec import from_ibis
    >>> from_ibis({0: 1.0, 4: 0.0, 2: 2.5})
    SparseVector(dimension=5, entries={0: 1.0, 2: 2.5})
    >>> from_ibis({0: 1.0}, dimension=10).size()
    10
    """
    if isinstance(value, ir.MapValue):
        value = value.execute()
    if value is None:
        value = {}
    if not isinstance(value, Mapping):
        raise TypeError(f"Expected a map of index to value, got {type(value)}")

    needed = max(value.keys(), default=-1) + 1
    smallest = min(value.keys(), default=0)
    if dimension is None:
        dimension = max(needed, 0)
    if smallest < 0:
        raise IndexOutOfRangeError(smallest, dimension)
    if dimension < needed:
        raise InvalidDimensionError(
            f"dimension {dimension} is too small to hold index {needed - 1}"
        )
    vec = SparseVector(dimension)
    for i, val in value.items():
        # NULL values inside the map read as 0, like absent ones
        if val is not None and val != 0:
            vec.set(i, val)
    return vec


def to_numpy(vector: SparseVector) -> np.ndarray:
    """Convert to a dense float64 numpy array of length ``vector.size()``.

    Raises `IndexOutOfRangeError` if an entry is stored outside of
    ``[0, vector.size())``, since it has no position in the array.

    Examples
    --------
    >>> from sparsevec import SparseVector, to_numpy
    >>> to_numpy(SparseVector.from_array([0, 3, 0, 5]))
    array([0., 3., 0., 5.])
    """
    dimension = vector.size()
    result = np.zeros(dimension, dtype=np.float64)
    for i, val in vector.entries.items():
        if not 0 <= i < dimension:
            raise IndexOutOfRangeError(i, dimension)
        result[i] = val
    return result
