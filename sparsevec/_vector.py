"""The SparseVector container and the operations that combine two of them."""

from __future__ import annotations

import logging
import math
import numbers
import operator
import types
from typing import Iterable, Mapping, Sequence
import warnings

from sparsevec.exceptions import DimensionMismatchWarning, InvalidDimensionError

logger = logging.getLogger(__name__)


class SparseVector:
    """A vector that only stores the coordinates that have been set.

    Absent coordinates read as ``0.0``.
    The declared ``dimension`` is nominal: :meth:`set` and :meth:`get`
    accept any integer index and never change the dimension.

    The entry storage is a shared handle. :meth:`grow` returns a new vector
    that shares it with the receiver, so a :meth:`set` through one is seen
    through the other. Use :meth:`copy` to get an independent vector.
    Everything else that returns a vector (:meth:`scale`, :meth:`compact`,
    :func:`add`, :func:`concat`) gives the result its own storage and leaves
    the operands alone.

    Instances are not thread safe. Concurrent :meth:`set` calls on a shared
    store must be synchronized by the caller.

    Examples
    --------
    >>> from sparsevec import SparseVector
    >>> v = SparseVector.from_array([0, 0, 3, 0, 5])
    >>> v.size()
    5
    >>> v
    SparseVector(dimension=5, entries={2: 3.0, 4: 5.0})
    >>> v.get(0)
    0.0
    >>> v.magnitude()  # doctest: +ELLIPSIS
    5.830951894845...
    """

    __slots__ = ("_dimension", "_entries")

    def __init__(self, dimension: int = 0) -> None:
        self._dimension: int = _check_dimension(dimension)
        self._entries: dict[int, float] = {}

    @classmethod
    def _from_entries(cls, dimension: int, entries: dict[int, float]) -> SparseVector:
        """Wrap an existing store without copying it."""
        vec = cls.__new__(cls)
        vec._dimension = dimension
        vec._entries = entries
        return vec

    @classmethod
    def from_array(cls, values: Sequence[float]) -> SparseVector:
        """Build a vector from dense values.

        The dimension is ``len(values)``, and only the nonzero values are stored.

        Parameters
        ----------
        values :
            Any sized sequence of numbers, including a numpy array.

        Returns
        -------
        SparseVector
            The new vector.

        Examples
        --------
        >>> from sparsevec import SparseVector
        >>> SparseVector.from_array([1, 0, 2]).to_dict()
        {0: 1.0, 2: 2.0}
        """
        vec = cls(len(values))
        vec.load(values)
        return vec

    @property
    def dimension(self) -> int:
        """The declared size of the vector."""
        return self._dimension

    @property
    def entries(self) -> Mapping[int, float]:
        """A read-only, live view of the stored entries."""
        return types.MappingProxyType(self._entries)

    @property
    def nnz(self) -> int:
        """The number of stored entries, stored zeros included."""
        return len(self._entries)

    def size(self) -> int:
        """The declared size of the vector."""
        return self._dimension

    def grow(self, n: int) -> SparseVector:
        """Return a vector with dimension ``max(self.size(), n)``.

        The returned vector shares its entry storage with this one.

        Examples
        --------
        >>> from sparsevec import SparseVector
        >>> v = SparseVector(2)
        >>> g = v.grow(10)
        >>> g.size(), v.size()
        (10, 2)
        >>> g.set(7, 1.5)
        >>> v.get(7)
        1.5
        """
        n = operator.index(n)
        return SparseVector._from_entries(max(self._dimension, n), self._entries)

    def set(self, index: int, value: float) -> None:
        """Store ``value`` at ``index``, in place.

        Zeros are stored as-is, unlike :meth:`load`.
        The index is not checked against the dimension.
        """
        self._entries[index] = float(value)

    def get(self, index: int) -> float:
        """The value at ``index``, or ``0.0`` if nothing is stored there."""
        return self._entries.get(index, 0.0)

    __getitem__ = get

    def load(self, values: Iterable[float]) -> None:
        """Set every nonzero value at its position.

        Existing entries are kept, so loading into a non-empty vector merges.
        """
        for i, value in enumerate(values):
            if value != 0:
                self.set(i, value)

    def magnitude(self) -> float:
        """The Euclidean (L2) norm of the vector."""
        return math.sqrt(sum(val * val for val in self._entries.values()))

    def scale(self, scalar: float) -> SparseVector:
        """Multiply every stored entry by ``scalar``.

        Entries that become zero stay stored, call :meth:`compact` to drop them.

        Examples
        --------
        >>> from sparsevec import SparseVector
        >>> SparseVector.from_array([1, 2]).scale(0).to_dict()
        {0: 0.0, 1: 0.0}
        """
        scalar = float(scalar)
        entries = {i: val * scalar for i, val in self._entries.items()}
        return SparseVector._from_entries(self._dimension, entries)

    def compact(self) -> SparseVector:
        """A copy of this vector without the stored zeros."""
        entries = {i: val for i, val in self._entries.items() if val != 0}
        return SparseVector._from_entries(self._dimension, entries)

    def copy(self) -> SparseVector:
        """A copy of this vector with its own entry storage."""
        return SparseVector._from_entries(self._dimension, dict(self._entries))

    def to_dict(self) -> dict[int, float]:
        """A copy of the stored entries."""
        return dict(self._entries)

    def to_list(self) -> list[float]:
        """The dense values ``[self.get(i) for i in range(self.size())]``."""
        return [self.get(i) for i in range(self._dimension)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseVector):
            return NotImplemented
        return (
            self._dimension == other._dimension and self._entries == other._entries
        )

    __hash__ = None

    def __add__(self, other: SparseVector) -> SparseVector:
        if not isinstance(other, SparseVector):
            return NotImplemented
        return _add(self, other, stacklevel=3)

    def __mul__(self, scalar: float) -> SparseVector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def __matmul__(self, other: SparseVector) -> float:
        if not isinstance(other, SparseVector):
            return NotImplemented
        return dot(self, other)

    def __abs__(self) -> float:
        return self.magnitude()

    def __str__(self) -> str:
        return str(dict(sorted(self._entries.items())))

    def __repr__(self) -> str:
        return f"SparseVector(dimension={self._dimension}, entries={self})"


def new_vector(dimension: int) -> SparseVector:
    """Construct an empty vector with the given dimension."""
    return SparseVector(dimension)


def vector_from_array(values: Sequence[float]) -> SparseVector:
    """Construct a vector from dense values. See `SparseVector.from_array`."""
    return SparseVector.from_array(values)


def scale(vector: SparseVector, scalar: float) -> SparseVector:
    """Multiply every stored entry of ``vector`` by ``scalar``."""
    return vector.scale(scalar)


def magnitude(vector: SparseVector) -> float:
    """The Euclidean (L2) norm of ``vector``."""
    return vector.magnitude()


def concat(v1: SparseVector, v2: SparseVector) -> SparseVector:
    """Append ``v2`` to the end of ``v1``.

    Parameters
    ----------
    v1 :
        The leading vector. Its entries keep their indices.
    v2 :
        The trailing vector. Its entries are shifted by ``v1.size()``.

    Returns
    -------
    SparseVector
        A new vector of dimension ``v1.size() + v2.size()``.
        Neither operand is modified.

    Examples
    --------
    >>> from sparsevec import SparseVector, concat
    >>> concat(SparseVector.from_array([1, 0]), SparseVector.from_array([0, 2]))
    SparseVector(dimension=4, entries={0: 1.0, 3: 2.0})
    """
    offset = v1.size()
    entries = dict(v1._entries)
    for i, val in v2._entries.items():
        entries[offset + i] = val
    return SparseVector._from_entries(offset + v2.size(), entries)


def add(v1: SparseVector, v2: SparseVector) -> SparseVector:
    """Elementwise sum of two vectors.

    The operand with more stored entries is copied, and the entries of the
    other one are added into the copy. When both have the same number of
    entries, ``v1`` is the one copied.

    The result takes the dimension of the copied operand, not
    ``max(v1.size(), v2.size())``. A `DimensionMismatchWarning` is emitted
    whenever the two dimensions differ.

    Parameters
    ----------
    v1 :
        The first vector.
    v2 :
        The second vector.

    Returns
    -------
    SparseVector
        The sum. Neither operand is modified.

    Examples
    --------
    >>> from sparsevec import SparseVector, add
    >>> add(SparseVector.from_array([1, 0, 2]), SparseVector.from_array([0, 3, 0]))
    SparseVector(dimension=3, entries={0: 1.0, 1: 3.0, 2: 2.0})
    """
    return _add(v1, v2, stacklevel=3)


def _add(v1: SparseVector, v2: SparseVector, *, stacklevel: int) -> SparseVector:
    # stacklevel is counted from the warn() call below
    smaller, bigger = _smaller_bigger(v1, v2)
    if v1.size() != v2.size():
        warnings.warn(
            DimensionMismatchWarning(v1.size(), v2.size(), bigger.size()),
            stacklevel=stacklevel,
        )
    entries = dict(bigger._entries)
    for i, val in smaller._entries.items():
        entries[i] = entries.get(i, 0.0) + val
    return SparseVector._from_entries(bigger.size(), entries)


def dot(v1: SparseVector, v2: SparseVector) -> float:
    """The dot product of two vectors.

    Only the indices stored in the operand with fewer entries are visited.

    Examples
    --------
    >>> from sparsevec import SparseVector, dot
    >>> dot(SparseVector.from_array([1, 2, 3]), SparseVector.from_array([4, 5, 6]))
    32.0
    """
    smaller, bigger = _smaller_bigger(v1, v2)
    return sum((val * bigger.get(i) for i, val in smaller._entries.items()), 0.0)


def _smaller_bigger(
    v1: SparseVector, v2: SparseVector
) -> tuple[SparseVector, SparseVector]:
    """Sort two vectors by entry count. Ties make ``v1`` the bigger one."""
    if v2.nnz > v1.nnz:
        smaller, bigger = v1, v2
    else:
        smaller, bigger = v2, v1
    logger.debug(
        "Iterating %d stored entries against a vector with %d",
        smaller.nnz,
        bigger.nnz,
    )
    return smaller, bigger


def _check_dimension(dimension: int) -> int:
    dimension = operator.index(dimension)
    if dimension < 0:
        raise InvalidDimensionError(
            f"dimension must be non-negative, got {dimension}"
        )
    return dimension
