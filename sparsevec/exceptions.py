from __future__ import annotations


class SparseVecError(Exception):
    """Base class for all sparsevec errors."""


class SparseVecWarning(Warning):
    """Base class for all sparsevec warnings."""


class InvalidDimensionError(ValueError, SparseVecError):
    """A vector was given a dimension it cannot have, eg a negative one."""


class IndexOutOfRangeError(IndexError, SparseVecError):
    """A stored index falls outside of the declared dimension of a vector."""

    def __init__(self, index: int, dimension: int) -> None:
        self.index: int = index
        """The offending index."""
        self.dimension: int = dimension
        """The declared dimension of the vector."""
        super().__init__(
            f"Index {index} is outside the declared dimension {dimension}."
        )


class DimensionMismatchWarning(UserWarning, SparseVecWarning):
    """Two vectors with different declared dimensions were combined."""

    def __init__(self, left: int, right: int, result: int) -> None:
        self.left: int = left
        """The dimension of the first operand."""
        self.right: int = right
        """The dimension of the second operand."""
        self.result: int = result
        """The dimension that the result was given."""
        super().__init__(
            f"Combining vectors of dimension {left} and {right}, the result has dimension {result}."  # noqa: E501
        )
