"""Sparse vectors (storing only the coordinates that are set) and operations on them."""

from __future__ import annotations

import importlib.metadata
import warnings

from sparsevec import exceptions as exceptions
from sparsevec._convert import from_ibis as from_ibis
from sparsevec._convert import to_ibis as to_ibis
from sparsevec._convert import to_numpy as to_numpy
from sparsevec._similarity import angle as angle
from sparsevec._similarity import normalized_angle as normalized_angle
from sparsevec._similarity import normalized_similarity as normalized_similarity
from sparsevec._similarity import similarity as similarity
from sparsevec._vector import SparseVector as SparseVector
from sparsevec._vector import add as add
from sparsevec._vector import concat as concat
from sparsevec._vector import dot as dot
from sparsevec._vector import magnitude as magnitude
from sparsevec._vector import new_vector as new_vector
from sparsevec._vector import scale as scale
from sparsevec._vector import vector_from_array as vector_from_array

try:
    __version__ = importlib.metadata.version(__name__)
except importlib.metadata.PackageNotFoundError as e:
    warnings.warn(f"Could not determine version of {__name__}\n{e!s}", stacklevel=2)
    __version__ = "unknown"
