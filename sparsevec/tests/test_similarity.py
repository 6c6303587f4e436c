from __future__ import annotations

import math

import numpy as np
import pytest

from sparsevec import (
    SparseVector,
    angle,
    normalized_angle,
    normalized_similarity,
    similarity,
)

ALL_MEASURES = [angle, normalized_angle, similarity, normalized_similarity]


@pytest.mark.parametrize(
    "a,b,expected",
    [
        pytest.param([1, 0], [0, 1], math.pi / 2, id="orthogonal"),
        pytest.param([1, 0], [-3, 0], math.pi, id="opposite"),
        pytest.param([3, 4], [6, 8], 0.0, id="same_direction"),
        pytest.param([1, 0], [1, 1], math.pi / 4, id="45_degrees"),
        pytest.param([0, 0, 2], [0, 5, 0, 7], math.pi / 2, id="dimension_mismatch"),
    ],
)
@pytest.mark.parametrize("func", [angle, normalized_angle])
def test_angle(func, a, b, expected):
    result = func(SparseVector.from_array(a), SparseVector.from_array(b))
    assert result == pytest.approx(expected, abs=1e-7)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        pytest.param([1, 1], [-2, -2], -1.0, id="opposite_directions"),
        pytest.param([1, 2], [2, 4], 1.0, id="same_directions"),
        pytest.param([1], [-99], -1.0, id="1D"),
        pytest.param([1, 0], [0, 1], 0.0, id="orthogonal"),
        pytest.param([1, 2, 3], [4, 5, 6], 32 / math.sqrt(14 * 77), id="general"),
    ],
)
@pytest.mark.parametrize("func", [similarity, normalized_similarity])
def test_similarity(func, a, b, expected):
    result = func(SparseVector.from_array(a), SparseVector.from_array(b))
    assert result == pytest.approx(expected, abs=1e-7)


@pytest.mark.parametrize(
    "values",
    [
        pytest.param([3, 4], id="pythagorean"),
        pytest.param([1, 2, 3], id="small"),
        pytest.param([0.1, 0, 0, 1e-3, 7e5], id="wide_range"),
        pytest.param([-1, -1, -1], id="negative"),
    ],
)
@pytest.mark.parametrize("func", [similarity, normalized_similarity])
def test_self_similarity(func, values):
    v = SparseVector.from_array(values)
    assert func(v, v) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "a,b",
    [
        pytest.param([], [1, 2], id="first_empty"),
        pytest.param([1, 2], [0, 0], id="second_zeros"),
        pytest.param([], [], id="both_empty"),
    ],
)
@pytest.mark.parametrize("func", ALL_MEASURES)
def test_zero_magnitude_is_nan(func, a, b):
    result = func(SparseVector.from_array(a), SparseVector.from_array(b))
    assert np.isnan(result)


@pytest.mark.parametrize("func", ALL_MEASURES)
def test_stored_zeros_are_zero_magnitude(func):
    zeros = SparseVector.from_array([1, 2]).scale(0)
    result = func(zeros, SparseVector.from_array([1, 2]))
    assert np.isnan(result)


@pytest.mark.parametrize("func", ALL_MEASURES)
def test_nan_entries_are_nan(func):
    v = SparseVector(2)
    v.set(0, math.nan)
    assert np.isnan(func(v, SparseVector.from_array([1, 1])))


@pytest.mark.parametrize(
    "cosine,expected_angle",
    [
        pytest.param(1.0000000000000002, 0.0, id="rounding_over_1"),
        pytest.param(-1.0000000000000002, math.pi, id="rounding_under_neg_1"),
        pytest.param(1.5, math.nan, id="way_over_1"),
        pytest.param(-3.0, math.nan, id="way_under_neg_1"),
    ],
)
def test_cosine_outside_domain(monkeypatch, cosine, expected_angle):
    from sparsevec import _similarity

    monkeypatch.setattr(_similarity, "dot", lambda v1, v2: cosine)
    v = SparseVector.from_array([1])
    result = _similarity.angle(v, v)
    if np.isnan(expected_angle):
        assert np.isnan(result)
        assert np.isnan(_similarity.similarity(v, v))
    else:
        assert result == expected_angle


def test_operands_unchanged():
    v1 = SparseVector.from_array([1, 2, 0])
    v2 = SparseVector.from_array([0, 2, 3])
    for func in ALL_MEASURES:
        func(v1, v2)
    assert v1 == SparseVector.from_array([1, 2, 0])
    assert v2 == SparseVector.from_array([0, 2, 3])
