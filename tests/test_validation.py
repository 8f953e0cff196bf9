"""Tests for input validation."""

import numpy as np
import pandas as pd
import pytest

from vertical_label_placement.core.validation import (
    validate_limits,
    validate_positions,
    validate_separation,
)


class TestValidatePositions:
    def test_list(self):
        assert validate_positions([1, 2, 2, 5]) == [1, 2, 2, 5]

    def test_numpy_and_series(self):
        assert validate_positions(np.array([3, 4], dtype=np.uint8)) == [3, 4]
        assert validate_positions(pd.Series([-1, 0])) == [-1, 0]

    def test_empty(self):
        assert validate_positions([]) == []
        assert validate_positions(np.array([], dtype=float)) == []

    def test_large_python_ints(self):
        big = 2**70
        assert validate_positions([big, big + 1]) == [big, big + 1]

    def test_unsorted_names_index(self):
        with pytest.raises(ValueError, match=r"Position 2 \(1\) is less than position 1 \(5\)"):
            validate_positions([0, 5, 1])

    def test_floats_rejected(self):
        with pytest.raises(TypeError, match="dtype 'float64'"):
            validate_positions([0.0, 1.0])

    def test_strings_rejected(self):
        with pytest.raises(TypeError, match="integers"):
            validate_positions(["a", "b"])

    def test_booleans_rejected(self):
        with pytest.raises(TypeError, match="integers"):
            validate_positions([True, False])

    def test_mixed_objects_rejected(self):
        with pytest.raises(TypeError, match="non-integer values"):
            validate_positions([2**70, None])

    def test_two_dimensional_rejected(self):
        with pytest.raises(TypeError, match="one-dimensional"):
            validate_positions([[0, 1], [2, 3]])

    def test_scalar_rejected(self):
        with pytest.raises(TypeError, match="one-dimensional"):
            validate_positions(5)

    def test_ragged_rejected(self):
        with pytest.raises(TypeError, match="one-dimensional sequence of integers"):
            validate_positions([0, [1, 2]])


class TestValidateSeparation:
    def test_valid(self):
        assert validate_separation(10) == 10
        assert validate_separation(np.int64(3)) == 3

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive(self, value):
        with pytest.raises(ValueError, match="positive"):
            validate_separation(value)

    @pytest.mark.parametrize("value", [1.0, "10", True, None])
    def test_non_integer(self, value):
        with pytest.raises(TypeError, match="integer"):
            validate_separation(value)


class TestValidateLimits:
    def test_valid(self):
        assert validate_limits(-5, 5) == (-5, 5)
        assert validate_limits(0, 0) == (0, 0)

    def test_inverted(self):
        with pytest.raises(ValueError, match="must not exceed"):
            validate_limits(1, 0)

    def test_non_integer(self):
        with pytest.raises(TypeError, match="max_position"):
            validate_limits(0, 1.5)
