"""Input validation with clear error messages for placement callers."""

from __future__ import annotations

from typing import Any

import numpy as np


def _is_integer(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def validate_positions(positions: Any) -> list[int]:
    """Validate preferred positions and return them as a list of Python ints.

    Accepts any one-dimensional integer sequence (list, tuple, numpy array,
    pandas Series). Positions must be non-decreasing; they are never sorted
    here, because callers rely on index-for-index correspondence.
    """
    try:
        arr = np.asarray(positions)
    except ValueError as exc:
        raise TypeError(
            "Positions must be a one-dimensional sequence of integers; "
            "nested sequences of different lengths are not allowed."
        ) from exc
    if arr.ndim != 1:
        raise TypeError(
            f"Positions must be a one-dimensional sequence, got {arr.ndim} dimensions."
        )
    if arr.size == 0:
        return []

    if arr.dtype.kind in "iu":
        values = arr.tolist()
    elif arr.dtype.kind == "O":
        values = arr.tolist()
        bad = [v for v in values if not _is_integer(v)]
        if bad:
            raise TypeError(
                f"Positions must be integers. Found non-integer values: {bad[:5]}"
                + (f" (and {len(bad) - 5} more)" if len(bad) > 5 else "")
            )
        values = [int(v) for v in values]
    else:
        raise TypeError(
            f"Positions must be integers, got dtype '{arr.dtype}'. "
            "Round or cast your positions before placing labels."
        )

    for i in range(1, len(values)):
        if values[i] < values[i - 1]:
            raise ValueError(
                f"Positions must be in non-decreasing order. Position {i} "
                f"({values[i]}) is less than position {i - 1} ({values[i - 1]})."
            )
    return values


def validate_separation(separation: Any) -> int:
    """Validate that separation is a positive integer."""
    if not _is_integer(separation):
        raise TypeError(
            f"Separation must be an integer, got {type(separation).__name__}."
        )
    if separation <= 0:
        raise ValueError(f"Separation must be positive, got {separation}.")
    return int(separation)


def validate_limits(min_position: Any, max_position: Any) -> tuple[int, int]:
    """Validate an inclusive [min_position, max_position] interval."""
    for name, value in (("min_position", min_position), ("max_position", max_position)):
        if not _is_integer(value):
            raise TypeError(
                f"{name} must be an integer, got {type(value).__name__}."
            )
    if min_position > max_position:
        raise ValueError(
            f"min_position ({min_position}) must not exceed "
            f"max_position ({max_position})."
        )
    return int(min_position), int(max_position)
