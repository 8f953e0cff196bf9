"""Vertical label placement: the public entry points.

Labels are swept in order of preferred position. Each label starts as a
singleton cluster; while the cluster below it on the stack is too close,
the two are merged and re-balanced. A merge can move a cluster close
enough to the one beneath it to trigger a further merge.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .core.cluster import Cluster
from .core.cluster_stack import ClusterStack
from .core.validation import validate_limits, validate_positions, validate_separation

log = logging.getLogger(__name__)


def _sweep(
    positions: list[int],
    separation: int,
    limits: tuple[int, int] | None = None,
) -> list[int]:
    clusters = ClusterStack(separation)
    merges = 0

    for position in positions:
        cluster = Cluster.from_position(position)
        if limits is not None:
            cluster = cluster.limit(*limits)

        previous = clusters.pop_if_not_separate(cluster)
        while previous is not None:
            cluster = Cluster.merge(previous, cluster, separation)
            if limits is not None:
                cluster = cluster.limit(*limits)
            merges += 1
            previous = clusters.pop_if_not_separate(cluster)

        if limits is not None and cluster.start < limits[0]:
            log.debug(
                "Cluster [%d, %d] overflows limits [%d, %d]; upper limit kept",
                cluster.start, cluster.end, *limits,
            )
        clusters.push(cluster)

    log.debug(
        "Placed %d labels: %d merges, %d clusters",
        len(positions), merges, len(clusters),
    )
    return clusters.positions()


def place(positions: Sequence[int], separation: int) -> list[int]:
    """Place labels, respecting a minimum separation.

    Parameters
    ----------
    positions : sequence of int
        Preferred positions, in non-decreasing order.
    separation : int
        Minimum distance between adjacent permitted positions (> 0).

    Returns
    -------
    list[int]
        Permitted positions, one per input, in the same order.

    Examples
    --------
    >>> place([-10, -1, 1, 10], 10)
    [-15, -5, 5, 15]
    """
    separation = validate_separation(separation)
    return _sweep(validate_positions(positions), separation)


def place_with_limits(
    positions: Sequence[int],
    separation: int,
    min_position: int,
    max_position: int,
) -> list[int]:
    """Place labels, respecting a minimum separation and position limits.

    Every permitted position lies in ``[min_position, max_position]`` when
    there is room. When a cluster is wider than the range only the maximum
    is respected.

    Examples
    --------
    >>> place_with_limits([-10, -1, 1, 10], 10, 0, 100)
    [0, 10, 20, 30]
    >>> place_with_limits([-10, -1, 1, 10], 10, -10, 10)
    [-20, -10, 0, 10]
    """
    separation = validate_separation(separation)
    limits = validate_limits(min_position, max_position)
    return _sweep(validate_positions(positions), separation, limits)
